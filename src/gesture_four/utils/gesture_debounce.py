from __future__ import annotations

from dataclasses import dataclass, field
from time import monotonic
from typing import Callable, Optional

from gesture_four.constants import BOMB_TOGGLE_COOLDOWN
from gesture_four.vision.gesture_types import GestureLabel


@dataclass(slots=True)
class ToggleDebounce:
	"""Gates the bomb toggle gesture so a held sign does not flip the disc repeatedly.

	A trigger gesture fires only when both hold:

	* at least ``cooldown`` seconds passed since the last accepted trigger, and
	* the previously observed gesture was not the trigger gesture itself.

	Every observed label becomes the new "previous" gesture, accepted or not.
	"""

	trigger: GestureLabel = GestureLabel.VICTORY
	cooldown: float = BOMB_TOGGLE_COOLDOWN
	clock: Callable[[], float] | None = field(default=None, repr=False)

	_clock: Callable[[], float] = field(init=False, repr=False)
	_last_trigger_time: Optional[float] = field(init=False, default=None, repr=False)
	_last_gesture: Optional[GestureLabel] = field(init=False, default=None, repr=False)

	def __post_init__(self) -> None:
		self._clock = self.clock or monotonic
		self.cooldown = max(0.0, float(self.cooldown))

	def observe(self, gesture: GestureLabel, now: float | None = None) -> bool:
		if now is None:
			now = self._clock()
		fired = False
		if gesture == self.trigger:
			cooled = self._last_trigger_time is None or (now - self._last_trigger_time) > self.cooldown
			if cooled and self._last_gesture != self.trigger:
				self._last_trigger_time = now
				fired = True
		self._last_gesture = gesture
		return fired
