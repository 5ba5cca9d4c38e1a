from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional


class GestureLabel(Enum):
    CLOSED_FIST = "Closed_Fist"
    OPEN_PALM = "Open_Palm"
    VICTORY = "Victory"
    THUMB_UP = "Thumb_Up"
    NONE = "None"


@dataclass(frozen=True, slots=True)
class HandDetection:
    """One tracked hand: palm centre in window pixels (y-down) and its classified gesture."""
    x: float
    y: float
    gesture: GestureLabel = GestureLabel.NONE


@dataclass(frozen=True, slots=True)
class GestureFrame:
    """Latest sample from a gesture source.

    timestamp is on the same monotonic clock the game loop passes as ``now``.
    """
    timestamp: float
    hands: List[HandDetection] = field(default_factory=list)

    @property
    def primary(self) -> Optional[HandDetection]:
        return self.hands[0] if self.hands else None

    def is_fresh(self, now: float, window: float) -> bool:
        return bool(self.hands) and (now - self.timestamp) <= window
