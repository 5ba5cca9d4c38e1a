"""Translates gesture samples into hand events while a match is running."""
from __future__ import annotations

import logging

from esper import World

from gesture_four.components.game_state import GameMode
from gesture_four.constants import GESTURE_FRESHNESS_WINDOW
from gesture_four.events.bus import (
    EVENT_BOMB_TOGGLE_REQUEST,
    EVENT_GESTURE_FRAME,
    EVENT_HAND_GRAB,
    EVENT_HAND_MOVE,
    EVENT_HAND_RELEASE,
    EVENT_TRACKING_LOST,
    EventBus,
)
from gesture_four.utils.gesture_debounce import ToggleDebounce
from gesture_four.utils.world_queries import active_disc, board_geometry, current_mode, input_locked
from gesture_four.vision.gesture_types import GestureFrame, GestureLabel

logger = logging.getLogger(__name__)


class GestureInputSystem:
    """Only the first detected hand drives the game.

    Fist grabs, open palm releases over the hovered column, victory toggles the
    bomb (debounced) and any tracked hand moves a grabbed disc. An empty or stale
    sample force-releases the disc without dropping it.
    """

    def __init__(
        self,
        world: World,
        event_bus: EventBus,
        *,
        freshness: float = GESTURE_FRESHNESS_WINDOW,
        debounce: ToggleDebounce | None = None,
    ):
        self.world = world
        self.event_bus = event_bus
        self.freshness = freshness
        self.debounce = debounce or ToggleDebounce()
        self._tracking = False
        event_bus.subscribe(EVENT_GESTURE_FRAME, self.on_frame)

    def on_frame(self, sender, **kwargs):
        if current_mode(self.world) != GameMode.PLAYING:
            return
        frame: GestureFrame | None = kwargs.get('frame')
        now = kwargs.get('now')
        if now is None:
            now = frame.timestamp if frame is not None else 0.0
        if frame is None or not frame.is_fresh(now, self.freshness):
            self._lost('stale' if frame is not None and frame.hands else 'no-hands')
            return
        self._tracking = True
        if input_locked(self.world):
            return
        hand = frame.primary
        geometry = board_geometry(self.world)
        col = geometry.column_at(hand.x)
        if hand.gesture == GestureLabel.CLOSED_FIST:
            self.event_bus.emit(EVENT_HAND_GRAB, x=hand.x, y=hand.y)
        elif hand.gesture == GestureLabel.OPEN_PALM:
            self.event_bus.emit(EVENT_HAND_RELEASE, col=col)
        if self.debounce.observe(hand.gesture, now):
            self.event_bus.emit(EVENT_BOMB_TOGGLE_REQUEST)
        if active_disc(self.world).grabbed:
            self.event_bus.emit(EVENT_HAND_MOVE, x=hand.x, y=hand.y, col=col)

    def _lost(self, reason: str):
        if active_disc(self.world).grabbed:
            self.event_bus.emit(EVENT_HAND_RELEASE, col=-1)
        if self._tracking:
            self._tracking = False
            logger.debug("Hand tracking lost (%s)", reason)
            self.event_bus.emit(EVENT_TRACKING_LOST, reason=reason)
