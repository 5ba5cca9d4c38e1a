"""High-level coordinator for game mode transitions."""
from __future__ import annotations

import logging

from esper import World

from gesture_four.components.game_state import GameMode
from gesture_four.components.landing_progress import LandingProgress
from gesture_four.components.viewport import Viewport
from gesture_four.constants import WIN_DISPLAY_DURATION
from gesture_four.events.bus import (
    EVENT_GAME_START_REQUEST,
    EVENT_GAME_STARTED,
    EVENT_TICK,
    EVENT_WINDOW_RESIZED,
    EventBus,
)
from gesture_four.systems.match_setup import reset_match
from gesture_four.utils.game_state import set_game_mode
from gesture_four.utils.world_queries import current_mode, match_state, singleton

logger = logging.getLogger(__name__)


class GameFlowSystem:
    """Landing -> playing -> (win countdown) -> landing."""

    def __init__(self, world: World, event_bus: EventBus, *, win_display: float = WIN_DISPLAY_DURATION) -> None:
        self.world = world
        self.event_bus = event_bus
        self.win_display = win_display
        self.event_bus.subscribe(EVENT_GAME_START_REQUEST, self._on_start_request)
        self.event_bus.subscribe(EVENT_TICK, self._on_tick)
        self.event_bus.subscribe(EVENT_WINDOW_RESIZED, self._on_resize)

    def _on_start_request(self, sender, **payload) -> None:
        if current_mode(self.world) == GameMode.PLAYING:
            return
        reset_match(self.world, self.event_bus, reason="start")
        singleton(self.world, LandingProgress).elapsed = 0.0
        set_game_mode(self.world, self.event_bus, GameMode.PLAYING)
        self.event_bus.emit(EVENT_GAME_STARTED)

    def _on_tick(self, sender, **payload) -> None:
        if current_mode(self.world) != GameMode.PLAYING:
            return
        state = match_state(self.world)
        if not state.game_over:
            return
        state.win_timer += payload.get("dt", 1 / 60)
        if state.win_timer >= self.win_display:
            self.return_to_landing(reason="win-timeout")

    def _on_resize(self, sender, **payload) -> None:
        width = payload.get("width"); height = payload.get("height")
        if not width or not height:
            return
        viewport = singleton(self.world, Viewport)
        if (viewport.width, viewport.height) == (width, height):
            return
        viewport.width = int(width)
        viewport.height = int(height)
        logger.info("Viewport resized to %dx%d", viewport.width, viewport.height)
        reset_match(self.world, self.event_bus, reason="resize")

    def return_to_landing(self, *, reason: str) -> None:
        reset_match(self.world, self.event_bus, reason=reason)
        singleton(self.world, LandingProgress).elapsed = 0.0
        set_game_mode(self.world, self.event_bus, GameMode.LANDING)

