import logging

from esper import World

from gesture_four.components.game_state import GameMode
from gesture_four.components.landing_progress import LandingProgress
from gesture_four.constants import GESTURE_FRESHNESS_WINDOW
from gesture_four.events.bus import (
    EVENT_GAME_START_REQUEST,
    EVENT_GESTURE_FRAME,
    EVENT_LANDING_PROGRESS,
    EventBus,
)
from gesture_four.utils.world_queries import current_mode, singleton
from gesture_four.vision.gesture_types import GestureLabel

logger = logging.getLogger(__name__)


class LandingSystem:
    """Starts a match once a thumbs-up has been held long enough on the landing screen."""
    def __init__(self, world: World, event_bus: EventBus, *, freshness: float = GESTURE_FRESHNESS_WINDOW):
        self.world = world
        self.event_bus = event_bus
        self.freshness = freshness
        event_bus.subscribe(EVENT_GESTURE_FRAME, self.on_frame)

    def on_frame(self, sender, **kwargs):
        if current_mode(self.world) != GameMode.LANDING:
            return
        progress = singleton(self.world, LandingProgress)
        frame = kwargs.get('frame')
        now = kwargs.get('now')
        dt = kwargs.get('dt', 1/60)
        if now is None and frame is not None:
            now = frame.timestamp
        holding = (
            frame is not None
            and frame.is_fresh(now, self.freshness)
            and frame.primary.gesture == GestureLabel.THUMB_UP
        )
        if not holding:
            if progress.elapsed > 0:
                progress.elapsed = 0.0
                self.event_bus.emit(EVENT_LANDING_PROGRESS, elapsed=0.0, fraction=0.0)
            return
        progress.elapsed += dt
        self.event_bus.emit(EVENT_LANDING_PROGRESS, elapsed=progress.elapsed, fraction=progress.fraction)
        if progress.complete:
            logger.info("Start gesture held for %.2fs", progress.elapsed)
            self.event_bus.emit(EVENT_GAME_START_REQUEST)
