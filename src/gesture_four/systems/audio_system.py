"""Fire-and-forget sound cues keyed to game events."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Callable, Dict, Optional

from gesture_four.constants import SOUND_DIR
from gesture_four.events.bus import (
    AUDIO_EVENTS,
    EVENT_BOMB_EXPLODED,
    EVENT_DISC_GRABBED,
    EVENT_DISC_PLACED,
    EVENT_GAME_STARTED,
    EVENT_GAME_WON,
    EventBus,
)

logger = logging.getLogger(__name__)

# event -> (sound file, volume)
SOUND_CUES: Dict[str, tuple[str, float]] = {
    EVENT_DISC_PLACED: ("place.mp3", 0.5),
    EVENT_GAME_WON: ("win.mp3", 0.7),
    EVENT_GAME_STARTED: ("start.mp3", 0.6),
    EVENT_DISC_GRABBED: ("grab.mp3", 0.4),
    EVENT_BOMB_EXPLODED: ("bomb.mp3", 0.7),
}


def _arcade_load(path: Path):
    import arcade
    return arcade.load_sound(path)


def _arcade_play(sound, volume: float):
    import arcade
    arcade.play_sound(sound, volume=volume)


class AudioSystem:
    """Plays one sound per cue event. Sounds that fail to load stay silent."""

    def __init__(
        self,
        event_bus: EventBus,
        *,
        sound_dir: Path = SOUND_DIR,
        loader: Callable[[Path], Any] = _arcade_load,
        player: Callable[[Any, float], None] = _arcade_play,
        enabled: bool = True,
    ):
        self.event_bus = event_bus
        self.sound_dir = Path(sound_dir)
        self._loader = loader
        self._player = player
        self.enabled = enabled
        self._sounds: Dict[str, Optional[Any]] = {}
        for event_name in AUDIO_EVENTS:
            event_bus.subscribe(event_name, self._make_handler(event_name))

    def _make_handler(self, event_name: str):
        def handler(sender, **kwargs):
            self.play(event_name)
        return handler

    def _sound_for(self, event_name: str):
        if event_name in self._sounds:
            return self._sounds[event_name]
        filename, _ = SOUND_CUES[event_name]
        path = self.sound_dir / filename
        try:
            sound = self._loader(path)
        except Exception as exc:  # missing file, codec or audio device problems
            logger.warning("Could not load sound %s: %s", path, exc)
            sound = None
        self._sounds[event_name] = sound
        return sound

    def play(self, event_name: str) -> bool:
        if not self.enabled or event_name not in SOUND_CUES:
            return False
        sound = self._sound_for(event_name)
        if sound is None:
            return False
        try:
            self._player(sound, SOUND_CUES[event_name][1])
        except Exception as exc:
            logger.warning("Could not play %s: %s", event_name, exc)
            return False
        return True
