import logging

from gesture_four.events.bus import (
    AUDIO_EVENTS,
    EVENT_BOMB_EXPLODED,
    EVENT_DISC_GRABBED,
    EVENT_DISC_PLACED,
    EVENT_GAME_STARTED,
    EVENT_GAME_WON,
    EventBus,
)
from gesture_four.systems.audio_system import SOUND_CUES, AudioSystem


def test_each_cue_plays_its_sound_at_its_volume(tmp_path):
    bus = EventBus()
    played = []
    AudioSystem(bus, sound_dir=tmp_path, loader=lambda path: path.name, player=lambda s, v: played.append((s, v)))
    bus.emit(EVENT_DISC_PLACED, owner_entity=1, row=5, col=3)
    bus.emit(EVENT_GAME_WON, winner=1, positions=[])
    bus.emit(EVENT_GAME_STARTED)
    bus.emit(EVENT_DISC_GRABBED, owner_entity=1, reason='grab')
    bus.emit(EVENT_BOMB_EXPLODED, row=5, col=3, owner=1, cleared=[])
    assert played == [
        ("place.mp3", 0.5),
        ("win.mp3", 0.7),
        ("start.mp3", 0.6),
        ("grab.mp3", 0.4),
        ("bomb.mp3", 0.7),
    ]


def test_sound_loaded_once(tmp_path):
    bus = EventBus()
    loads = []

    def loader(path):
        loads.append(path)
        return object()

    AudioSystem(bus, sound_dir=tmp_path, loader=loader, player=lambda s, v: None)
    bus.emit(EVENT_DISC_GRABBED)
    bus.emit(EVENT_DISC_GRABBED)
    assert loads == [tmp_path / "grab.mp3"]


def test_failed_load_is_logged_and_silent(tmp_path, caplog):
    bus = EventBus()
    played = []

    def broken(path):
        raise FileNotFoundError(path)

    AudioSystem(bus, sound_dir=tmp_path, loader=broken, player=lambda s, v: played.append(s))
    with caplog.at_level(logging.WARNING):
        bus.emit(EVENT_GAME_STARTED)
        bus.emit(EVENT_GAME_STARTED)
    assert played == []
    assert sum("start.mp3" in rec.getMessage() for rec in caplog.records) == 1


def test_disabled_audio_plays_nothing(tmp_path):
    bus = EventBus()
    played = []
    AudioSystem(bus, sound_dir=tmp_path, loader=lambda p: p, player=lambda s, v: played.append(s), enabled=False)
    bus.emit(EVENT_GAME_WON, winner=2, positions=[])
    assert played == []


def test_every_audio_event_has_a_cue(tmp_path):
    assert set(AUDIO_EVENTS) == set(SOUND_CUES)
    bus = EventBus()
    played = []
    AudioSystem(bus, sound_dir=tmp_path, loader=lambda path: path.name, player=lambda s, v: played.append(s))
    for event_name in AUDIO_EVENTS:
        bus.emit(event_name)
    assert sorted(played) == sorted(name for name, _ in SOUND_CUES.values())
