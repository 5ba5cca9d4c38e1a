from gesture_four.utils.gesture_debounce import ToggleDebounce
from gesture_four.vision.gesture_types import GestureLabel
from tests.helpers import FakeClock


def test_first_victory_fires():
    debounce = ToggleDebounce(clock=FakeClock())
    assert debounce.observe(GestureLabel.VICTORY)


def test_sustained_victory_never_refires():
    clock = FakeClock()
    debounce = ToggleDebounce(clock=clock)
    assert debounce.observe(GestureLabel.VICTORY)
    for _ in range(30):
        clock.advance(0.1)
        assert not debounce.observe(GestureLabel.VICTORY)


def test_requires_cooldown_even_after_gesture_change():
    clock = FakeClock()
    debounce = ToggleDebounce(clock=clock)
    assert debounce.observe(GestureLabel.VICTORY)
    clock.advance(0.3)
    assert not debounce.observe(GestureLabel.OPEN_PALM)
    clock.advance(0.3)
    assert not debounce.observe(GestureLabel.VICTORY)
    clock.advance(0.1)
    assert not debounce.observe(GestureLabel.CLOSED_FIST)
    clock.advance(0.5)
    assert debounce.observe(GestureLabel.VICTORY)


def test_cooldown_must_be_strictly_exceeded():
    clock = FakeClock()
    debounce = ToggleDebounce(clock=clock)
    assert debounce.observe(GestureLabel.VICTORY)
    clock.advance(0.5)
    assert not debounce.observe(GestureLabel.NONE)
    clock.advance(0.5)
    assert not debounce.observe(GestureLabel.VICTORY)
    clock.advance(0.25)
    assert not debounce.observe(GestureLabel.NONE)
    assert debounce.observe(GestureLabel.VICTORY)
