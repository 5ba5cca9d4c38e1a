from types import SimpleNamespace

import pytest

from gesture_four.vision.gesture_classifier import classify_hand, finger_status, palm_center
from gesture_four.vision.gesture_types import GestureFrame, GestureLabel, HandDetection


def _pt(x, y):
    return SimpleNamespace(x=x, y=y)


def _hand(fingers, *, thumb_out=False, thumb_up=False):
    """Right hand in image coordinates; fingers is [index, middle, ring, pinky]."""
    pts = [_pt(0.5, 0.5) for _ in range(21)]
    pts[0] = _pt(0.5, 0.9)
    pts[5] = _pt(0.45, 0.6)
    pts[9] = _pt(0.5, 0.6)
    for extended, tip, x in zip(fingers, (8, 12, 16, 20), (0.45, 0.5, 0.55, 0.6)):
        pts[tip - 2] = _pt(x, 0.5)
        pts[tip] = _pt(x, 0.3 if extended else 0.7)
    pts[2] = _pt(0.42, 0.65)
    pts[3] = _pt(0.4, 0.6)
    if thumb_up:
        pts[4] = _pt(0.4, 0.3)
    elif thumb_out:
        pts[4] = _pt(0.3, 0.6)
    else:
        pts[4] = _pt(0.45, 0.7)
    return pts


@pytest.mark.parametrize(
    "landmarks,expected",
    [
        (_hand([0, 0, 0, 0]), GestureLabel.CLOSED_FIST),
        (_hand([1, 1, 1, 1], thumb_out=True), GestureLabel.OPEN_PALM),
        (_hand([1, 1, 0, 0]), GestureLabel.VICTORY),
        (_hand([0, 0, 0, 0], thumb_up=True), GestureLabel.THUMB_UP),
        (_hand([1, 0, 0, 1]), GestureLabel.NONE),
    ],
)
def test_classify_hand(landmarks, expected):
    assert classify_hand(landmarks, "Right") == expected


def test_thumb_direction_depends_on_handedness():
    landmarks = _hand([1, 1, 1, 1], thumb_out=True)
    assert finger_status(landmarks, "Right") == [1, 1, 1, 1, 1]
    assert finger_status(landmarks, "Left") == [0, 1, 1, 1, 1]


def test_palm_center_uses_wrist_and_middle_base():
    pts = _hand([0, 0, 0, 0])
    pts[0] = _pt(0.2, 0.9)
    pts[9] = _pt(0.4, 0.6)
    x, y = palm_center(pts, 1000, 500, mirrored=False)
    assert x == pytest.approx(300.0)
    assert y == pytest.approx(375.0)
    x, _ = palm_center(pts, 1000, 500)
    assert x == pytest.approx(700.0)


def test_gesture_frame_freshness_and_primary_hand():
    first = HandDetection(1.0, 2.0, GestureLabel.OPEN_PALM)
    frame = GestureFrame(timestamp=10.0, hands=[first, HandDetection(5.0, 5.0)])
    assert frame.primary is first
    assert frame.is_fresh(10.5, 0.5)
    assert not frame.is_fresh(10.6, 0.5)
    assert GestureFrame(timestamp=10.0).primary is None
    assert not GestureFrame(timestamp=10.0).is_fresh(10.0, 0.5)
