"""Landmark heuristics turning MediaPipe hand landmarks into game gestures.

Landmarks are sequences of objects exposing ``x`` and ``y`` normalised to the
camera frame (MediaPipe's ``NormalizedLandmark``). Index layout follows the
21-point MediaPipe hand model.
"""
from __future__ import annotations

from typing import List, Sequence, Tuple

from gesture_four.vision.gesture_types import GestureLabel

WRIST = 0
MIDDLE_MCP = 9
TIP_IDS = (4, 8, 12, 16, 20)


def finger_status(landmarks: Sequence, handedness: str) -> List[int]:
    """Return [thumb, index, middle, ring, pinky] as 1 (extended) / 0 (folded)."""
    fingers = [0] * 5
    thumb_tip = landmarks[TIP_IDS[0]]
    thumb_ip = landmarks[TIP_IDS[0] - 1]
    # Thumb extends sideways; the other fingers extend upwards (smaller y).
    if (handedness == "Right" and thumb_tip.x < thumb_ip.x) or (
        handedness == "Left" and thumb_tip.x > thumb_ip.x
    ):
        fingers[0] = 1
    for i in range(1, 5):
        tip = landmarks[TIP_IDS[i]]
        pip = landmarks[TIP_IDS[i] - 2]
        fingers[i] = 1 if tip.y < pip.y else 0
    return fingers


def _thumb_points_up(landmarks: Sequence) -> bool:
    tip = landmarks[TIP_IDS[0]]
    mcp = landmarks[TIP_IDS[0] - 2]
    index_mcp = landmarks[5]
    return tip.y < mcp.y and tip.y < index_mcp.y


def classify_hand(landmarks: Sequence, handedness: str) -> GestureLabel:
    fingers = finger_status(landmarks, handedness)
    others = fingers[1:]
    if others == [1, 1, 0, 0]:
        return GestureLabel.VICTORY
    if others == [0, 0, 0, 0]:
        if _thumb_points_up(landmarks):
            return GestureLabel.THUMB_UP
        return GestureLabel.CLOSED_FIST
    if others == [1, 1, 1, 1]:
        return GestureLabel.OPEN_PALM
    return GestureLabel.NONE


def palm_center(landmarks: Sequence, frame_width: float, frame_height: float, *, mirrored: bool = True) -> Tuple[float, float]:
    """Palm centre in pixels from the wrist and middle-finger base.

    When ``mirrored`` the x axis is flipped so the position matches a mirrored
    camera preview.
    """
    wrist = landmarks[WRIST]
    middle_base = landmarks[MIDDLE_MCP]
    x = (wrist.x + middle_base.x) / 2 * frame_width
    if mirrored:
        x = frame_width - x
    y = (wrist.y + middle_base.y) / 2 * frame_height
    return x, y
