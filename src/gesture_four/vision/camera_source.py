"""Gesture sources feeding the game loop.

``MediaPipeGestureSource`` runs the camera and MediaPipe Hands on a background
thread and hands the latest classified sample to the game loop on demand.
``NullGestureSource`` never sees a hand, which the game treats as tracking lost.
"""
from __future__ import annotations

import logging
import threading
import time
from typing import Callable, Optional

from gesture_four.constants import GESTURE_CACHE_WINDOW
from gesture_four.vision.gesture_classifier import classify_hand, palm_center
from gesture_four.vision.gesture_types import GestureFrame, HandDetection

logger = logging.getLogger(__name__)


class GestureSourceUnavailable(RuntimeError):
    """Camera or hand-tracking backend could not be started."""


class NullGestureSource:
    def __init__(self, clock: Callable[[], float] | None = None):
        self._clock = clock or time.monotonic

    def start(self) -> None:
        return

    def set_viewport(self, width: int, height: int) -> None:
        return

    def poll(self) -> GestureFrame:
        return GestureFrame(timestamp=self._clock(), hands=[])

    def close(self) -> None:
        return


class MediaPipeGestureSource:
    """Camera-backed gesture source.

    The capture thread only keeps results that contain at least one hand; ``poll``
    returns that cached sample while it is younger than ``cache_window`` and an
    empty frame otherwise.
    """

    def __init__(
        self,
        camera_index: int = 0,
        *,
        width: int = 1280,
        height: int = 720,
        max_hands: int = 1,
        cache_window: float = GESTURE_CACHE_WINDOW,
        clock: Callable[[], float] | None = None,
    ):
        self.camera_index = camera_index
        self.max_hands = max_hands
        self.cache_window = cache_window
        self._clock = clock or time.monotonic
        self._width = width
        self._height = height
        self._lock = threading.Lock()
        self._latest: Optional[GestureFrame] = None
        self._running = False
        self._thread: Optional[threading.Thread] = None
        self._capture = None
        self._hands = None
        self._cv2 = None

    def start(self) -> None:
        try:
            import cv2
            import mediapipe as mp
        except ImportError as exc:
            raise GestureSourceUnavailable(f"hand tracking backend missing: {exc}") from exc
        capture = cv2.VideoCapture(self.camera_index)
        if not capture.isOpened():
            capture.release()
            raise GestureSourceUnavailable(f"cannot open camera index {self.camera_index}")
        self._cv2 = cv2
        self._capture = capture
        self._hands = mp.solutions.hands.Hands(
            max_num_hands=self.max_hands,
            model_complexity=0,
            min_detection_confidence=0.6,
            min_tracking_confidence=0.6,
        )
        self._running = True
        self._thread = threading.Thread(target=self._capture_loop, name="gesture-capture", daemon=True)
        self._thread.start()
        logger.info("Gesture capture started on camera %d", self.camera_index)

    def set_viewport(self, width: int, height: int) -> None:
        with self._lock:
            self._width = width
            self._height = height

    def poll(self) -> GestureFrame:
        now = self._clock()
        with self._lock:
            latest = self._latest
        if latest is not None and now - latest.timestamp < self.cache_window:
            return latest
        return GestureFrame(timestamp=now, hands=[])

    def close(self) -> None:
        self._running = False
        if self._thread is not None:
            self._thread.join(timeout=1.0)
            self._thread = None
        if self._capture is not None:
            self._capture.release()
            self._capture = None
        if self._hands is not None:
            self._hands.close()
            self._hands = None

    def _capture_loop(self) -> None:
        cv2 = self._cv2
        while self._running:
            ok, frame = self._capture.read()
            if not ok or frame is None:
                time.sleep(0.02)
                continue
            frame = cv2.flip(frame, 1)
            rgb = cv2.cvtColor(frame, cv2.COLOR_BGR2RGB)
            try:
                results = self._hands.process(rgb)
            except Exception:
                logger.exception("Hand tracking failed on a frame")
                continue
            sample = self._build_frame(results)
            if sample is not None:
                with self._lock:
                    self._latest = sample

    def _build_frame(self, results) -> Optional[GestureFrame]:
        if not results.multi_hand_landmarks:
            return None
        with self._lock:
            width, height = self._width, self._height
        hands = []
        for index, hand_landmarks in enumerate(results.multi_hand_landmarks):
            handedness = "Right"
            if results.multi_handedness and index < len(results.multi_handedness):
                handedness = results.multi_handedness[index].classification[0].label
            points = hand_landmarks.landmark
            # Frame is already mirrored by cv2.flip above.
            x, y = palm_center(points, width, height, mirrored=False)
            hands.append(HandDetection(x=x, y=y, gesture=classify_hand(points, handedness)))
        return GestureFrame(timestamp=self._clock(), hands=hands)
