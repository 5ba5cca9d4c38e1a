"""Entry point for Gesture Four, a hand-gesture driven connect four.

Sets up ECS world, event bus, systems, gesture source and Arcade window.
"""
from __future__ import annotations

import argparse
import logging
import sys
import time

from arcade import Window, color, key, run, set_background_color

from gesture_four.constants import DEFAULT_WINDOW_HEIGHT, DEFAULT_WINDOW_WIDTH, GRID_COLS, GRID_ROWS
from gesture_four.events.bus import EVENT_GESTURE_FRAME, EVENT_TICK, EVENT_WINDOW_RESIZED, EventBus
from gesture_four.systems.animation import AnimationSystem
from gesture_four.systems.audio_system import AudioSystem
from gesture_four.systems.bomb_system import BombSystem
from gesture_four.systems.disc_control import DiscControlSystem
from gesture_four.systems.game_flow_system import GameFlowSystem
from gesture_four.systems.gesture_input import GestureInputSystem
from gesture_four.systems.landing_system import LandingSystem
from gesture_four.systems.match_resolution import MatchResolutionSystem
from gesture_four.systems.render import RenderSystem
from gesture_four.systems.turn_system import TurnSystem
from gesture_four.vision.camera_source import GestureSourceUnavailable, MediaPipeGestureSource, NullGestureSource
from gesture_four.world import create_world

logger = logging.getLogger("gesture_four")


class GestureFourWindow(Window):
    def __init__(self, gesture_source, *, rows: int = GRID_ROWS, cols: int = GRID_COLS,
                 width: int = DEFAULT_WINDOW_WIDTH, height: int = DEFAULT_WINDOW_HEIGHT,
                 fullscreen: bool = True, audio: bool = True):
        super().__init__(width, height, "Gesture Four", resizable=True)
        self.set_update_rate(1/60)
        self.gesture_source = gesture_source
        self.event_bus = EventBus()
        self.world = create_world(self.event_bus, rows=rows, cols=cols, width=self.width, height=self.height)

        # Flow systems
        self.game_flow_system = GameFlowSystem(self.world, self.event_bus)
        self.landing_system = LandingSystem(self.world, self.event_bus)

        # Input systems
        self.gesture_input_system = GestureInputSystem(self.world, self.event_bus)
        self.disc_control_system = DiscControlSystem(self.world, self.event_bus)
        self.turn_system = TurnSystem(self.world, self.event_bus)

        # Board and animation systems
        self.animation_system = AnimationSystem(self.world, self.event_bus)
        self.match_resolution_system = MatchResolutionSystem(self.world, self.event_bus)
        self.bomb_system = BombSystem(self.world, self.event_bus)

        # Presentation
        self.audio_system = AudioSystem(self.event_bus, enabled=audio)
        self.render_system = RenderSystem(self.world, self.event_bus, self)

        set_background_color(color.BLACK)
        if fullscreen:
            try:
                self.set_fullscreen(True)
            except Exception as exc:
                logger.warning("Fullscreen unavailable: %s", exc)
        self.gesture_source.set_viewport(self.width, self.height)

    def on_resize(self, width: int, height: int):
        result = super().on_resize(width, height)
        # Arcade may dispatch a resize from Window.__init__ before systems exist.
        if not hasattr(self, "event_bus"):
            return result
        self.gesture_source.set_viewport(width, height)
        self.event_bus.emit(EVENT_WINDOW_RESIZED, width=width, height=height)
        return result

    def on_draw(self):
        self.clear()
        self.render_system.process()

    def on_update(self, delta_time: float):
        frame = self.gesture_source.poll()
        self.event_bus.emit(EVENT_GESTURE_FRAME, frame=frame, now=time.monotonic(), dt=delta_time)
        self.event_bus.emit(EVENT_TICK, dt=delta_time)

    def on_key_press(self, symbol: int, modifiers: int):
        if symbol == key.ESCAPE:
            self.close()

    def on_close(self):
        self.gesture_source.close()
        super().on_close()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="gesture-four", description="Connect four played with hand gestures.")
    parser.add_argument("--rows", type=int, default=GRID_ROWS, help="board rows (default %(default)s)")
    parser.add_argument("--cols", type=int, default=GRID_COLS, help="board columns (default %(default)s)")
    parser.add_argument("--camera", type=int, default=0, help="camera index for OpenCV")
    parser.add_argument("--windowed", action="store_true", help="do not switch to fullscreen")
    parser.add_argument("--no-camera", action="store_true", help="run without hand tracking")
    parser.add_argument("--mute", action="store_true", help="disable sound effects")
    parser.add_argument("--log-level", default="INFO", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    if args.rows < 4 or args.cols < 4:
        logger.error("Board must be at least 4x4, got %dx%d", args.rows, args.cols)
        return 2

    if args.no_camera:
        source = NullGestureSource()
    else:
        source = MediaPipeGestureSource(args.camera)
    try:
        source.start()
    except GestureSourceUnavailable as exc:
        logger.error("Hand tracking unavailable: %s (use --no-camera to start without it)", exc)
        return 1

    try:
        GestureFourWindow(source, rows=args.rows, cols=args.cols, fullscreen=not args.windowed, audio=not args.mute)
        run()
    finally:
        source.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())
