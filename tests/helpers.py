from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Iterable

from esper import World

from gesture_four.components.board import Board
from gesture_four.components.disc_kind import DiscKind
from gesture_four.components.game_state import GameMode
from gesture_four.components.player import PlayerIdentity
from gesture_four.events.bus import (
    EVENT_GAME_START_REQUEST,
    EVENT_HAND_GRAB,
    EVENT_HAND_MOVE,
    EVENT_HAND_RELEASE,
    EVENT_TICK,
    EventBus,
)
from gesture_four.systems.animation import AnimationSystem
from gesture_four.systems.bomb_system import BombSystem
from gesture_four.systems.disc_control import DiscControlSystem
from gesture_four.systems.game_flow_system import GameFlowSystem
from gesture_four.systems.gesture_input import GestureInputSystem
from gesture_four.systems.landing_system import LandingSystem
from gesture_four.systems.match_resolution import MatchResolutionSystem
from gesture_four.systems.turn_system import TurnSystem
from gesture_four.utils.world_queries import active_disc, board_geometry, singleton
from gesture_four.vision.gesture_types import GestureFrame, GestureLabel, HandDetection
from gesture_four.world import create_world


class DummyWindow:
    def __init__(self, width=1280, height=720):
        self.width = width
        self.height = height


class FakeClock:
    def __init__(self) -> None:
        self.value = 0.0

    def advance(self, amount: float) -> None:
        self.value += amount

    def __call__(self) -> float:
        return self.value


def drive_ticks(bus: EventBus, count: int = 120, dt: float = 1 / 60) -> None:
    for _ in range(count):
        bus.emit(EVENT_TICK, dt=dt)


def hand_frame(gesture: GestureLabel, x: float = 0.0, y: float = 0.0, timestamp: float = 0.0) -> GestureFrame:
    return GestureFrame(timestamp=timestamp, hands=[HandDetection(x=x, y=y, gesture=gesture)])


@dataclass
class Game:
    bus: EventBus
    world: World
    flow: GameFlowSystem
    gestures: GestureInputSystem
    discs: DiscControlSystem

    @property
    def board(self) -> Board:
        return singleton(self.world, Board)

    def start(self) -> None:
        self.bus.emit(EVENT_GAME_START_REQUEST)

    def release_into(self, col: int) -> None:
        """Grab the active disc, hover over col and let go."""
        disc = active_disc(self.world)
        self.bus.emit(EVENT_HAND_GRAB, x=disc.x, y=disc.y)
        geometry = board_geometry(self.world)
        x = geometry.start_x + col * geometry.cell_size + geometry.cell_size / 2
        self.bus.emit(EVENT_HAND_MOVE, x=x, y=geometry.cell_size / 2, col=col)
        self.bus.emit(EVENT_HAND_RELEASE, col=col)

    def play(self, col: int, ticks: int = 120) -> None:
        self.release_into(col)
        drive_ticks(self.bus, ticks)


def build_game(*, started: bool = True, rows: int = 6, cols: int = 7, seed: int = 0) -> Game:
    bus = EventBus()
    world = create_world(bus, rows=rows, cols=cols, rng=random.Random(seed))
    flow = GameFlowSystem(world, bus)
    LandingSystem(world, bus)
    gestures = GestureInputSystem(world, bus)
    discs = DiscControlSystem(world, bus)
    TurnSystem(world, bus)
    AnimationSystem(world, bus)
    MatchResolutionSystem(world, bus)
    BombSystem(world, bus)
    game = Game(bus=bus, world=world, flow=flow, gestures=gestures, discs=discs)
    if started:
        game.start()
    return game


def fill(board: Board, cells: Iterable[tuple[int, int, int]], kind: DiscKind = DiscKind.NORMAL) -> None:
    for row, col, owner in cells:
        cell = board.cells[row][col]
        cell.owner = owner
        cell.rotation = 0.0
        cell.kind = kind


def occupied_positions(board: Board) -> list[tuple[int, int]]:
    return [
        (row, col)
        for row in range(board.rows)
        for col in range(board.cols)
        if board.cells[row][col].occupied
    ]


def is_empty(board: Board) -> bool:
    return not occupied_positions(board)


def has_floating_discs(board: Board) -> bool:
    """True if any occupied cell sits above an empty one in the same column."""
    for col in range(board.cols):
        seen_empty = False
        for row in range(board.rows - 1, -1, -1):
            if not board.cells[row][col].occupied:
                seen_empty = True
            elif seen_empty:
                return True
    return False


def player_entities(world: World) -> tuple[int, ...]:
    """Player entity ids ordered by player number."""
    entries = sorted(world.get_component(PlayerIdentity), key=lambda item: item[1].number)
    return tuple(entity for entity, _ in entries)


__all__ = [
    "DummyWindow", "FakeClock", "Game", "GameMode", "build_game", "drive_ticks", "fill", "hand_frame",
    "has_floating_discs", "is_empty", "occupied_positions", "player_entities",
]
