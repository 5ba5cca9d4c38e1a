from __future__ import annotations

from typing import Type, TypeVar

from esper import World

from gesture_four.components.active_disc import ActiveDisc
from gesture_four.components.active_turn import ActiveTurn
from gesture_four.components.board import Board
from gesture_four.components.bomb_sequence import BombSequence
from gesture_four.components.game_state import GameMode, GameState
from gesture_four.components.match_state import MatchState
from gesture_four.components.player import BombInventory, PlayerIdentity
from gesture_four.components.preview_disc import PreviewDisc
from gesture_four.components.viewport import Viewport
from gesture_four.ui.layout import BoardGeometry, compute_board_geometry

T = TypeVar("T")


def singleton(world: World, component_type: Type[T]) -> T:
    for _, component in world.get_component(component_type):
        return component
    raise RuntimeError(f"{component_type.__name__} not found")


def singleton_entity(world: World, component_type: type) -> int | None:
    for entity, _ in world.get_component(component_type):
        return entity
    return None


def current_mode(world: World) -> GameMode:
    return singleton(world, GameState).mode


def board_geometry(world: World) -> BoardGeometry:
    board = singleton(world, Board)
    viewport = singleton(world, Viewport)
    return compute_board_geometry(viewport.width, viewport.height, board.rows, board.cols)


def active_disc(world: World) -> ActiveDisc:
    return singleton(world, ActiveDisc)


def preview_disc(world: World) -> PreviewDisc:
    return singleton(world, PreviewDisc)


def match_state(world: World) -> MatchState:
    return singleton(world, MatchState)


def bomb_sequence(world: World) -> BombSequence:
    return singleton(world, BombSequence)


def current_player_entity(world: World) -> int | None:
    for _, active in world.get_component(ActiveTurn):
        return active.owner_entity
    return None


def player_identity(world: World, entity: int) -> PlayerIdentity:
    return world.component_for_entity(entity, PlayerIdentity)


def bombs_remaining(world: World, entity: int | None) -> int:
    if entity is None:
        return 0
    try:
        return world.component_for_entity(entity, BombInventory).count
    except KeyError:
        return 0


def input_locked(world: World) -> bool:
    """Gameplay input is ignored after a win and while a blast resolves."""
    return match_state(world).game_over or bomb_sequence(world).active
