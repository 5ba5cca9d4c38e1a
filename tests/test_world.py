import random

from gesture_four.components.active_disc import ActiveDisc
from gesture_four.components.game_state import GameMode
from gesture_four.components.player import BombInventory, PlayerIdentity
from gesture_four.components.preview_disc import PreviewDisc
from gesture_four.events.bus import EventBus
from gesture_four.systems.board_ops import get_board
from gesture_four.utils.world_queries import current_mode, current_player_entity, player_identity
from gesture_four.world import create_world
from tests.helpers import is_empty, player_entities


def test_create_world_defaults():
    world = create_world(EventBus())
    assert current_mode(world) == GameMode.LANDING
    board = get_board(world)
    assert (board.rows, board.cols) == (6, 7)
    assert is_empty(board)
    players = player_entities(world)
    assert [world.component_for_entity(p, PlayerIdentity).number for p in players] == [1, 2]
    assert all(world.component_for_entity(p, BombInventory).count == 1 for p in players)
    assert player_identity(world, current_player_entity(world)).number == 1
    assert len(list(world.get_components(ActiveDisc, PreviewDisc))) == 1


def test_worlds_are_independent():
    first = create_world(EventBus(), rows=5, cols=8, rng=random.Random(1))
    second = create_world(EventBus())
    assert get_board(first) is not get_board(second)
    assert (get_board(first).rows, get_board(first).cols) == (5, 8)
    assert isinstance(first.random, random.Random)
