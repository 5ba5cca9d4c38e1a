import random

from esper import World
from .events.bus import EventBus
from gesture_four.components.bomb_sequence import BombSequence
from gesture_four.components.game_state import GameMode, GameState
from gesture_four.components.landing_progress import LandingProgress
from gesture_four.components.match_state import MatchState
from gesture_four.components.player import BombInventory, PlayerIdentity
from gesture_four.components.turn_order import TurnOrder
from gesture_four.components.active_turn import ActiveTurn
from gesture_four.components.viewport import Viewport
from gesture_four.constants import (
    BOMBS_PER_PLAYER,
    DEFAULT_WINDOW_HEIGHT,
    DEFAULT_WINDOW_WIDTH,
    GRID_COLS,
    GRID_ROWS,
    PLAYER_COLORS,
    PLAYER_NAMES,
    THUMB_UP_HOLD_DURATION,
)
from gesture_four.systems.board_ops import create_board
from gesture_four.systems.match_setup import spawn_controlled_discs


def create_world(
    event_bus: EventBus,
    initial_mode: GameMode = GameMode.LANDING,
    *,
    rows: int = GRID_ROWS,
    cols: int = GRID_COLS,
    width: int = DEFAULT_WINDOW_WIDTH,
    height: int = DEFAULT_WINDOW_HEIGHT,
    rng: random.Random | None = None,
) -> World:
    """Build a world holding one complete game: shared state, board, players and discs."""
    world = World()
    setattr(world, "random", rng or random.Random())

    world.create_entity(
        GameState(mode=initial_mode),
        LandingProgress(required=THUMB_UP_HOLD_DURATION),
        MatchState(),
        BombSequence(),
        Viewport(width=width, height=height),
    )
    world.create_entity(create_board(rows, cols))

    players = []
    for number in (1, 2):
        players.append(
            world.create_entity(
                PlayerIdentity(number=number, name=PLAYER_NAMES[number], color=PLAYER_COLORS[number]),
                BombInventory(count=BOMBS_PER_PLAYER),
            )
        )
    world.create_entity(TurnOrder(players=players))
    world.create_entity(ActiveTurn(owner_entity=players[0]))

    spawn_controlled_discs(world, initial=True)
    return world
