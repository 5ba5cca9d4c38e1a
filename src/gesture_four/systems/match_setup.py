"""Match (re)initialisation shared by game start, win timeout and resize."""
from __future__ import annotations

import logging

from esper import World

from gesture_four.components.active_disc import ActiveDisc
from gesture_four.components.active_turn import ActiveTurn
from gesture_four.components.animation_drop import DropAnimation
from gesture_four.components.animation_fall import FallAnimation
from gesture_four.components.board import Board
from gesture_four.components.bomb_sequence import BombSequence
from gesture_four.components.disc_kind import DiscKind
from gesture_four.components.explosion import Explosion
from gesture_four.components.match_state import MatchState
from gesture_four.components.player import BombInventory
from gesture_four.components.preview_disc import PreviewDisc
from gesture_four.components.turn_order import TurnOrder
from gesture_four.constants import BOMBS_PER_PLAYER
from gesture_four.events.bus import EVENT_MATCH_RESET, EventBus
from gesture_four.systems.board_ops import create_board
from gesture_four.utils.world_queries import (
    board_geometry,
    current_player_entity,
    player_identity,
    singleton_entity,
)

logger = logging.getLogger(__name__)

TRANSIENT_COMPONENTS = (DropAnimation, FallAnimation, Explosion)


def spawn_controlled_discs(world: World, *, initial: bool = False) -> int:
    """(Re)create the active and preview discs for the player whose turn it is."""
    existing = singleton_entity(world, ActiveDisc)
    if existing is not None:
        world.delete_entity(existing, immediate=True)
    geometry = board_geometry(world)
    owner = current_player_entity(world)
    identity = player_identity(world, owner)
    x, y = geometry.home_position(identity.number, initial=initial)
    return world.create_entity(
        ActiveDisc(x=x, y=y, radius=geometry.disc_radius, color=identity.color, kind=DiscKind.NORMAL),
        PreviewDisc(radius=geometry.disc_radius, color=identity.color),
    )


def reset_match(world: World, event_bus: EventBus | None = None, *, reason: str = "reset") -> None:
    """Discard every piece of match state and allocate fresh objects.

    The board is replaced rather than cleared so nothing holding the previous
    grid can observe the new game.
    """
    for component_type in TRANSIENT_COMPONENTS:
        for entity in [ent for ent, _ in world.get_component(component_type)]:
            world.delete_entity(entity, immediate=True)

    board_ent = singleton_entity(world, Board)
    if board_ent is not None:
        old = world.component_for_entity(board_ent, Board)
        world.add_component(board_ent, create_board(old.rows, old.cols))

    state_ent = singleton_entity(world, MatchState)
    if state_ent is not None:
        world.add_component(state_ent, MatchState())
        world.add_component(state_ent, BombSequence())

    for _, inventory in world.get_component(BombInventory):
        inventory.count = BOMBS_PER_PLAYER

    for _, order in world.get_component(TurnOrder):
        first = order.reset()
        if first is not None:
            for _, active in world.get_component(ActiveTurn):
                active.owner_entity = first
        break

    spawn_controlled_discs(world, initial=True)
    logger.info("Match reset (%s)", reason)
    if event_bus is not None:
        event_bus.emit(EVENT_MATCH_RESET, reason=reason)
