"""Grab / move / release / bomb toggle handling for the active disc."""
from __future__ import annotations

import logging
import math

from esper import World

from gesture_four.components.animation_drop import DropAnimation
from gesture_four.components.disc_kind import DiscKind
from gesture_four.components.player import BombInventory
from gesture_four.constants import GRAB_RADIUS_FACTOR
from gesture_four.events.bus import (
    EVENT_BOMB_TOGGLE_REQUEST,
    EVENT_BOMB_TOGGLED,
    EVENT_DISC_GRABBED,
    EVENT_DISC_PLACED,
    EVENT_HAND_GRAB,
    EVENT_HAND_MOVE,
    EVENT_HAND_RELEASE,
    EVENT_TURN_ADVANCED,
    EventBus,
)
from gesture_four.factories.animation_factory import AnimationFactory
from gesture_four.systems.board_ops import get_board, landing_position
from gesture_four.systems.drop_physics import start_drop
from gesture_four.systems.match_setup import spawn_controlled_discs
from gesture_four.utils.world_queries import (
    active_disc,
    board_geometry,
    bombs_remaining,
    current_player_entity,
    input_locked,
    player_identity,
    preview_disc,
)

logger = logging.getLogger(__name__)


class DiscControlSystem:
    def __init__(self, world: World, event_bus: EventBus):
        self.world = world
        self.event_bus = event_bus
        self.factory = AnimationFactory(world)
        event_bus.subscribe(EVENT_HAND_GRAB, self.on_grab)
        event_bus.subscribe(EVENT_HAND_MOVE, self.on_move)
        event_bus.subscribe(EVENT_HAND_RELEASE, self.on_release)
        event_bus.subscribe(EVENT_BOMB_TOGGLE_REQUEST, self.on_toggle)
        event_bus.subscribe(EVENT_TURN_ADVANCED, self.on_turn_advanced)

    def _reserved(self) -> frozenset:
        # Cells already claimed by discs still falling.
        return frozenset((drop.row, drop.col) for _, drop in self.world.get_component(DropAnimation))

    def on_grab(self, sender, **kwargs):
        if input_locked(self.world):
            return
        disc = active_disc(self.world)
        if disc.grabbed:
            return
        x = kwargs.get('x'); y = kwargs.get('y')
        if x is None or y is None:
            return
        if math.hypot(x - disc.x, y - disc.y) >= disc.radius * GRAB_RADIUS_FACTOR:
            return
        disc.grabbed = True
        owner = current_player_entity(self.world)
        logger.debug("Disc grabbed by entity %s", owner)
        self.event_bus.emit(EVENT_DISC_GRABBED, owner_entity=owner, reason='grab')

    def on_move(self, sender, **kwargs):
        disc = active_disc(self.world)
        if not disc.grabbed:
            return
        geometry = board_geometry(self.world)
        x = kwargs.get('x', disc.x); y = kwargs.get('y', disc.y)
        col = kwargs.get('col')
        if col is None:
            col = geometry.column_at(x)
        disc.x = x
        disc.y = min(geometry.cell_size, y)
        preview = preview_disc(self.world)
        landing = landing_position(get_board(self.world), geometry, col, self._reserved())
        if landing is None:
            preview.visible = False
            preview.row = -1
            preview.col = -1
            return
        preview.x = landing.x
        preview.y = landing.y
        preview.row = landing.row
        preview.col = landing.col
        preview.radius = disc.radius
        preview.color = disc.color
        preview.kind = disc.kind
        preview.visible = True

    def on_release(self, sender, **kwargs):
        col = kwargs.get('col', -1)
        disc = active_disc(self.world)
        if disc.grabbed and not input_locked(self.world):
            self._drop(disc, col)
        # The active disc may have been replaced by the turn switch.
        active_disc(self.world).grabbed = False
        preview = preview_disc(self.world)
        preview.visible = False
        preview.row = -1
        preview.col = -1

    def _drop(self, disc, col: int) -> bool:
        geometry = board_geometry(self.world)
        landing = landing_position(get_board(self.world), geometry, col, self._reserved())
        if landing is None:
            return False
        owner = current_player_entity(self.world)
        identity = player_identity(self.world, owner)
        kind = disc.kind
        if kind is DiscKind.BOMB:
            inventory = self.world.component_for_entity(owner, BombInventory)
            if inventory.count <= 0:
                kind = DiscKind.NORMAL
            else:
                inventory.count -= 1
        drop = start_drop(
            disc.x,
            disc.y,
            landing,
            radius=disc.radius,
            color=identity.color,
            owner=identity.number,
            kind=kind,
            rng=getattr(self.world, 'random', None),
        )
        self.factory.create_drop(drop)
        logger.info("%s drops a %s disc into column %d (row %d)", identity.name, kind.name.lower(), landing.col, landing.row)
        self.event_bus.emit(EVENT_DISC_PLACED, owner_entity=owner, row=landing.row, col=landing.col, kind=kind)
        return True

    def on_toggle(self, sender, **kwargs):
        disc = active_disc(self.world)
        if disc.grabbed or input_locked(self.world):
            return
        owner = current_player_entity(self.world)
        if bombs_remaining(self.world, owner) <= 0:
            return
        disc.kind = DiscKind.NORMAL if disc.kind is DiscKind.BOMB else DiscKind.BOMB
        logger.debug("Active disc switched to %s", disc.kind.name)
        self.event_bus.emit(EVENT_BOMB_TOGGLED, owner_entity=owner, kind=disc.kind)
        self.event_bus.emit(EVENT_DISC_GRABBED, owner_entity=owner, reason='toggle')

    def on_turn_advanced(self, sender, **kwargs):
        spawn_controlled_discs(self.world)
