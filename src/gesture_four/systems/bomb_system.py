"""Bomb detonation and the timed gravity collapse that follows it."""
from __future__ import annotations

import logging

from esper import World

from gesture_four.components.bomb_sequence import BombSequence
from gesture_four.components.disc_kind import DiscKind
from gesture_four.constants import BOMB_GRAVITY_DELAY, BOMB_INPUT_LOCK
from gesture_four.events.bus import (
    EVENT_ANIMATION_START,
    EVENT_BOMB_EXPLODED,
    EVENT_BOMB_SEQUENCE_COMPLETE,
    EVENT_DISC_SETTLED,
    EVENT_GRAVITY_APPLIED,
    EVENT_TICK,
    EventBus,
)
from gesture_four.factories.animation_factory import AnimationFactory
from gesture_four.systems.board_ops import get_board
from gesture_four.systems.bomb_ops import apply_gravity, blast
from gesture_four.utils.world_queries import board_geometry, bomb_sequence

logger = logging.getLogger(__name__)


class BombSystem:
    def __init__(self, world: World, event_bus: EventBus, *, gravity_delay: float = BOMB_GRAVITY_DELAY, input_lock: float = BOMB_INPUT_LOCK):
        self.world = world
        self.event_bus = event_bus
        self.gravity_delay = gravity_delay
        self.input_lock = input_lock
        self.factory = AnimationFactory(world)
        event_bus.subscribe(EVENT_DISC_SETTLED, self.on_disc_settled)
        event_bus.subscribe(EVENT_TICK, self.on_tick)

    def on_disc_settled(self, sender, **kwargs):
        if kwargs.get('kind') is not DiscKind.BOMB:
            return
        row = kwargs['row']; col = kwargs['col']; owner = kwargs['owner']
        cleared = blast(get_board(self.world), row, col)
        x, y = board_geometry(self.world).cell_center(row, col)
        self.factory.create_explosion(x, y, owner)
        sequence = bomb_sequence(self.world)
        # A second bomb landing mid-sequence restarts the timers from its own blast.
        sequence.active = True
        sequence.elapsed = 0.0
        sequence.gravity_applied = False
        sequence.origin = (row, col)
        logger.info("Bomb from player %d exploded at (%d, %d), cleared %d discs", owner, row, col, len(cleared))
        self.event_bus.emit(EVENT_BOMB_EXPLODED, row=row, col=col, owner=owner, cleared=cleared)

    def on_tick(self, sender, **kwargs):
        sequence = bomb_sequence(self.world)
        if not sequence.active:
            return
        sequence.elapsed += kwargs.get('dt', 1/60)
        if not sequence.gravity_applied and sequence.elapsed > self.gravity_delay:
            self._collapse(sequence)
        if sequence.elapsed > self.input_lock:
            sequence.active = False
            origin = sequence.origin or (None, None)
            logger.debug("Bomb sequence finished after %.2fs", sequence.elapsed)
            self.event_bus.emit(EVENT_BOMB_SEQUENCE_COMPLETE, row=origin[0], col=origin[1])

    def _collapse(self, sequence: BombSequence):
        moves = apply_gravity(get_board(self.world), board_geometry(self.world))
        sequence.gravity_applied = True
        logger.debug("Gravity moved %d discs", len(moves))
        self.event_bus.emit(EVENT_GRAVITY_APPLIED, moves=moves)
        if moves:
            self.event_bus.emit(EVENT_ANIMATION_START, kind='fall', items=moves)
