from __future__ import annotations

import logging

from esper import World

from gesture_four.components.animation_drop import DropAnimation
from gesture_four.components.animation_fall import FallAnimation
from gesture_four.components.duration import Duration
from gesture_four.components.explosion import Explosion
from gesture_four.constants import EXPLOSION_GROWTH_RATE
from gesture_four.events.bus import (
    EVENT_ANIMATION_COMPLETE,
    EVENT_ANIMATION_START,
    EVENT_DISC_SETTLED,
    EVENT_TICK,
    EventBus,
)
from gesture_four.factories.animation_factory import AnimationFactory
from gesture_four.systems.board_ops import get_board, get_cell, set_cell
from gesture_four.systems.drop_physics import step_drop
from gesture_four.utils.world_queries import board_geometry

logger = logging.getLogger(__name__)


class AnimationSystem:
    """Drives per-tick animation: falling discs, gravity replays and explosions.

    Drop animations run on frame ticks (fixed step per tick); falls and explosions
    scale with the tick's dt.
    """
    def __init__(self, world: World, event_bus: EventBus):
        self.world = world
        self.event_bus = event_bus
        self.factory = AnimationFactory(world)
        event_bus.subscribe(EVENT_TICK, self.on_tick)
        event_bus.subscribe(EVENT_ANIMATION_START, self.on_animation_start)

    def on_animation_start(self, sender, **kwargs):
        kind = kwargs.get('kind'); items = kwargs.get('items', [])
        if kind == 'fall' and items:
            self.factory.create_fall_group(items, board_geometry(self.world))

    def on_tick(self, sender, **kwargs):
        dt = kwargs.get('dt', 1/60)
        self._advance_drops()
        self._advance_falls(dt)
        self._advance_explosions(dt)

    def _advance_drops(self):
        # Snapshot in creation order; settled discs are removed after their own step.
        drops = sorted(self.world.get_component(DropAnimation), key=lambda item: item[0])
        for ent, disc in drops:
            if not step_drop(disc):
                continue
            self.world.delete_entity(ent, immediate=True)
            row = self._commit(disc)
            if row is None:
                continue
            self.event_bus.emit(EVENT_DISC_SETTLED, row=row, col=disc.col, owner=disc.owner, kind=disc.kind)

    def _commit(self, disc: DropAnimation) -> int | None:
        board = get_board(self.world)
        cell = get_cell(board, disc.row, disc.col)
        if cell is None or cell.occupied:
            # The landing cell is fixed at release; a slot taken during flight loses the disc.
            logger.warning("Dropped disc discarded; cell (%d, %d) was filled during flight", disc.row, disc.col)
            return None
        set_cell(board, disc.row, disc.col, disc.owner, disc.rotation, disc.kind)
        return disc.row

    def _advance_falls(self, dt: float):
        falls = list(self.world.get_component(FallAnimation))
        if not falls:
            return
        for ent, fall in falls:
            if fall.linear < 1.0:
                d = self.world.component_for_entity(ent, Duration)
                fall.linear += dt / d.value if d.value > 0 else 1.0
                if fall.linear > 1.0:
                    fall.linear = 1.0
        if all(fall.linear >= 1.0 for _, fall in falls):
            items = [{'from': fall.src, 'to': fall.dst} for _, fall in falls]
            for ent, _ in falls:
                self.world.delete_entity(ent, immediate=True)
            self.event_bus.emit(EVENT_ANIMATION_COMPLETE, kind='fall', items=items)

    def _advance_explosions(self, dt: float):
        for ent, explosion in list(self.world.get_component(Explosion)):
            explosion.radius += dt * EXPLOSION_GROWTH_RATE
            explosion.alpha = max(0.0, 1.0 - explosion.radius / explosion.max_radius)
            if explosion.radius >= explosion.max_radius:
                self.world.delete_entity(ent, immediate=True)
