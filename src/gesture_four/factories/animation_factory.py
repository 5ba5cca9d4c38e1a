from __future__ import annotations

from typing import Iterable, List

from esper import World

from gesture_four.components.animation_drop import DropAnimation
from gesture_four.components.animation_fall import FallAnimation
from gesture_four.components.duration import Duration
from gesture_four.components.explosion import Explosion
from gesture_four.constants import EXPLOSION_COLORS, EXPLOSION_MAX_RADIUS, GRAVITY_FALL_DURATION
from gesture_four.systems.bomb_ops import GravityMove
from gesture_four.ui.layout import BoardGeometry


class AnimationFactory:
    def __init__(self, world: World):
        self.world = world

    def create_drop(self, disc: DropAnimation) -> int:
        return self.world.create_entity(disc)

    def create_fall_group(
        self,
        moves: Iterable[GravityMove],
        geometry: BoardGeometry,
        duration: float = GRAVITY_FALL_DURATION,
    ) -> List[int]:
        ents = []
        for move in moves:
            start = geometry.cell_center(*move.source)
            ent = self.world.create_entity(
                FallAnimation(src=move.source, dst=move.target, start=start, end=(move.target_x, move.target_y)),
                Duration(duration),
            )
            ents.append(ent)
        return ents

    def create_explosion(self, x: float, y: float, owner_number: int, max_radius: float = EXPLOSION_MAX_RADIUS) -> int:
        color = EXPLOSION_COLORS.get(owner_number, (255, 255, 255))
        return self.world.create_entity(
            Explosion(x=x, y=y, owner=owner_number, color=color, max_radius=max_radius)
        )
