from __future__ import annotations

import math
import random
from typing import Tuple

from gesture_four.components.animation_drop import DropAnimation
from gesture_four.components.disc_kind import DiscKind
from gesture_four.constants import (
    DROP_ACCELERATION,
    HORIZONTAL_EASE,
    ROTATION_BLEND,
    ROTATION_DAMPING,
    ROTATION_SPEED_MAX,
    ROTATION_SPEED_MIN,
    SETTLE_ZONE_RADII,
)
from gesture_four.systems.board_ops import LandingPosition


def start_drop(
    x: float,
    y: float,
    landing: LandingPosition,
    *,
    radius: float,
    color: Tuple[int, int, int],
    owner: int,
    kind: DiscKind,
    rng: random.Random | None = None,
) -> DropAnimation:
    """Create a falling disc at the release point heading for a fixed landing cell."""
    rng = rng or random.Random()
    return DropAnimation(
        x=x,
        y=y,
        target_x=landing.x,
        target_y=landing.y,
        row=landing.row,
        col=landing.col,
        radius=radius,
        color=color,
        owner=owner,
        kind=kind,
        rotation_speed=rng.uniform(ROTATION_SPEED_MIN, ROTATION_SPEED_MAX),
        final_rotation=rng.uniform(0.0, math.tau),
        acceleration=DROP_ACCELERATION,
    )


def step_drop(disc: DropAnimation) -> bool:
    """Advance one frame; returns True once the disc reached its landing height.

    Speed is integrated before position. Near the target the spin blends towards
    the pre-chosen final angle while its speed decays.
    """
    disc.speed += disc.acceleration
    disc.y += disc.speed
    disc.x += (disc.target_x - disc.x) * HORIZONTAL_EASE
    disc.rotation += disc.rotation_speed
    if disc.target_y - disc.y < disc.radius * SETTLE_ZONE_RADII:
        disc.rotation += (disc.final_rotation - disc.rotation) * ROTATION_BLEND
        disc.rotation_speed *= ROTATION_DAMPING
    if disc.y >= disc.target_y:
        disc.x = disc.target_x
        disc.y = disc.target_y
        disc.settled = True
    return disc.settled
