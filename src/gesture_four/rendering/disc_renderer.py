from __future__ import annotations

import math
from typing import TYPE_CHECKING, Hashable

from gesture_four.components.disc_kind import DiscKind
from gesture_four.constants import PREVIEW_ALPHA_BOMB, PREVIEW_ALPHA_NORMAL

if TYPE_CHECKING:
    from gesture_four.rendering.snapshot import GameSnapshot
    from gesture_four.rendering.sprite_cache import SpriteCache

MARKER_COLOR = (255, 255, 255)
BOMB_FALLBACK_COLOR = (30, 30, 30)


def draw_disc(
    arcade,
    sprites: "SpriteCache",
    key: Hashable,
    x: float,
    y: float,
    radius: float,
    color,
    kind: DiscKind | None,
    rotation: float,
    active_keys: set,
    alpha: int = 255,
) -> None:
    """Draw a disc at arcade coordinates (y-up). rotation is in radians, y-down sense."""
    arcade.draw_circle_filled(x, y, radius, (*color[:3], alpha))
    if kind is DiscKind.BOMB:
        sprite = sprites.ensure_bomb_sprite(arcade, key)
        if sprite is not None:
            sprites.update_sprite_visuals(sprite, x, y, radius * 1.4, alpha, math.degrees(rotation))
            active_keys.add(key)
        else:
            arcade.draw_circle_filled(x, y, radius * 0.45, (*BOMB_FALLBACK_COLOR, alpha))
        return
    # Orientation mark so the spin stays visible once the disc rests.
    mx = x + math.cos(rotation) * radius * 0.55
    my = y - math.sin(rotation) * radius * 0.55
    arcade.draw_circle_filled(mx, my, radius * 0.18, (*MARKER_COLOR, alpha))
    arcade.draw_circle_outline(x, y, radius * 0.75, (*MARKER_COLOR, alpha // 3), 2)


class DiscRenderer:
    """Active disc, landing preview, falling discs and blast rings."""

    def __init__(self, sprite_cache: "SpriteCache"):
        self._sprites = sprite_cache

    def render(self, arcade, snap: "GameSnapshot", active_keys: set) -> None:
        height = snap.geometry.height
        preview = snap.preview
        if preview is not None:
            alpha = PREVIEW_ALPHA_BOMB if preview.kind is DiscKind.BOMB else PREVIEW_ALPHA_NORMAL
            draw_disc(arcade, self._sprites, "preview", preview.x, height - preview.y, preview.radius,
                      preview.color, preview.kind, 0.0, active_keys, alpha)

        for index, drop in enumerate(snap.drops):
            draw_disc(arcade, self._sprites, ("drop", index), drop.x, height - drop.y, drop.radius,
                      drop.color, drop.kind, drop.rotation, active_keys)

        disc = snap.active_disc
        if disc is not None and not snap.game_over:
            draw_disc(arcade, self._sprites, "active", disc.x, height - disc.y, disc.radius,
                      disc.color, disc.kind, 0.0, active_keys)
            if disc.grabbed:
                arcade.draw_circle_outline(disc.x, height - disc.y, disc.radius + 4, (255, 255, 255), 3)

        for explosion in snap.explosions:
            alpha = int(255 * explosion.alpha)
            if alpha <= 0:
                continue
            cy = height - explosion.y
            arcade.draw_circle_filled(explosion.x, cy, explosion.radius, (*explosion.color, alpha // 2))
            arcade.draw_circle_outline(explosion.x, cy, explosion.radius, (*explosion.color, alpha), 4)
