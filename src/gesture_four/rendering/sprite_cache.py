from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Hashable

logger = logging.getLogger(__name__)

BOMB_IMAGE = "bomb.png"


class SpriteCache:
    """Bomb icon sprites keyed by what they decorate (a cell, the active disc, a drop...)."""

    def __init__(self, image_dir: Path):
        self._image_dir = Path(image_dir)
        self._smoothed_texture_cache: dict[tuple[str, int | None], Any] = {}
        self._failed: set[str] = set()
        self._bomb_sprite_map: dict[Hashable, Any] = {}
        self._bomb_sprites: Any | None = None

    def bomb_texture(self, arcade_module, *, max_dim: int | None = 128):
        return self._load_smoothed_texture(arcade_module, self._image_dir / BOMB_IMAGE, max_dim=max_dim)

    def ensure_bomb_sprite(self, arcade_module, key: Hashable):
        texture = self.bomb_texture(arcade_module)
        if texture is None:
            return None
        bomb_list = self._bomb_sprites
        if bomb_list is None:
            bomb_list = arcade_module.SpriteList()
            self._bomb_sprites = bomb_list
        sprite = self._bomb_sprite_map.get(key)
        if sprite is None:
            sprite = arcade_module.Sprite()
            sprite.texture = texture
            self._bomb_sprite_map[key] = sprite
            bomb_list.append(sprite)
        return sprite

    def cleanup_bomb_sprites(self, active_keys: set) -> None:
        for key in [k for k in self._bomb_sprite_map if k not in active_keys]:
            sprite = self._bomb_sprite_map.pop(key)
            sprite.remove_from_sprite_lists()

    def draw_bomb_sprites(self) -> None:
        if self._bomb_sprites is not None:
            self._bomb_sprites.draw()

    def update_sprite_visuals(self, sprite, center_x: float, center_y: float, size: float, alpha: int, angle: float = 0.0) -> None:
        sprite.center_x = center_x
        sprite.center_y = center_y
        texture = sprite.texture
        if texture and texture.width and texture.height:
            max_dim = max(texture.width, texture.height)
            if max_dim:
                sprite.scale = size / max_dim
        sprite.alpha = max(0, min(255, int(alpha)))
        sprite.angle = angle

    def _load_smoothed_texture(self, arcade_module, path: Path, max_dim: int | None = None):
        from PIL import Image

        key = (str(path), max_dim)
        cached = self._smoothed_texture_cache.get(key)
        if cached is not None:
            return cached
        if str(path) in self._failed:
            return None
        try:
            img = Image.open(path).convert("RGBA")
        except (OSError, ValueError) as exc:
            logger.warning("Could not load image %s: %s", path, exc)
            self._failed.add(str(path))
            return None
        if max_dim is not None and max(img.size) > max_dim:
            w, h = img.size
            scale = max_dim / max(w, h)
            img = img.resize((max(1, int(w * scale)), max(1, int(h * scale))), Image.Resampling.LANCZOS)
        texture = arcade_module.Texture(img, hash=f"smooth:{path.name}:{max_dim}")
        self._smoothed_texture_cache[key] = texture
        return texture
