from __future__ import annotations

import math
from typing import TYPE_CHECKING

from gesture_four.constants import BOARD_ALPHA, BOARD_COLOR, HOLE_COLOR, WIN_HIGHLIGHT_COLOR
from gesture_four.rendering.disc_renderer import draw_disc

if TYPE_CHECKING:
    from gesture_four.rendering.snapshot import GameSnapshot
    from gesture_four.rendering.sprite_cache import SpriteCache
    from gesture_four.systems.render import RenderSystem


def ease_in_out(p: float) -> float:
    if p < 0.5:
        return 2 * p * p
    return -2 * p * p + 4 * p - 1


class BoardRenderer:
    def __init__(self, render_system: RenderSystem, sprite_cache: "SpriteCache"):
        self._rs = render_system
        self._sprites = sprite_cache

    def render(self, arcade, snap: GameSnapshot, headless: bool, active_keys: set) -> None:
        rs = self._rs
        geo = snap.geometry
        height = geo.height
        rs._last_cell_layout = {}
        for row in range(geo.rows):
            for col in range(geo.cols):
                x, y = geo.cell_center(row, col)
                rs._last_cell_layout[(row, col)] = (x, height - y)
        if headless:
            return

        left = geo.start_x
        top = height - geo.start_y
        arcade.draw_lrbt_rectangle_filled(left, left + geo.board_width, top - geo.board_height, top, (*BOARD_COLOR, BOARD_ALPHA))
        hole_radius = geo.disc_radius + 2
        winning = set(snap.winning_positions)
        # Winning discs pulse while the countdown runs.
        pulse = 0.5 + 0.5 * math.sin(rs._time * 6.0)

        for (row, col), (x, y) in rs._last_cell_layout.items():
            arcade.draw_circle_filled(x, y, hole_radius, (*HOLE_COLOR, 160))
            cell = snap.cell(row, col)
            if cell.owner is None or (row, col) in snap.hidden_cells:
                continue
            color = snap.player_colors.get(cell.owner, (200, 200, 200))
            draw_disc(arcade, self._sprites, ("cell", row, col), x, y, geo.disc_radius, color,
                      cell.kind, cell.rotation or 0.0, active_keys)
            if (row, col) in winning:
                arcade.draw_circle_outline(x, y, geo.disc_radius + 3 + pulse * 5, (*WIN_HIGHLIGHT_COLOR, int(140 + 115 * pulse)), 4)

        for fall in snap.falls:
            if fall.owner is None:
                continue
            p = ease_in_out(fall.progress)
            x = fall.start[0] + (fall.end[0] - fall.start[0]) * p
            y = fall.start[1] + (fall.end[1] - fall.start[1]) * p
            color = snap.player_colors.get(fall.owner, (200, 200, 200))
            draw_disc(arcade, self._sprites, ("fall", fall.dst), x, height - y, geo.disc_radius, color,
                      fall.kind, fall.rotation or 0.0, active_keys)
