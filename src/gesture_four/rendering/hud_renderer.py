from __future__ import annotations

import math
from typing import TYPE_CHECKING

from gesture_four.components.game_state import GameMode

if TYPE_CHECKING:
    from gesture_four.rendering.snapshot import GameSnapshot

TEXT_COLOR = (255, 255, 255)
BAR_BACKGROUND = (60, 60, 60)
BAR_FILL = (90, 185, 70)


def status_lines(snap: "GameSnapshot") -> list[str]:
    """Text shown in the status area for the current frame."""
    if snap.mode == GameMode.LANDING:
        return ["Gesture Four", "Hold a thumbs up to start"]
    if snap.game_over and snap.winner is not None:
        name = snap.player_names.get(snap.winner, f"Player {snap.winner}")
        return [f"{name} wins!", f"New game in {math.ceil(snap.countdown)}s"]
    name = snap.player_names.get(snap.current_player, f"Player {snap.current_player}")
    bombs = snap.bombs.get(snap.current_player, 0)
    lines = [f"{name}'s turn", f"Bombs: {bombs}"]
    if snap.bomb_selected:
        lines.append("Bomb armed")
    return lines


class HudRenderer:
    def render(self, arcade, snap: "GameSnapshot") -> None:
        geo = snap.geometry
        lines = status_lines(snap)
        if snap.mode == GameMode.LANDING:
            cx = geo.width / 2
            cy = geo.height / 2
            arcade.draw_text(lines[0], cx, cy + 60, TEXT_COLOR, 48, anchor_x="center", bold=True)
            arcade.draw_text(lines[1], cx, cy, TEXT_COLOR, 22, anchor_x="center")
            bar_w = geo.width * 0.4
            left = cx - bar_w / 2
            arcade.draw_lbwh_rectangle_filled(left, cy - 60, bar_w, 20, BAR_BACKGROUND)
            if snap.landing_progress > 0:
                arcade.draw_lbwh_rectangle_filled(left, cy - 60, bar_w * snap.landing_progress, 20, BAR_FILL)
            arcade.draw_lbwh_rectangle_outline(left, cy - 60, bar_w, 20, TEXT_COLOR, 2)
            return
        color = TEXT_COLOR
        if snap.game_over and snap.winner is not None:
            color = snap.player_colors.get(snap.winner, TEXT_COLOR)
        else:
            color = snap.player_colors.get(snap.current_player, TEXT_COLOR)
        y = geo.height - 30
        for line in lines:
            arcade.draw_text(line, 20, y, color, 18, bold=True)
            y -= 26
