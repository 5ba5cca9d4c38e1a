from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Tuple

from gesture_four.constants import (
    ACTIVE_DISC_HOME_PCT,
    ACTIVE_DISC_TOP_OFFSET,
    BOARD_RESERVED_ROWS,
    DISC_RADIUS_FRACTION,
    MIN_CELL_SIZE,
)


@dataclass(frozen=True, slots=True)
class BoardGeometry:
    """Pixel layout of the board inside the window.

    Coordinates are y-down (camera/screen space): start_y is the top edge of the
    board and row 0 is the top row. Renderers flip to their own convention.
    """

    rows: int
    cols: int
    width: int
    height: int
    cell_size: float
    disc_radius: float
    start_x: float
    start_y: float

    @property
    def board_width(self) -> float:
        return self.cell_size * self.cols

    @property
    def board_height(self) -> float:
        return self.cell_size * self.rows

    def cell_center(self, row: int, col: int) -> Tuple[float, float]:
        x = self.start_x + col * self.cell_size + self.cell_size / 2
        y = self.start_y + row * self.cell_size + self.cell_size / 2
        return x, y

    def column_at(self, x: float) -> int:
        """Column under a horizontal pixel position; may be out of range."""
        return int(math.floor((x - self.start_x) / self.cell_size))

    def home_position(self, player_number: int, *, initial: bool = False) -> Tuple[float, float]:
        pct = ACTIVE_DISC_HOME_PCT.get(player_number, 0.5)
        x = self.width * pct
        if initial:
            return x, self.cell_size / 2
        return x, self.disc_radius + ACTIVE_DISC_TOP_OFFSET


def compute_board_geometry(window_width: int, window_height: int, rows: int, cols: int) -> BoardGeometry:
    """Fit the board into the window, centred horizontally and resting near the bottom.

    The cell size keeps room for one spare row above and below the board so the
    active disc can hover over it.
    """
    cell_size = min(window_width / cols, window_height / (rows + BOARD_RESERVED_ROWS))
    if cell_size < MIN_CELL_SIZE:
        cell_size = MIN_CELL_SIZE
    start_x = (window_width - cell_size * cols) / 2
    start_y = window_height - cell_size * rows - cell_size / 2
    return BoardGeometry(
        rows=rows,
        cols=cols,
        width=window_width,
        height=window_height,
        cell_size=cell_size,
        disc_radius=cell_size * DISC_RADIUS_FRACTION,
        start_x=start_x,
        start_y=start_y,
    )
