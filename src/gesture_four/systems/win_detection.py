from __future__ import annotations

from typing import List, Optional, Tuple

from gesture_four.components.board import Board
from gesture_four.systems.board_ops import owner_at

Position = Tuple[int, int]

# Checked in this order; the first axis reaching four is reported.
WIN_AXES: Tuple[Position, ...] = (
    (0, 1),   # horizontal
    (1, 0),   # vertical
    (1, 1),   # diagonal down-right
    (1, -1),  # diagonal down-left
)
WIN_LENGTH = 4


def _run(board: Board, row: int, col: int, dr: int, dc: int, player: int) -> List[Position]:
    cells: List[Position] = []
    for step in range(1, WIN_LENGTH):
        r = row + step * dr
        c = col + step * dc
        if owner_at(board, r, c) != player:
            break
        cells.append((r, c))
    return cells


def check_win(board: Board, row: int, col: int, player: int) -> Optional[List[Position]]:
    """Return the winning run through (row, col) or None.

    The list starts with the placed cell, followed by the cells counted in the
    positive direction and then the negative direction of the first winning axis.
    Runs longer than four are reported as counted (up to three cells each way).
    """
    for dr, dc in WIN_AXES:
        positions: List[Position] = [(row, col)]
        positions.extend(_run(board, row, col, dr, dc, player))
        positions.extend(_run(board, row, col, -dr, -dc, player))
        if len(positions) >= WIN_LENGTH:
            return positions
    return None
