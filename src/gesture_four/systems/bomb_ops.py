from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple

from gesture_four.components.board import Board
from gesture_four.constants import BLAST_RADIUS
from gesture_four.systems.board_ops import clear_cell, get_cell
from gesture_four.ui.layout import BoardGeometry

Position = Tuple[int, int]


@dataclass(frozen=True, slots=True)
class GravityMove:
    source: Position
    target: Position
    target_x: float = 0.0
    target_y: float = 0.0


def blast(board: Board, row: int, col: int, radius: int = BLAST_RADIUS) -> List[Position]:
    """Clear every occupied cell in the square neighbourhood around (row, col).

    Out-of-range neighbours are skipped. Returns the cleared positions in
    row-major order.
    """
    cleared: List[Position] = []
    for dr in range(-radius, radius + 1):
        for dc in range(-radius, radius + 1):
            r = row + dr
            c = col + dc
            if clear_cell(board, r, c):
                cleared.append((r, c))
    return cleared


def apply_gravity(board: Board, geometry: Optional[BoardGeometry] = None) -> List[GravityMove]:
    """Collapse every column so occupied cells rest contiguously on the bottom.

    Each column is scanned bottom to top while tracking the lowest free slot;
    a disc found above it moves down with its rotation and kind. The board is
    mutated in place and the moves are returned for animation.
    """
    moves: List[GravityMove] = []
    for col in range(board.cols):
        empty_row = -1
        for row in range(board.rows - 1, -1, -1):
            cell = board.cells[row][col]
            if not cell.occupied:
                if empty_row == -1:
                    empty_row = row
                continue
            if empty_row == -1:
                continue
            dest = get_cell(board, empty_row, col)
            dest.owner = cell.owner
            dest.rotation = cell.rotation
            dest.kind = cell.kind
            clear_cell(board, row, col)
            if geometry is not None:
                tx, ty = geometry.cell_center(empty_row, col)
            else:
                tx, ty = 0.0, 0.0
            moves.append(GravityMove(source=(row, col), target=(empty_row, col), target_x=tx, target_y=ty))
            empty_row -= 1
    return moves
