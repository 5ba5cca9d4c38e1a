from __future__ import annotations

from dataclasses import dataclass
from typing import AbstractSet, Optional, Tuple

from esper import World

from gesture_four.components.board import Board, Cell
from gesture_four.components.disc_kind import DiscKind
from gesture_four.ui.layout import BoardGeometry

Position = Tuple[int, int]


@dataclass(frozen=True, slots=True)
class LandingPosition:
    row: int
    col: int
    x: float
    y: float


def create_board(rows: int, cols: int) -> Board:
    return Board(rows=rows, cols=cols, cells=[[Cell() for _ in range(cols)] for _ in range(rows)])


def get_board(world: World) -> Board:
    for _, board in world.get_component(Board):
        return board
    raise RuntimeError("Board not found")


def in_bounds(board: Board, row: int, col: int) -> bool:
    return 0 <= row < board.rows and 0 <= col < board.cols


def is_valid_column(board: Board, col: int) -> bool:
    return 0 <= col < board.cols


def get_cell(board: Board, row: int, col: int) -> Optional[Cell]:
    if not in_bounds(board, row, col):
        return None
    return board.cells[row][col]


def owner_at(board: Board, row: int, col: int) -> Optional[int]:
    cell = get_cell(board, row, col)
    return cell.owner if cell is not None else None


def set_cell(board: Board, row: int, col: int, owner: int, rotation: float, kind: DiscKind) -> bool:
    """Occupy a slot with a settled disc. Refuses out-of-range or occupied slots."""
    cell = get_cell(board, row, col)
    if cell is None or cell.occupied:
        return False
    cell.owner = owner
    cell.rotation = rotation
    cell.kind = kind
    return True


def clear_cell(board: Board, row: int, col: int) -> bool:
    cell = get_cell(board, row, col)
    if cell is None or not cell.occupied:
        return False
    cell.owner = None
    cell.rotation = None
    cell.kind = None
    return True


def is_column_full(board: Board, col: int) -> bool:
    """True when the top slot of the column is taken; invalid columns count as full."""
    if not is_valid_column(board, col):
        return True
    return board.cells[0][col].occupied


def lowest_empty_row(board: Board, col: int, reserved: AbstractSet[Position] = frozenset()) -> Optional[int]:
    """Row a disc dropped into col would land on, skipping slots already claimed by discs in flight."""
    if not is_valid_column(board, col):
        return None
    for row in range(board.rows - 1, -1, -1):
        if not board.cells[row][col].occupied and (row, col) not in reserved:
            return row
    return None


def landing_position(
    board: Board,
    geometry: BoardGeometry,
    col: int,
    reserved: AbstractSet[Position] = frozenset(),
) -> Optional[LandingPosition]:
    row = lowest_empty_row(board, col, reserved)
    if row is None:
        return None
    x, y = geometry.cell_center(row, col)
    return LandingPosition(row=row, col=col, x=x, y=y)
