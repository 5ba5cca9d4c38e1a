from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from gesture_four.components.disc_kind import DiscKind


@dataclass(slots=True)
class Cell:
    """Single board slot.

    owner is the player number occupying the slot or None when empty. rotation and
    kind describe the settled disc and are only meaningful while owner is set;
    board_ops writes and clears all three together.
    """
    owner: Optional[int] = None
    rotation: Optional[float] = None
    kind: Optional[DiscKind] = None

    @property
    def occupied(self) -> bool:
        return self.owner is not None


@dataclass(slots=True)
class Board:
    rows: int
    cols: int
    cells: List[List[Cell]] = field(default_factory=list)
