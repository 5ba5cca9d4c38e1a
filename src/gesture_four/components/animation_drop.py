from dataclasses import dataclass
from typing import Tuple

from gesture_four.components.disc_kind import DiscKind


@dataclass(slots=True)
class DropAnimation:
    """Disc in free fall towards a landing cell chosen when it was released."""
    x: float
    y: float
    target_x: float
    target_y: float
    row: int
    col: int
    radius: float
    color: Tuple[int, int, int]
    owner: int
    kind: DiscKind
    rotation_speed: float
    final_rotation: float
    acceleration: float
    speed: float = 0.0
    rotation: float = 0.0
    settled: bool = False
