from dataclasses import dataclass
from typing import Tuple

@dataclass(slots=True)
class FallAnimation:
    """Cosmetic replay of a gravity move already committed to the board."""
    src: Tuple[int,int]
    dst: Tuple[int,int]
    start: Tuple[float,float]
    end: Tuple[float,float]
    linear: float = 0.0  # 0..1
