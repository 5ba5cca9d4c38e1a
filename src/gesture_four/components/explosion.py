from dataclasses import dataclass
from typing import Tuple


@dataclass(slots=True)
class Explosion:
    x: float
    y: float
    owner: int
    color: Tuple[int, int, int]
    max_radius: float
    radius: float = 0.0
    alpha: float = 1.0
