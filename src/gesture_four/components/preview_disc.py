from dataclasses import dataclass
from typing import Tuple

from gesture_four.components.disc_kind import DiscKind


@dataclass(slots=True)
class PreviewDisc:
    x: float = 0.0
    y: float = 0.0
    row: int = -1
    col: int = -1
    radius: float = 0.0
    visible: bool = False
    color: Tuple[int, int, int] = (0, 0, 0)
    kind: DiscKind = DiscKind.NORMAL
