from dataclasses import dataclass
from typing import Tuple

from gesture_four.components.disc_kind import DiscKind


@dataclass(slots=True)
class ActiveDisc:
    """Disc under the current player's control before it is released.

    kind doubles as the bomb selection flag: BOMB means the player toggled a bomb.
    """
    x: float
    y: float
    radius: float
    color: Tuple[int, int, int]
    kind: DiscKind = DiscKind.NORMAL
    grabbed: bool = False
