from dataclasses import dataclass
from typing import Tuple


@dataclass(slots=True)
class PlayerIdentity:
    """Static identity for one of the two players."""
    number: int
    name: str
    color: Tuple[int, int, int]


@dataclass(slots=True)
class BombInventory:
    count: int = 1
