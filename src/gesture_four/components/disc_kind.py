from enum import Enum, auto


class DiscKind(Enum):
    """Closed set of disc variants; every consumer handles each member explicitly."""
    NORMAL = auto()
    BOMB = auto()
