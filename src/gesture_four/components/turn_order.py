from dataclasses import dataclass, field
from typing import List


@dataclass(slots=True)
class TurnOrder:
    """Player entities in play order; index points at whoever holds the active disc."""
    players: List[int] = field(default_factory=list)
    index: int = 0

    def current(self) -> int | None:
        if not self.players:
            return None
        return self.players[self.index % len(self.players)]

    def advance(self) -> int | None:
        if self.players:
            self.index = (self.index + 1) % len(self.players)
        return self.current()

    def reset(self) -> int | None:
        self.index = 0
        return self.current()
