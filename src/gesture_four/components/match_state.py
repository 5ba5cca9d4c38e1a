from dataclasses import dataclass, field
from typing import List, Optional, Tuple


@dataclass(slots=True)
class MatchState:
    """Outcome of the running match and the post-win countdown."""

    game_over: bool = False
    winner: Optional[int] = None
    winning_positions: List[Tuple[int, int]] = field(default_factory=list)
    win_timer: float = 0.0
