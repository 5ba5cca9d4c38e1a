from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass(slots=True)
class BombSequence:
    """Timing gate that suspends input while a blast resolves.

    Gravity compaction is applied once elapsed passes the gravity delay and the
    sequence ends (input resumes) after the input lock window.
    """

    active: bool = False
    elapsed: float = 0.0
    gravity_applied: bool = False
    origin: Optional[Tuple[int, int]] = None
