from dataclasses import dataclass


@dataclass(slots=True)
class Viewport:
    """Current window size in pixels; board geometry is derived from it."""
    width: int
    height: int
