from dataclasses import dataclass


@dataclass(slots=True)
class LandingProgress:
    """Time the start gesture has been held continuously on the landing screen."""
    required: float
    elapsed: float = 0.0

    @property
    def fraction(self) -> float:
        if self.required <= 0:
            return 1.0
        return min(self.elapsed / self.required, 1.0)

    @property
    def complete(self) -> bool:
        return self.elapsed >= self.required
