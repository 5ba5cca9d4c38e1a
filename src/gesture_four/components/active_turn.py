from dataclasses import dataclass

@dataclass(slots=True)
class ActiveTurn:
    """Marks which player entity currently controls the active disc."""
    owner_entity: int
