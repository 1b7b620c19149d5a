from dataclasses import dataclass

from flowlines.components.color import Color

@dataclass(slots=True)
class Anchor:
    """Immovable colored marker. ``order`` is 0 for the first-listed anchor, 1 for its partner."""
    color: Color
    order: int = 0
