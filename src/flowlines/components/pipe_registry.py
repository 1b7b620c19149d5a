from dataclasses import dataclass, field
from typing import Dict

from flowlines.components.color import Color


@dataclass(slots=True)
class PipeRegistry:
    """Singleton mapping each color to the entity of its active pipe."""
    active: Dict[Color, int] = field(default_factory=dict)
