from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Tuple

from flowlines.components.color import Color

Position = Tuple[int, int]


@dataclass(frozen=True, slots=True)
class LevelDefinition:
    """Already-parsed level: geometry plus the two anchor coordinates of each color."""

    level_id: int
    rows: int
    cols: int
    anchors: Dict[Color, Tuple[Position, Position]] = field(default_factory=dict)

    @property
    def size(self) -> Tuple[int, int]:
        return (self.rows, self.cols)

    @property
    def colors(self) -> Tuple[Color, ...]:
        return tuple(self.anchors)
