from __future__ import annotations

from dataclasses import dataclass, field
from typing import Tuple

from flowlines.components.color import Color


@dataclass(slots=True)
class CurrentLevel:
    """Level loaded on the board; ``colors`` lists every anchor color it uses."""

    level_id: int | None
    colors: Tuple[Color, ...] = field(default_factory=tuple)
    solved: bool = False
