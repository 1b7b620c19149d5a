from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import List, Tuple

from flowlines.components.color import Color
from flowlines.components.direction import Direction


class PipeMove(Enum):
    """Outcome of a single extend command."""
    EXTENDED = auto()
    RETREATED = auto()
    IGNORED = auto()


@dataclass(slots=True)
class Pipe:
    """Ordered path of cells for one color.

    ``directions[k]`` is the move from ``cells[k]`` to ``cells[k + 1]``, so
    ``len(directions) == len(cells) - 1`` at all times.
    """

    color: Color
    cells: List[Tuple[int, int]] = field(default_factory=list)
    directions: List[Direction] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.cells)
