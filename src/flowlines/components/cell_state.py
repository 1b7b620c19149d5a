from __future__ import annotations

from dataclasses import dataclass

from flowlines.components.color import Color


@dataclass(slots=True)
class CellState:
    """Occupancy of one grid cell.

    ``anchor`` is set once when the board is built. ``pipe`` names the color of
    the pipe currently passing through the cell; pipes are referenced by color
    only, the owning Pipe entity is found through the PipeRegistry.
    """

    anchor: Color | None = None
    pipe: Color | None = None

    @property
    def occupied(self) -> bool:
        return self.anchor is not None or self.pipe is not None
