from enum import Enum
from typing import Tuple


class Direction(Enum):
    """Grid move between two orthogonally adjacent cells.

    Values are (d_row, d_col); row 0 is the top of the board.
    """
    UP = (-1, 0)
    DOWN = (1, 0)
    LEFT = (0, -1)
    RIGHT = (0, 1)

    @property
    def delta(self) -> Tuple[int, int]:
        return self.value

    @property
    def opposite(self) -> "Direction":
        d_row, d_col = self.value
        return Direction((-d_row, -d_col))
