from dataclasses import dataclass, field
from typing import Dict, Tuple

@dataclass(slots=True)
class Board:
    rows: int
    cols: int
    # (row, col) -> cell entity; filled when the board is built.
    cells: Dict[Tuple[int, int], int] = field(default_factory=dict)
