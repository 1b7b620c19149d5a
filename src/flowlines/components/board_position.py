from dataclasses import dataclass

@dataclass(slots=True)
class BoardPosition:
    row: int
    col: int

    def as_tuple(self) -> tuple[int, int]:
        return (self.row, self.col)
