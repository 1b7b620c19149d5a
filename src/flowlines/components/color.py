"""Palette of anchor colors usable in a level."""
from enum import Enum


class Color(Enum):
    """One anchor pair / pipe track.

    Values are the short codes used when the board is dumped as text.
    """
    RED = "R"
    ORANGE = "O"
    BLUE = "B"
    GREEN = "G"
    YELLOW = "Y"
    TURQUOISE = "T"
    PINK = "P"
    PURPLE = "V"
    MAROON = "M"

    @property
    def code(self) -> str:
        return self.value

    @classmethod
    def from_name(cls, name: str) -> "Color":
        """Case-insensitive lookup by enum name; raises ValueError for unknown names."""
        try:
            return cls[name.strip().upper()]
        except KeyError:
            raise ValueError(f"Unknown color '{name}'") from None


# Canonical render colors, one per palette entry.
COLOR_RGB = {
    Color.RED:       (220, 40, 40),
    Color.ORANGE:    (240, 140, 30),
    Color.BLUE:      (40, 80, 230),
    Color.GREEN:     (30, 150, 50),
    Color.YELLOW:    (235, 220, 50),
    Color.TURQUOISE: (60, 210, 210),
    Color.PINK:      (245, 120, 190),
    Color.PURPLE:    (130, 50, 170),
    Color.MAROON:    (130, 30, 50),
}
