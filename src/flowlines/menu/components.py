"""Components used by the level select menu."""
from dataclasses import dataclass


@dataclass
class MenuButton:
    """Clickable button that launches one level."""
    label: str
    level_id: int
    x: float
    y: float
    width: float = 64.0
    height: float = 40.0
    solved: bool = False


@dataclass
class MenuLabel:
    """Static text such as the title or a board-size heading."""
    text: str
    x: float
    y: float
    font_size: int = 18


@dataclass
class MenuBackground:
    """Background styling data for the menu screen."""
    color: tuple[int, int, int] = (20, 30, 50)


@dataclass
class MenuTag:
    """Marker component so menu entities can be cleaned up together."""
    pass
