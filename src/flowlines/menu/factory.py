"""Factory helpers for creating and removing the level select menu."""
from esper import World

from flowlines.constants import (
    MENU_BUTTON_GAP,
    MENU_BUTTON_HEIGHT,
    MENU_BUTTON_WIDTH,
    MENU_LEFT_MARGIN,
    MENU_ROW_HEIGHT,
    MENU_TOP_MARGIN,
)
from flowlines.levels.repository import LevelRepository
from flowlines.menu.components import MenuBackground, MenuButton, MenuLabel, MenuTag


def spawn_level_menu(world: World, width: int, height: int, repository: LevelRepository) -> None:
    """Lay out one row of level buttons per board size, smallest boards at the top."""
    world.create_entity(MenuBackground(), MenuTag())
    world.create_entity(MenuLabel(text="Flowlines", x=width / 2, y=height - MENU_TOP_MARGIN / 2, font_size=28), MenuTag())

    for row_index, ((rows, cols), level_ids) in enumerate(repository.levels_by_size().items()):
        y = height - MENU_TOP_MARGIN - row_index * MENU_ROW_HEIGHT
        world.create_entity(MenuLabel(text=f"{rows}x{cols}", x=MENU_LEFT_MARGIN / 2, y=y), MenuTag())
        for index, level_id in enumerate(level_ids):
            x = MENU_LEFT_MARGIN + index * (MENU_BUTTON_WIDTH + MENU_BUTTON_GAP) + MENU_BUTTON_WIDTH / 2
            world.create_entity(
                MenuButton(
                    label=str(index + 1),
                    level_id=level_id,
                    x=x,
                    y=y,
                    width=MENU_BUTTON_WIDTH,
                    height=MENU_BUTTON_HEIGHT,
                    solved=repository.is_solved(level_id),
                ),
                MenuTag(),
            )


def clear_menu(world: World) -> None:
    """Remove all entities that are part of the menu UI."""
    for ent, _ in list(world.get_component(MenuTag)):
        world.delete_entity(ent, immediate=True)
