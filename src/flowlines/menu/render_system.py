"""Rendering system responsible for drawing the level select menu."""
import arcade
from esper import World

from flowlines.components.game_state import GameMode
from flowlines.menu.components import MenuBackground, MenuButton, MenuLabel
from flowlines.utils.game_state import get_game_state


class MenuRenderSystem:
    """Renders menu entities when the game is in menu mode."""

    def __init__(self, world: World, window) -> None:
        self.world = world
        self.window = window

    def process(self) -> None:
        state = get_game_state(self.world)
        if not state or state.mode != GameMode.MENU:
            return

        for _, background in self.world.get_component(MenuBackground):
            arcade.draw_lrbt_rectangle_filled(0, self.window.width, 0, self.window.height, background.color)

        for _, label in self.world.get_component(MenuLabel):
            arcade.draw_text(
                label.text,
                label.x,
                label.y,
                arcade.color.WHITE,
                label.font_size,
                anchor_x="center",
                anchor_y="center",
                bold=True,
            )

        for _, button in self.world.get_component(MenuButton):
            left = button.x - button.width / 2
            bottom = button.y - button.height / 2
            # Solved levels get a green fill.
            fill_color = arcade.color.DARK_PASTEL_GREEN if button.solved else arcade.color.DARK_SLATE_BLUE
            arcade.draw_lbwh_rectangle_filled(left, bottom, button.width, button.height, fill_color)
            arcade.draw_lbwh_rectangle_outline(left, bottom, button.width, button.height, arcade.color.WHITE, border_width=2)
            arcade.draw_text(
                button.label,
                button.x,
                button.y,
                arcade.color.WHITE,
                16,
                anchor_x="center",
                anchor_y="center",
                bold=True,
            )
