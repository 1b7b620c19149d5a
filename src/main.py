"""Entry point for the Flowlines pipe puzzle.

Sets up ECS world, event bus, systems, and Arcade window.
"""
import logging

from arcade import Window, run, set_background_color, color
from flowlines.world import create_world
from flowlines.components.game_state import GameMode
from flowlines.constants import WINDOW_HEIGHT, WINDOW_TITLE, WINDOW_WIDTH
from flowlines.events.bus import EVENT_KEY_PRESS, EVENT_MOUSE_PRESS, EVENT_TICK, EventBus
from flowlines.levels.repository import LevelRepository
from flowlines.menu.input_system import MenuInputSystem
from flowlines.menu.render_system import MenuRenderSystem
from flowlines.systems.game_flow_system import GameFlowSystem
from flowlines.systems.input import InputSystem
from flowlines.systems.puzzle_session import PuzzleSession
from flowlines.systems.render import RenderSystem


class FlowlinesWindow(Window):
    def __init__(self):
        super().__init__(WINDOW_WIDTH, WINDOW_HEIGHT, WINDOW_TITLE)
        self.set_update_rate(1/60)
        self.event_bus = EventBus()
        self.world = create_world(self.event_bus, initial_mode=GameMode.MENU)
        self.level_repository = LevelRepository(self.event_bus)

        # Engine
        self.session = PuzzleSession(self.world, self.event_bus, level_repository=self.level_repository)
        self.game_flow_system = GameFlowSystem(
            self.world,
            self.event_bus,
            self.level_repository,
            menu_size_provider=lambda: (self.width, self.height),
        )

        # Board input subscribes before the menu so the click that launches a level
        # is not also delivered to the new board.
        self.input_system = InputSystem(self.event_bus, self, self.world)
        self.menu_input_system = MenuInputSystem(self.world, self.event_bus)
        self.menu_render_system = MenuRenderSystem(self.world, self)
        self.render_system = RenderSystem(self.world, self.event_bus, self, self.session)

        set_background_color(color.BLACK)
        self.game_flow_system.show_menu()

    def on_draw(self):
        self.clear()
        self.menu_render_system.process()
        self.render_system.process()

    def on_update(self, delta_time: float):
        self.event_bus.emit(EVENT_TICK, dt=delta_time)

    def on_mouse_press(self, x: float, y: float, button: int, modifiers: int):
        self.event_bus.emit(EVENT_MOUSE_PRESS, x=x, y=y, button=button)

    def on_key_press(self, symbol: int, modifiers: int):
        self.event_bus.emit(EVENT_KEY_PRESS, symbol=symbol, modifiers=modifiers)


def main():
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    FlowlinesWindow()
    run()

if __name__ == "__main__":
    main()
