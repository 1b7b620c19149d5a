"""Input handling for the level select menu."""
from esper import World

from flowlines.components.game_state import GameMode
from flowlines.constants import MOUSE_BUTTON_LEFT
from flowlines.events.bus import EVENT_LEVEL_LAUNCH, EVENT_MOUSE_PRESS, EventBus
from flowlines.menu.components import MenuButton
from flowlines.utils.game_state import get_game_state


class MenuInputSystem:
    """Launches the clicked level while the game is in menu mode."""

    def __init__(self, world: World, event_bus: EventBus) -> None:
        self.world = world
        self.event_bus = event_bus
        event_bus.subscribe(EVENT_MOUSE_PRESS, self.on_mouse_press)

    def on_mouse_press(self, sender, **payload) -> None:
        x = payload.get("x")
        y = payload.get("y")
        button = payload.get("button")
        if x is None or y is None or button is None:
            return
        self.handle_mouse_press(float(x), float(y), int(button))

    def handle_mouse_press(self, x: float, y: float, button: int) -> None:
        state = get_game_state(self.world)
        if not state or state.mode != GameMode.MENU or button != MOUSE_BUTTON_LEFT:
            return
        for _, menu_button in self.world.get_component(MenuButton):
            if self._point_inside_button(x, y, menu_button):
                self.event_bus.emit(EVENT_LEVEL_LAUNCH, level_id=menu_button.level_id)
                return

    @staticmethod
    def _point_inside_button(x: float, y: float, button: MenuButton) -> bool:
        half_w = button.width / 2
        half_h = button.height / 2
        return (
            button.x - half_w <= x <= button.x + half_w
            and button.y - half_h <= y <= button.y + half_h
        )
