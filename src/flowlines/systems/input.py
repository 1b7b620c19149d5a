from flowlines.components.direction import Direction
from flowlines.components.game_state import GameMode
from flowlines.constants import (
    KEY_DOWN,
    KEY_ESCAPE,
    KEY_LEFT,
    KEY_RIGHT,
    KEY_UP,
    MOUSE_BUTTON_LEFT,
)
from flowlines.events.bus import (
    EVENT_CELL_CLICK,
    EVENT_DIRECTION_PRESS,
    EVENT_KEY_PRESS,
    EVENT_MENU_REQUESTED,
    EVENT_MOUSE_PRESS,
    EventBus,
)
from flowlines.systems import board_ops
from flowlines.ui.layout import cell_at_point
from flowlines.utils.game_state import get_game_state

KEY_DIRECTIONS = {
    KEY_UP: Direction.UP,
    KEY_DOWN: Direction.DOWN,
    KEY_LEFT: Direction.LEFT,
    KEY_RIGHT: Direction.RIGHT,
}


class InputSystem:
    """Translates raw window input into board-level events while a level is being played."""

    def __init__(self, event_bus: EventBus, window, world):
        self.event_bus = event_bus
        self.window = window
        self.world = world
        self.event_bus.subscribe(EVENT_MOUSE_PRESS, self.on_mouse_press)
        self.event_bus.subscribe(EVENT_KEY_PRESS, self.on_key_press)

    def on_mouse_press(self, sender, **kwargs):
        x = kwargs.get('x')
        y = kwargs.get('y')
        button = kwargs.get('button')
        if x is None or y is None:
            return
        if button != MOUSE_BUTTON_LEFT or not self._playing():
            return
        if not board_ops.has_board(self.world):
            return
        board = board_ops.get_board(self.world)
        cell = cell_at_point(x, y, self.window.width, self.window.height, board.rows, board.cols)
        if cell is not None:
            self.event_bus.emit(EVENT_CELL_CLICK, row=cell[0], col=cell[1])

    def on_key_press(self, sender, **kwargs):
        symbol = kwargs.get('symbol')
        if not self._playing():
            return
        if symbol == KEY_ESCAPE:
            self.event_bus.emit(EVENT_MENU_REQUESTED)
            return
        direction = KEY_DIRECTIONS.get(symbol)
        if direction is not None:
            self.event_bus.emit(EVENT_DIRECTION_PRESS, direction=direction)

    def _playing(self) -> bool:
        state = get_game_state(self.world)
        return state is None or state.mode == GameMode.PLAYING
