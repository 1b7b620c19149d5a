from __future__ import annotations

from flowlines.components.color import COLOR_RGB
from flowlines.components.game_state import GameMode
from flowlines.constants import ANCHOR_RADIUS_FRACTION, PIPE_WIDTH_FRACTION, STATUS_BAR_HEIGHT
from flowlines.events.bus import EVENT_PIPE_STARTED, EventBus
from flowlines.systems import board_ops
from flowlines.systems.puzzle_session import PuzzleSession
from flowlines.ui.layout import cell_center, compute_board_geometry
from flowlines.utils.game_state import get_game_state
from esper import World

GRID_LINE_COLOR = (70, 70, 90)
CELL_FILL_COLOR = (15, 15, 20)


class RenderSystem:
    def __init__(self, world: World, event_bus: EventBus, window, session: PuzzleSession):
        self.world = world
        self.event_bus = event_bus
        self.window = window
        self.session = session
        self.selected = None
        self.event_bus.subscribe(EVENT_PIPE_STARTED, self.on_pipe_started)

    def on_pipe_started(self, sender, **kwargs):
        self.selected = kwargs.get('color')

    def layout(self):
        """Return (rows, cols, tile_size, start_x, start_y) for the current board."""
        board = board_ops.get_board(self.world)
        tile_size, start_x, start_y = compute_board_geometry(self.window.width, self.window.height, board.rows, board.cols)
        return board.rows, board.cols, tile_size, start_x, start_y

    def pipe_segments(self):
        """Line segments (color, x1, y1, x2, y2) for every active pipe, in path order."""
        rows, _, tile_size, start_x, start_y = self.layout()
        segments = []
        for color in self.session.colors():
            cells = self.session.pipe_cells(color)
            for (r1, c1), (r2, c2) in zip(cells, cells[1:]):
                x1, y1 = cell_center(r1, c1, tile_size, start_x, start_y, rows)
                x2, y2 = cell_center(r2, c2, tile_size, start_x, start_y, rows)
                segments.append((color, x1, y1, x2, y2))
        return segments

    def process(self):
        # Local import keeps tests headless without creating a window.
        import arcade
        try:
            arcade.get_window()
        except Exception:
            return
        state = get_game_state(self.world)
        if state is None or state.mode != GameMode.PLAYING or not board_ops.has_board(self.world):
            return
        rows, cols, tile_size, start_x, start_y = self.layout()

        arcade.draw_lbwh_rectangle_filled(start_x, start_y, cols * tile_size, rows * tile_size, CELL_FILL_COLOR)
        for c in range(cols + 1):
            x = start_x + c * tile_size
            arcade.draw_line(x, start_y, x, start_y + rows * tile_size, GRID_LINE_COLOR, 2)
        for r in range(rows + 1):
            y = start_y + r * tile_size
            arcade.draw_line(start_x, y, start_x + cols * tile_size, y, GRID_LINE_COLOR, 2)

        pipe_width = tile_size * PIPE_WIDTH_FRACTION
        for color, x1, y1, x2, y2 in self.pipe_segments():
            arcade.draw_line(x1, y1, x2, y2, COLOR_RGB[color], pipe_width)
            arcade.draw_circle_filled(x2, y2, pipe_width / 2, COLOR_RGB[color])

        radius = tile_size * ANCHOR_RADIUS_FRACTION
        for color, coords in self.session.anchor_positions().items():
            for row, col in coords:
                x, y = cell_center(row, col, tile_size, start_x, start_y, rows)
                arcade.draw_circle_filled(x, y, radius, COLOR_RGB[color])
                if color == self.selected:
                    arcade.draw_circle_outline(x, y, radius + 3, arcade.color.WHITE, 2)

        self._render_status(arcade, start_y + rows * tile_size)

    def _render_status(self, arcade, board_top: float):
        level_id = self.session.level_id
        text = f"Level {level_id}" if level_id is not None else "Free play"
        if self.session.is_won():
            text += "  -  Solved!"
        elif self.session.level_solved:
            text += "  (solved before)"
        arcade.draw_text(
            text,
            self.window.width / 2,
            board_top + STATUS_BAR_HEIGHT / 2,
            arcade.color.WHITE,
            18,
            anchor_x="center",
            anchor_y="center",
        )
