"""Engine facade: anchor selection, direction commands and win evaluation."""
from __future__ import annotations

import logging
from typing import Dict, List, Tuple

from esper import World

from flowlines.components.color import Color
from flowlines.components.current_level import CurrentLevel
from flowlines.components.direction import Direction
from flowlines.components.pipe import Pipe, PipeMove
from flowlines.events.bus import (
    EVENT_CELL_CLICK,
    EVENT_DIRECTION_PRESS,
    EVENT_LEVEL_LAUNCH,
    EVENT_LEVEL_READY,
    EVENT_LEVEL_SOLVED,
    EVENT_PIPE_CHANGED,
    EVENT_PIPE_STARTED,
    EventBus,
)
from flowlines.levels.definition import LevelDefinition
from flowlines.levels.repository import LevelRepository
from flowlines.systems import board_ops, pipe_ops, pipe_registry_ops
from flowlines.systems.board_ops import AnchorLayout, Position

logger = logging.getLogger(__name__)


class PuzzleSession:
    """Coordinates one board: which pipe is being drawn and whether the level is won.

    All public operations run to completion synchronously. Hosts that deliver
    input from several threads must serialise calls into the session.
    """

    def __init__(
        self,
        world: World,
        event_bus: EventBus,
        *,
        level_repository: LevelRepository | None = None,
    ) -> None:
        self.world = world
        self.event_bus = event_bus
        self.level_repository = level_repository
        self._current_color: Color | None = None
        self._winning = False
        self.event_bus.subscribe(EVENT_CELL_CLICK, self._on_cell_click)
        self.event_bus.subscribe(EVENT_DIRECTION_PRESS, self._on_direction_press)
        self.event_bus.subscribe(EVENT_LEVEL_LAUNCH, self._on_level_launch)

    # ------------------------------------------------------------------
    # Level lifecycle
    # ------------------------------------------------------------------

    def reset_for_new_level(
        self,
        rows: int,
        cols: int,
        anchors: AnchorLayout,
        *,
        level_id: int | None = None,
    ) -> None:
        """Discard the previous board and pipes, then build a fresh board.

        Pipes are forgotten without teardown since their cells are deleted
        with the old board. A layout that fails validation raises
        BoardConstructionError and leaves the previous level untouched.
        """
        board_ops.validate_layout(rows, cols, anchors)
        pipe_registry_ops.clear_all(self.world)
        board_ops.clear_board(self.world)
        self._current_color = None
        self._winning = False
        level = self._current_level()
        level.level_id = level_id
        level.colors = ()
        level.solved = False
        board_ops.build_board(self.world, rows, cols, anchors)
        level.colors = tuple(anchors)
        if level_id is not None and self.level_repository is not None:
            level.solved = self.level_repository.is_solved(level_id)
        logger.debug("Level %s ready (%dx%d, %d colors)", level_id, rows, cols, len(level.colors))
        self.event_bus.emit(EVENT_LEVEL_READY, level_id=level_id, rows=rows, cols=cols)

    def load_level(self, level: LevelDefinition) -> None:
        self.reset_for_new_level(level.rows, level.cols, level.anchors, level_id=level.level_id)

    def launch_level(self, level_id: int) -> None:
        if self.level_repository is None:
            raise RuntimeError("No level repository configured")
        self.load_level(self.level_repository.get_level(level_id))

    # ------------------------------------------------------------------
    # Player commands
    # ------------------------------------------------------------------

    def select(self, row: int, col: int) -> bool:
        """Start a new pipe from the anchor at (row, col); False when there is no anchor."""
        position = (row, col)
        color = board_ops.anchor_color(self.world, position)
        if color is None:
            return False
        pipe_registry_ops.start_pipe(self.world, color, position)
        self._current_color = color
        self._winning = False
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("Started %s pipe at %s\n%s", color.name, position, board_ops.describe_board(self.world))
        self.event_bus.emit(EVENT_PIPE_STARTED, color=color, position=position)
        return True

    def act(self, direction: Direction) -> bool:
        """Apply a direction press to the current pipe.

        Returns True when the board is in a winning state after the call.
        """
        pipe = self.current_pipe
        if pipe is None:
            return False
        move = pipe_ops.extend(self.world, pipe, direction)
        if move is not PipeMove.IGNORED:
            if logger.isEnabledFor(logging.DEBUG):
                logger.debug("%s %s %s\n%s", pipe.color.name, move.name.lower(), direction.name,
                             board_ops.describe_board(self.world))
            self.event_bus.emit(
                EVENT_PIPE_CHANGED,
                color=pipe.color,
                move=move,
                length=len(pipe),
                complete=pipe_ops.is_complete(self.world, pipe),
            )
        won = self.is_won()
        if won and not self._winning:
            self._mark_solved()
        self._winning = won
        return won

    def is_won(self) -> bool:
        colors = self.colors()
        if not all(pipe_registry_ops.is_complete(self.world, color) for color in colors):
            return False
        return board_ops.is_fully_covered(self.world)

    def _mark_solved(self) -> None:
        level = self._current_level()
        level.solved = True
        logger.info("Level %s solved", level.level_id)
        self.event_bus.emit(EVENT_LEVEL_SOLVED, level_id=level.level_id)

    # ------------------------------------------------------------------
    # Read accessors for renderers
    # ------------------------------------------------------------------

    @property
    def current_color(self) -> Color | None:
        return self._current_color

    @property
    def current_pipe(self) -> Pipe | None:
        if self._current_color is None:
            return None
        return pipe_registry_ops.active_pipe(self.world, self._current_color)

    @property
    def level_id(self) -> int | None:
        return self._current_level().level_id

    @property
    def level_solved(self) -> bool:
        return self._current_level().solved

    def colors(self) -> Tuple[Color, ...]:
        return self._current_level().colors

    def has_pipe(self, color: Color) -> bool:
        return pipe_registry_ops.has_pipe(self.world, color)

    def is_complete(self, color: Color) -> bool:
        return pipe_registry_ops.is_complete(self.world, color)

    def start_cell_coordinates(self, color: Color) -> Position | None:
        pipe = pipe_registry_ops.active_pipe(self.world, color)
        return pipe_ops.start_cell(pipe) if pipe is not None else None

    def path_directions(self, color: Color) -> List[Direction]:
        pipe = pipe_registry_ops.active_pipe(self.world, color)
        return pipe_ops.path(pipe) if pipe is not None else []

    def pipe_cells(self, color: Color) -> List[Position]:
        pipe = pipe_registry_ops.active_pipe(self.world, color)
        return list(pipe.cells) if pipe is not None else []

    def anchor_positions(self) -> Dict[Color, Tuple[Position, Position]]:
        return board_ops.anchor_positions(self.world)

    def is_fully_covered(self) -> bool:
        return board_ops.is_fully_covered(self.world)

    def _current_level(self) -> CurrentLevel:
        for _, level in self.world.get_component(CurrentLevel):
            return level
        raise RuntimeError("CurrentLevel not found")

    # ------------------------------------------------------------------
    # Event handlers
    # ------------------------------------------------------------------

    def _on_cell_click(self, sender, **payload) -> None:
        row = payload.get("row")
        col = payload.get("col")
        if row is None or col is None or not board_ops.has_board(self.world):
            return
        try:
            self.select(row, col)
        except IndexError:
            return

    def _on_direction_press(self, sender, **payload) -> None:
        direction = payload.get("direction")
        if not isinstance(direction, Direction):
            return
        self.act(direction)

    def _on_level_launch(self, sender, **payload) -> None:
        level_id = payload.get("level_id")
        if level_id is None or self.level_repository is None:
            return
        self.launch_level(level_id)
