"""Growth, retreat and teardown of a single pipe."""
from __future__ import annotations

from typing import List

from esper import World

from flowlines.components.direction import Direction
from flowlines.components.pipe import Pipe, PipeMove
from flowlines.systems.board_ops import (
    Position,
    anchor_color,
    neighbor,
    release,
    release_all,
    try_join,
)


def start_cell(pipe: Pipe) -> Position:
    return pipe.cells[0]


def last_cell(pipe: Pipe) -> Position:
    return pipe.cells[-1]


def path(pipe: Pipe) -> List[Direction]:
    """Directions between consecutive cells, for drawing straight segments."""
    return list(pipe.directions)


def is_complete(world: World, pipe: Pipe) -> bool:
    """A pipe is complete once it has left its start cell and ends on an anchor."""
    return len(pipe.cells) >= 2 and anchor_color(world, pipe.cells[-1]) is not None


def extend(world: World, pipe: Pipe, direction: Direction) -> PipeMove:
    """Apply one direction press to ``pipe``.

    Moving back onto the second-to-last cell retreats by exactly one step,
    even when the pipe is complete. Any other move grows an incomplete pipe
    if the target cell accepts it. Presses at the board edge, into blocked
    cells, or growing a complete pipe change nothing.
    """
    candidate = neighbor(world, last_cell(pipe), direction)
    if candidate is None:
        return PipeMove.IGNORED
    # Checked before completeness: stepping back off the far anchor must undo
    # the completion, as in the 3x1 walkthrough (step 4 retreats).
    if len(pipe.cells) >= 2 and candidate == pipe.cells[-2]:
        release(world, pipe.cells.pop())
        pipe.directions.pop()
        return PipeMove.RETREATED
    if is_complete(world, pipe):
        return PipeMove.IGNORED
    if try_join(world, candidate, pipe):
        pipe.cells.append(candidate)
        pipe.directions.append(direction)
        return PipeMove.EXTENDED
    return PipeMove.IGNORED


def teardown(world: World, pipe: Pipe) -> None:
    """Release every cell held by the pipe."""
    release_all(world, pipe.cells)
