from __future__ import annotations

from typing import Dict, Iterable, Iterator, Mapping, Sequence, Tuple

from esper import World

from flowlines.components.anchor import Anchor
from flowlines.components.board import Board
from flowlines.components.board_position import BoardPosition
from flowlines.components.cell_state import CellState
from flowlines.components.color import Color
from flowlines.components.direction import Direction
from flowlines.components.pipe import Pipe

Position = Tuple[int, int]
AnchorLayout = Mapping[Color, Sequence[Position]]


class BoardConstructionError(ValueError):
    """Raised when level geometry or anchor layout cannot form a board."""


def _is_coordinate(value) -> bool:
    return (
        isinstance(value, (tuple, list))
        and len(value) == 2
        and all(isinstance(part, int) and not isinstance(part, bool) for part in value)
    )


def validate_layout(rows: int, cols: int, anchors: AnchorLayout) -> None:
    if rows <= 0 or cols <= 0:
        raise BoardConstructionError(f"Board dimensions must be positive, got {rows}x{cols}")
    seen: Dict[Position, Color] = {}
    for color, coords in anchors.items():
        if isinstance(coords, (str, bytes)) or not isinstance(coords, Sequence):
            raise BoardConstructionError(f"Color {color.name} anchors must be a sequence, got {coords!r}")
        if len(coords) != 2:
            raise BoardConstructionError(
                f"Color {color.name} needs exactly two anchors, got {len(coords)}"
            )
        for coord in coords:
            if not _is_coordinate(coord):
                raise BoardConstructionError(
                    f"Anchor {color.name} has malformed coordinate {coord!r}"
                )
            row, col = coord
            if not (0 <= row < rows and 0 <= col < cols):
                raise BoardConstructionError(
                    f"Anchor {color.name} at ({row}, {col}) is outside the {rows}x{cols} board"
                )
            if (row, col) in seen:
                raise BoardConstructionError(
                    f"Anchors {seen[(row, col)].name} and {color.name} share cell ({row}, {col})"
                )
            seen[(row, col)] = color


def build_board(world: World, rows: int, cols: int, anchors: AnchorLayout) -> int:
    """Create the board entity, one entity per cell, then place the anchors.

    The layout is validated before anything is added to the world.
    """
    validate_layout(rows, cols, anchors)
    board = Board(rows=rows, cols=cols)
    board_entity = world.create_entity(board)
    for r in range(rows):
        for c in range(cols):
            board.cells[(r, c)] = world.create_entity(BoardPosition(row=r, col=c), CellState())
    for color, coords in anchors.items():
        for order, (row, col) in enumerate(coords):
            cell = board.cells[(row, col)]
            world.component_for_entity(cell, CellState).anchor = color
            world.add_component(cell, Anchor(color=color, order=order))
    return board_entity


def clear_board(world: World) -> None:
    """Delete the board and all of its cell entities."""
    for entity, board in list(world.get_component(Board)):
        for cell in board.cells.values():
            world.delete_entity(cell, immediate=True)
        world.delete_entity(entity, immediate=True)


def get_board(world: World) -> Board:
    for _, board in world.get_component(Board):
        return board
    raise RuntimeError("Board not found")


def has_board(world: World) -> bool:
    return any(True for _ in world.get_component(Board))


def cell_at(world: World, row: int, col: int) -> int:
    board = get_board(world)
    try:
        return board.cells[(row, col)]
    except KeyError:
        raise IndexError(f"Cell ({row}, {col}) is outside the {board.rows}x{board.cols} board") from None


def cell_state(world: World, position: Position) -> CellState:
    return world.component_for_entity(cell_at(world, *position), CellState)


def iter_cells(world: World) -> Iterator[Tuple[Position, CellState]]:
    board = get_board(world)
    for position, entity in board.cells.items():
        yield position, world.component_for_entity(entity, CellState)


def neighbor_of(board: Board, position: Position, direction: Direction) -> Position | None:
    """Edge-aware neighbor lookup; None past any border of the board."""
    d_row, d_col = direction.delta
    row, col = position[0] + d_row, position[1] + d_col
    if 0 <= row < board.rows and 0 <= col < board.cols:
        return (row, col)
    return None


def neighbor(world: World, position: Position, direction: Direction) -> Position | None:
    return neighbor_of(get_board(world), position, direction)


def anchor_color(world: World, position: Position) -> Color | None:
    return cell_state(world, position).anchor


def has_pipe_at(world: World, position: Position) -> bool:
    return cell_state(world, position).pipe is not None


def is_occupied(world: World, position: Position) -> bool:
    return cell_state(world, position).occupied


def try_join(world: World, position: Position, pipe: Pipe) -> bool:
    """Record ``pipe`` as occupant of the cell if the cell accepts it.

    Accepted cells are either completely empty, or hold an anchor of the
    pipe's color that is not the pipe's own start cell.
    """
    state = cell_state(world, position)
    unoccupied = state.anchor is None and state.pipe is None
    terminal_anchor = (
        state.anchor is pipe.color
        and bool(pipe.cells)
        and pipe.cells[0] != position
    )
    if unoccupied or terminal_anchor:
        state.pipe = pipe.color
        return True
    return False


def release(world: World, position: Position) -> None:
    """Clear the pipe occupant; anchors stay in place."""
    cell_state(world, position).pipe = None


def release_all(world: World, positions: Iterable[Position]) -> None:
    for position in positions:
        release(world, position)


def is_fully_covered(world: World) -> bool:
    return all(state.occupied for _, state in iter_cells(world))


def anchor_positions(world: World) -> Dict[Color, Tuple[Position, Position]]:
    """Anchor coordinates per color, first-listed anchor first."""
    found: Dict[Color, Dict[int, Position]] = {}
    for _, (position, anchor) in world.get_components(BoardPosition, Anchor):
        found.setdefault(anchor.color, {})[anchor.order] = position.as_tuple()
    return {
        color: tuple(by_order[k] for k in sorted(by_order))
        for color, by_order in found.items()
    }


def describe_board(world: World) -> str:
    """Text dump of the grid: anchor codes in upper case, pipe codes in lower case."""
    board = get_board(world)
    lines = []
    for r in range(board.rows):
        cells = []
        for c in range(board.cols):
            state = world.component_for_entity(board.cells[(r, c)], CellState)
            if state.anchor is not None:
                cells.append(state.anchor.code)
            elif state.pipe is not None:
                cells.append(state.pipe.code.lower())
            else:
                cells.append(".")
        lines.append(" ".join(cells))
    return "\n".join(lines)
