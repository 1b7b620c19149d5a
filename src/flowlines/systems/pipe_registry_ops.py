from __future__ import annotations

from esper import World

from flowlines.components.cell_state import CellState
from flowlines.components.color import Color
from flowlines.components.pipe import Pipe
from flowlines.components.pipe_registry import PipeRegistry
from flowlines.systems import pipe_ops
from flowlines.systems.board_ops import Position, cell_state


def get_pipe_registry(world: World) -> PipeRegistry:
    for _, registry in world.get_component(PipeRegistry):
        return registry
    raise RuntimeError("PipeRegistry not found")


def active_pipe(world: World, color: Color) -> Pipe | None:
    entity = get_pipe_registry(world).active.get(color)
    if entity is None:
        return None
    return world.component_for_entity(entity, Pipe)


def has_pipe(world: World, color: Color) -> bool:
    return color in get_pipe_registry(world).active


def start_pipe(world: World, color: Color, position: Position) -> Pipe:
    """Replace any active pipe of ``color`` with a fresh one rooted at ``position``.

    The previous pipe releases all of its cells before the new one claims the
    start cell.
    """
    state: CellState = cell_state(world, position)
    if state.anchor is not color:
        raise ValueError(f"Cell {position} holds no {color.name} anchor")
    registry = get_pipe_registry(world)
    previous = registry.active.pop(color, None)
    if previous is not None:
        pipe_ops.teardown(world, world.component_for_entity(previous, Pipe))
        world.delete_entity(previous, immediate=True)
    pipe = Pipe(color=color, cells=[position])
    state.pipe = color
    registry.active[color] = world.create_entity(pipe)
    return pipe


def clear(world: World, color: Color) -> None:
    """Forget the active pipe of ``color`` without touching any cell."""
    entity = get_pipe_registry(world).active.pop(color, None)
    if entity is not None:
        world.delete_entity(entity, immediate=True)


def clear_all(world: World) -> None:
    for color in list(get_pipe_registry(world).active):
        clear(world, color)


def is_complete(world: World, color: Color) -> bool:
    pipe = active_pipe(world, color)
    return pipe is not None and pipe_ops.is_complete(world, pipe)
