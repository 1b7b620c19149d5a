from __future__ import annotations

from typing import Sequence

from flowlines.components.direction import Direction
from flowlines.events.bus import EventBus
from flowlines.systems.board_ops import AnchorLayout
from flowlines.systems.puzzle_session import PuzzleSession
from flowlines.world import create_world


def build_session(rows: int, cols: int, anchors: AnchorLayout, *, level_id: int | None = None):
    """Create a bus, world and session with a freshly built board."""

    bus = EventBus()
    world = create_world(bus)
    session = PuzzleSession(world, bus)
    session.reset_for_new_level(rows, cols, anchors, level_id=level_id)
    return bus, world, session


def drive(session: PuzzleSession, directions: Sequence[Direction]) -> list[bool]:
    """Apply each direction in turn and return the per-call win flags."""

    return [session.act(direction) for direction in directions]
