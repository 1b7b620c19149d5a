import pytest

from flowlines.components.anchor import Anchor
from flowlines.components.board import Board
from flowlines.components.color import Color
from flowlines.components.direction import Direction
from flowlines.components.pipe import Pipe
from flowlines.events.bus import EventBus
from flowlines.systems import board_ops
from flowlines.systems.board_ops import BoardConstructionError
from flowlines.world import create_world


def _world_with_board(rows, cols, anchors):
    world = create_world(EventBus())
    board_ops.build_board(world, rows, cols, anchors)
    return world


def test_build_board_indexes_every_cell():
    world = _world_with_board(2, 3, {Color.RED: ((0, 0), (1, 2))})
    boards = list(world.get_component(Board))
    assert len(boards) == 1
    board = boards[0][1]
    assert (board.rows, board.cols) == (2, 3)
    assert sorted(board.cells) == [(r, c) for r in range(2) for c in range(3)]
    anchors = [(anchor.color, anchor.order) for _, anchor in world.get_component(Anchor)]
    assert sorted(anchors, key=lambda a: a[1]) == [(Color.RED, 0), (Color.RED, 1)]


@pytest.mark.parametrize(
    "rows, cols, anchors",
    [
        (0, 3, {}),
        (3, -1, {}),
        (3, 3, {Color.RED: ((0, 0), (3, 0))}),
        (3, 3, {Color.RED: ((0, 0), (0, -1))}),
        (3, 3, {Color.RED: ((0, 0),)}),
        (3, 3, {Color.RED: ((0, 0), (1, 1), (2, 2))}),
        (3, 3, {Color.RED: ((0, 0), (1, 1)), Color.BLUE: ((1, 1), (2, 2))}),
        (3, 3, {Color.RED: (0, 1)}),
        (3, 3, {Color.RED: ((0, 0), (1, "1"))}),
        (3, 3, {Color.RED: 5}),
    ],
)
def test_build_board_rejects_invalid_layouts(rows, cols, anchors):
    world = create_world(EventBus())
    with pytest.raises(BoardConstructionError):
        board_ops.build_board(world, rows, cols, anchors)
    assert not board_ops.has_board(world)


def test_cell_at_is_bounds_checked():
    world = _world_with_board(2, 2, {})
    assert board_ops.cell_at(world, 1, 1) is not None
    with pytest.raises(IndexError):
        board_ops.cell_at(world, 2, 0)
    with pytest.raises(IndexError):
        board_ops.cell_at(world, 0, -1)


def test_neighbor_returns_none_past_edges():
    board = Board(rows=3, cols=2)
    assert board_ops.neighbor_of(board, (0, 0), Direction.UP) is None
    assert board_ops.neighbor_of(board, (0, 0), Direction.LEFT) is None
    assert board_ops.neighbor_of(board, (2, 1), Direction.DOWN) is None
    assert board_ops.neighbor_of(board, (2, 1), Direction.RIGHT) is None
    assert board_ops.neighbor_of(board, (1, 0), Direction.UP) == (0, 0)
    assert board_ops.neighbor_of(board, (1, 0), Direction.DOWN) == (2, 0)
    assert board_ops.neighbor_of(board, (1, 0), Direction.RIGHT) == (1, 1)
    assert board_ops.neighbor_of(board, (1, 1), Direction.LEFT) == (1, 0)


def test_try_join_accepts_empty_cell():
    world = _world_with_board(1, 3, {Color.RED: ((0, 0), (0, 2))})
    pipe = Pipe(color=Color.RED, cells=[(0, 0)])
    assert board_ops.try_join(world, (0, 1), pipe) is True
    assert board_ops.cell_state(world, (0, 1)).pipe is Color.RED


def test_try_join_accepts_terminal_anchor_of_same_color():
    world = _world_with_board(1, 3, {Color.RED: ((0, 0), (0, 2))})
    pipe = Pipe(color=Color.RED, cells=[(0, 0), (0, 1)])
    assert board_ops.try_join(world, (0, 2), pipe) is True
    state = board_ops.cell_state(world, (0, 2))
    assert state.anchor is Color.RED and state.pipe is Color.RED


def test_try_join_rejects_own_start_anchor():
    world = _world_with_board(2, 2, {Color.RED: ((0, 0), (1, 1))})
    pipe = Pipe(color=Color.RED, cells=[(0, 0), (0, 1)])
    assert board_ops.try_join(world, (0, 0), pipe) is False


def test_try_join_rejects_other_color_and_occupied_cells():
    world = _world_with_board(1, 4, {Color.RED: ((0, 0), (0, 3)), Color.BLUE: ((0, 1), (0, 2))})
    pipe = Pipe(color=Color.RED, cells=[(0, 0)])
    assert board_ops.try_join(world, (0, 1), pipe) is False
    assert board_ops.cell_state(world, (0, 1)).pipe is None

    world = _world_with_board(1, 3, {})
    board_ops.cell_state(world, (0, 1)).pipe = Color.BLUE
    assert board_ops.try_join(world, (0, 1), Pipe(color=Color.RED, cells=[(0, 0)])) is False
    assert board_ops.cell_state(world, (0, 1)).pipe is Color.BLUE


def test_release_keeps_anchor():
    world = _world_with_board(1, 2, {Color.RED: ((0, 0), (0, 1))})
    state = board_ops.cell_state(world, (0, 1))
    state.pipe = Color.RED
    board_ops.release(world, (0, 1))
    assert state.pipe is None
    assert state.anchor is Color.RED
    assert board_ops.is_occupied(world, (0, 1))


def test_fully_covered_counts_anchors_and_pipes():
    world = _world_with_board(1, 3, {Color.RED: ((0, 0), (0, 2))})
    assert board_ops.is_fully_covered(world) is False
    board_ops.cell_state(world, (0, 1)).pipe = Color.RED
    assert board_ops.is_fully_covered(world) is True


def test_anchor_positions_keep_listing_order():
    world = _world_with_board(3, 3, {Color.RED: ((2, 2), (0, 0)), Color.BLUE: ((0, 1), (1, 1))})
    positions = board_ops.anchor_positions(world)
    assert positions == {Color.RED: ((2, 2), (0, 0)), Color.BLUE: ((0, 1), (1, 1))}


def test_describe_board_marks_anchors_and_pipes():
    world = _world_with_board(2, 2, {Color.RED: ((0, 0), (1, 1))})
    board_ops.cell_state(world, (0, 1)).pipe = Color.RED
    assert board_ops.describe_board(world) == "R r\n. R"


def test_clear_board_removes_cells():
    world = _world_with_board(2, 2, {Color.RED: ((0, 0), (1, 1))})
    board_ops.clear_board(world)
    assert not board_ops.has_board(world)
    assert not list(world.get_component(Anchor))
