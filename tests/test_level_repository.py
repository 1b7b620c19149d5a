from __future__ import annotations

import json
from pathlib import Path

import pytest

from flowlines.components.color import Color
from flowlines.components.direction import Direction
from flowlines.events.bus import EVENT_LEVEL_SOLVED, EventBus
from flowlines.levels.definition import LevelDefinition
from flowlines.levels.repository import LevelRepository
from flowlines.systems.puzzle_session import PuzzleSession
from flowlines.world import create_world

LEVELS = [
    LevelDefinition(level_id=1, rows=1, cols=2, anchors={Color.RED: ((0, 0), (0, 1))}),
    LevelDefinition(level_id=2, rows=3, cols=3, anchors={Color.RED: ((0, 0), (2, 2))}),
    LevelDefinition(level_id=3, rows=1, cols=2, anchors={Color.BLUE: ((0, 0), (0, 1))}),
]


def _repository(tmp_path, bus=None, **kwargs) -> LevelRepository:
    return LevelRepository(bus, levels=LEVELS, save_path=Path(tmp_path) / "progress.json", **kwargs)


def test_levels_by_size_groups_and_orders(tmp_path):
    repo = _repository(tmp_path, load_existing=False)
    assert len(repo) == 3
    assert repo.levels_by_size() == {(1, 2): [1, 3], (3, 3): [2]}
    assert repo.get_level(2).rows == 3
    with pytest.raises(KeyError):
        repo.get_level(99)


def test_mark_solved_persists_and_is_monotonic(tmp_path):
    save_path = Path(tmp_path) / "progress.json"
    repo = _repository(tmp_path, load_existing=False)
    assert repo.is_solved(2) is False
    repo.mark_solved(2)
    repo.mark_solved(2)
    assert repo.is_solved(2) is True
    with save_path.open("r", encoding="utf-8") as handle:
        assert json.load(handle) == {"solved": [2]}

    reloaded = _repository(tmp_path)
    assert reloaded.solved_ids() == [2]


def test_missing_or_corrupt_progress_starts_empty(tmp_path):
    save_path = Path(tmp_path) / "progress.json"
    repo = _repository(tmp_path)
    assert repo.solved_ids() == []
    assert save_path.exists()

    save_path.write_text("{not json", encoding="utf-8")
    repo = _repository(tmp_path)
    assert repo.solved_ids() == []


@pytest.mark.parametrize("payload", [[1, 2], {"solved": 5}, {"solved": ["x"]}, {"solved": [None]}])
def test_wrong_shape_progress_starts_empty(tmp_path, payload):
    save_path = Path(tmp_path) / "progress.json"
    save_path.write_text(json.dumps(payload), encoding="utf-8")
    repo = _repository(tmp_path)
    assert repo.solved_ids() == []
    with save_path.open("r", encoding="utf-8") as handle:
        assert json.load(handle) == {"solved": []}


def test_default_levels_ship_with_the_package(tmp_path):
    repo = LevelRepository(save_path=Path(tmp_path) / "progress.json")
    assert len(repo) >= 1
    assert repo.get_level(1).rows >= 1


def test_unknown_ids_in_progress_file_are_dropped(tmp_path):
    save_path = Path(tmp_path) / "progress.json"
    save_path.write_text(json.dumps({"solved": [1, 42]}), encoding="utf-8")
    repo = _repository(tmp_path)
    assert repo.solved_ids() == [1]


def test_reset_progress_clears_flags(tmp_path):
    repo = _repository(tmp_path, load_existing=False)
    repo.mark_solved(1)
    repo.reset_progress()
    assert repo.is_solved(1) is False


def test_level_solved_event_marks_repository(tmp_path):
    bus = EventBus()
    repo = _repository(tmp_path, bus, load_existing=False)
    bus.emit(EVENT_LEVEL_SOLVED, level_id=3)
    bus.emit(EVENT_LEVEL_SOLVED, level_id=None)
    assert repo.solved_ids() == [3]


def test_session_win_marks_level_solved(tmp_path):
    bus = EventBus()
    world = create_world(bus)
    repo = _repository(tmp_path, bus, load_existing=False)
    session = PuzzleSession(world, bus, level_repository=repo)

    session.launch_level(1)
    assert session.level_id == 1
    session.select(0, 0)
    assert session.act(Direction.RIGHT) is True
    assert repo.is_solved(1) is True

    session.launch_level(1)
    assert session.level_solved is True
    assert session.is_won() is False


def test_levels_load_from_text_file(tmp_path):
    levels_path = Path(tmp_path) / "levels.txt"
    levels_path.write_text("Level\n2,2\nRED;0,0;1,1\n", encoding="utf-8")
    repo = LevelRepository(levels_path=levels_path, save_path=Path(tmp_path) / "p.json")
    assert repo.level_ids() == [1]
    assert repo.get_level(1).anchors == {Color.RED: ((0, 0), (1, 1))}
