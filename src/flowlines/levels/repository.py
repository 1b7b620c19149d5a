from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Dict, Iterable, List, Set, Tuple

from flowlines.events.bus import EVENT_LEVEL_SOLVED, EventBus
from flowlines.levels.definition import LevelDefinition
from flowlines.levels.parser import parse_levels

logger = logging.getLogger(__name__)


class LevelRepository:
    """Level catalog plus the persisted set of solved level ids."""

    def __init__(
        self,
        event_bus: EventBus | None = None,
        *,
        levels: Iterable[LevelDefinition] | None = None,
        levels_path: Path | None = None,
        save_path: Path | None = None,
        load_existing: bool = True,
    ) -> None:
        self._levels_path = Path(levels_path) if levels_path is not None else self._default_levels_path()
        self._save_path = Path(save_path) if save_path is not None else self._default_save_path()
        if levels is None:
            levels = self._read_levels(self._levels_path)
        self._levels: Dict[int, LevelDefinition] = {level.level_id: level for level in levels}
        self._solved: Set[int] = set()

        if event_bus is not None:
            event_bus.subscribe(EVENT_LEVEL_SOLVED, self._on_level_solved)

        if load_existing:
            self.load_progress()
        else:
            self.save_progress()

    @staticmethod
    def _default_levels_path() -> Path:
        # Bundled as package data next to this module.
        return Path(__file__).resolve().parent / "levels.txt"

    @staticmethod
    def _default_save_path() -> Path:
        return Path.home() / ".flowlines" / "progress.json"

    @staticmethod
    def _read_levels(path: Path) -> List[LevelDefinition]:
        with path.open("r", encoding="utf-8") as handle:
            levels = parse_levels(handle.read())
        logger.info("Loaded %d levels from %s", len(levels), path)
        return levels

    # Catalog ------------------------------------------------------------

    def __len__(self) -> int:
        return len(self._levels)

    def level_ids(self) -> List[int]:
        return sorted(self._levels)

    def get_level(self, level_id: int) -> LevelDefinition:
        try:
            return self._levels[level_id]
        except KeyError:
            raise KeyError(f"Unknown level id {level_id}") from None

    def levels_by_size(self) -> Dict[Tuple[int, int], List[int]]:
        """Level ids grouped by (rows, cols), smallest boards first."""
        grouped: Dict[Tuple[int, int], List[int]] = {}
        for level_id in self.level_ids():
            grouped.setdefault(self._levels[level_id].size, []).append(level_id)
        return dict(sorted(grouped.items()))

    # Progress -----------------------------------------------------------

    def is_solved(self, level_id: int) -> bool:
        return level_id in self._solved

    def mark_solved(self, level_id: int) -> None:
        """Flag a level as solved. Solved flags are never cleared by play."""
        self.get_level(level_id)
        if level_id in self._solved:
            return
        self._solved.add(level_id)
        logger.info("Level %d solved", level_id)
        self.save_progress()

    def solved_ids(self) -> List[int]:
        return sorted(self._solved)

    def load_progress(self) -> None:
        try:
            with self._save_path.open("r", encoding="utf-8") as handle:
                payload = json.load(handle)
        except FileNotFoundError:
            self._solved = set()
            self.save_progress()
            return
        except json.JSONDecodeError:
            self._discard_corrupt_progress()
            return
        solved = payload.get("solved", []) if isinstance(payload, dict) else None
        if not isinstance(solved, list):
            self._discard_corrupt_progress()
            return
        try:
            level_ids = {int(level_id) for level_id in solved}
        except (TypeError, ValueError):
            self._discard_corrupt_progress()
            return
        self._solved = {level_id for level_id in level_ids if level_id in self._levels}

    def _discard_corrupt_progress(self) -> None:
        logger.warning("Progress file %s is corrupt; starting fresh", self._save_path)
        self._solved = set()
        self.save_progress()

    def reset_progress(self) -> None:
        self._solved = set()
        self.save_progress()

    def save_progress(self) -> None:
        self._save_path.parent.mkdir(parents=True, exist_ok=True)
        with self._save_path.open("w", encoding="utf-8") as handle:
            json.dump({"solved": self.solved_ids()}, handle, indent=2)

    # Event handlers -----------------------------------------------------

    def _on_level_solved(self, sender, **payload) -> None:
        level_id = payload.get("level_id")
        if level_id is None or level_id not in self._levels:
            return
        self.mark_solved(level_id)
