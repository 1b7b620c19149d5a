"""Switches between the level select menu and the board."""
from __future__ import annotations

from typing import Callable, Tuple

from esper import World

from flowlines.components.game_state import GameMode
from flowlines.constants import WINDOW_HEIGHT, WINDOW_WIDTH
from flowlines.events.bus import EVENT_LEVEL_READY, EVENT_MENU_REQUESTED, EventBus
from flowlines.levels.repository import LevelRepository
from flowlines.menu.factory import clear_menu, spawn_level_menu
from flowlines.utils.game_state import set_game_mode


class GameFlowSystem:
    """Central coordinator for menu and level transitions."""

    def __init__(
        self,
        world: World,
        event_bus: EventBus,
        repository: LevelRepository,
        *,
        menu_size_provider: Callable[[], Tuple[int, int]] | None = None,
    ) -> None:
        self.world = world
        self.event_bus = event_bus
        self.repository = repository
        self._menu_size_provider = menu_size_provider or (lambda: (WINDOW_WIDTH, WINDOW_HEIGHT))
        self.event_bus.subscribe(EVENT_LEVEL_READY, self._on_level_ready)
        self.event_bus.subscribe(EVENT_MENU_REQUESTED, self._on_menu_requested)

    def show_menu(self) -> None:
        # Rebuilt every time so solved flags are current.
        clear_menu(self.world)
        width, height = self._menu_size_provider()
        spawn_level_menu(self.world, width, height, self.repository)
        set_game_mode(self.world, self.event_bus, GameMode.MENU)

    def _on_level_ready(self, sender, **payload) -> None:
        clear_menu(self.world)
        set_game_mode(self.world, self.event_bus, GameMode.PLAYING)

    def _on_menu_requested(self, sender, **payload) -> None:
        self.show_menu()
