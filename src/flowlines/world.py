from esper import World

from flowlines.events.bus import EventBus
from flowlines.components.current_level import CurrentLevel
from flowlines.components.game_state import GameMode, GameState
from flowlines.components.pipe_registry import PipeRegistry


def create_world(
    event_bus: EventBus,
    initial_mode: GameMode = GameMode.PLAYING,
) -> World:
    """Create a world holding the singleton game state, pipe registry and level record.

    The board itself is built later, when a level is launched.
    """
    world = World()
    world.create_entity(GameState(mode=initial_mode))
    world.create_entity(PipeRegistry())
    world.create_entity(CurrentLevel(level_id=None))
    return world
