from blinker import Signal
from typing import Dict

class EventBus:
    """Simple event bus leveraging blinker Signal objects."""
    def __init__(self):
        self._signals: Dict[str, Signal] = {}

    def subscribe(self, name: str, fn):
        sig = self._signals.setdefault(name, Signal(name))
        # Strong references keep handlers alive for systems that are not stored in a variable.
        sig.connect(fn, weak=False)

    def emit(self, name: str, **payload):
        sig = self._signals.get(name)
        if sig:
            sig.send(self, **payload)


# ============================================================================
# SYSTEM & TIMING
# ============================================================================
EVENT_TICK = "tick"


# ============================================================================
# INPUT & INTERACTION
# ============================================================================
EVENT_MOUSE_PRESS = "mouse_press"              # payload: x, y, button
EVENT_KEY_PRESS = "key_press"                  # payload: symbol, modifiers
EVENT_CELL_CLICK = "cell_click"                # payload: row, col
EVENT_DIRECTION_PRESS = "direction_press"      # payload: direction=Direction


# ============================================================================
# PIPES
# ============================================================================
EVENT_PIPE_STARTED = "pipe_started"            # payload: color=Color, position=(r,c)
EVENT_PIPE_CHANGED = "pipe_changed"            # payload: color=Color, move=PipeMove, length=int, complete=bool


# ============================================================================
# LEVELS & GAME FLOW
# ============================================================================
EVENT_LEVEL_LAUNCH = "level_launch"            # payload: level_id=int
EVENT_LEVEL_READY = "level_ready"              # payload: level_id=int|None, rows=int, cols=int
EVENT_LEVEL_SOLVED = "level_solved"            # payload: level_id=int|None
EVENT_MENU_REQUESTED = "menu_requested"        # payload: None
EVENT_GAME_MODE_CHANGED = "game_mode_changed"  # payload: previous_mode=GameMode|None, new_mode=GameMode
