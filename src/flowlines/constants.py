WINDOW_WIDTH = 800
WINDOW_HEIGHT = 600
WINDOW_TITLE = "Flowlines"

BOTTOM_MARGIN = 20
# Minimum tile edge in pixels when the board is scaled down to fit the window.
MIN_TILE_SIZE = 20

# Board maximum footprint relative to window (percentage of window width/height).
BOARD_MAX_WIDTH_PCT = 0.85
BOARD_MAX_HEIGHT_PCT = 0.85

# Pipe stroke and anchor radius as fractions of the tile size.
PIPE_WIDTH_FRACTION = 0.35
ANCHOR_RADIUS_FRACTION = 0.38

# Height of the status line drawn above the board.
STATUS_BAR_HEIGHT = 40

# Level select menu geometry.
MENU_BUTTON_WIDTH = 64.0
MENU_BUTTON_HEIGHT = 40.0
MENU_BUTTON_GAP = 12.0
MENU_ROW_HEIGHT = 64.0
MENU_TOP_MARGIN = 90.0
MENU_LEFT_MARGIN = 140.0

# Mouse button and key codes (pyglet values) so input stays importable without arcade.
MOUSE_BUTTON_LEFT = 1
KEY_UP = 65362
KEY_DOWN = 65364
KEY_LEFT = 65361
KEY_RIGHT = 65363
KEY_ESCAPE = 65307
