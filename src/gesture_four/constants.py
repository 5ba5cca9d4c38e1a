from pathlib import Path

GRID_ROWS = 6
GRID_COLS = 7

DEFAULT_WINDOW_WIDTH = 1280
DEFAULT_WINDOW_HEIGHT = 720

# Board sizing: the board leaves one spare row of cells above and below it.
BOARD_RESERVED_ROWS = 2
DISC_RADIUS_FRACTION = 0.4
MIN_CELL_SIZE = 8.0

# Active disc home positions as a fraction of window width (player 1 right, player 2 left).
ACTIVE_DISC_HOME_PCT = {1: 0.75, 2: 0.25}
ACTIVE_DISC_TOP_OFFSET = 5.0
# A closed fist within this many disc radii of the active disc grabs it.
GRAB_RADIUS_FACTOR = 5.0

# Drop physics, expressed per frame tick.
DROP_ACCELERATION = 0.5
HORIZONTAL_EASE = 0.2
ROTATION_SPEED_MIN = 0.05
ROTATION_SPEED_MAX = 0.2
SETTLE_ZONE_RADII = 4.0
ROTATION_BLEND = 0.1
ROTATION_DAMPING = 0.9

# Bombs
BOMBS_PER_PLAYER = 1
BLAST_RADIUS = 1
BOMB_GRAVITY_DELAY = 1.0     # seconds after the blast before gravity compaction applies
BOMB_INPUT_LOCK = 2.0        # seconds after the blast before input resumes
EXPLOSION_MAX_RADIUS = 80.0
EXPLOSION_GROWTH_RATE = 200.0  # pixels per second
GRAVITY_FALL_DURATION = 0.3

# Game flow timers (seconds)
THUMB_UP_HOLD_DURATION = 2.0
WIN_DISPLAY_DURATION = 10.0

# Gesture sampling
GESTURE_FRESHNESS_WINDOW = 0.5
GESTURE_CACHE_WINDOW = 0.2
BOMB_TOGGLE_COOLDOWN = 1.0

# Palette
PLAYER_NAMES = {1: "Orange", 2: "Blue"}
PLAYER_COLORS = {1: (239, 125, 0), 2: (0, 154, 212)}
EXPLOSION_COLORS = {1: (255, 119, 0), 2: (0, 162, 255)}
BOARD_COLOR = (90, 185, 70)
BOARD_ALPHA = 178
HOLE_COLOR = (20, 20, 20)
WIN_HIGHLIGHT_COLOR = (255, 255, 255)
PREVIEW_ALPHA_NORMAL = 77
PREVIEW_ALPHA_BOMB = 128

PROJECT_ROOT = Path(__file__).resolve().parents[2]
ASSETS_DIR = PROJECT_ROOT / "assets"
IMAGE_DIR = ASSETS_DIR / "images"
SOUND_DIR = ASSETS_DIR / "sounds"
