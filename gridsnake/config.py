# Grid size in cells. Playfield = COLS * TILE by ROWS * TILE pixels.
COLS = 40
ROWS = 30
TILE = 16

FPS = 60

# Milliseconds between snake steps (lower = faster)
TICK_INTERVAL_MS = 130
# Most steps run in a single frame after a stall; the rest of the backlog is dropped
MAX_STEPS_PER_FRAME = 5

SCORE_INCREMENT = 1
INITIAL_LENGTH = 3

# Free-cell search: rejection sampling below this occupied fraction,
# direct enumeration of the free cells above it.
FREE_CELL_SAMPLE_RATIO = 0.5
MAX_SAMPLE_ATTEMPTS = 100

BG_COLOR = (29, 29, 29)
HEAD_COLOR = (48, 196, 82)
BODY_COLOR = (42, 160, 74)
FOOD_COLOR = (233, 79, 55)
WHITE = (255, 255, 255)
GREY = (170, 170, 170)
RED = (255, 50, 50)
