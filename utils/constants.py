"""
Global constants for Maze Escape
"""

# Screen settings
CELL_SIZE = 40
FPS = 60

# Animated generation speed (carving steps per second)
GEN_STEPS_PER_SECOND = 220

# Cell states
PATH = 0
WALL = 1

# Direction vectors (dx, dy) used when carving
CARVE_DIRS = [
    (1, 0),     # right
    (-1, 0),    # left
    (0, 1),     # down
    (0, -1),    # up
]

# Maze defaults
DEFAULT_WIDTH = 15
DEFAULT_HEIGHT = 15
MIN_DIMENSION = 2
START_POS = (1, 1)

# Vision
VISIBILITY_RADIUS = 3
FOG_ENABLED_BY_DEFAULT = True

# Win message
WIN_TEXT_SIZE = 20
WIN_TEXT_LINE_GAP = 30
