"""
Color palette for Maze Escape
"""

# Maze cells
COLOR_WALL = (0, 0, 128)          # Navy
COLOR_PATH = (255, 255, 255)      # White

# Entity colors
COLOR_PLAYER = (0, 255, 0)        # Lime
COLOR_EXIT = (255, 0, 0)          # Red

# Generation cursor
COLOR_CARVE_CURSOR = (255, 220, 120)

# Fog of war (black at 70% opacity)
COLOR_FOG = (0, 0, 0, 178)

# Text
COLOR_WIN_TEXT = (0, 128, 0)      # Green
