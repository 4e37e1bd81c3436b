"""
Maze generation - randomized recursive backtracking on a step-2 lattice

Walls and corridors are both full cells: the walk jumps two cells at a time
and opens the cell in between, leaving one-cell-wide corridors.
"""

import random
from utils.constants import CARVE_DIRS
from maze.maze_core import Grid


def exit_cell(cols, rows):
    """Exit position for a grid of the given size"""
    return cols - 2, rows - 2


def _shuffled_dirs(rng):
    dirs = list(CARVE_DIRS)
    rng.shuffle(dirs)
    return dirs


# ========== GENERATOR: BACKTRACKER ==========

def carve_steps(cols, rows, start_x, start_y, rng=None):
    """
    Backtracking carver - animated generator

    Uses an explicit stack of (x, y, directions) frames instead of recursion.
    Each frame shuffles its four directions once when the cell is entered,
    and a neighbour is only carved if it is still a wall at the moment its
    direction comes up, so the walk matches the recursive version exactly.

    Args:
        cols, rows: Grid dimensions
        start_x, start_y: Cell the walk starts from
        rng: Optional random.Random instance (module random if None)

    Yields:
        dict with keys 'grid', 'current', 'carved', 'done'
    """
    if rng is None:
        rng = random

    grid = Grid(cols, rows)
    grid.carve(start_x, start_y)
    stack = [(start_x, start_y, iter(_shuffled_dirs(rng)))]

    yield {"grid": grid, "current": (start_x, start_y), "carved": None, "done": False}

    while stack:
        cx, cy, dirs = stack[-1]
        step = next(dirs, None)

        if step is None:
            stack.pop()
            continue

        dx, dy = step
        nx, ny = cx + dx * 2, cy + dy * 2
        if grid.in_bounds(nx, ny) and grid.is_wall(nx, ny):
            # Carve through the wall between the two cells
            grid.carve(cx + dx, cy + dy)
            grid.carve(nx, ny)
            stack.append((nx, ny, iter(_shuffled_dirs(rng))))
            yield {"grid": grid, "current": (nx, ny), "carved": ((cx, cy), (nx, ny)), "done": False}

    # Exit is forced open even if the walk never reached it
    ex, ey = exit_cell(cols, rows)
    grid.carve(ex, ey)

    yield {"grid": grid, "current": (start_x, start_y), "carved": None, "done": True}


def generate(cols, rows, start_x, start_y, rng=None):
    """
    Generate a maze instantly

    Returns:
        Grid with the carved corridors and an open exit cell
    """
    last_state = None
    for state in carve_steps(cols, rows, start_x, start_y, rng):
        last_state = state
    return last_state["grid"]
