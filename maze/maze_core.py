"""
Core maze data - the wall/path grid
"""

from utils.constants import WALL, PATH
from utils.helpers import in_bounds


class BoundsError(IndexError):
    """Raised when a cell outside the grid is accessed"""
    def __init__(self, x, y, cols, rows):
        super().__init__(f"cell ({x}, {y}) is outside the {cols}x{rows} grid")
        self.x = x
        self.y = y


class Grid:
    """
    Maze grid with cell-based representation
    Each cell is either WALL or PATH, stored row-major as cells[y][x]
    """
    def __init__(self, cols, rows):
        self.cols = cols
        self.rows = rows
        # Initialize every cell as wall
        self.cells = [[WALL for _ in range(cols)] for _ in range(rows)]

    def in_bounds(self, x, y):
        """Check if coordinates are within grid bounds"""
        return in_bounds(self.cols, self.rows, x, y)

    def _check(self, x, y):
        if not self.in_bounds(x, y):
            raise BoundsError(x, y, self.cols, self.rows)

    def is_wall(self, x, y):
        """Check if cell is a wall (raises BoundsError outside the grid)"""
        self._check(x, y)
        return self.cells[y][x] == WALL

    def is_path(self, x, y):
        return not self.is_wall(x, y)

    def carve(self, x, y):
        """Open a cell"""
        self._check(x, y)
        self.cells[y][x] = PATH

    def valid_move(self, x, y):
        """Check if a player may stand on (x, y)"""
        return self.in_bounds(x, y) and self.cells[y][x] == PATH

    def path_count(self):
        return sum(row.count(PATH) for row in self.cells)

    def __repr__(self):
        return f"Grid(size={self.cols}x{self.rows}, open={self.path_count()})"
