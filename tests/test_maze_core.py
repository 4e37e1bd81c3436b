import pytest

from maze.maze_core import Grid, BoundsError
from utils.constants import WALL, PATH


def test_new_grid_is_all_wall():
    grid = Grid(4, 3)
    assert len(grid.cells) == 3
    assert all(len(row) == 4 for row in grid.cells)
    assert all(cell == WALL for row in grid.cells for cell in row)
    assert grid.path_count() == 0


def test_carve_opens_cell_at_x_y():
    grid = Grid(4, 3)
    grid.carve(3, 1)
    assert grid.cells[1][3] == PATH
    assert not grid.is_wall(3, 1)
    assert grid.is_path(3, 1)
    assert grid.is_wall(1, 1)


@pytest.mark.parametrize("x, y", [(-1, 0), (0, -1), (4, 0), (0, 3), (10, 10)])
def test_out_of_bounds_access_raises(x, y):
    grid = Grid(4, 3)
    with pytest.raises(BoundsError):
        grid.is_wall(x, y)
    with pytest.raises(BoundsError):
        grid.carve(x, y)


def test_bounds_error_is_an_index_error():
    grid = Grid(2, 2)
    with pytest.raises(IndexError):
        grid.is_wall(2, 0)


def test_valid_move_needs_bounds_and_path():
    grid = Grid(3, 3)
    grid.carve(1, 1)
    assert grid.valid_move(1, 1)
    assert not grid.valid_move(0, 1)
    assert not grid.valid_move(-1, 1)
    assert not grid.valid_move(3, 1)
