import random

import pytest

from config import GameConfig
from game.game_state import GameSession
from maze.maze_core import Grid


def grid_from_rows(rows):
    """Build a Grid from strings where '#' is wall and '.' is path"""
    grid = Grid(len(rows[0]), len(rows))
    for y, row in enumerate(rows):
        for x, ch in enumerate(row):
            if ch == '.':
                grid.carve(x, y)
    return grid


# Exit at (5, 5); corridor along the top row then down the right column
OPEN_7X7 = [
    "#######",
    "#.....#",
    "#.###.#",
    "#.#...#",
    "#.#.#.#",
    "#...#.#",
    "#######",
]


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def session(rng):
    return GameSession(GameConfig(), rng=rng)


@pytest.fixture
def small_session(rng):
    """7x7 session playing on the hand-made OPEN_7X7 grid"""
    s = GameSession(GameConfig(width=7, height=7), rng=rng)
    s.load_grid(grid_from_rows(OPEN_7X7))
    return s


@pytest.fixture
def build_grid():
    return grid_from_rows
