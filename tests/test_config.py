import pytest

from config import GameConfig, GAME_TITLE
from utils.helpers import window_title


def test_defaults():
    config = GameConfig()
    assert (config.width, config.height) == (15, 15)
    assert config.visibility_radius == 3
    assert config.fog_enabled is True
    assert config.seed is None


def test_overrides():
    config = GameConfig(width=21, height=11, visibility_radius=5, fog_enabled=False, seed=7)
    assert (config.width, config.height) == (21, 11)
    assert config.visibility_radius == 5
    assert not config.fog_enabled
    assert config.seed == 7


def test_smallest_grid_is_allowed():
    config = GameConfig(width=2, height=2)
    assert (config.width, config.height) == (2, 2)


@pytest.mark.parametrize("kwargs", [
    {"width": 1},
    {"height": 0},
    {"width": -3},
    {"width": 10.5},
    {"visibility_radius": -1},
])
def test_invalid_settings(kwargs):
    with pytest.raises(ValueError):
        GameConfig(**kwargs)


def test_window_title():
    assert window_title(GAME_TITLE, 0) == "Maze Escape - Moves: 0"
    assert window_title(GAME_TITLE, 12) == "Maze Escape - Moves: 12"
