"""
Game configuration for Maze Escape
"""

from utils.constants import (
    DEFAULT_WIDTH, DEFAULT_HEIGHT, MIN_DIMENSION,
    VISIBILITY_RADIUS, FOG_ENABLED_BY_DEFAULT
)

GAME_TITLE = "Maze Escape"
GAME_VERSION = "1.0.0"


class GameConfig:
    """Settings fixed when a session is created"""
    def __init__(self, **kwargs):
        # Maze dimensions
        self.width = kwargs.get('width', DEFAULT_WIDTH)
        self.height = kwargs.get('height', DEFAULT_HEIGHT)

        # Fog of war
        self.visibility_radius = kwargs.get('visibility_radius', VISIBILITY_RADIUS)
        self.fog_enabled = kwargs.get('fog_enabled', FOG_ENABLED_BY_DEFAULT)

        # Random seed (None = fresh randomness)
        self.seed = kwargs.get('seed', None)

        self.validate()

    def validate(self):
        """Raise ValueError on settings the game cannot run with"""
        for name in ('width', 'height'):
            value = getattr(self, name)
            if not isinstance(value, int) or value < MIN_DIMENSION:
                raise ValueError(f"{name} must be an integer >= {MIN_DIMENSION}, got {value!r}")
        if self.visibility_radius < 0:
            raise ValueError(f"visibility_radius must be >= 0, got {self.visibility_radius!r}")

    def __repr__(self):
        return (f"GameConfig(size={self.width}x{self.height}, "
                f"radius={self.visibility_radius}, fog={self.fog_enabled})")
