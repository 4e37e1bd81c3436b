"""
Fog of War system - limits player vision to a radius around the player
"""

from utils.constants import VISIBILITY_RADIUS, FOG_ENABLED_BY_DEFAULT
from utils.helpers import distance


class FogOfWar:
    """
    Fog of War that hides every cell farther than `radius` from the player
    """
    def __init__(self, radius=VISIBILITY_RADIUS, enabled=FOG_ENABLED_BY_DEFAULT):
        """
        Args:
            radius: Vision radius in cells (Euclidean)
            enabled: Whether fog starts switched on
        """
        self.radius = radius
        self.enabled = enabled

    def toggle(self):
        """Switch fog on/off"""
        self.enabled = not self.enabled
        return self.enabled

    def is_visible(self, x, y, player_x, player_y):
        """
        Check if cell is currently visible

        Cells exactly at the radius are visible.
        """
        if not self.enabled:
            return True
        return distance(x, y, player_x, player_y) <= self.radius

    def visible_cells(self, cols, rows, player_x, player_y):
        """All visible (x, y) cells of a cols x rows grid"""
        return [
            (x, y)
            for y in range(rows)
            for x in range(cols)
            if self.is_visible(x, y, player_x, player_y)
        ]

    def __repr__(self):
        state = "on" if self.enabled else "off"
        return f"FogOfWar(radius={self.radius}, {state})"
