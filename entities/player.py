"""
Player entity - position on the maze grid
"""


class Player:
    """
    Player position; the session decides whether a move is legal
    """
    def __init__(self, x, y):
        self.x = x
        self.y = y

    @property
    def position(self):
        return self.x, self.y

    def target(self, dx, dy):
        """Cell the player would land on after moving by (dx, dy)"""
        return self.x + dx, self.y + dy

    def move(self, dx, dy):
        self.x += dx
        self.y += dy

    def reset_position(self, x, y):
        """Reset player to a position"""
        self.x = x
        self.y = y

    def __repr__(self):
        return f"Player(pos=({self.x}, {self.y}))"
