"""
Game State Machine - owns the maze, the player and the win condition
"""

import random
from enum import Enum, auto

from config import GameConfig
from entities.player import Player
from game.fog_of_war import FogOfWar
from maze.generator import generate, carve_steps, exit_cell
from maze.maze_core import BoundsError
from utils.constants import START_POS


class GameState(Enum):
    """Game states"""
    PLAYING = auto()
    WON = auto()


class GameSession:
    """
    A single game: grid, player, move counter, exit and fog of war

    The input layer calls move/restart/toggle_fog one at a time and the
    renderer polls the query methods once per frame.
    """
    def __init__(self, config=None, rng=None):
        """
        Args:
            config: GameConfig (defaults if None)
            rng: Optional random.Random; seeded from config.seed if None
        """
        self.config = config if config is not None else GameConfig()
        self.rng = rng if rng is not None else random.Random(self.config.seed)

        self.cols = self.config.width
        self.rows = self.config.height
        self.start_pos = START_POS
        self.exit_pos = exit_cell(self.cols, self.rows)

        self.fog = FogOfWar(self.config.visibility_radius, self.config.fog_enabled)

        self.current_state = GameState.PLAYING
        self.previous_state = None
        self.grid = None
        self.player = None
        self.moves = 0

        self.restart()

    # ========== STATE MACHINE ==========

    def transition_to(self, new_state):
        """Transition to a new state"""
        self.previous_state = self.current_state
        self.current_state = new_state

    def is_state(self, state):
        """Check if current state matches"""
        return self.current_state == state

    @property
    def state(self):
        return self.current_state

    @property
    def game_over(self):
        return self.current_state == GameState.WON

    # ========== COMMANDS ==========

    def move(self, direction):
        """
        Move the player one cell in a Direction

        Returns:
            bool: True if the move was accepted. Moves into walls, off the
            grid, or after the game is won are ignored and return False.
        """
        if self.game_over:
            return False

        dx, dy = direction.value
        nx, ny = self.player.target(dx, dy)
        if not self.grid.valid_move(nx, ny):
            return False

        self.player.move(dx, dy)
        self.moves += 1
        self.check_win()
        return True

    def check_win(self):
        """Switch to WON when the player stands on the exit"""
        if self.game_over:
            return True
        if self.player.position == self.exit_pos:
            self.transition_to(GameState.WON)
            return True
        return False

    def restart(self):
        """Generate a fresh maze and reset player, counter and win state"""
        sx, sy = self.start_pos
        self.load_grid(generate(self.cols, self.rows, sx, sy, self.rng))

    def generation_steps(self):
        """
        Step-by-step generation of the next maze, for animation

        Pass the final state's grid to load_grid() to start playing it.
        """
        sx, sy = self.start_pos
        return carve_steps(self.cols, self.rows, sx, sy, self.rng)

    def load_grid(self, grid):
        """Take ownership of a generated grid and reset the session onto it"""
        if (grid.cols, grid.rows) != (self.cols, self.rows):
            raise ValueError(
                f"grid is {grid.cols}x{grid.rows}, session expects {self.cols}x{self.rows}"
            )
        self.grid = grid
        self.player = Player(*self.start_pos)
        self.moves = 0
        self.transition_to(GameState.PLAYING)

    def toggle_fog(self):
        """Flip fog of war; allowed in any state"""
        return self.fog.toggle()

    # ========== QUERIES ==========

    @property
    def width(self):
        return self.cols

    @property
    def height(self):
        return self.rows

    @property
    def fog_enabled(self):
        return self.fog.enabled

    def is_wall(self, x, y):
        return self.grid.is_wall(x, y)

    def is_visible(self, x, y):
        """Check if a cell is visible from the player's position"""
        if not self.grid.in_bounds(x, y):
            raise BoundsError(x, y, self.cols, self.rows)
        return self.fog.is_visible(x, y, self.player.x, self.player.y)

    def player_position(self):
        return self.player.position

    def exit_position(self):
        return self.exit_pos

    def move_count(self):
        return self.moves

    def is_over(self):
        return self.game_over

    def __repr__(self):
        return (f"GameSession(state={self.current_state.name}, "
                f"player={self.player.position}, moves={self.moves})")
