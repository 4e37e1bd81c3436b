"""
Maze Escape
Find the way from the top-left corner to the red exit cell
"""

import argparse
import sys

import pygame

from config import GAME_TITLE, GAME_VERSION, GameConfig
from game.commands import Command, dispatch
from game.game_state import GameSession
from game.ui_manager import UIManager
from utils.constants import (
    CELL_SIZE, FPS, GEN_STEPS_PER_SECOND,
    DEFAULT_WIDTH, DEFAULT_HEIGHT, MIN_DIMENSION, VISIBILITY_RADIUS
)
from utils.helpers import window_title


KEY_COMMANDS = {
    pygame.K_UP: Command.MOVE_UP,
    pygame.K_w: Command.MOVE_UP,
    pygame.K_DOWN: Command.MOVE_DOWN,
    pygame.K_s: Command.MOVE_DOWN,
    pygame.K_LEFT: Command.MOVE_LEFT,
    pygame.K_a: Command.MOVE_LEFT,
    pygame.K_RIGHT: Command.MOVE_RIGHT,
    pygame.K_d: Command.MOVE_RIGHT,
    pygame.K_r: Command.RESTART,
    pygame.K_f: Command.TOGGLE_FOG,
}


class MazeGame:
    """
    Main game class
    """
    def __init__(self, config, animated=False):
        pygame.init()

        self.session = GameSession(config)
        self.ui_manager = UIManager(CELL_SIZE)

        screen_w = self.session.width * CELL_SIZE
        screen_h = self.session.height * CELL_SIZE
        self.screen = pygame.display.set_mode((screen_w, screen_h))
        print(f"{GAME_TITLE} v{GAME_VERSION}: maze {self.session.width}x{self.session.height}, "
              f"window {screen_w}x{screen_h}")

        self.clock = pygame.time.Clock()
        self.running = True
        self.announced_win = False

        # Animated generation state
        self.animated = animated
        self.generator = None
        self.gen_state = None
        self.gen_accum = 0.0

        if self.animated:
            self._start_generation()
        self._update_title()

    def _update_title(self):
        pygame.display.set_caption(window_title(GAME_TITLE, self.session.move_count()))

    def handle_events(self):
        """Handle input events"""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
                return

            if event.type == pygame.KEYDOWN:
                self._handle_keydown(event.key)

    def _handle_keydown(self, key):
        """Map a key press to a command"""
        if key == pygame.K_ESCAPE:
            self.running = False
            return

        if self.generator:
            # Can skip generation with space
            if key == pygame.K_SPACE:
                self._finish_generation_instantly()
            return

        command = KEY_COMMANDS.get(key)
        if command is None:
            return

        if command == Command.RESTART and self.animated:
            self._start_generation()
        else:
            dispatch(self.session, command)

        if command == Command.RESTART:
            self.announced_win = False
        self._update_title()

    # ========== ANIMATED GENERATION ==========

    def _start_generation(self):
        self.generator = self.session.generation_steps()
        self.gen_state = next(self.generator)
        self.gen_accum = 0.0

    def _finish_generation(self, state):
        self.session.load_grid(state['grid'])
        self.generator = None
        self.gen_state = None
        self._update_title()

    def _finish_generation_instantly(self):
        """Finish generation without animation"""
        last_state = self.gen_state
        for state in self.generator:
            last_state = state
        self._finish_generation(last_state)

    def _update_generation(self, dt):
        """Advance maze generation"""
        self.gen_accum += dt * GEN_STEPS_PER_SECOND
        steps = int(self.gen_accum)
        self.gen_accum -= steps

        for _ in range(steps):
            state = next(self.generator)
            self.gen_state = state
            if state['done']:
                self._finish_generation(state)
                break

    # ========== LOOP ==========

    def update(self, dt):
        """Update game state"""
        if self.generator:
            self._update_generation(dt)
            return

        if self.session.is_over() and not self.announced_win:
            print(f"You Escaped in {self.session.move_count()} moves!")
            self.announced_win = True

    def render(self):
        """Render current game state"""
        if self.generator:
            self.ui_manager.draw_generation(self.screen, self.gen_state)
        else:
            self.ui_manager.draw_session(self.screen, self.session)
        pygame.display.flip()

    def run(self):
        """Main game loop"""
        while self.running:
            dt_ms = self.clock.tick(FPS)
            dt = dt_ms / 1000.0

            self.handle_events()
            self.update(dt)
            self.render()

        pygame.quit()
        print("Game closed.")


def dimension(value):
    """argparse type for maze width/height"""
    try:
        num = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected an integer value, got '{value}'")
    if num < MIN_DIMENSION:
        raise argparse.ArgumentTypeError(f"{num} is too small (must be {MIN_DIMENSION} or greater)")
    return num


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        prog="maze-escape",
        description="Escape a randomly generated maze.",
        usage="%(prog)s [options] [width height]"
    )
    parser.add_argument('width', nargs='?', type=dimension, default=DEFAULT_WIDTH,
                        help="The width of the maze in cells.")
    parser.add_argument('height', nargs='?', type=dimension, default=DEFAULT_HEIGHT,
                        help="The height of the maze in cells.")
    parser.add_argument('--radius', type=float, default=VISIBILITY_RADIUS,
                        help="Fog of war visibility radius.")
    parser.add_argument('--no-fog', dest='fog', action='store_false',
                        help="Start with fog of war switched off.")
    parser.add_argument('--seed', type=int, default=None,
                        help="Seed for reproducible mazes.")
    parser.add_argument('--animate', action='store_true',
                        help="Show the maze being carved (SPACE skips).")
    return parser.parse_args(argv)


def main(argv=None):
    """Entry point"""
    args = parse_args(argv)
    try:
        config = GameConfig(
            width=args.width,
            height=args.height,
            visibility_radius=args.radius,
            fog_enabled=args.fog,
            seed=args.seed,
        )
    except ValueError as e:
        print(f"Error: {e}")
        return 2

    game = MazeGame(config, animated=args.animate)
    game.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
