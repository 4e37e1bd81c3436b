"""
UI Manager - draws the maze, player, exit, fog and win message
"""

import pygame
from utils.colors import (
    COLOR_WALL, COLOR_PATH, COLOR_PLAYER, COLOR_EXIT,
    COLOR_FOG, COLOR_WIN_TEXT, COLOR_CARVE_CURSOR
)
from utils.constants import CELL_SIZE, WIN_TEXT_SIZE, WIN_TEXT_LINE_GAP


class UIManager:
    """
    Draws a GameSession using only its read-only queries
    """
    def __init__(self, cell_size=CELL_SIZE):
        self.cell_size = cell_size
        self.font = None
        self._init_fonts()

    def _init_fonts(self):
        """Initialize fonts"""
        pygame.font.init()
        self.font = pygame.font.SysFont("consolas", WIN_TEXT_SIZE)

    def draw_cell(self, screen, x, y, color):
        """Fill one grid cell"""
        rect = (x * self.cell_size, y * self.cell_size, self.cell_size, self.cell_size)
        pygame.draw.rect(screen, color, rect)

    def draw_grid(self, screen, grid):
        """Draw every cell as wall or path"""
        for y in range(grid.rows):
            for x in range(grid.cols):
                color = COLOR_WALL if grid.is_wall(x, y) else COLOR_PATH
                self.draw_cell(screen, x, y, color)

    def draw_session(self, screen, session):
        """
        Draw a full frame for a session

        Order: cells, exit, player, fog, win message
        """
        screen.fill(COLOR_WALL)
        self.draw_grid(screen, session.grid)

        ex, ey = session.exit_position()
        self.draw_cell(screen, ex, ey, COLOR_EXIT)

        px, py = session.player_position()
        self.draw_cell(screen, px, py, COLOR_PLAYER)

        if session.fog_enabled:
            self.draw_fog(screen, session)

        if session.is_over():
            self.draw_win_message(screen, session.move_count(), session.height)

    def draw_fog(self, screen, session):
        """Darken every cell the player cannot see"""
        fog_surface = pygame.Surface(screen.get_size(), pygame.SRCALPHA)
        for y in range(session.height):
            for x in range(session.width):
                if not session.is_visible(x, y):
                    rect = (x * self.cell_size, y * self.cell_size, self.cell_size, self.cell_size)
                    pygame.draw.rect(fog_surface, COLOR_FOG, rect)
        screen.blit(fog_surface, (0, 0))

    def draw_win_message(self, screen, moves, rows):
        """Draw the escape message over the maze"""
        x = self.cell_size
        y = self.cell_size * (rows // 2)
        lines = [f"You Escaped in {moves} moves!", "Press R to restart"]
        for i, line in enumerate(lines):
            text = self.font.render(line, True, COLOR_WIN_TEXT)
            screen.blit(text, (x, y + i * WIN_TEXT_LINE_GAP))

    def draw_generation(self, screen, state):
        """Draw an in-progress maze from a carve_steps() state"""
        screen.fill(COLOR_WALL)
        self.draw_grid(screen, state["grid"])
        cx, cy = state["current"]
        self.draw_cell(screen, cx, cy, COLOR_CARVE_CURSOR)
