"""
Maze Module - grid model and generator
"""

from .maze_core import Grid, BoundsError
from .generator import generate, carve_steps, exit_cell

__all__ = ['Grid', 'BoundsError', 'generate', 'carve_steps', 'exit_cell']
