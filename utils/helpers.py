"""
Helper utility functions for Maze Escape
"""

import math


def distance(x1, y1, x2, y2):
    """Calculate Euclidean distance between two points"""
    return math.sqrt((x2 - x1) ** 2 + (y2 - y1) ** 2)


def in_bounds(cols, rows, x, y):
    """Check if coordinates are in bounds"""
    return 0 <= x < cols and 0 <= y < rows


def window_title(title, moves):
    """Window caption with the move counter"""
    return f"{title} - Moves: {moves}"
