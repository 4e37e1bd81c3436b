"""
Entities Module
"""

from .player import Player

__all__ = ['Player']
