"""
Game Module - session state, commands, fog of war and drawing
"""

from .game_state import GameState, GameSession
from .commands import Command, Direction, dispatch
from .fog_of_war import FogOfWar

__all__ = ['GameState', 'GameSession', 'Command', 'Direction', 'dispatch', 'FogOfWar']
