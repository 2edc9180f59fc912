"""
Domain entities for the terminal snake.

This module contains the core game entities that are independent of
the terminal they are drawn on.
"""

from .constants import UP, DOWN, LEFT, RIGHT, SPACE, QUIT, VALID_MOVES, VALID_KEYS
from .snake import Segment, Snake
from .game_state import GameState

__all__ = [
    'UP', 'DOWN', 'LEFT', 'RIGHT', 'SPACE', 'QUIT', 'VALID_MOVES', 'VALID_KEYS',
    'Segment',
    'Snake',
    'GameState',
]
