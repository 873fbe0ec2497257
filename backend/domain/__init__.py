"""
Domain entities for the terminal snake game engine.

This module contains the core game entities that are independent of
terminal concerns (curses, key codes, process exit).
"""

from .constants import (
    UP, DOWN, LEFT, RIGHT, VALID_MOVES, DIRECTION_DELTAS,
    DEFAULT_WIDTH, DEFAULT_HEIGHT, INITIAL_LENGTH,
    CONFINED_RULES, CLASSIC_RULES, VALID_RULES, MAX_CHERRY_ATTEMPTS,
)
from .body import Body
from .game_state import GameState

__all__ = [
    'UP', 'DOWN', 'LEFT', 'RIGHT', 'VALID_MOVES', 'DIRECTION_DELTAS',
    'DEFAULT_WIDTH', 'DEFAULT_HEIGHT', 'INITIAL_LENGTH',
    'CONFINED_RULES', 'CLASSIC_RULES', 'VALID_RULES', 'MAX_CHERRY_ATTEMPTS',
    'Body',
    'GameState',
]
