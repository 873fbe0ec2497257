"""
Player implementations for the terminal snake.

This module contains the player abstractions used by the autoplay demo
mode to pick the snake's next direction.
"""

from .base import Player
from .random_player import RandomPlayer

__all__ = [
    'Player',
    'RandomPlayer',
]
