"""
Random player implementation - picks random safe moves.
"""

import random
from typing import List, Optional

from domain.constants import DIRECTION_DELTAS, VALID_MOVES
from domain.game_state import GameState
from .base import Player


class RandomPlayer(Player):
    """
    A random AI that picks a direction that avoids walls, its own body and
    reversing into its neck. Prefers a move onto the cherry when one is
    adjacent.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng if rng is not None else random.Random()

    def get_move(self, game_state: GameState) -> str:
        positions = game_state.positions
        head_x, head_y = positions[0]

        # Calculate all possible next positions
        possible_moves = {
            move: (head_x + dx, head_y + dy)
            for move, (dx, dy) in DIRECTION_DELTAS.items()
        }

        # Filter out moves that:
        # 1. Hit walls
        # 2. Hit own body (except tail, which will move)
        valid_moves: List[str] = []
        for move, (new_x, new_y) in sorted(possible_moves.items()):
            # Check wall collisions
            if (new_x < 1 or new_x > game_state.width - 2 or
                new_y < 1 or new_y > game_state.height - 2):
                continue

            # Check self collisions (excluding tail which will move)
            if (new_x, new_y) in positions[:-1]:
                continue

            if (new_x, new_y) == game_state.cherry:
                return move

            valid_moves.append(move)

        # If no valid moves, just return a random move (the engine refuses it)
        if not valid_moves:
            return self.rng.choice(sorted(VALID_MOVES))

        return self.rng.choice(valid_moves)
