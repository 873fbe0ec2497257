"""
Base player interface for the game engine.
"""

from domain.game_state import GameState


class Player:
    """
    Base class/interface for automated player logic.

    A player looks at a snapshot of the game and returns the next
    direction for the snake. The shell feeds that direction to
    SnakeGame.advance() exactly as it would a keypress.
    """

    def get_move(self, game_state: GameState) -> str:
        """
        Return a move direction given the current game state.

        Args:
            game_state: Current state of the game

        Returns:
            One of: "UP", "DOWN", "LEFT", "RIGHT"
        """
        raise NotImplementedError
