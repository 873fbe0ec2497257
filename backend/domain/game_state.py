"""
GameState entity - a read-only snapshot of the game at a point in time.
"""

from typing import List, Optional, Tuple


class GameState:
    """
    A snapshot of the game, handed to the renderer and to players.

    Attributes:
        positions: list of (x, y) from head to tail
        cherry: (x, y) of the active cherry, None once the board is full
        cherries_eaten: number of cherries eaten so far
        width, height: grid dimensions, border included
        moves: number of moves applied so far
        game_over: whether the game has ended
    """

    def __init__(
        self,
        positions: List[Tuple[int, int]],
        cherry: Optional[Tuple[int, int]],
        cherries_eaten: int,
        width: int,
        height: int,
        moves: int = 0,
        game_over: bool = False,
        end_reason: Optional[str] = None
    ):
        self.positions = positions
        self.cherry = cherry
        self.cherries_eaten = cherries_eaten
        self.width = width
        self.height = height
        self.moves = moves
        self.game_over = game_over
        self.end_reason = end_reason

    @property
    def head(self) -> Tuple[int, int]:
        return self.positions[0]

    def print_board(self) -> str:
        """
        Returns a string representation of the board with:
        # = border
        . = empty interior cell
        X = cherry
        0 = snake head
        o = snake body
        Row 0 is printed first, matching the terminal layout.
        """
        board = [['.' for _ in range(self.width)] for _ in range(self.height)]

        for y in range(self.height):
            board[y][0] = '#'
            board[y][self.width - 1] = '#'
        for x in range(self.width):
            board[0][x] = '#'
            board[self.height - 1][x] = '#'

        if self.cherry is not None:
            cx, cy = self.cherry
            board[cy][cx] = 'X'

        # Tail first so the head wins if cells overlap
        for pos_idx in range(len(self.positions) - 1, -1, -1):
            x, y = self.positions[pos_idx]
            if 0 <= x < self.width and 0 <= y < self.height:
                board[y][x] = '0' if pos_idx == 0 else 'o'

        return "\n".join("".join(row) for row in board)

    def __repr__(self):
        return (
            f"<GameState moves={self.moves}, cherry={self.cherry}, "
            f"length={len(self.positions)}, cherries_eaten={self.cherries_eaten}>"
        )
