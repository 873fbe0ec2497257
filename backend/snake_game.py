"""
SnakeGame - the game-state engine.

Owns the body, the single active cherry and the cherry counter. The engine
never reads input or keeps time; the shell calls advance() once per
directional command and redraws from snapshot().
"""

import logging
import random
from typing import Optional, Set, Tuple

from domain.body import Body
from domain.constants import (
    CONFINED_RULES,
    DIRECTION_DELTAS,
    INITIAL_LENGTH,
    MAX_CHERRY_ATTEMPTS,
    VALID_MOVES,
    VALID_RULES,
)
from domain.game_state import GameState

logger = logging.getLogger(__name__)

# Outcomes returned by SnakeGame.advance()
MOVED = "moved"
ATE = "ate"
REVERSAL = "reversal"
BLOCKED = "blocked"
ENDED = "ended"


class CherryPlacementError(RuntimeError):
    """Raised when no free interior cell can be found for a new cherry."""


class SnakeGame:
    """
    Manages:
      - Grid (width, height), border included
      - Body
      - The active cherry
      - Cherry counter
      - Running / ended state
    """

    def __init__(
        self,
        width: int,
        height: int,
        rules: str = CONFINED_RULES,
        seed: Optional[int] = None,
        rng: Optional[random.Random] = None
    ):
        if width < INITIAL_LENGTH + 2 or height < 4:
            raise ValueError(
                f"Grid {width}x{height} is too small; need at least "
                f"{INITIAL_LENGTH + 2}x4 to fit the starting body and a cherry."
            )
        if rules not in VALID_RULES:
            raise ValueError(f"Unknown rules '{rules}'. Expected one of {sorted(VALID_RULES)}.")

        self.width = width
        self.height = height
        self.rules = rules
        self.rng = rng if rng is not None else random.Random(seed)

        self.cherries_eaten = 0
        self.moves = 0
        self.game_over = False
        self.end_reason: Optional[str] = None

        # Horizontal line centred in the grid, head on the right end
        cx, cy = width // 2, height // 2
        half = INITIAL_LENGTH // 2
        self.body = Body((x, cy) for x in range(cx + half, cx - half - 1, -1))

        self.cherry: Optional[Tuple[int, int]] = None
        self.spawn_cherry()
        logger.info(
            "New %dx%d game (%s rules): head at %s, cherry at %s",
            width, height, rules, self.body.head, self.cherry
        )

    def in_bounds(self, cell: Tuple[int, int]) -> bool:
        """Whether *cell* lies in the playable interior."""
        x, y = cell
        return 1 <= x <= self.width - 2 and 1 <= y <= self.height - 2

    def spawn_cherry(self) -> Tuple[int, int]:
        """
        Place the cherry on a random interior cell not covered by the body.

        Cells are drawn uniformly over the interior and redrawn on overlap.
        Raises CherryPlacementError if the interior is full or no free cell
        turns up within MAX_CHERRY_ATTEMPTS draws.
        """
        self.cherry = self._pick_free_cell(set(self.body))
        logger.debug("Cherry spawned at %s", self.cherry)
        return self.cherry

    def _interior_full(self, occupied: Set[Tuple[int, int]]) -> bool:
        interior = (self.width - 2) * (self.height - 2)
        return sum(1 for cell in occupied if self.in_bounds(cell)) >= interior

    def _pick_free_cell(self, occupied: Set[Tuple[int, int]]) -> Tuple[int, int]:
        interior = (self.width - 2) * (self.height - 2)
        if self._interior_full(occupied):
            raise CherryPlacementError(
                f"No free cell for a cherry: body covers all {interior} interior cells."
            )

        for _ in range(MAX_CHERRY_ATTEMPTS):
            x = self.rng.randint(1, self.width - 2)
            y = self.rng.randint(1, self.height - 2)
            if (x, y) not in occupied:
                return (x, y)

        raise CherryPlacementError(
            f"Could not place a cherry after {MAX_CHERRY_ATTEMPTS} attempts "
            f"({len(occupied)} of {interior} interior cells occupied)."
        )

    def advance(self, direction: str) -> str:
        """
        Move the snake one cell in *direction*.

        Steps:
          1) Reject unknown directions and do nothing once the game ended
          2) Ignore a move straight back into the neck
          3) Under confined rules, ignore a move into the wall or the body
          4) Prepend the new head
          5) On the cherry: count it and spawn a new one (grow); when the
             grown body covers the whole interior there is no next cherry
             and the game ends with "board full"
             Otherwise: drop the tail

        Returns one of "moved", "ate", "reversal", "blocked", "ended".
        """
        if direction not in VALID_MOVES:
            raise ValueError(f"Invalid direction: {direction!r}")
        if self.game_over:
            return ENDED

        dx, dy = DIRECTION_DELTAS[direction]
        hx, hy = self.body.head
        target = (hx + dx, hy + dy)

        if len(self.body) > 1 and target == self.body.second:
            return REVERSAL

        eats = target == self.cherry

        if self.rules == CONFINED_RULES:
            # The tail moves out of the way unless the snake is growing
            into_body = self.body.contains(target) and (eats or target != self.body.tail)
            if not self.in_bounds(target) or into_body:
                logger.debug("Blocked move %s into %s", direction, target)
                return BLOCKED

        if eats:
            # Pick the next cherry before touching any state
            grown = set(self.body)
            grown.add(target)
            board_full = self._interior_full(grown)
            next_cherry = None if board_full else self._pick_free_cell(grown)

            self.body.prepend(target)
            self.moves += 1
            self.cherries_eaten += 1
            self.cherry = next_cherry
            logger.info("Cherry eaten at %s (total %d)", target, self.cherries_eaten)
            self._log_board()
            if board_full:
                self.end_game("board full")
            return ATE

        self.body.prepend(target)
        self.moves += 1
        self.body.trim_tail()
        self._log_board()
        return MOVED

    def _log_board(self):
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("Board after move %d:\n%s", self.moves, self.snapshot().print_board())

    def is_legal(self) -> bool:
        """
        True while every body cell is inside the interior and no two body
        cells coincide.
        """
        seen = set()
        for cell in self.body:
            if not self.in_bounds(cell) or cell in seen:
                return False
            seen.add(cell)
        return True

    def check_legal(self) -> bool:
        """Run is_legal() and end the game if the state is not legal."""
        legal = self.is_legal()
        if not legal:
            self.end_game("illegal state")
        return legal

    def end_game(self, reason: str):
        if self.game_over:
            return
        self.game_over = True
        self.end_reason = reason
        logger.info("Game over: %s (cherries eaten: %d)", reason, self.cherries_eaten)

    def eaten_count(self) -> int:
        return self.cherries_eaten

    def get_current_state(self) -> GameState:
        """
        Return a snapshot of the current board as a GameState.
        """
        return GameState(
            positions=self.body.cells(),
            cherry=self.cherry,
            cherries_eaten=self.cherries_eaten,
            width=self.width,
            height=self.height,
            moves=self.moves,
            game_over=self.game_over,
            end_reason=self.end_reason
        )

    snapshot = get_current_state

    def __repr__(self):
        return (
            f"<SnakeGame {self.width}x{self.height} rules={self.rules}, "
            f"length={len(self.body)}, cherries_eaten={self.cherries_eaten}>"
        )


def initialize(width: int, height: int, **kwargs) -> SnakeGame:
    """Create a running game on a width x height grid."""
    return SnakeGame(width, height, **kwargs)
