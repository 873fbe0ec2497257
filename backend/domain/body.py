"""
Body entity for the game engine.
"""

from collections import deque
from typing import Iterable, Iterator, List, Tuple

Cell = Tuple[int, int]


class Body:
    """
    The snake's occupied cells.

    Attributes:
        positions: deque of (x, y) from head at index 0 to tail at the end
    """

    def __init__(self, positions: Iterable[Cell] = ()):
        self.positions = deque(positions)

    def __len__(self) -> int:
        return len(self.positions)

    def __iter__(self) -> Iterator[Cell]:
        return iter(self.positions)

    def __repr__(self):
        return f"<Body length={len(self.positions)}, head={self.positions[0] if self.positions else None}>"

    @property
    def head(self) -> Cell:
        """Return the head position (first element)."""
        return self.positions[0]

    @property
    def second(self) -> Cell:
        """Return the neck, the cell directly behind the head."""
        return self.positions[1]

    @property
    def tail(self) -> Cell:
        """Return the tail position (last element)."""
        return self.positions[-1]

    def prepend(self, cell: Cell) -> None:
        """Insert a new head. Callers are responsible for legality."""
        self.positions.appendleft(cell)

    def trim_tail(self) -> Cell:
        """Remove and return the tail."""
        return self.positions.pop()

    def contains(self, cell: Cell, excluding_head: bool = False) -> bool:
        if excluding_head:
            return any(c == cell for i, c in enumerate(self.positions) if i > 0)
        return cell in self.positions

    def cells(self) -> List[Cell]:
        return list(self.positions)
