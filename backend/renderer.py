"""
Curses drawing for the terminal snake.

Draws a GameState onto a window; knows nothing about input or rules.
"""

from domain.game_state import GameState

HEAD_CHAR = "0"
BODY_CHAR = "o"
CHERRY_CHAR = "X"


def draw(window, state: GameState, autoplay: bool = False):
    """Redraw the border, status line, cherry and snake, then refresh."""
    window.erase()
    window.box()

    status = f" Cherries: {state.cherries_eaten} "
    if autoplay:
        status += "[autoplay] "
    window.addstr(0, 2, status[: max(0, state.width - 4)])

    if state.cherry is not None:
        cx, cy = state.cherry
        window.addch(cy, cx, CHERRY_CHAR)

    # Tail first so the head is always visible
    for pos_idx in range(len(state.positions) - 1, -1, -1):
        x, y = state.positions[pos_idx]
        if 1 <= x <= state.width - 2 and 1 <= y <= state.height - 2:
            window.addch(y, x, HEAD_CHAR if pos_idx == 0 else BODY_CHAR)

    window.refresh()

