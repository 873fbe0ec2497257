#!/usr/bin/env python3
"""
Terminal snake - curses front end for the SnakeGame engine.

Usage:
    python main.py
    python main.py --width 60 --height 20 --seed 7
    python main.py --rules classic
    python main.py --autoplay --delay 50

Arrow keys (or WASD / HJKL) steer the snake, 'q' quits. The snake only
moves when a direction is pressed.
"""

import argparse
import curses
import logging
import random
import sys
from typing import Optional

from domain.constants import DOWN, LEFT, RIGHT, UP, VALID_RULES
from game_config import LOG_LEVELS, Settings, load_settings
from players import Player, RandomPlayer
from renderer import draw
from snake_game import CherryPlacementError, SnakeGame

logger = logging.getLogger(__name__)

KEY_DIRECTIONS = {
    curses.KEY_UP: UP,
    curses.KEY_DOWN: DOWN,
    curses.KEY_LEFT: LEFT,
    curses.KEY_RIGHT: RIGHT,
    ord('w'): UP,
    ord('s'): DOWN,
    ord('a'): LEFT,
    ord('d'): RIGHT,
    ord('k'): UP,
    ord('j'): DOWN,
    ord('h'): LEFT,
    ord('l'): RIGHT,
}

QUIT_KEYS = {ord('q'), ord('Q')}


class TerminalTooSmallError(RuntimeError):
    """Raised when the terminal cannot hold the configured grid."""


def key_to_direction(key: int) -> Optional[str]:
    """Map a curses key code to a direction, or None for any other key."""
    return KEY_DIRECTIONS.get(key)


def play(window, game: SnakeGame, player: Optional[Player] = None) -> int:
    """
    Run the input loop until the player quits or the game ends.

    With a *player*, every key read (including the -1 a timed-out read
    returns) is replaced by the player's move; only quit keys are honoured.

    Returns the number of cherries eaten.
    """
    autoplay = player is not None
    draw(window, game.snapshot(), autoplay=autoplay)

    while not game.game_over and game.check_legal():
        key = window.getch()
        if key in QUIT_KEYS:
            logger.info("Player quit after %d moves", game.moves)
            break

        if autoplay:
            direction = player.get_move(game.snapshot())
        else:
            direction = key_to_direction(key)
        if direction is None:
            continue

        outcome = game.advance(direction)
        logger.debug("%s -> %s", direction, outcome)
        draw(window, game.snapshot(), autoplay=autoplay)

    return game.eaten_count()


def create_window(stdscr, width: int, height: int, delay_ms: Optional[int] = None):
    """
    Prepare the terminal and return a width x height game window.

    A *delay_ms* makes getch() give up after that many milliseconds, which
    paces the autoplay demo. Without it getch() blocks.
    """
    rows, cols = stdscr.getmaxyx()
    if rows < height or cols < width:
        raise TerminalTooSmallError(
            f"Terminal is {cols}x{rows}; the game needs at least {width}x{height}."
        )

    curses.cbreak()
    curses.noecho()
    try:
        curses.curs_set(0)
    except curses.error:
        # Not every terminal can hide the cursor
        logger.debug("Cursor visibility not supported")

    stdscr.refresh()
    window = curses.newwin(height, width, 0, 0)
    window.keypad(True)
    window.timeout(delay_ms if delay_ms is not None else -1)
    return window


def _run(stdscr, game: SnakeGame, player: Optional[Player], delay_ms: int) -> int:
    window = create_window(stdscr, game.width, game.height, delay_ms if player is not None else None)
    return play(window, game, player)


def parse_args(argv, settings: Settings) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Steer a snake around a bordered grid and eat cherries."
    )
    parser.add_argument("--width", type=int, default=settings.width,
                        help="Grid width including the border")
    parser.add_argument("--height", type=int, default=settings.height,
                        help="Grid height including the border")
    parser.add_argument("--seed", type=int, default=settings.seed,
                        help="Seed for cherry placement")
    parser.add_argument("--rules", choices=sorted(VALID_RULES), default=settings.rules,
                        help="'confined' ignores moves into walls or the body; "
                             "'classic' allows them and ends the game")
    parser.add_argument("--autoplay", action="store_true",
                        help="Let a random player steer the snake")
    parser.add_argument("--delay", type=int, default=settings.autoplay_delay_ms,
                        help="Milliseconds between autoplay moves")
    parser.add_argument("--log-file", type=str, default=settings.log_file,
                        help="Write logs to this file")
    parser.add_argument("--log-level", type=str.upper, choices=LOG_LEVELS,
                        default=settings.log_level,
                        help="Logging level")
    return parser.parse_args(argv)


def configure_logging(log_file: Optional[str], level: str):
    """Log to *log_file*; with no file, stay silent so the screen is not overwritten."""
    if log_file:
        logging.basicConfig(
            filename=log_file,
            level=level.upper(),
            format="%(asctime)s [%(levelname)s] %(message)s",
        )
    else:
        logging.getLogger().addHandler(logging.NullHandler())


def main(argv=None) -> int:
    try:
        settings = load_settings()
    except ValueError as e:
        raise SystemExit(f"[ERROR] {e}")

    args = parse_args(argv, settings)
    configure_logging(args.log_file, args.log_level)

    try:
        game = SnakeGame(args.width, args.height, rules=args.rules, seed=args.seed)
    except (ValueError, CherryPlacementError) as e:
        raise SystemExit(f"[ERROR] {e}")

    player = RandomPlayer(random.Random(args.seed)) if args.autoplay else None

    try:
        curses.wrapper(_run, game, player, args.delay)
    except (curses.error, CherryPlacementError, TerminalTooSmallError) as e:
        logger.error("Game aborted: %s", e)
        print(f"[ERROR] {e}", file=sys.stderr)
        return 1

    print("\nGame over!!!")
    print(f"cherries eaten: {game.eaten_count()}\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
