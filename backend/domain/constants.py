"""
Game constants for the terminal snake.
"""

# Movement directions
UP = "UP"
DOWN = "DOWN"
LEFT = "LEFT"
RIGHT = "RIGHT"
VALID_MOVES = {UP, DOWN, LEFT, RIGHT}

# (dx, dy) per direction. Screen coordinates: y grows downwards.
DIRECTION_DELTAS = {
    UP:    (0, -1),
    DOWN:  (0, 1),
    LEFT:  (-1, 0),
    RIGHT: (1, 0),
}

# Grid defaults (border included)
DEFAULT_WIDTH = 80
DEFAULT_HEIGHT = 24

INITIAL_LENGTH = 5

# Rule sets
CONFINED_RULES = "confined"   # moves into a wall or the body are ignored
CLASSIC_RULES = "classic"     # moves are never refused except into the neck
VALID_RULES = {CONFINED_RULES, CLASSIC_RULES}

MAX_CHERRY_ATTEMPTS = 10_000
