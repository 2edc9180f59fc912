"""
Game constants for the terminal snake.
"""

# Movement directions
UP = "UP"
DOWN = "DOWN"
LEFT = "LEFT"
RIGHT = "RIGHT"
VALID_MOVES = {UP, DOWN, LEFT, RIGHT}

OPPOSITE = {
    UP: DOWN,
    DOWN: UP,
    LEFT: RIGHT,
    RIGHT: LEFT,
}

# (dx, dy) per direction; y grows downwards on a terminal
DELTAS = {
    UP: (0, -1),
    DOWN: (0, 1),
    LEFT: (-1, 0),
    RIGHT: (1, 0),
}

# Non-movement keys
SPACE = "SPACE"
QUIT = "QUIT"
VALID_KEYS = VALID_MOVES | {SPACE, QUIT}

# Board settings
GRID_WIDTH = 80
GRID_HEIGHT = 50
START_POSITION = (30, 25)

# Seconds between two movement steps
MOVE_INTERVAL = 0.1

# Glyphs
SNAKE_GLYPH = "#"
FOOD_GLYPH = "@"
EMPTY_GLYPH = " "
