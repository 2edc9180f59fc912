"""
GameState entity - everything a running session owns.
"""

import random
from typing import Tuple

from .constants import GRID_WIDTH, GRID_HEIGHT, START_POSITION
from .snake import Snake


def random_position(rng: random.Random, width: int, height: int) -> Tuple[int, int]:
    """Uniform random cell on the grid. Occupied cells are not excluded."""
    return (rng.randint(0, width - 1), rng.randint(0, height - 1))


class GameState:
    """
    The mutable simulation of one session.

    Replaced as a whole on restart so nothing from the previous round
    survives.

    Attributes:
        snake: the player's snake
        food: (x, y) of the single food item
        last_move: clock reading of the last movement step
        game_over: set once the head runs into the body
        width, height: board dimensions
    """

    def __init__(
        self,
        snake: Snake,
        food: Tuple[int, int],
        last_move: float,
        width: int = GRID_WIDTH,
        height: int = GRID_HEIGHT,
        game_over: bool = False
    ):
        if width <= 0 or height <= 0:
            raise ValueError(f"Board must be at least 1x1, got {width}x{height}.")
        self.snake = snake
        self.food = food
        self.last_move = last_move
        self.width = width
        self.height = height
        self.game_over = game_over

    @classmethod
    def initial(
        cls,
        now: float,
        rng: random.Random,
        width: int = GRID_WIDTH,
        height: int = GRID_HEIGHT
    ) -> "GameState":
        """A single unmoved segment at the start cell and freshly placed food."""
        start = (min(START_POSITION[0], width - 1), min(START_POSITION[1], height - 1))
        return cls(
            snake=Snake.at(start),
            food=random_position(rng, width, height),
            last_move=now,
            width=width,
            height=height,
        )

    @property
    def score(self) -> int:
        return len(self.snake)

    def __repr__(self):
        return (
            f"<GameState food={self.food}, snake={self.snake!r}, "
            f"game_over={self.game_over}>"
        )
