"""
SnakeGame - the per-frame state machine driven by the frame loop.
"""

import logging
import random
import time
from typing import Callable, Optional

from domain.constants import (
    VALID_MOVES, SPACE, QUIT, GRID_WIDTH, GRID_HEIGHT, MOVE_INTERVAL,
    SNAKE_GLYPH, FOOD_GLYPH, EMPTY_GLYPH,
)
from domain.game_state import GameState, random_position
from terminal.base import Terminal

logger = logging.getLogger(__name__)

GAME_OVER_TEXT = "GAME OVER"
RESTART_TEXT = "Press SPACE to play again, Q to quit"


class SnakeGame:
    """
    Manages:
      - the GameState of the running session
      - direction input
      - the movement rate gate
      - drawing onto the terminal
      - restart after game over
    """

    def __init__(
        self,
        width: int = GRID_WIDTH,
        height: int = GRID_HEIGHT,
        clock: Callable[[], float] = time.time,
        rng: Optional[random.Random] = None,
        move_interval: float = MOVE_INTERVAL
    ):
        self.width = width
        self.height = height
        self.clock = clock
        self.rng = rng or random.Random()
        self.move_interval = move_interval
        self.games_played = 1
        self.state = self._new_state()
        logger.info(
            f"New game on a {width}x{height} board, head at {self.state.snake.head.position}, "
            f"food at {self.state.food}"
        )

    def _new_state(self) -> GameState:
        return GameState.initial(self.clock(), self.rng, self.width, self.height)

    def reset(self, ctx: Terminal) -> None:
        """Throw the finished round away and start over."""
        final_score = self.state.score
        self.state = self._new_state()
        self.games_played += 1
        ctx.cls()
        logger.info(
            f"Restarted (game #{self.games_played}); previous score {final_score}, "
            f"food at {self.state.food}"
        )

    def tick(self, ctx: Terminal) -> None:
        """
        Run one frame:
          1) Quit wins over everything
          2) If the game is over, show the prompt and wait for SPACE
          3) Otherwise take the direction input (every frame, so turns
             between steps are not lost)
          4) Skip the rest until MOVE_INTERVAL has passed since the last step
          5) Draw score and food, move the snake, check collision and food
        """
        key = ctx.key

        if key == QUIT:
            logger.info(f"Quit requested with score {self.state.score}")
            ctx.quit()
            return

        if self.state.game_over:
            if key == SPACE:
                self.reset(ctx)
            else:
                self.draw_game_over(ctx)
            return

        if key in VALID_MOVES:
            self.steer(key)

        now = self.clock()
        if now - self.state.last_move < self.move_interval:
            return
        self.state.last_move = now

        ctx.print(0, 0, f"Score: {self.state.score}")
        ctx.print(self.state.food[0], self.state.food[1], FOOD_GLYPH)

        self.advance_snake(ctx)
        if self.state.game_over:
            return

        self.check_food()

    def steer(self, direction: str) -> None:
        snake = self.state.snake
        if not snake.steer(direction):
            logger.debug(f"Ignored {direction}: snake is heading {snake.head.direction}")

    def advance_snake(self, ctx: Terminal) -> None:
        """
        Move every segment one cell, then either end the game on
        self-collision or pass directions one segment down the body.
        """
        state = self.state
        snake = state.snake

        for segment in snake.segments:
            x, y = segment.position
            ctx.print(x, y, EMPTY_GLYPH)
            segment.step(state.width, state.height)
            x, y = segment.position
            ctx.print(x, y, SNAKE_GLYPH)

        logger.debug(f"Head at {snake.head.position} heading {snake.head.direction}")

        if snake.hits_itself():
            state.game_over = True
            logger.info(f"Game over: ran into own body at {snake.head.position}, score {state.score}")
            return

        snake.propagate_directions()

    def check_food(self) -> None:
        state = self.state
        snake = state.snake

        # Departs from the growth rule on purpose: a snake that has not started
        # moving cannot eat, or food on the start cell would end the game next tick
        if snake.head.direction is None:
            return
        if snake.head.position != state.food:
            return

        eaten_at = state.food
        state.food = random_position(self.rng, state.width, state.height)
        segment = snake.grow(state.width, state.height)
        logger.info(
            f"Ate food at {eaten_at}; length {len(snake)}, new tail at {segment.position}, "
            f"next food at {state.food}"
        )

    def draw_game_over(self, ctx: Terminal) -> None:
        middle = self.height // 2
        ctx.print_centered(middle - 1, GAME_OVER_TEXT)
        ctx.print_centered(middle, f"Score: {self.state.score}")
        ctx.print_centered(middle + 1, RESTART_TEXT)
