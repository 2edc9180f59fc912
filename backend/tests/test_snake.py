"""
Tests for the domain entities - Segment, Snake and GameState.
"""

import os
import random
import sys

import pytest

# Add backend to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from domain import Segment, Snake, GameState, UP, DOWN, LEFT, RIGHT
from domain.constants import START_POSITION, GRID_WIDTH, GRID_HEIGHT
from domain.snake import clamp, offset


class TestGridHelpers:
    """Tests for clamp and offset."""

    def test_clamp_keeps_cells_inside(self):
        """Cells already on the grid are unchanged."""
        assert clamp((3, 4), 10, 10) == (3, 4)

    def test_clamp_saturates_each_axis(self):
        """Out-of-range coordinates are pulled to the nearest edge."""
        assert clamp((-1, 12), 10, 10) == (0, 9)
        assert clamp((10, -5), 10, 10) == (9, 0)

    def test_offset_follows_screen_coordinates(self):
        """UP decreases y and DOWN increases it."""
        assert offset((5, 5), UP, 10, 10) == (5, 4)
        assert offset((5, 5), DOWN, 10, 10) == (5, 6)
        assert offset((5, 5), LEFT, 10, 10) == (4, 5)
        assert offset((5, 5), RIGHT, 10, 10) == (6, 5)

    def test_offset_stops_at_the_edge(self):
        """Moving off the grid leaves the position where it was."""
        assert offset((0, 0), UP, 10, 10) == (0, 0)
        assert offset((9, 9), RIGHT, 10, 10) == (9, 9)


class TestSegment:
    """Tests for the Segment class."""

    def test_new_segment_has_no_direction(self):
        """A segment starts without a pending direction."""
        segment = Segment((1, 2))
        assert segment.position == (1, 2)
        assert segment.direction is None

    def test_step_without_direction_stays_put(self):
        """A segment that has no direction does not move."""
        segment = Segment((1, 2))
        segment.step(10, 10)
        assert segment.position == (1, 2)

    def test_step_moves_one_cell(self):
        """step() moves in the stored direction."""
        segment = Segment((1, 2), RIGHT)
        segment.step(10, 10)
        assert segment.position == (2, 2)

    def test_segments_compare_by_value(self):
        """Two segments with the same cell and direction are equal."""
        assert Segment((1, 1), UP) == Segment((1, 1), UP)
        assert Segment((1, 1), UP) != Segment((1, 1), DOWN)


class TestSnake:
    """Tests for the Snake class."""

    def test_snake_needs_a_segment(self):
        """An empty snake is rejected."""
        with pytest.raises(ValueError):
            Snake([])

    def test_snake_at_builds_single_segment(self):
        """Snake.at gives one unmoved segment."""
        snake = Snake.at((4, 4))
        assert len(snake) == 1
        assert snake.head == Segment((4, 4))
        assert snake.head is snake.tail

    def test_positions_head_first(self):
        """positions lists the head first and the tail last."""
        snake = Snake([Segment((5, 5), UP), Segment((5, 6), UP)])
        assert snake.positions == [(5, 5), (5, 6)]

    def test_single_segment_accepts_any_direction(self):
        """A one-segment snake can reverse freely."""
        snake = Snake([Segment((5, 5), UP)])
        assert snake.steer(DOWN) is True
        assert snake.head.direction == DOWN

    def test_single_segment_accepts_first_direction(self):
        """The very first direction is always taken."""
        snake = Snake.at((5, 5))
        for direction in (UP, DOWN, LEFT, RIGHT):
            assert snake.steer(direction) is True
            assert snake.head.direction == direction

    @pytest.mark.parametrize("current,opposite", [
        (UP, DOWN), (DOWN, UP), (LEFT, RIGHT), (RIGHT, LEFT),
    ])
    def test_long_snake_refuses_reversal(self, current, opposite):
        """A longer snake ignores a turn straight back into its neck."""
        snake = Snake([Segment((5, 5), current), Segment((6, 6), current)])
        assert snake.steer(opposite) is False
        assert snake.head.direction == current

    def test_long_snake_accepts_perpendicular_turn(self):
        """Turning 90 degrees is allowed."""
        snake = Snake([Segment((5, 5), UP), Segment((5, 6), UP)])
        assert snake.steer(LEFT) is True
        assert snake.head.direction == LEFT

    def test_hits_itself(self):
        """Only the head meeting another segment counts as a collision."""
        snake = Snake([Segment((1, 1)), Segment((2, 1)), Segment((1, 1))])
        assert snake.hits_itself() is True

        snake = Snake([Segment((1, 1)), Segment((2, 1)), Segment((2, 1))])
        assert snake.hits_itself() is False

    def test_propagate_uses_previous_directions(self):
        """Each segment takes the old direction of the one ahead of it."""
        snake = Snake([
            Segment((5, 5), LEFT),
            Segment((6, 5), UP),
            Segment((6, 6), RIGHT),
        ])
        snake.propagate_directions()
        assert [s.direction for s in snake.segments] == [LEFT, LEFT, UP]

    def test_grow_behind_tail(self):
        """The new segment sits opposite to the tail's heading."""
        cases = {UP: (5, 6), DOWN: (5, 4), LEFT: (6, 5), RIGHT: (4, 5)}
        for direction, expected in cases.items():
            snake = Snake([Segment((5, 5), direction)])
            segment = snake.grow(10, 10)
            assert segment.position == expected
            assert segment.direction == direction
            assert snake.tail is segment
            assert len(snake) == 2

    def test_grow_is_clamped(self):
        """Growth at the edge stays on the grid."""
        snake = Snake([Segment((0, 5), RIGHT)])
        segment = snake.grow(10, 10)
        assert segment.position == (0, 5)


class TestGameState:
    """Tests for the GameState class."""

    def test_initial_state(self):
        """The initial state has one unmoved segment at the start cell."""
        state = GameState.initial(12.5, random.Random(1))
        assert state.snake.positions == [START_POSITION]
        assert state.snake.head.direction is None
        assert state.last_move == 12.5
        assert state.game_over is False
        assert state.width == GRID_WIDTH
        assert state.height == GRID_HEIGHT
        assert state.score == 1

    def test_initial_food_on_grid(self):
        """Food is placed somewhere on the board."""
        rng = random.Random(7)
        for _ in range(200):
            state = GameState.initial(0.0, rng, 8, 6)
            x, y = state.food
            assert 0 <= x < 8 and 0 <= y < 6

    def test_initial_start_fits_small_boards(self):
        """On a board smaller than the start cell the snake starts at the corner."""
        state = GameState.initial(0.0, random.Random(1), 10, 10)
        assert state.snake.head.position == (9, 9)

    def test_board_must_have_cells(self):
        """A zero-sized board is rejected."""
        with pytest.raises(ValueError):
            GameState(Snake.at((0, 0)), (0, 0), 0.0, width=0, height=10)

    def test_repr(self):
        """repr shows food and the over flag."""
        state = GameState(Snake.at((1, 1)), (2, 3), 0.0, 5, 5)
        assert "food=(2, 3)" in repr(state)
        assert "game_over=False" in repr(state)
