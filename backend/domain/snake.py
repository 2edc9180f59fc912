"""
Snake entity for the game engine.
"""

from typing import List, Optional, Tuple

from .constants import DELTAS, OPPOSITE

Position = Tuple[int, int]


def clamp(position: Position, width: int, height: int) -> Position:
    """Pull a position back onto the grid (no wrapping)."""
    x, y = position
    return (min(max(x, 0), width - 1), min(max(y, 0), height - 1))


def offset(position: Position, direction: str, width: int, height: int) -> Position:
    """Return the neighbouring cell in `direction`, clamped to the grid."""
    dx, dy = DELTAS[direction]
    return clamp((position[0] + dx, position[1] + dy), width, height)


class Segment:
    """
    One unit of the snake.

    Attributes:
        position: (x, y) cell the segment occupies
        direction: direction applied on the next step, None until the
            player has pressed a direction
    """

    def __init__(self, position: Position, direction: Optional[str] = None):
        self.position = position
        self.direction = direction

    def step(self, width: int, height: int) -> None:
        if self.direction is None:
            return
        self.position = offset(self.position, self.direction, width, height)

    def __eq__(self, other):
        if not isinstance(other, Segment):
            return NotImplemented
        return (self.position, self.direction) == (other.position, other.direction)

    def __repr__(self):
        return f"Segment({self.position}, {self.direction})"


class Snake:
    """
    Represents the snake on the board.

    Attributes:
        segments: list of Segment from head at index 0 to tail at the end
    """

    def __init__(self, segments: List[Segment]):
        if not segments:
            raise ValueError("A snake needs at least one segment.")
        self.segments = list(segments)

    @classmethod
    def at(cls, position: Position) -> "Snake":
        """A fresh single-segment snake that has not started moving."""
        return cls([Segment(position)])

    @property
    def head(self) -> Segment:
        """Return the head segment (first element)."""
        return self.segments[0]

    @property
    def tail(self) -> Segment:
        return self.segments[-1]

    @property
    def positions(self) -> List[Position]:
        return [segment.position for segment in self.segments]

    def __len__(self):
        return len(self.segments)

    def steer(self, direction: str) -> bool:
        """
        Set the head's pending direction.

        A single segment accepts any direction. A longer snake refuses to
        reverse into its own neck, leaving the pending direction unchanged.

        Returns:
            True if the direction was accepted
        """
        current = self.head.direction
        if len(self.segments) > 1 and current is not None and OPPOSITE[direction] == current:
            return False
        self.head.direction = direction
        return True

    def hits_itself(self) -> bool:
        """True when the head shares a cell with any other segment."""
        head = self.head.position
        return any(segment.position == head for segment in self.segments[1:])

    def propagate_directions(self) -> None:
        """
        Hand each segment the direction of the segment ahead of it.

        Walks tail to head so every segment reads its leader's direction
        before the leader is overwritten.
        """
        for i in range(len(self.segments) - 1, 0, -1):
            self.segments[i].direction = self.segments[i - 1].direction

    def grow(self, width: int, height: int) -> Segment:
        """
        Append a segment behind the tail, opposite to the tail's heading.

        The new segment inherits the tail's direction so it follows the same
        path on the next step.
        """
        tail = self.tail
        if tail.direction is None:
            position = tail.position
        else:
            position = offset(tail.position, OPPOSITE[tail.direction], width, height)
        segment = Segment(position, tail.direction)
        self.segments.append(segment)
        return segment

    def __repr__(self):
        return f"<Snake length={len(self.segments)}, head={self.head.position}>"
