from __future__ import annotations

from enum import Enum, IntEnum
from typing import Tuple

Position = Tuple[int, int]  # (x, y), 1-based


class Color(IntEnum):
    # Value is the bit stored on the board
    BLACK = 0
    WHITE = 1


class Direction(IntEnum):
    # Clockwise order
    UP = 0
    RIGHT = 1
    DOWN = 2
    LEFT = 3

    def rotate_cw(self) -> "Direction":
        return Direction((self + 1) % 4)

    def rotate_ccw(self) -> "Direction":
        return Direction((self - 1) % 4)

    @property
    def delta(self) -> Position:
        """(dx, dy) of a single move; y grows downwards."""
        return _DELTAS[self]


_DELTAS = {
    Direction.UP: (0, -1),
    Direction.RIGHT: (1, 0),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
}


class StepOutcome(Enum):
    CONTINUED = "continued"
    HALTED = "halted"  # the ant would have left the board
