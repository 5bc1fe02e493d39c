from dataclasses import dataclass, field

from .config import config
from .types import Direction, Position


@dataclass(slots=True)
class Ant:
    """Position and heading of the ant. Movement rules live in Game."""

    direction: Direction = Direction.UP
    pos: Position = field(
        default_factory=lambda: (config.BOARD_SIDE // 2, config.BOARD_SIDE // 2)
    )

    @classmethod
    def centered(cls, side: int) -> "Ant":
        return cls(direction=Direction.UP, pos=(side // 2, side // 2))

    def rotate_cw(self) -> None:
        self.direction = self.direction.rotate_cw()

    def rotate_ccw(self) -> None:
        self.direction = self.direction.rotate_ccw()
