from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from loguru import logger

from .ant import Ant
from .board import Board
from .types import Color, Position, StepOutcome


@dataclass(slots=True)
class Game:
    board: Board
    ant: Ant
    age: int = 0  # steps attempted, including a final one that hit the edge
    black_count: int = 0

    def __post_init__(self) -> None:
        if not self.board.inbound(self.ant.pos):
            raise ValueError(
                f"Ant position {self.ant.pos} is outside a "
                f"{self.board.side}x{self.board.side} board"
            )

    def next_cell_pos(self) -> Optional[Position]:
        """Cell in front of the ant, or None when that would leave the board."""
        dx, dy = self.ant.direction.delta
        new_pos = (self.ant.pos[0] + dx, self.ant.pos[1] + dy)
        return new_pos if self.board.inbound(new_pos) else None

    def step(self) -> StepOutcome:
        """Move the ant one cell, flip that cell and turn.

        White cells turn the ant clockwise and become Black; Black cells turn
        it counter-clockwise and become White. ``age`` is bumped before the
        bounds check, so a step that halts still counts.
        """
        self.age += 1
        next_pos = self.next_cell_pos()
        if next_pos is None:
            logger.debug(
                f"Ant at {self.ant.pos} facing {self.ant.direction.name} hit the edge"
            )
            return StepOutcome.HALTED

        next_color = self.board.get_color(next_pos)
        self.ant.pos = next_pos
        if next_color == Color.WHITE:
            self.ant.rotate_cw()
            self.board.set_color(next_pos, Color.BLACK)
            self.black_count += 1
        else:
            self.ant.rotate_ccw()
            self.board.set_color(next_pos, Color.WHITE)
            self.black_count -= 1
        return StepOutcome.CONTINUED

    def play(self, step_limit: int) -> StepOutcome:
        """Step up to ``step_limit`` times, stopping when the ant leaves the board."""
        if step_limit < 0:
            raise ValueError(f"step_limit must be non-negative, got {step_limit}")
        for _ in range(step_limit):
            if self.step() is StepOutcome.HALTED:
                logger.info(
                    f"Ant left the board after {self.age} steps "
                    f"({self.black_count} black cells)"
                )
                return StepOutcome.HALTED
        return StepOutcome.CONTINUED
