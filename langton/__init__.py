"""
Langton's Ant
A bounded, bit-packed simulation of Langton's Ant.
"""

from .ant import Ant
from .board import Board
from .config import config
from .game import Game
from .types import Color, Direction, Position, StepOutcome

__all__ = [
    "Ant",
    "Board",
    "Color",
    "config",
    "Direction",
    "Game",
    "Position",
    "StepOutcome",
]
