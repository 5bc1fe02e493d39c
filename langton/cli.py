import argparse
import os
import time
from typing import Optional, Sequence

from loguru import logger

from .ant import Ant
from .board import Board
from .config import config
from .game import Game
from .image import write_png
from .types import StepOutcome


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Run Langton's Ant and save the board as a PNG"
    )
    parser.add_argument(
        "--steps",
        type=int,
        default=config.STEP_LIMIT,
        help="Maximum number of steps to play",
    )
    parser.add_argument(
        "--side",
        type=int,
        default=config.BOARD_SIDE,
        help="Board side length in cells (multiple of 8)",
    )
    parser.add_argument("--output-dir", type=str, default=config.OUTPUT_DIR)
    parser.add_argument("--image-name", type=str, default=config.IMAGE_NAME)
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    logger.info(f"Playing up to {args.steps} steps on a {args.side}x{args.side} board")

    board = Board(side=args.side)
    game = Game(board, Ant.centered(args.side))
    start_time = time.time()
    outcome = game.play(args.steps)
    elapsed = time.time() - start_time
    if outcome is StepOutcome.HALTED:
        logger.info(f"Stopped early: the ant reached the edge at step {game.age}")
    logger.info(f"Simulation time: {elapsed:.2f} seconds")

    path = write_png(game.board, os.path.join(args.output_dir, args.image_name))

    print(
        f"The game finished in {game.age} iterations with {game.black_count} black cells."
    )
    print(f"See {path} for the path image.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
