from __future__ import annotations

from pathlib import Path

from loguru import logger
from PIL import Image

from .board import Board


def board_to_image(board: Board) -> Image.Image:
    # Pillow's "1" mode uses the same MSB-first, 1=white packing as the board
    return Image.frombytes("1", (board.side, board.side), board.export_bits())


def write_png(board: Board, path: str | Path) -> Path:
    """Save the board as a 1-bit grayscale PNG, creating parent directories."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    board_to_image(board).save(path, format="PNG")
    logger.info(f"Wrote {board.side}x{board.side} board image to {path}")
    return path
