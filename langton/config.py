import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()


@dataclass(slots=True)
class Config:
    # --- Board ---
    BOARD_SIDE: int = int(os.getenv("BOARD_SIDE", 1024))  # cells per row/column
    # --- Driver ---
    STEP_LIMIT: int = int(os.getenv("STEP_LIMIT", 100_000))
    OUTPUT_DIR: str = os.getenv("OUTPUT_DIR", "out")
    IMAGE_NAME: str = os.getenv("IMAGE_NAME", "image.png")

    def __post_init__(self):
        # Rows are packed into whole bytes
        if self.BOARD_SIDE <= 0 or self.BOARD_SIDE % 8 != 0:
            raise ValueError("BOARD_SIDE must be a positive multiple of 8")
        if self.STEP_LIMIT < 0:
            raise ValueError("STEP_LIMIT must be non-negative")


config = Config()
