from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np

from .config import config
from .types import Color, Position


@dataclass(slots=True)
class Board:
    """Fixed-size two-color grid stored as a packed bitmap.

    Rows are packed into ``side // 8`` bytes each, most significant bit first,
    row-major. A set bit is a White cell, a cleared bit a Black one, which is
    the raw layout of a 1-bit grayscale image.
    """

    side: int = config.BOARD_SIDE
    cells: bytearray = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.side <= 0 or self.side % 8 != 0:
            raise ValueError(
                f"Board side must be a positive multiple of 8, got {self.side}"
            )
        self.cells = bytearray(b"\xff" * (self.side * self.side // 8))

    @property
    def row_bytes(self) -> int:
        return self.side // 8

    # --- Addressing ---
    def offset(self, pos: Position) -> int:
        """Index of the byte holding ``pos``."""
        return (pos[1] - 1) * self.row_bytes + (pos[0] - 1) // 8

    def bitshift(self, pos: Position) -> int:
        """Bit index of ``pos`` inside its byte, counted from the LSB."""
        return 7 - ((pos[0] - 1) % 8)

    def inbound(self, pos: Position) -> bool:
        return 1 <= pos[0] <= self.side and 1 <= pos[1] <= self.side

    def center(self) -> Position:
        return (self.side // 2, self.side // 2)

    def _check(self, pos: Position) -> None:
        if not self.inbound(pos):
            raise IndexError(f"Position {pos} is outside a {self.side}x{self.side} board")

    # --- Cells ---
    def get_color(self, pos: Position) -> Color:
        self._check(pos)
        block = self.cells[self.offset(pos)]
        return Color((block >> self.bitshift(pos)) & 1)

    def set_color(self, pos: Position, color: Color) -> None:
        self._check(pos)
        offset = self.offset(pos)
        mask = 1 << self.bitshift(pos)
        if color == Color.WHITE:
            self.cells[offset] |= mask
        else:
            self.cells[offset] &= ~mask & 0xFF

    # --- Bulk views ---
    def export_bits(self) -> bytes:
        """Snapshot of the packed buffer, ready for a 1-bit image encoder."""
        return bytes(self.cells)

    def to_array(self) -> np.ndarray:
        """Return a (side, side) uint8 array of Color values indexed [y-1, x-1]."""
        packed = np.frombuffer(self.cells, dtype=np.uint8)
        return np.unpackbits(packed).reshape(self.side, self.side)

    def count_black(self) -> int:
        """Number of Black cells, by full scan."""
        packed = np.frombuffer(self.cells, dtype=np.uint8)
        return self.side * self.side - int(np.unpackbits(packed).sum())
