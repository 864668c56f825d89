"""
Board Colorer
=============

Square colours come from a fixed 32-bit mask rather than a parity rule.
Squares are indexed column-major from the top-left of the image
(``index = file * 8 + row``, row 0 = rank 8), so 32 bits cover four full
files and the pattern repeats for the other half of the board.
"""

from __future__ import annotations

from typing import Tuple

Color = Tuple[int, int, int, int]

# Set bit → dark square.
COLOR_BITBOARD: int = 0xAA55AA55
PATTERN_PERIOD: int = 32

PURPLE: Color = (0x71, 0x03, 0x8A, 0xFF)
WHITE: Color = (0xFF, 0xFF, 0xFF, 0xFF)

DARK: Color = PURPLE
LIGHT: Color = WHITE


def is_dark(square_index: int) -> bool:
    """Return ``True`` when the mask bit for *square_index* is set."""
    if square_index < 0:
        raise ValueError(f"square index must be non-negative, got {square_index}")
    return (COLOR_BITBOARD >> (square_index % PATTERN_PERIOD)) & 1 == 1


def color_of(square_index: int) -> Color:
    """RGBA colour of the square at *square_index*."""
    return DARK if is_dark(square_index) else LIGHT
