"""
Notation Translator
===================

Converts algebraic square names (``"a1"``, ``"E4"``) to pixel rectangles
on the output canvas.

The image is drawn top-down while rank 1 sits at the bottom of the board,
so ranks are inverted: rank 1 → row 7, rank 8 → row 0.  Sprites are
centred in their square by ``(square_size - sprite_size) // 2`` pixels of
padding on each side.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from chess_render.errors import InvalidNotationError, InvalidNotationLengthError
from chess_render.models.geometry import Rect

BOARD_SIZE: int = 8
FILES: tuple[str, ...] = ("a", "b", "c", "d", "e", "f", "g", "h")
RANKS: tuple[str, ...] = ("1", "2", "3", "4", "5", "6", "7", "8")

DEFAULT_SPRITE_SIZE: int = 60


@dataclass(frozen=True)
class Square:
    """A validated board square."""
    file: int                  # 0–7 → a–h
    rank: int                  # 1–8

    @property
    def row(self) -> int:
        """Row on the image, counted from the top (rank 8 → 0)."""
        return BOARD_SIZE - self.rank

    @property
    def index(self) -> int:
        """Board Colorer index (column-major from the top-left)."""
        return self.file * BOARD_SIZE + self.row

    @property
    def name(self) -> str:
        return f"{FILES[self.file]}{self.rank}"


def parse_square(notation: str) -> Square:
    """Validate a two-character square name and return its :class:`Square`."""
    if len(notation) != 2:
        raise InvalidNotationLengthError(
            f"wrong square notation format {notation!r}, expected format \"b7\""
        )

    normalized = notation.lower()
    file_char, rank_char = normalized[0], normalized[1]
    if file_char not in FILES or rank_char not in RANKS:
        raise InvalidNotationError(
            f"wrong square notation {normalized!r}, rank/file not found"
        )

    return Square(file=FILES.index(file_char), rank=RANKS.index(rank_char) + 1)


def split_notation(text: str) -> Tuple[str, str]:
    """Split ``"na1"`` into ``("n", "a1")``.

    Two-character input has no piece prefix and yields ``("", text)``.
    Any other length is returned untouched as the square part so that
    :func:`parse_square` reports it.
    """
    if len(text) == 3:
        return text[0], text[1:]
    return "", text


def square_rect(
    notation: str,
    square_pixel_size: int,
    sprite_size: int = DEFAULT_SPRITE_SIZE,
) -> Rect:
    """Destination rectangle for a sprite centred on *notation*.

    Assumes ``square_pixel_size >= sprite_size``; :class:`RenderConfig`
    enforces this before rendering starts.
    """
    square = parse_square(notation)
    padding = (square_pixel_size - sprite_size) // 2
    return Rect.from_origin(
        square.file * square_pixel_size + padding,
        square.row * square_pixel_size + padding,
        sprite_size,
        sprite_size,
    )


def square_bounds(square_index: int, square_pixel_size: int) -> Rect:
    """Full pixel block covered by the square at *square_index*."""
    file, row = divmod(square_index, BOARD_SIZE)
    return Rect.from_origin(
        file * square_pixel_size,
        row * square_pixel_size,
        square_pixel_size,
        square_pixel_size,
    )
