"""Sprite Locator – piece / colour code → cell of the sprite sheet."""

from __future__ import annotations

from chess_render.models.geometry import Rect
from chess_render.models.pieces import PieceColor, PieceType, parse_color, parse_piece

SPRITE_SIZE: int = 60  # Cell edge in the stock ChessPiecesArray.png


def cell_rect(
    piece: PieceType,
    color: PieceColor,
    sprite_size: int = SPRITE_SIZE,
) -> Rect:
    """Rectangle of an already-parsed piece / colour pair."""
    return Rect.from_origin(
        piece.value * sprite_size,
        color.value * sprite_size,
        sprite_size,
        sprite_size,
    )


def sprite_rect(piece: str, color: str, sprite_size: int = SPRITE_SIZE) -> Rect:
    """Source rectangle for *piece* / *color* codes.

    >>> sprite_rect("k", "w")
    Rect(x0=60, y0=60, x1=120, y1=120)

    Raises :class:`InvalidPieceError` or :class:`InvalidColorError`.
    """
    return cell_rect(parse_piece(piece), parse_color(color), sprite_size)
