"""
Piece & Colour Catalogs
=======================

The sprite sheet is a fixed 6×2 grid.  The enum *value* of each member is
its ordinal in that grid:

  column  0 queen   1 king   2 rook   3 knight   4 bishop   5 pawn
  row     0 black   1 white

Parsing is case-insensitive.  An empty piece code means pawn; an empty
colour code is rejected.
"""

from __future__ import annotations

from enum import Enum

from chess_render.errors import InvalidColorError, InvalidPieceError


class PieceType(Enum):
    QUEEN = 0
    KING = 1
    ROOK = 2
    KNIGHT = 3
    BISHOP = 4
    PAWN = 5

    @property
    def code(self) -> str:
        return PIECE_CODES[self.value]


class PieceColor(Enum):
    BLACK = 0
    WHITE = 1

    @property
    def code(self) -> str:
        return COLOR_CODES[self.value]


# ── Canonical code order (index ↔ enum value) ─────────────────────────

PIECE_CODES: tuple[str, ...] = ("q", "k", "r", "n", "b", "p")
COLOR_CODES: tuple[str, ...] = ("b", "w")

CODE_TO_PIECE: dict[str, PieceType] = {
    code: PieceType(idx) for idx, code in enumerate(PIECE_CODES)
}
CODE_TO_COLOR: dict[str, PieceColor] = {
    code: PieceColor(idx) for idx, code in enumerate(COLOR_CODES)
}

SHEET_COLUMNS: int = len(PIECE_CODES)
SHEET_ROWS: int = len(COLOR_CODES)


def parse_piece(code: str) -> PieceType:
    """Return the :class:`PieceType` for a one-letter code (``""`` → pawn)."""
    normalized = code.lower()
    if normalized == "":
        return PieceType.PAWN
    if len(normalized) > 1 or normalized not in CODE_TO_PIECE:
        raise InvalidPieceError(f"invalid piece: {normalized!r}")
    return CODE_TO_PIECE[normalized]


def parse_color(code: str) -> PieceColor:
    """Return the :class:`PieceColor` for ``"b"`` / ``"w"`` (any case)."""
    normalized = code.lower()
    if len(normalized) != 1 or normalized not in CODE_TO_COLOR:
        raise InvalidColorError(f"invalid color: {normalized!r}")
    return CODE_TO_COLOR[normalized]
