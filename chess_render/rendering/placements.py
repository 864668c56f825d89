"""
Piece Placements – literal, JSON and FEN sources
================================================

Every source is reduced to an ordered list of :class:`Placement` records.
Validation happens here, eagerly, so that a bad entry aborts the run
before the compositor touches the canvas.

JSON format::

    [
      {"color": "b", "square": "a1", "piece": "n"},
      {"color": "w", "square": "e4"}
    ]

``piece`` is optional and defaults to pawn.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Optional, Tuple

from chess_render.board.notation import (
    BOARD_SIZE,
    FILES,
    RANKS,
    Square,
    parse_square,
    split_notation,
)
from chess_render.errors import InvalidFenError, PlacementFileError
from chess_render.models.pieces import (
    CODE_TO_PIECE,
    PieceColor,
    PieceType,
    parse_color,
    parse_piece,
)

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class Placement:
    """One sprite to draw."""
    color: PieceColor
    piece: PieceType
    square: Square

    def __str__(self) -> str:
        return f"{self.color.code}{self.piece.code}@{self.square.name}"


def parse_placement(color: str, notation: str, piece: Optional[str] = None) -> Placement:
    """Build a :class:`Placement` from codes.

    *notation* is either a square (``"e4"``) or a piece-prefixed square
    (``"ne4"``).  An explicit *piece* argument takes the place of the
    prefix and is only allowed with a bare square.
    """
    prefix, square_part = split_notation(notation)
    if piece is not None and prefix:
        # "piece" given twice; let the square check reject the long form
        prefix, square_part = "", notation
    return Placement(
        color=parse_color(color),
        piece=parse_piece(piece if piece is not None else prefix),
        square=parse_square(square_part),
    )


def parse_placements(entries: Iterable[Tuple[str, str]]) -> List[Placement]:
    """Parse ``(color, notation)`` literals, preserving order."""
    return [parse_placement(color, notation) for color, notation in entries]


# ── JSON ───────────────────────────────────────────────────────────────

def load_placements(path: str | Path) -> List[Placement]:
    """Read placement records from a JSON file."""
    path = Path(path)
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError as exc:
        raise PlacementFileError(f"placements file not found: {str(path)!r}") from exc
    except OSError as exc:
        raise PlacementFileError(f"cannot read placements file {str(path)!r}: {exc}") from exc
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise PlacementFileError(f"invalid JSON in {str(path)!r}: {exc}") from exc

    if not isinstance(data, list):
        raise PlacementFileError(
            f"{str(path)!r} must contain a list of placement records"
        )

    placements: List[Placement] = []
    for i, record in enumerate(data):
        if not isinstance(record, dict) or "color" not in record or "square" not in record:
            raise PlacementFileError(
                f"record {i} in {str(path)!r} needs 'color' and 'square': {record!r}"
            )
        piece = record.get("piece")  # missing or null → pawn
        placements.append(
            parse_placement(
                str(record["color"]),
                str(record["square"]),
                piece="" if piece is None else str(piece),
            )
        )

    log.info("Loaded %d placements from %s", len(placements), path)
    return placements


# ── FEN ────────────────────────────────────────────────────────────────

def placements_from_fen(fen: str) -> List[Placement]:
    """Placements for the piece-placement field of a FEN string.

    Only the first whitespace-separated token is read; side to move,
    castling rights and clocks are ignored.  Ranks run 8 → 1, upper case
    is white.
    """
    fields = fen.split()
    if not fields:
        raise InvalidFenError(f"empty FEN: {fen!r}")

    rows = fields[0].split("/")
    if len(rows) != BOARD_SIZE:
        raise InvalidFenError(
            f"expected {BOARD_SIZE} ranks in {fields[0]!r}, got {len(rows)}"
        )

    placements: List[Placement] = []
    for row_idx, row_str in enumerate(rows):
        rank = BOARD_SIZE - row_idx
        file_idx = 0
        for ch in row_str:
            if ch in RANKS:
                file_idx += int(ch)
                continue
            if ch.lower() not in CODE_TO_PIECE or file_idx >= BOARD_SIZE:
                raise InvalidFenError(f"unexpected {ch!r} in rank {rank} of {fen!r}")
            color = PieceColor.WHITE if ch.isupper() else PieceColor.BLACK
            placements.append(
                Placement(
                    color=color,
                    piece=CODE_TO_PIECE[ch.lower()],
                    square=parse_square(f"{FILES[file_idx]}{rank}"),
                )
            )
            file_idx += 1
        if file_idx != BOARD_SIZE:
            raise InvalidFenError(
                f"rank {rank} of {fen!r} covers {file_idx} files (expected {BOARD_SIZE})"
            )

    return placements
