"""
Error types raised while rendering a board.

Every failure is fatal for the run; the CLI is the only place these are
caught.  Each class also derives from the closest builtin so callers that
only know about ``ValueError`` / ``FileNotFoundError`` still work.
"""

from __future__ import annotations


class ChessRenderError(Exception):
    """Base class for all renderer errors."""


# ── Sprite sheet I/O ──────────────────────────────────────────────────

class SpriteSheetNotFoundError(ChessRenderError, FileNotFoundError):
    """The sprite-sheet file does not exist."""


class SpriteSheetDecodeError(ChessRenderError, ValueError):
    """The sprite sheet could not be decoded or has the wrong layout."""


class OutputWriteError(ChessRenderError, OSError):
    """The output PNG could not be created or written."""


# ── Piece / square validation ─────────────────────────────────────────

class InvalidPieceError(ChessRenderError, ValueError):
    """Unknown piece code."""


class InvalidColorError(ChessRenderError, ValueError):
    """Unknown colour code."""


class InvalidNotationLengthError(ChessRenderError, ValueError):
    """Square notation is not exactly two characters."""


class InvalidNotationError(ChessRenderError, ValueError):
    """Square notation names a file or rank outside the board."""


# ── Configuration / placement sources ─────────────────────────────────

class ConfigError(ChessRenderError, ValueError):
    """Inconsistent render configuration."""


class PlacementFileError(ChessRenderError, ValueError):
    """A placements JSON file is missing or malformed."""


class InvalidFenError(ChessRenderError, ValueError):
    """A FEN piece-placement field could not be parsed."""
