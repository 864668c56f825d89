"""
Render configuration.

Module constants hold the stock values; :class:`RenderConfig` bundles them
for one run and checks that they fit together before any pixel is drawn.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Tuple

from chess_render.board.notation import BOARD_SIZE
from chess_render.errors import ConfigError
from chess_render.sprites.locator import SPRITE_SIZE

CANVAS_SIZE: int = 640
SPRITE_SHEET: str = "ChessPiecesArray.png"
OUTPUT_PATH: str = "image.png"

# (color, [piece]square) literals drawn when nothing else is requested.
DEFAULT_PLACEMENTS: Tuple[Tuple[str, str], ...] = (
    ("b", "na1"),
)


@dataclass(frozen=True)
class RenderConfig:
    """Parameters for a single render.

    Parameters
    ----------
    canvas_size : int
        Edge of the square output image in pixels; a multiple of 8.
    board_size : int
        Squares per side.  Only 8 is supported.
    sprite_size : int
        Edge of one sprite-sheet cell.
    sprite_sheet, output_path : Path
        Input sheet and output PNG.
    placements : list[tuple[str, str]]
        ``(color, notation)`` pairs; notation may carry a piece prefix.
    """
    canvas_size: int = CANVAS_SIZE
    board_size: int = BOARD_SIZE
    sprite_size: int = SPRITE_SIZE
    sprite_sheet: Path = Path(SPRITE_SHEET)
    output_path: Path = Path(OUTPUT_PATH)
    placements: List[Tuple[str, str]] = field(
        default_factory=lambda: list(DEFAULT_PLACEMENTS)
    )

    def __post_init__(self) -> None:
        if self.board_size != BOARD_SIZE:
            raise ConfigError(
                f"board size must be {BOARD_SIZE}, got {self.board_size}"
            )
        if self.canvas_size <= 0 or self.canvas_size % self.board_size:
            raise ConfigError(
                f"canvas size {self.canvas_size} is not a positive multiple "
                f"of the board size {self.board_size}"
            )
        if self.sprite_size <= 0:
            raise ConfigError(f"sprite size must be positive, got {self.sprite_size}")
        if self.square_size < self.sprite_size:
            raise ConfigError(
                f"square size {self.square_size}px is smaller than the "
                f"{self.sprite_size}px sprite cell"
            )

    @property
    def square_size(self) -> int:
        return self.canvas_size // self.board_size

    @property
    def padding(self) -> int:
        return (self.square_size - self.sprite_size) // 2
