"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

from pathlib import Path

import numpy as np
import pytest
from PIL import Image

SPRITE = 60
TRANSPARENT_CORNER = 10  # top-left pixels of every cell with alpha 0


def cell_color(column: int, row: int) -> tuple[int, int, int, int]:
    """Opaque fill used for the synthetic sheet cell at (column, row)."""
    return (column * 40, 50 + row * 100, 200, 255)


def make_sheet_array(sprite: int = SPRITE) -> np.ndarray:
    sheet = np.zeros((2 * sprite, 6 * sprite, 4), dtype=np.uint8)
    for row in range(2):
        for column in range(6):
            y0, x0 = row * sprite, column * sprite
            sheet[y0:y0 + sprite, x0:x0 + sprite] = cell_color(column, row)
            sheet[y0:y0 + TRANSPARENT_CORNER, x0:x0 + TRANSPARENT_CORNER] = (0, 0, 0, 0)
    return sheet


@pytest.fixture
def sheet_path(tmp_path: Path) -> Path:
    """A 360×120 sprite sheet whose cells are flat, distinguishable colours."""
    path = tmp_path / "ChessPiecesArray.png"
    Image.fromarray(make_sheet_array()).save(path)
    return path
