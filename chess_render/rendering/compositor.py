"""
Compositor – board squares + piece sprites → RGBA canvas
=========================================================

Stages:
  1. Allocate a ``canvas_size × canvas_size`` RGBA buffer.
  2. Fill each of the 64 squares with its Board Colorer colour.  Filling
     whole blocks gives the same pixels as colouring every ``(x, y)`` with
     ``color_of((x // sq) * 8 + (y // sq))``.
  3. Resolve every placement to a source / destination rectangle, then
     alpha-composite ("over") each sprite onto the canvas.

Nothing is written to disk here; see :func:`save_png`.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List, Tuple

import numpy as np
from PIL import Image

from chess_render.board.colors import color_of
from chess_render.board.notation import square_bounds, square_rect
from chess_render.config import RenderConfig
from chess_render.errors import OutputWriteError
from chess_render.models.geometry import Rect
from chess_render.rendering.placements import Placement
from chess_render.sprites.locator import cell_rect
from chess_render.sprites.sheet import SpriteSheet

log = logging.getLogger(__name__)


def paint_board(canvas_size: int, board_size: int) -> np.ndarray:
    """Return an ``(H, W, 4)`` uint8 array holding the bare checkerboard."""
    square_size = canvas_size // board_size
    canvas = np.zeros((canvas_size, canvas_size, 4), dtype=np.uint8)

    for square_index in range(board_size * board_size):
        block = square_bounds(square_index, square_size)
        canvas[block.y0:block.y1, block.x0:block.x1] = color_of(square_index)

    return canvas


def resolve_placements(
    placements: Iterable[Placement],
    config: RenderConfig,
) -> List[Tuple[Placement, Rect, Rect]]:
    """Map placements to ``(placement, source, destination)`` triples."""
    resolved: List[Tuple[Placement, Rect, Rect]] = []
    for placement in placements:
        src = cell_rect(placement.piece, placement.color, config.sprite_size)
        dst = square_rect(placement.square.name, config.square_size, config.sprite_size)
        resolved.append((placement, src, dst))
    return resolved


def render_board(
    config: RenderConfig,
    placements: Iterable[Placement],
    sheet: SpriteSheet | None = None,
) -> Image.Image:
    """Render the board described by *config* with *placements* on top.

    *sheet* may be ``None`` only when there is nothing to draw.
    """
    resolved = resolve_placements(placements, config)

    canvas = Image.fromarray(paint_board(config.canvas_size, config.board_size))
    if not resolved:
        return canvas
    if sheet is None:
        raise ValueError("a sprite sheet is required to draw pieces")

    for placement, src, dst in resolved:
        log.debug("Drawing %s: sheet %s → canvas %s", placement, src, dst)
        canvas.alpha_composite(sheet.sprite(src), dest=dst.origin)

    return canvas


def save_png(image: Image.Image, path: str | Path) -> Path:
    """Write *image* as PNG, replacing any existing file."""
    path = Path(path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        image.save(path, format="PNG")
    except OSError as exc:
        raise OutputWriteError(f"cannot write {str(path)!r}: {exc}") from exc
    return path
