"""
Sprite Sheet Loader
===================

Loads the piece sprite sheet once and hands out read-only numpy views of
individual cells.  The sheet is decoded to RGBA so every cell carries a
per-pixel alpha channel for compositing.

Expected layout (see :mod:`chess_render.models.pieces`)::

    +-------+-------+-------+--------+--------+------+
    | q (b) | k (b) | r (b) | n (b)  | b (b)  | p (b)|
    +-------+-------+-------+--------+--------+------+
    | q (w) | k (w) | r (w) | n (w)  | b (w)  | p (w)|
    +-------+-------+-------+--------+--------+------+
"""

from __future__ import annotations

import logging
from pathlib import Path

import numpy as np
from PIL import Image, UnidentifiedImageError

from chess_render.errors import SpriteSheetDecodeError, SpriteSheetNotFoundError
from chess_render.models.geometry import Rect
from chess_render.models.pieces import SHEET_COLUMNS, SHEET_ROWS
from chess_render.sprites.locator import SPRITE_SIZE

log = logging.getLogger(__name__)


class SpriteSheet:
    """Decoded sprite sheet held as an immutable ``(H, W, 4)`` uint8 array."""

    def __init__(self, pixels: np.ndarray, sprite_size: int = SPRITE_SIZE) -> None:
        if pixels.ndim != 3 or pixels.shape[2] != 4:
            raise SpriteSheetDecodeError(
                f"sprite sheet must be RGBA, got array of shape {pixels.shape}"
            )
        height, width = pixels.shape[:2]
        need_w, need_h = SHEET_COLUMNS * sprite_size, SHEET_ROWS * sprite_size
        if width < need_w or height < need_h:
            raise SpriteSheetDecodeError(
                f"sprite sheet is {width}x{height}, "
                f"expected at least {need_w}x{need_h} for {sprite_size}px cells"
            )

        self._pixels = pixels
        self._pixels.flags.writeable = False
        self.sprite_size = sprite_size

    @classmethod
    def load(cls, path: str | Path, sprite_size: int = SPRITE_SIZE) -> "SpriteSheet":
        """Open and decode *path*.

        Raises :class:`SpriteSheetNotFoundError` when the file is missing and
        :class:`SpriteSheetDecodeError` when it is not a usable image.
        """
        path = Path(path)
        try:
            with Image.open(path) as img:
                rgba = img.convert("RGBA")
        except FileNotFoundError as exc:
            raise SpriteSheetNotFoundError(f"cannot read file {str(path)!r}: {exc}") from exc
        except (UnidentifiedImageError, Image.DecompressionBombError, OSError) as exc:
            raise SpriteSheetDecodeError(f"cannot decode file {str(path)!r}: {exc}") from exc

        log.debug("Loaded sprite sheet %s (%dx%d)", path, rgba.width, rgba.height)
        return cls(np.array(rgba, dtype=np.uint8), sprite_size=sprite_size)

    @property
    def size(self) -> tuple[int, int]:
        """``(width, height)`` in pixels."""
        return self._pixels.shape[1], self._pixels.shape[0]

    def region(self, rect: Rect) -> np.ndarray:
        """Read-only ``(h, w, 4)`` view of *rect*."""
        width, height = self.size
        if rect.x0 < 0 or rect.y0 < 0 or rect.x1 > width or rect.y1 > height:
            raise ValueError(f"region {rect} lies outside the {width}x{height} sheet")
        return self._pixels[rect.y0:rect.y1, rect.x0:rect.x1]

    def sprite(self, rect: Rect) -> Image.Image:
        """Cell at *rect* as a standalone RGBA Pillow image."""
        return Image.fromarray(np.ascontiguousarray(self.region(rect)))
