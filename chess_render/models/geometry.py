"""Pixel rectangles shared by the sprite locator and notation translator."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class Rect:
    """Axis-aligned pixel region ``(x0, y0)-(x1, y1)``.

    The max edge is exclusive, matching Pillow boxes and numpy slices, so
    ``Rect(60, 60, 120, 120)`` covers a 60×60 block.
    """
    x0: int
    y0: int
    x1: int
    y1: int

    @classmethod
    def from_origin(cls, x: int, y: int, width: int, height: int) -> "Rect":
        return cls(x, y, x + width, y + height)

    @property
    def width(self) -> int:
        return self.x1 - self.x0

    @property
    def height(self) -> int:
        return self.y1 - self.y0

    @property
    def origin(self) -> Tuple[int, int]:
        return (self.x0, self.y0)

    @property
    def box(self) -> Tuple[int, int, int, int]:
        """Pillow-style ``(left, upper, right, lower)`` box."""
        return (self.x0, self.y0, self.x1, self.y1)

    def __str__(self) -> str:
        return f"({self.x0},{self.y0})-({self.x1},{self.y1})"
