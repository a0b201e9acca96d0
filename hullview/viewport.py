"""
Mapping from device pixels to the normalized drawing space.

The shorter side of the drawing area spans [-1, 1]; the longer side spans
[-aspect, aspect] so that the unit square is never stretched.
"""
from __future__ import annotations

from typing import Tuple

from hullview.geometry import Point


class Viewport:
    def __init__(self, width: int, height: int):
        self.resize(width, height)

    def resize(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"Viewport size must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self.aspect_x = 1.0
        self.aspect_y = 1.0
        if width > height:
            self.aspect_x = float(width) / height
        else:
            self.aspect_y = float(height) / width

    def limits(self) -> Tuple[float, float, float, float]:
        return -self.aspect_x, self.aspect_x, -self.aspect_y, self.aspect_y

    def transform(self, px: float, py: float) -> Point:
        """Pixel position with the origin at the top-left corner -> normalized point."""
        return Point(
            (2.0 * px / self.width - 1.0) * self.aspect_x,
            -(2.0 * py / self.height - 1.0) * self.aspect_y,
        )
