"""Geometric primitives used throughout the engine."""

from __future__ import annotations
from pydantic import BaseModel


class Bounds(BaseModel):
    """Axis-aligned rectangle on the plan (origin top-left)."""
    x: float
    y: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height


class BoundingBox(BaseModel):
    """Extent enclosing a set of rectangles."""
    min_x: float
    min_y: float
    max_x: float
    max_y: float
    width: float
    height: float

    @classmethod
    def from_extents(
        cls, min_x: float, min_y: float, max_x: float, max_y: float,
    ) -> BoundingBox:
        return cls(
            min_x=min_x, min_y=min_y, max_x=max_x, max_y=max_y,
            width=max_x - min_x,
            height=max_y - min_y,
        )
