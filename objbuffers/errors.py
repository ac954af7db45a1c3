# objbuffers/errors.py
from __future__ import annotations

from typing import Optional

MAX_VERTICES = 1 << 16  # u16 index buffer


class ObjBuffersError(Exception):
    """Base class for conversion failures."""


class PolygonShapeError(ObjBuffersError, ValueError):
    def __init__(self, corner_count: int, polygon_index: Optional[int] = None) -> None:
        self.corner_count = corner_count
        self.polygon_index = polygon_index
        where = "" if polygon_index is None else f" (polygon {polygon_index})"
        super().__init__(
            f"Polygon is not a triangle or quad: {corner_count} corners{where}"
        )


class IndexRangeError(ObjBuffersError, OverflowError):
    def __init__(self, vertex_count: int) -> None:
        self.vertex_count = vertex_count
        super().__init__(
            f"{vertex_count} vertices do not fit a 16-bit index buffer (max {MAX_VERTICES})"
        )
