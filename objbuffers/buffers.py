# objbuffers/buffers.py
"""Packing of converted meshes into GPU upload buffers (numpy)."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List

import numpy as np

from .errors import MAX_VERTICES, IndexRangeError
from .indexer import Vertex


class DrawType(Enum):
    TRIANGLES = "triangles"
    LINES = "lines"

    @property
    def group_size(self) -> int:
        return 3 if self is DrawType.TRIANGLES else 2


@dataclass(frozen=True)
class VertexLayout:
    attributes: tuple = ("position", "color")
    format: str = "3f 3f"
    stride_bytes: int = 24


VERTEX_LAYOUT = VertexLayout()


@dataclass(frozen=True)
class MeshBuffers:
    vertices: List[Vertex]
    indices: List[int]
    draw_type: DrawType
    layout: VertexLayout = VERTEX_LAYOUT

    @property
    def primitive_count(self) -> int:
        return len(self.indices) // self.draw_type.group_size

    def vertex_array(self) -> np.ndarray:
        """(n, 6) float32: x, y, z, then the 3 color components."""
        out = np.empty((len(self.vertices), 6), dtype=np.float32)
        for i, v in enumerate(self.vertices):
            out[i, :3] = v.position
            out[i, 3:] = v.color
        return out

    def index_array(self) -> np.ndarray:
        if len(self.vertices) > MAX_VERTICES:
            raise IndexRangeError(len(self.vertices))
        return np.asarray(self.indices, dtype=np.uint16)

    def vertex_bytes(self) -> bytes:
        return self.vertex_array().astype("<f4", copy=False).tobytes()

    def index_bytes(self) -> bytes:
        return self.index_array().astype("<u2", copy=False).tobytes()
