# objbuffers/rules.py
"""
Per-polygon emission rules.

Each rule receives the running index buffer and one polygon's deduplicated
corner indices (3 or 4 of them, in winding order) and appends to the buffer.
Anything other than a triangle or a quad raises ``PolygonShapeError``.
"""
from __future__ import annotations

from typing import Iterable, List, Optional, Sequence, Set, Tuple

from .config import QuadMode
from .errors import PolygonShapeError

Edge = Tuple[int, int]

# corner-slot pairs, walked in order
_TRI_EDGES: Tuple[Edge, ...] = ((0, 1), (1, 2), (2, 0))
_TESS_QUAD_EXTRA: Tuple[Edge, ...] = ((0, 2), (2, 3), (3, 0))
_KEEP_QUAD: Tuple[Edge, ...] = ((0, 1), (1, 2), (2, 3), (3, 0))


def check_shape(polygon_indices: Sequence[int], polygon_index: Optional[int] = None) -> int:
    n = len(polygon_indices)
    if n not in (3, 4):
        raise PolygonShapeError(n, polygon_index)
    return n


# ----------------
# Triangulation
# ----------------

def poly_triangles(indices: List[int], polygon_indices: Sequence[int],
                   polygon_index: Optional[int] = None) -> None:
    """Triangles verbatim; quads fan from corner 0: (0,1,2) then (0,2,3)."""
    n = check_shape(polygon_indices, polygon_index)
    c = polygon_indices
    if n == 3:
        indices.extend(c)
    else:
        indices.extend((c[0], c[1], c[2]))
        indices.extend((c[0], c[2], c[3]))


# ----------------
# Wireframe
# ----------------

class EdgeSet:
    """Undirected edge set stored as directed pairs.

    The first sighting of ``{a, b}`` records both ``(a, b)`` and ``(b, a)``,
    so a membership test needs no normalisation of the pair.
    """

    def __init__(self) -> None:
        self._pairs: Set[Edge] = set()

    def add(self, a: int, b: int) -> bool:
        """Record the edge; False when it was already present."""
        if (a, b) in self._pairs:
            return False
        self._pairs.add((a, b))
        self._pairs.add((b, a))
        return True

    def __contains__(self, edge: Edge) -> bool:
        return edge in self._pairs

    def __len__(self) -> int:
        # self-loops (a, a) occupy a single slot
        loops = sum(1 for a, b in self._pairs if a == b)
        return (len(self._pairs) - loops) // 2 + loops


def edge_slots(corner_count: int, quad_mode: QuadMode) -> Iterable[Edge]:
    if quad_mode is QuadMode.TESSELLATE:
        if corner_count == 4:
            return _TRI_EDGES + _TESS_QUAD_EXTRA
        return _TRI_EDGES
    if corner_count == 4:
        return _KEEP_QUAD
    return _TRI_EDGES


def poly_edges(indices: List[int], polygon_indices: Sequence[int], edges: EdgeSet,
               quad_mode: QuadMode, polygon_index: Optional[int] = None) -> None:
    """Append the polygon's edges that ``edges`` has not seen yet, as index pairs."""
    n = check_shape(polygon_indices, polygon_index)
    for i, j in edge_slots(n, quad_mode):
        a, b = polygon_indices[i], polygon_indices[j]
        if edges.add(a, b):
            indices.extend((a, b))
