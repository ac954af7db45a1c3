# objbuffers/indexer.py
"""
The shared indexing pass.

``gen_mesh`` walks the polygon list once, turns every corner into a corner
key ``(position_index, attribute_index | None)`` and gives each distinct key
exactly one ``Vertex``. Each polygon's deduplicated indices are then handed to
the selected emission rule, which appends triangles or edges to the index
buffer.

Preconditions owned by the caller / parser: attribute and position indices are
in range for their tables. The 16-bit vertex limit is enforced here.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional, Tuple

from .config import DEFAULT_FALLBACK_COLOR, AttributeMode, EmissionRule, QuadMode
from .errors import MAX_VERTICES, IndexRangeError
from .model import Polygon, RawObj, Vec3
from .rules import EdgeSet, poly_edges, poly_triangles

logger = logging.getLogger(__name__)

CornerKey = Tuple[int, Optional[int]]


@dataclass(frozen=True)
class Vertex:
    position: Vec3
    color: Vec3


def corner_keys(polygon: Polygon, attribute: AttributeMode) -> Iterator[CornerKey]:
    for i in range(len(polygon)):
        p = polygon.position_index(i)
        if attribute is AttributeMode.TEXCOORD:
            yield (p, polygon.tex_coord_index(i))
        elif attribute is AttributeMode.NORMAL:
            yield (p, polygon.normal_index(i))
        else:
            yield (p, None)


def deref_vertex(key: CornerKey, obj: RawObj, attribute: AttributeMode,
                 fallback: Vec3 = DEFAULT_FALLBACK_COLOR) -> Vertex:
    p, a = key
    x, y, z, _ = obj.positions[p]
    if a is None:
        color = fallback
    elif attribute is AttributeMode.NORMAL:
        color = obj.normals[a]
    else:
        color = obj.tex_coords[a]
    return Vertex(position=(x, y, z), color=(color[0], color[1], color[2]))


def gen_mesh(obj: RawObj, rule: EmissionRule,
             attribute: AttributeMode = AttributeMode.TEXCOORD,
             fallback: Vec3 = DEFAULT_FALLBACK_COLOR) -> Tuple[List[Vertex], List[int]]:
    """Deduplicate corners into vertices and emit indices with ``rule``.

    Raises ``PolygonShapeError`` on the first polygon that is neither a
    triangle nor a quad and ``IndexRangeError`` past 65536 vertices; nothing
    is returned in either case.
    """
    vertices: List[Vertex] = []
    indices: List[int] = []
    index_of: Dict[CornerKey, int] = {}
    edges = EdgeSet() if rule is not EmissionRule.TRIANGULATE else None
    quad_mode: Optional[QuadMode] = rule.quad_mode

    for n, polygon in enumerate(obj.polygons):
        current: List[int] = []
        for key in corner_keys(polygon, attribute):
            idx = index_of.get(key)
            if idx is None:
                idx = len(vertices)
                if idx >= MAX_VERTICES:
                    raise IndexRangeError(idx + 1)
                vertices.append(deref_vertex(key, obj, attribute, fallback))
                index_of[key] = idx
            current.append(idx)

        if rule is EmissionRule.TRIANGULATE:
            poly_triangles(indices, current, n)
        else:
            poly_edges(indices, current, edges, quad_mode, n)  # type: ignore[arg-type]

    logger.debug(
        "gen_mesh rule=%s attribute=%s polygons=%d vertices=%d indices=%d",
        rule.value, attribute.value, len(obj.polygons), len(vertices), len(indices),
    )
    return vertices, indices
