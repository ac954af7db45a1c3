# objbuffers/api.py
from __future__ import annotations

from typing import List, Optional, Tuple

from .buffers import DrawType, MeshBuffers
from .config import DEFAULT_FALLBACK_COLOR, DEFAULT_OPTIONS, AttributeMode, ConversionOptions, EmissionRule, QuadMode
from .indexer import Vertex, gen_mesh
from .model import RawObj, Vec3


def triangles(obj: RawObj, attribute: AttributeMode = AttributeMode.TEXCOORD,
              fallback: Vec3 = DEFAULT_FALLBACK_COLOR) -> Tuple[List[Vertex], List[int]]:
    """Solid triangles. The vertex ``color`` is the UV triple (or normal) if present, else ``fallback``."""
    return gen_mesh(obj, EmissionRule.TRIANGULATE, attribute, fallback)


def wireframe(obj: RawObj, quad_mode: QuadMode = QuadMode.TESSELLATE,
              attribute: AttributeMode = AttributeMode.TEXCOORD,
              fallback: Vec3 = DEFAULT_FALLBACK_COLOR) -> Tuple[List[Vertex], List[int]]:
    """Unique undirected edges as index pairs, for a line draw."""
    return gen_mesh(obj, EmissionRule.for_quad_mode(quad_mode), attribute, fallback)


def draw_type_for(rule: EmissionRule) -> DrawType:
    if rule is EmissionRule.TRIANGULATE:
        return DrawType.TRIANGLES
    return DrawType.LINES


def convert(obj: RawObj, options: Optional[ConversionOptions] = None) -> MeshBuffers:
    opts = options or DEFAULT_OPTIONS
    vertices, indices = gen_mesh(obj, opts.rule, opts.attribute, opts.fallback_color)
    return MeshBuffers(vertices=vertices, indices=indices, draw_type=draw_type_for(opts.rule))
