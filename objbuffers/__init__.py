"""objbuffers: polygon-soup OBJ models to deduplicated vertex / u16 index buffers."""

from .api import convert, draw_type_for, triangles, wireframe
from .buffers import DrawType, MeshBuffers, VertexLayout
from .config import AttributeMode, ConversionOptions, EmissionRule, QuadMode
from .errors import IndexRangeError, ObjBuffersError, PolygonShapeError
from .indexer import Vertex, corner_keys, deref_vertex, gen_mesh
from .model import Polygon, PolygonKind, RawObj
from .rules import EdgeSet, poly_edges, poly_triangles

__version__ = "0.1.0"

__all__ = [
    "AttributeMode",
    "ConversionOptions",
    "DrawType",
    "EdgeSet",
    "EmissionRule",
    "IndexRangeError",
    "MeshBuffers",
    "ObjBuffersError",
    "Polygon",
    "PolygonKind",
    "PolygonShapeError",
    "QuadMode",
    "RawObj",
    "Vertex",
    "VertexLayout",
    "convert",
    "corner_keys",
    "deref_vertex",
    "draw_type_for",
    "gen_mesh",
    "poly_edges",
    "poly_triangles",
    "triangles",
    "wireframe",
    "__version__",
]
