from __future__ import annotations

import pytest

from objbuffers.config import AttributeMode, EmissionRule
from objbuffers.errors import IndexRangeError, PolygonShapeError
from objbuffers.indexer import corner_keys, gen_mesh
from objbuffers.model import Polygon, RawObj


def _unit_quad(*polygons):
    return RawObj.from_lists(
        positions=[(0, 0, 0), (1, 0, 0), (1, 1, 0), (0, 1, 0)],
        polygons=list(polygons) or [Polygon.p([0, 1, 2, 3])],
    )


def test_unit_quad_triangulates():
    vertices, indices = gen_mesh(_unit_quad(), EmissionRule.TRIANGULATE)
    assert len(vertices) == 4
    assert indices == [0, 1, 2, 0, 2, 3]
    assert vertices[2].position == (1.0, 1.0, 0.0)


def test_shared_corners_are_deduplicated():
    obj = _unit_quad(Polygon.p([0, 1, 2]), Polygon.p([0, 2, 3]))
    vertices, indices = gen_mesh(obj, EmissionRule.TRIANGULATE)
    assert len(vertices) == 4
    assert indices == [0, 1, 2, 0, 2, 3]


def test_same_position_different_uv_is_a_new_vertex():
    obj = RawObj.from_lists(
        positions=[(0, 0, 0), (1, 0, 0), (1, 1, 0)],
        tex_coords=[(0, 0), (1, 0), (1, 1), (0.5, 0.5)],
        polygons=[
            Polygon.pt([(0, 0), (1, 1), (2, 2)]),
            Polygon.pt([(0, 3), (1, 1), (2, 2)]),
        ],
    )
    vertices, indices = gen_mesh(obj, EmissionRule.TRIANGULATE, AttributeMode.TEXCOORD)
    assert len(vertices) == 4
    assert indices == [0, 1, 2, 3, 1, 2]
    assert vertices[3].color == (0.5, 0.5, 0.0)

    # without the attribute the two triangles share every vertex
    vertices, indices = gen_mesh(obj, EmissionRule.TRIANGULATE, AttributeMode.NONE)
    assert len(vertices) == 3
    assert indices == [0, 1, 2, 0, 1, 2]


def test_normal_mode_reads_normals_and_falls_back():
    obj = RawObj.from_lists(
        positions=[(0, 0, 0), (1, 0, 0), (1, 1, 0), (5, 5, 5)],
        tex_coords=[(0.25, 0.75)],
        normals=[(0, 0, 1)],
        polygons=[
            Polygon.ptn([(0, 0, 0), (1, 0, 0), (2, 0, 0)]),
            Polygon.pt([(3, 0), (1, 0), (2, 0)]),
        ],
    )
    vertices, _ = gen_mesh(obj, EmissionRule.TRIANGULATE, AttributeMode.NORMAL)
    assert vertices[0].color == (0.0, 0.0, 1.0)
    # PT polygon has no normal: new corner keys, fallback color
    assert len(vertices) == 6
    assert vertices[3].position == (5.0, 5.0, 5.0)
    assert vertices[3].color == (1.0, 1.0, 1.0)


def test_custom_fallback_color():
    vertices, _ = gen_mesh(_unit_quad(), EmissionRule.TRIANGULATE, fallback=(0.0, 0.0, 0.0))
    assert all(v.color == (0.0, 0.0, 0.0) for v in vertices)


def test_corner_keys_per_mode():
    poly = Polygon.ptn([(4, 5, 6), (7, 8, 9), (1, 2, 3)])
    assert list(corner_keys(poly, AttributeMode.NONE)) == [(4, None), (7, None), (1, None)]
    assert list(corner_keys(poly, AttributeMode.TEXCOORD)) == [(4, 5), (7, 8), (1, 2)]
    assert list(corner_keys(poly, AttributeMode.NORMAL)) == [(4, 6), (7, 9), (1, 3)]
    pn = Polygon.pn([(0, 1), (2, 3), (4, 5)])
    assert list(corner_keys(pn, AttributeMode.TEXCOORD)) == [(0, None), (2, None), (4, None)]


@pytest.mark.parametrize("rule", list(EmissionRule))
def test_five_corner_polygon_aborts(rule):
    obj = RawObj.from_lists(
        positions=[(0, 0, 0), (1, 0, 0), (1, 1, 0), (0, 1, 0), (-1, 0.5, 0)],
        polygons=[Polygon.p([0, 1, 2]), Polygon.p([0, 1, 2, 3, 4])],
    )
    with pytest.raises(PolygonShapeError) as exc:
        gen_mesh(obj, rule)
    assert exc.value.corner_count == 5
    assert exc.value.polygon_index == 1


def test_two_corner_polygon_aborts():
    with pytest.raises(PolygonShapeError):
        gen_mesh(_unit_quad(Polygon.p([0, 1])), EmissionRule.TRIANGULATE)


def test_too_many_vertices_raises():
    count = (1 << 16) + 2
    positions = [(float(i), 0.0, 0.0) for i in range(count)]
    polygons = [Polygon.p([i, i + 1, i + 2]) for i in range(0, count - 2, 3)]
    obj = RawObj.from_lists(positions=positions, polygons=polygons)
    with pytest.raises(IndexRangeError):
        gen_mesh(obj, EmissionRule.TRIANGULATE)


def test_empty_model():
    assert gen_mesh(RawObj(), EmissionRule.WIREFRAME_KEEP) == ([], [])


@pytest.mark.parametrize("rule", list(EmissionRule))
def test_indices_are_in_range(rule):
    obj = RawObj.from_lists(
        positions=[(0, 0, 0), (1, 0, 0), (1, 1, 0), (0, 1, 0), (2, 0, 0), (2, 1, 0)],
        polygons=[Polygon.p([0, 1, 2, 3]), Polygon.p([1, 4, 5, 2]), Polygon.p([3, 2, 5])],
    )
    vertices, indices = gen_mesh(obj, rule, AttributeMode.NONE)
    assert len(vertices) == 6
    assert indices
    assert all(0 <= i < len(vertices) for i in indices)
