# objbuffers/model.py
"""
Polygon-soup input types.

An external OBJ parser produces a ``RawObj``: flat tables of positions,
texture coordinates and normals, plus polygons whose corners index into
those tables (zero-based). Nothing here parses text; these are plain,
immutable containers consumed by the indexer.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Sequence, Tuple, Union

Vec4 = Tuple[float, float, float, float]
Vec3 = Tuple[float, float, float]

# P: int, PN: (p, n), PT: (p, t), PTN: (p, t, n)
Corner = Union[int, Tuple[int, int], Tuple[int, int, int]]


class PolygonKind(Enum):
    P = "p"
    PN = "pn"
    PT = "pt"
    PTN = "ptn"

    @property
    def has_tex_coords(self) -> bool:
        return self in (PolygonKind.PT, PolygonKind.PTN)

    @property
    def has_normals(self) -> bool:
        return self in (PolygonKind.PN, PolygonKind.PTN)


@dataclass(frozen=True)
class Polygon:
    kind: PolygonKind
    corners: Tuple[Corner, ...]

    # ---- constructors, one per OBJ face flavour ----
    @classmethod
    def p(cls, positions: Sequence[int]) -> "Polygon":
        """``f 1 2 3``"""
        return cls(PolygonKind.P, tuple(positions))

    @classmethod
    def pn(cls, corners: Sequence[Tuple[int, int]]) -> "Polygon":
        """``f 1//1 2//2 3//3``"""
        return cls(PolygonKind.PN, tuple(tuple(c) for c in corners))

    @classmethod
    def pt(cls, corners: Sequence[Tuple[int, int]]) -> "Polygon":
        """``f 1/1 2/2 3/3``"""
        return cls(PolygonKind.PT, tuple(tuple(c) for c in corners))

    @classmethod
    def ptn(cls, corners: Sequence[Tuple[int, int, int]]) -> "Polygon":
        """``f 1/1/1 2/2/2 3/3/3``"""
        return cls(PolygonKind.PTN, tuple(tuple(c) for c in corners))

    def __len__(self) -> int:
        return len(self.corners)

    def position_index(self, i: int) -> int:
        c = self.corners[i]
        return c if self.kind is PolygonKind.P else c[0]  # type: ignore[index,return-value]

    def tex_coord_index(self, i: int) -> Optional[int]:
        if not self.kind.has_tex_coords:
            return None
        return self.corners[i][1]  # type: ignore[index]

    def normal_index(self, i: int) -> Optional[int]:
        c = self.corners[i]
        if self.kind is PolygonKind.PN:
            return c[1]  # type: ignore[index]
        if self.kind is PolygonKind.PTN:
            return c[2]  # type: ignore[index]
        return None


@dataclass(frozen=True)
class RawObj:
    positions: Tuple[Vec4, ...] = field(default_factory=tuple)
    tex_coords: Tuple[Vec3, ...] = field(default_factory=tuple)
    normals: Tuple[Vec3, ...] = field(default_factory=tuple)
    polygons: Tuple[Polygon, ...] = field(default_factory=tuple)

    @classmethod
    def from_lists(cls,
                   positions: Sequence[Sequence[float]],
                   polygons: Sequence[Polygon],
                   tex_coords: Sequence[Sequence[float]] = (),
                   normals: Sequence[Sequence[float]] = ()) -> "RawObj":
        """Build a model from loose sequences.

        Positions may be given as xyz (w defaults to 1.0); texture coordinates
        as uv (w defaults to 0.0), matching what OBJ readers fill in.
        """
        return cls(
            positions=tuple(_pad(p, 4, 1.0) for p in positions),  # type: ignore[misc]
            tex_coords=tuple(_pad(t, 3, 0.0) for t in tex_coords),  # type: ignore[misc]
            normals=tuple(_pad(n, 3, 0.0) for n in normals),  # type: ignore[misc]
            polygons=tuple(polygons),
        )


def _pad(values: Sequence[float], size: int, fill: float) -> Tuple[float, ...]:
    out = tuple(float(v) for v in values)[:size]
    return out + (fill,) * (size - len(out))
