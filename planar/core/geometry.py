# -*- coding: utf-8 -*-
# planar/core/geometry.py

"""
Project: Planar
Date: 10/19/2026

Purpose:
--------
The Geometry value: a closed tagged variant (kind discriminant + payload) over the
OGC Simple Features kinds, plus the constructors the construction layer uses to
build values from coordinates.

Payload by kind:
----------------
   - Point, LineString, curved curves:   `coords` (one CoordinateBuffer)
   - Polygon, CurvePolygon:              `rings`  (shell first, then holes)
   - Multi*, GeometryCollection:         `members` (tuple of Geometry)

Notes:
------
   - Values are frozen; every operation returns a new value.
   - Constructors check shape and member kinds only. Topological validity is a
     query (`is_valid`), never a construction precondition.
   - The `st_*` methods delegate to `planar.api`; imports are lazy to keep this
     module free of engine dependencies.
"""

from dataclasses import dataclass
from typing import Iterator, Optional, Sequence, Tuple
import numpy as np

from .base import Steric, GeometryContract
from .buffer import CoordinateBuffer, EMPTY_BUFFER
from .kinds import (
    GeometryKind, COLLECTIONS, CURVED, KIND_DIMENSION, MEMBER_KIND,
)

__all__ = [
    "Geometry",
    "point", "line_string", "polygon",
    "multi_point", "multi_line_string", "multi_polygon",
    "geometry_collection", "empty", "curved",
]


@dataclass(frozen=True)
class Geometry(Steric, GeometryContract):
    """
    Immutable geometry value.

    Attributes
    ----------
    kind : GeometryKind
        Variant discriminant.
    coords : CoordinateBuffer
        Coordinates of a Point/LineString (empty for other kinds).
    rings : Tuple[CoordinateBuffer, ...]
        Shell followed by holes for a Polygon (empty for other kinds).
    members : Tuple[Geometry, ...]
        Members of a Multi*/GeometryCollection (empty for other kinds).
    """

    kind: GeometryKind
    coords: CoordinateBuffer = EMPTY_BUFFER
    rings: Tuple[CoordinateBuffer, ...] = ()
    members: Tuple["Geometry", ...] = ()

    # --------------------
    # Steric
    # --------------------
    def dimensions(self) -> int:
        if self.kind == GeometryKind.GEOMETRYCOLLECTION:
            if not self.members:
                return -1
            return max(m.dimensions() for m in self.members)
        return KIND_DIMENSION[self.kind]

    def is_empty(self) -> bool:
        if self.kind in COLLECTIONS:
            return all(m.is_empty() for m in self.members)
        if self.rings:
            return all(r.is_empty() for r in self.rings)
        return self.coords.is_empty()

    def is_valid(self, config=None) -> bool:
        from ..validity import is_valid
        return is_valid(self, config)

    def is_simple(self, config=None) -> bool:
        from ..validity import is_simple
        return is_simple(self, config)

    # --------------------
    # Structure helpers
    # --------------------
    @property
    def is_curved(self) -> bool:
        return self.kind in CURVED

    @property
    def shell(self) -> Optional[CoordinateBuffer]:
        """Exterior ring of a polygon, None if there are no rings."""
        return self.rings[0] if self.rings else None

    @property
    def holes(self) -> Tuple[CoordinateBuffer, ...]:
        return self.rings[1:]

    def iter_atomic(self) -> Iterator["Geometry"]:
        """Yield non-empty atomic leaves in order, flattening nested collections."""
        if self.kind in COLLECTIONS:
            for m in self.members:
                yield from m.iter_atomic()
        elif not self.is_empty():
            yield self

    def all_xy(self) -> np.ndarray:
        """Every coordinate of the geometry stacked as an (N, 2) array."""
        blocks = []
        if self.kind in COLLECTIONS:
            blocks = [m.all_xy() for m in self.members]
        elif self.rings:
            blocks = [r.xy for r in self.rings]
        else:
            blocks = [self.coords.xy]
        blocks = [b for b in blocks if b.shape[0]]
        if not blocks:
            return np.zeros((0, 2), dtype=np.float64)
        return np.vstack(blocks)

    def num_coordinates(self) -> int:
        return int(self.all_xy().shape[0])

    def __repr__(self) -> str:
        if self.is_empty():
            return f"<{self.kind.value} EMPTY>"
        if self.kind in COLLECTIONS:
            return f"<{self.kind.value} members={len(self.members)}>"
        if self.rings:
            return f"<{self.kind.value} rings={len(self.rings)} shell={self.rings[0].xy.tolist()}>"
        return f"<{self.kind.value} {self.coords.xy.tolist()}>"

    # --------------------
    # Topology
    # --------------------
    def st_equals(self, other, config=None) -> bool:
        from .. import api
        return api.st_equals(self, other, config)

    def st_disjoint(self, other, config=None) -> bool:
        from .. import api
        return api.st_disjoint(self, other, config)

    def st_intersects(self, other, config=None) -> bool:
        from .. import api
        return api.st_intersects(self, other, config)

    def st_touches(self, other, config=None) -> bool:
        from .. import api
        return api.st_touches(self, other, config)

    def st_crosses(self, other, config=None) -> bool:
        from .. import api
        return api.st_crosses(self, other, config)

    def st_within(self, other, config=None) -> bool:
        from .. import api
        return api.st_within(self, other, config)

    def st_contains(self, other, config=None) -> bool:
        from .. import api
        return api.st_contains(self, other, config)

    def st_overlaps(self, other, config=None) -> bool:
        from .. import api
        return api.st_overlaps(self, other, config)

    def st_relate(self, other, pattern=None, config=None):
        from .. import api
        return api.st_relate(self, other, pattern, config)

    # --------------------
    # Metrics
    # --------------------
    def st_distance(self, other, config=None) -> float:
        from .. import api
        return api.st_distance(self, other, config)

    def st_area(self) -> float:
        from .. import api
        return api.st_area(self)

    def st_length(self) -> float:
        from .. import api
        return api.st_length(self)

    def st_perimeter(self) -> float:
        from .. import api
        return api.st_perimeter(self)

    # --------------------
    # Set operations
    # --------------------
    def st_intersection(self, other, config=None) -> "Geometry":
        from .. import api
        return api.st_intersection(self, other, config)

    def st_union(self, other, config=None) -> "Geometry":
        from .. import api
        return api.st_union(self, other, config)

    def st_difference(self, other, config=None) -> "Geometry":
        from .. import api
        return api.st_difference(self, other, config)

    def st_sym_difference(self, other, config=None) -> "Geometry":
        from .. import api
        return api.st_sym_difference(self, other, config)

    # --------------------
    # Derived geometry
    # --------------------
    def st_buffer(self, radius: float, quad_segs=None, config=None) -> "Geometry":
        from .. import api
        return api.st_buffer(self, radius, quad_segs, config)

    def st_convex_hull(self, config=None) -> "Geometry":
        from .. import api
        return api.st_convex_hull(self, config)

    def st_centroid(self, config=None) -> "Geometry":
        from .. import api
        return api.st_centroid(self, config)

    def st_point_on_surface(self, config=None) -> "Geometry":
        from .. import api
        return api.st_point_on_surface(self, config)

    def st_simplify(self, tolerance: float) -> "Geometry":
        from .. import api
        return api.st_simplify(self, tolerance)

    def st_translate(self, dx: float, dy: float) -> "Geometry":
        from .. import api
        return api.st_translate(self, dx, dy)

    def st_scale(self, sx: float, sy: float, origin=None) -> "Geometry":
        from .. import api
        return api.st_scale(self, sx, sy, origin)

    def st_rotate(self, angle: float, origin=None) -> "Geometry":
        from .. import api
        return api.st_rotate(self, angle, origin)

    def st_affine(self, a: float, b: float, d: float, e: float,
                  xoff: float = 0.0, yoff: float = 0.0) -> "Geometry":
        from .. import api
        return api.st_affine(self, a, b, d, e, xoff, yoff)

    def st_snap_to_grid(self, size: float) -> "Geometry":
        from .. import api
        return api.st_snap_to_grid(self, size)

    # --------------------
    # Accessors
    # --------------------
    def st_exterior_ring(self) -> "Geometry":
        from .. import api
        return api.st_exterior_ring(self)

    def st_interior_ring_n(self, n: int) -> "Geometry":
        from .. import api
        return api.st_interior_ring_n(self, n)

    def st_num_interior_rings(self) -> int:
        from .. import api
        return api.st_num_interior_rings(self)

    def st_geometry_n(self, n: int) -> "Geometry":
        from .. import api
        return api.st_geometry_n(self, n)

    def st_num_geometries(self) -> int:
        from .. import api
        return api.st_num_geometries(self)


# -----------------------
# Constructors
# -----------------------
def point(x: float, y: float) -> Geometry:
    """Point at (x, y)."""
    return Geometry(GeometryKind.POINT, coords=CoordinateBuffer((x, y)))


def line_string(coords) -> Geometry:
    """LineString through `coords` ((x, y) pairs or (N, 2) array)."""
    return Geometry(GeometryKind.LINESTRING, coords=CoordinateBuffer.from_xy(coords))


def polygon(shell, holes: Sequence = ()) -> Geometry:
    """
    Polygon from a shell ring and optional hole rings.

    Rings are taken as given; closure and orientation are not altered. An empty
    shell yields an empty polygon.
    """
    shell_buf = CoordinateBuffer.from_xy(shell)
    if shell_buf.is_empty():
        if len(holes):
            raise ValueError("An empty polygon cannot carry holes.")
        return Geometry(GeometryKind.POLYGON)
    rings = (shell_buf,) + tuple(CoordinateBuffer.from_xy(h) for h in holes)
    return Geometry(GeometryKind.POLYGON, rings=rings)


def _members_of(kind: GeometryKind, items, build) -> Tuple[Geometry, ...]:
    out = []
    want = MEMBER_KIND[kind]
    for item in items:
        g = item if isinstance(item, Geometry) else build(item)
        if g.kind != want:
            raise ValueError(f"{kind.value} members must be {want.value}, got {g.kind.value}.")
        out.append(g)
    return tuple(out)


def multi_point(points) -> Geometry:
    """MultiPoint from Point geometries or (x, y) pairs."""
    return Geometry(
        GeometryKind.MULTIPOINT,
        members=_members_of(GeometryKind.MULTIPOINT, points, lambda p: point(*p)),
    )


def multi_line_string(lines) -> Geometry:
    """MultiLineString from LineString geometries or coordinate sequences."""
    return Geometry(
        GeometryKind.MULTILINESTRING,
        members=_members_of(GeometryKind.MULTILINESTRING, lines, line_string),
    )


def multi_polygon(polygons) -> Geometry:
    """MultiPolygon from Polygon geometries or (shell, holes) pairs."""
    return Geometry(
        GeometryKind.MULTIPOLYGON,
        members=_members_of(GeometryKind.MULTIPOLYGON, polygons, lambda sh: polygon(*sh)),
    )


def geometry_collection(members: Sequence[Geometry] = ()) -> Geometry:
    """Heterogeneous collection of geometry values."""
    members = tuple(members)
    for m in members:
        if not isinstance(m, Geometry):
            raise ValueError(f"GeometryCollection members must be Geometry, got {type(m).__name__}.")
    return Geometry(GeometryKind.GEOMETRYCOLLECTION, members=members)


def empty(kind: GeometryKind = GeometryKind.GEOMETRYCOLLECTION) -> Geometry:
    """Empty geometry of the given kind."""
    return Geometry(GeometryKind(kind))


def curved(kind: GeometryKind, coords=(), rings: Sequence = ()) -> Geometry:
    """
    Tag-only constructor for curved/surface kinds. The payload is stored but no
    algorithm interprets it.
    """
    kind = GeometryKind(kind)
    if kind not in CURVED:
        raise ValueError(f"{kind.value} is not a curved/surface kind.")
    return Geometry(
        kind,
        coords=CoordinateBuffer.from_xy(coords),
        rings=tuple(CoordinateBuffer.from_xy(r) for r in rings),
    )
