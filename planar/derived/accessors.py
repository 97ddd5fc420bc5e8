# -*- coding: utf-8 -*-
# planar/derived/accessors.py

"""
Project: Planar
Date: 10/19/2026

Purpose:
--------
Structural accessors: polygon rings and collection members.

Notes:
------
   - Indices are 1-based; anything outside [1, count] raises
     IndexOutOfRangeError.
   - Rings are returned as LineStrings (their stored coordinates unchanged).
   - An atomic non-empty geometry counts as one geometry (itself); any empty
     geometry counts zero.
"""

import operator

from ..core.geometry import Geometry, empty
from ..core.kinds import GeometryKind, COLLECTIONS
from ..errors import IndexOutOfRangeError, InvalidParameterError, NotAPolygonError
from ..topology.relate import require_supported


def _require_polygon(g: Geometry, op: str) -> None:
    require_supported(g)
    if g.kind != GeometryKind.POLYGON:
        raise NotAPolygonError(f"{op} needs a Polygon.", {"kind": g.kind.value})


def _index(n, count: int, op: str) -> int:
    try:
        i = operator.index(n)
    except TypeError:
        raise InvalidParameterError(f"{op} index must be an integer.", {"n": n})
    if not 1 <= i <= count:
        raise IndexOutOfRangeError(f"{op} index out of range.", {"n": i, "count": count})
    return i


def exterior_ring(g: Geometry) -> Geometry:
    _require_polygon(g, "st_exterior_ring")
    if not g.rings:
        return empty(GeometryKind.LINESTRING)
    return Geometry(GeometryKind.LINESTRING, coords=g.rings[0])


def num_interior_rings(g: Geometry) -> int:
    _require_polygon(g, "st_num_interior_rings")
    return max(len(g.rings) - 1, 0)


def interior_ring_n(g: Geometry, n: int) -> Geometry:
    _require_polygon(g, "st_interior_ring_n")
    i = _index(n, num_interior_rings(g), "st_interior_ring_n")
    return Geometry(GeometryKind.LINESTRING, coords=g.rings[i])


def num_geometries(g: Geometry) -> int:
    require_supported(g)
    if g.is_empty():
        return 0
    if g.kind in COLLECTIONS:
        return len(g.members)
    return 1


def geometry_n(g: Geometry, n: int) -> Geometry:
    i = _index(n, num_geometries(g), "st_geometry_n")
    if g.kind in COLLECTIONS:
        return g.members[i - 1]
    return g
