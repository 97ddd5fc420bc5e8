# -*- coding: utf-8 -*-
# planar/api.py

"""
Project: Planar
Date: 10/19/2026

Purpose
-------
Thin, import-only façade over the engines. Exposes every geometry operation as
a module function `st_*(geometry, ...)`; the `Geometry.st_*` methods delegate
here.

Main Tasks
----------
    1. Steric queries: dimensions, emptiness, validity, simplicity.
    2. Topology: DE-9IM (`st_relate`) and the eight named predicates.
    3. Metrics: distance, area, length, perimeter.
    4. Set operations: intersection, union, difference, symmetric difference.
    5. Derived geometry: buffer, convex hull, centroid, point on surface,
       simplify, affine transforms, grid snapping.
    6. Accessors: rings and members by 1-based index.

Notes
-----
- Binary operations require a Geometry operand; anything else raises
  `UnsupportedOperandError`.
- `config` is an optional `EngineConfig`; None uses `DEFAULT_CONFIG`.
"""

from typing import Any, Dict, Optional

from .config import EngineConfig
from .core.geometry import Geometry
from .errors import UnsupportedOperandError
from .derived import accessors as _acc
from .derived import transform as _tf
from .derived.buffer import buffer as _buffer
from .derived.centroid import centroid as _centroid
from .derived.hull import convex_hull as _convex_hull
from .derived.interior_point import point_on_surface as _point_on_surface
from .derived.simplify import simplify as _simplify
from .metrics import area as _area, distance as _distance, length as _length, perimeter as _perimeter
from .overlay import difference as _difference, intersection as _intersection
from .overlay import sym_difference as _sym_difference, union as _union
from .topology import predicates as _pred
from .validity import is_simple as _is_simple, is_valid as _is_valid
from .validity import validity_report as _validity_report

__all__ = [
    "dimensions", "is_empty", "is_valid", "is_simple", "validity_report",
    "st_relate", "st_equals", "st_disjoint", "st_intersects", "st_touches",
    "st_crosses", "st_within", "st_contains", "st_overlaps",
    "st_distance", "st_area", "st_length", "st_perimeter",
    "st_intersection", "st_union", "st_difference", "st_sym_difference",
    "st_buffer", "st_convex_hull", "st_centroid", "st_point_on_surface", "st_simplify",
    "st_translate", "st_scale", "st_rotate", "st_affine", "st_snap_to_grid",
    "st_exterior_ring", "st_interior_ring_n", "st_num_interior_rings",
    "st_geometry_n", "st_num_geometries",
]


def _operands(op: str, *geoms) -> None:
    for g in geoms:
        if not isinstance(g, Geometry):
            raise UnsupportedOperandError(f"{op} needs Geometry operands.", {"got": type(g).__name__})


# --------
# Steric
# --------
def dimensions(g: Geometry) -> int:
    _operands("dimensions", g)
    return g.dimensions()


def is_empty(g: Geometry) -> bool:
    _operands("is_empty", g)
    return g.is_empty()


def is_valid(g: Geometry, config: Optional[EngineConfig] = None) -> bool:
    _operands("is_valid", g)
    return _is_valid(g, config)


def is_simple(g: Geometry, config: Optional[EngineConfig] = None) -> bool:
    _operands("is_simple", g)
    return _is_simple(g, config)


def validity_report(g: Geometry, config: Optional[EngineConfig] = None,
                    enabled: Optional[Dict[str, bool]] = None) -> Dict[str, Any]:
    """Per-rule validity findings (see `planar.validity`)."""
    _operands("validity_report", g)
    return _validity_report(g, config, enabled)


# --------
# Topology
# --------
def st_relate(a: Geometry, b: Geometry, pattern: Optional[str] = None,
              config: Optional[EngineConfig] = None):
    """
    DE-9IM of (a, b) as a 9-character string, or whether it matches `pattern`.
    """
    _operands("st_relate", a, b)
    return _pred.relate_pattern(a, b, pattern, config)


def st_equals(a: Geometry, b: Geometry, config: Optional[EngineConfig] = None) -> bool:
    _operands("st_equals", a, b)
    return _pred.equals(a, b, config)


def st_disjoint(a: Geometry, b: Geometry, config: Optional[EngineConfig] = None) -> bool:
    _operands("st_disjoint", a, b)
    return _pred.disjoint(a, b, config)


def st_intersects(a: Geometry, b: Geometry, config: Optional[EngineConfig] = None) -> bool:
    _operands("st_intersects", a, b)
    return _pred.intersects(a, b, config)


def st_touches(a: Geometry, b: Geometry, config: Optional[EngineConfig] = None) -> bool:
    _operands("st_touches", a, b)
    return _pred.touches(a, b, config)


def st_crosses(a: Geometry, b: Geometry, config: Optional[EngineConfig] = None) -> bool:
    _operands("st_crosses", a, b)
    return _pred.crosses(a, b, config)


def st_within(a: Geometry, b: Geometry, config: Optional[EngineConfig] = None) -> bool:
    _operands("st_within", a, b)
    return _pred.within(a, b, config)


def st_contains(a: Geometry, b: Geometry, config: Optional[EngineConfig] = None) -> bool:
    _operands("st_contains", a, b)
    return _pred.contains(a, b, config)


def st_overlaps(a: Geometry, b: Geometry, config: Optional[EngineConfig] = None) -> bool:
    _operands("st_overlaps", a, b)
    return _pred.overlaps(a, b, config)


# --------
# Metrics
# --------
def st_distance(a: Geometry, b: Geometry, config: Optional[EngineConfig] = None) -> float:
    _operands("st_distance", a, b)
    return _distance(a, b, config)


def st_area(g: Geometry) -> float:
    _operands("st_area", g)
    return _area(g)


def st_length(g: Geometry) -> float:
    _operands("st_length", g)
    return _length(g)


def st_perimeter(g: Geometry) -> float:
    _operands("st_perimeter", g)
    return _perimeter(g)


# --------
# Set operations
# --------
def st_intersection(a: Geometry, b: Geometry, config: Optional[EngineConfig] = None) -> Geometry:
    _operands("st_intersection", a, b)
    return _intersection(a, b, config)


def st_union(a: Geometry, b: Geometry, config: Optional[EngineConfig] = None) -> Geometry:
    _operands("st_union", a, b)
    return _union(a, b, config)


def st_difference(a: Geometry, b: Geometry, config: Optional[EngineConfig] = None) -> Geometry:
    _operands("st_difference", a, b)
    return _difference(a, b, config)


def st_sym_difference(a: Geometry, b: Geometry, config: Optional[EngineConfig] = None) -> Geometry:
    _operands("st_sym_difference", a, b)
    return _sym_difference(a, b, config)


# --------
# Derived geometry
# --------
def st_buffer(g: Geometry, radius: float, quad_segs: Optional[int] = None,
              config: Optional[EngineConfig] = None) -> Geometry:
    _operands("st_buffer", g)
    return _buffer(g, radius, quad_segs, config)


def st_convex_hull(g: Geometry, config: Optional[EngineConfig] = None) -> Geometry:
    _operands("st_convex_hull", g)
    return _convex_hull(g, config)


def st_centroid(g: Geometry, config: Optional[EngineConfig] = None) -> Geometry:
    _operands("st_centroid", g)
    return _centroid(g, config)


def st_point_on_surface(g: Geometry, config: Optional[EngineConfig] = None) -> Geometry:
    _operands("st_point_on_surface", g)
    return _point_on_surface(g, config)


def st_simplify(g: Geometry, tolerance: float) -> Geometry:
    _operands("st_simplify", g)
    return _simplify(g, tolerance)


def st_translate(g: Geometry, dx: float, dy: float) -> Geometry:
    _operands("st_translate", g)
    return _tf.translate(g, dx, dy)


def st_scale(g: Geometry, sx: float, sy: float, origin=None) -> Geometry:
    _operands("st_scale", g)
    return _tf.scale(g, sx, sy, origin)


def st_rotate(g: Geometry, angle: float, origin=None) -> Geometry:
    _operands("st_rotate", g)
    return _tf.rotate(g, angle, origin)


def st_affine(g: Geometry, a: float, b: float, d: float, e: float,
              xoff: float = 0.0, yoff: float = 0.0) -> Geometry:
    _operands("st_affine", g)
    return _tf.affine(g, a, b, d, e, xoff, yoff)


def st_snap_to_grid(g: Geometry, size: float) -> Geometry:
    _operands("st_snap_to_grid", g)
    return _tf.snap_to_grid(g, size)


# --------
# Accessors
# --------
def st_exterior_ring(g: Geometry) -> Geometry:
    _operands("st_exterior_ring", g)
    return _acc.exterior_ring(g)


def st_interior_ring_n(g: Geometry, n: int) -> Geometry:
    _operands("st_interior_ring_n", g)
    return _acc.interior_ring_n(g, n)


def st_num_interior_rings(g: Geometry) -> int:
    _operands("st_num_interior_rings", g)
    return _acc.num_interior_rings(g)


def st_geometry_n(g: Geometry, n: int) -> Geometry:
    _operands("st_geometry_n", g)
    return _acc.geometry_n(g, n)


def st_num_geometries(g: Geometry) -> int:
    _operands("st_num_geometries", g)
    return _acc.num_geometries(g)
