# -*- coding: utf-8 -*-
# planar/core/base.py

"""
Project: Planar
Date: 10/19/2026

Purpose:
--------
Abstract capability contracts exposed to external collaborators (construction,
serialization and service layers). The Geometry value implements both.

Abstract Classes:
-----------------
- Steric:           dimension/emptiness/validity/simplicity queries.
- GeometryContract: predicate, metric, set-operation and derived-geometry surface.

Notes:
------
- Binary operations take another geometry value and either return a value or raise
  a typed `planar.errors.GeometryError`; nothing fails silently.
"""

from abc import ABC, abstractmethod


class Steric(ABC):
    """Structural queries implemented by every geometry value."""

    @abstractmethod
    def dimensions(self) -> int:
        """Topological dimension: 0 point, 1 line, 2 polygon, -1 empty collection."""

    @abstractmethod
    def is_valid(self, config=None) -> bool:
        """True if the geometry conforms to the OGC Simple Features structural rules."""

    @abstractmethod
    def is_empty(self) -> bool:
        """True if the geometry has no coordinates at any level."""

    @abstractmethod
    def is_simple(self, config=None) -> bool:
        """True if the geometry has no anomalous self-intersection."""


class GeometryContract(ABC):
    """
    Full operation surface. Every method returns a value or raises a typed
    GeometryError; `other` is always another geometry value.
    """

    # ---- topology ----
    @abstractmethod
    def st_equals(self, other, config=None) -> bool:
        """Point sets are topologically equal."""

    @abstractmethod
    def st_disjoint(self, other, config=None) -> bool:
        """No point in common."""

    @abstractmethod
    def st_intersects(self, other, config=None) -> bool:
        """At least one point in common."""

    @abstractmethod
    def st_touches(self, other, config=None) -> bool:
        """Common points exist but interiors do not intersect."""

    @abstractmethod
    def st_crosses(self, other, config=None) -> bool:
        """Some, but not all, interior points in common."""

    @abstractmethod
    def st_within(self, other, config=None) -> bool:
        """Every point lies in `other` and interiors intersect."""

    @abstractmethod
    def st_contains(self, other, config=None) -> bool:
        """Every point of `other` lies in this geometry and interiors intersect."""

    @abstractmethod
    def st_overlaps(self, other, config=None) -> bool:
        """Same dimension, interiors intersect, each has points outside the other."""

    # ---- metrics ----
    @abstractmethod
    def st_distance(self, other, config=None) -> float:
        """Minimum planar distance."""

    @abstractmethod
    def st_area(self) -> float:
        """Area of areal members."""

    @abstractmethod
    def st_length(self) -> float:
        """Length of linear members."""

    @abstractmethod
    def st_perimeter(self) -> float:
        """Ring length of areal members."""

    # ---- set operations ----
    @abstractmethod
    def st_intersection(self, other, config=None):
        """Point-set intersection."""

    @abstractmethod
    def st_union(self, other, config=None):
        """Point-set union."""

    @abstractmethod
    def st_difference(self, other, config=None):
        """Points of this geometry not in `other`."""

    # ---- derived geometry ----
    @abstractmethod
    def st_buffer(self, radius: float, quad_segs=None, config=None):
        """Offset polygon at `radius`."""

    @abstractmethod
    def st_convex_hull(self, config=None):
        """Smallest convex geometry enclosing all points."""

    @abstractmethod
    def st_centroid(self, config=None):
        """Center of mass."""

    @abstractmethod
    def st_point_on_surface(self, config=None):
        """A point guaranteed to lie on the geometry."""

    @abstractmethod
    def st_simplify(self, tolerance: float):
        """Douglas-Peucker simplification."""

    # ---- accessors ----
    @abstractmethod
    def st_exterior_ring(self):
        """Shell of a polygon as a LineString."""

    @abstractmethod
    def st_interior_ring_n(self, n: int):
        """1-based hole of a polygon as a LineString."""

    @abstractmethod
    def st_num_interior_rings(self) -> int:
        """Number of holes of a polygon."""

    @abstractmethod
    def st_geometry_n(self, n: int):
        """1-based member."""

    @abstractmethod
    def st_num_geometries(self) -> int:
        """Member count (1 for non-empty atomic, 0 for empty)."""
