# -*- coding: utf-8 -*-
# planar/topology/locate.py

"""
Project: Planar
Date: 10/19/2026

Purpose:
--------
Locate a point relative to a geometry's interior, boundary and exterior.

Rules:
------
   - Point: the point itself is interior; the boundary is empty.
   - LineString: endpoints of a non-closed line are boundary, other points on the
     line are interior; closed lines have no boundary.
   - Polygon: rings are boundary; points inside the shell and outside every hole
     are interior.
   - Multi/collections, in order of precedence:
       1. inside any polygon member -> interior;
       2. on a ring of any polygon member -> boundary, whatever the hit count;
       3. line endpoints follow the mod-2 rule across members (odd count ->
          boundary, even non-zero count -> interior);
       4. on a line or at a Point member -> interior.

Notes:
------
   - A locator precomputes per-member arrays once; queries are vectorized over
     segments with NumPy.
   - Callers that know more about the neighbourhood of a point (graph nodes
     surrounded by polygon interior) pass their own areal location to `locate`.
"""

from typing import List, Optional, Tuple
import numpy as np

from ..core.kinds import GeometryKind
from ..kernels.loop import is_closed
from ..kernels.predicates import Location, locate_in_ring, points_segments_distance


class _Polygon:
    __slots__ = ("rings", "bbox")

    def __init__(self, rings: List[np.ndarray]):
        self.rings = rings
        shell = rings[0]
        self.bbox = (float(shell[:, 0].min()), float(shell[:, 1].min()),
                     float(shell[:, 0].max()), float(shell[:, 1].max()))


class PointLocator:
    """
    Point location against one geometry value.

    Parameters
    ----------
    geom : Geometry
        Simple-features geometry (curved kinds are rejected upstream).
    tol : float
        Absolute on-boundary tolerance.
    """

    def __init__(self, geom, tol: float = 0.0):
        self.tol = float(tol)
        pts: List[Tuple[float, float]] = []
        self.lines: List[Tuple[np.ndarray, np.ndarray, bool]] = []
        self.polygons: List[_Polygon] = []
        for leaf in geom.iter_atomic():
            if leaf.kind == GeometryKind.POINT:
                pts.append(leaf.coords.coordinate(0))
            elif leaf.kind == GeometryKind.LINESTRING:
                xy = leaf.coords.xy
                if xy.shape[0] == 0:
                    continue
                closed = is_closed(xy)
                self.lines.append((xy, np.array([xy[0], xy[-1]]), closed))
            elif leaf.kind == GeometryKind.POLYGON:
                rings = []
                for r in leaf.rings:
                    xy = r.xy
                    if xy.shape[0] and not np.array_equal(xy[0], xy[-1]):
                        xy = np.vstack((xy, xy[0]))
                    rings.append(xy)
                if rings and rings[0].shape[0]:
                    self.polygons.append(_Polygon(rings))
        self.points = np.array(pts, dtype=float).reshape(-1, 2)

    @property
    def has_area(self) -> bool:
        return bool(self.polygons)

    # --------------------
    # Members
    # --------------------
    def _locate_polygon(self, pt, poly: _Polygon) -> Location:
        tol = self.tol
        x0, y0, x1, y1 = poly.bbox
        if pt[0] < x0 - tol or pt[0] > x1 + tol or pt[1] < y0 - tol or pt[1] > y1 + tol:
            return Location.EXTERIOR
        loc = locate_in_ring(pt, poly.rings[0], tol)
        if loc != Location.INTERIOR:
            return loc
        for hole in poly.rings[1:]:
            hl = locate_in_ring(pt, hole, tol)
            if hl == Location.INTERIOR:
                return Location.EXTERIOR
            if hl == Location.BOUNDARY:
                return Location.BOUNDARY
        return Location.INTERIOR

    def _on_line(self, pt, xy: np.ndarray) -> bool:
        if xy.shape[0] == 1:
            return bool(np.all(np.abs(xy[0] - pt) <= self.tol))
        d = points_segments_distance(np.array([pt]), xy[:-1], xy[1:])[0]
        return bool(np.min(d) <= self.tol)

    # --------------------
    # Queries
    # --------------------
    def locate_area(self, pt) -> Location:
        """Location of `pt` relative to the areal members only."""
        pt = (float(pt[0]), float(pt[1]))
        on_ring = False
        for poly in self.polygons:
            loc = self._locate_polygon(pt, poly)
            if loc == Location.INTERIOR:
                return Location.INTERIOR
            if loc == Location.BOUNDARY:
                on_ring = True
        return Location.BOUNDARY if on_ring else Location.EXTERIOR

    def locate(self, pt, area: Optional[Location] = None) -> Location:
        """
        Location of `pt` relative to the whole geometry.

        `area` overrides the areal location of `pt` when the caller has already
        resolved it.
        """
        pt = (float(pt[0]), float(pt[1]))
        if area is None:
            area = self.locate_area(pt)
        if area != Location.EXTERIOR:
            return area

        is_in = False
        n_ends = 0
        if self.points.shape[0]:
            hit = np.all(np.abs(self.points - np.array(pt)) <= self.tol, axis=1)
            is_in = bool(np.any(hit))
        for xy, ends, closed in self.lines:
            if not self._on_line(pt, xy):
                continue
            if not closed and np.any(np.all(np.abs(ends - np.array(pt)) <= self.tol, axis=1)):
                n_ends += 1
            else:
                is_in = True
        if n_ends % 2 == 1:
            return Location.BOUNDARY
        if n_ends > 0 or is_in:
            return Location.INTERIOR
        return Location.EXTERIOR
