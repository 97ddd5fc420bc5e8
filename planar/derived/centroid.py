# -*- coding: utf-8 -*-
# planar/derived/centroid.py

"""
Project: Planar
Date: 10/19/2026

Purpose:
--------
Centroid (center of mass) of a geometry.

Main Tasks:
-----------
   1. Areal members: area-weighted ring centroids (holes subtract).
   2. Linear members: length-weighted segment midpoints.
   3. Punctal members: arithmetic mean.

Notes:
------
   - Only the highest dimension present contributes. A polygon set with zero
     total area falls back to its rings as lines; zero total length falls back
     to the mean of all vertices.
"""

from typing import List, Optional, Tuple
import numpy as np

from ..config import EngineConfig
from ..core.geometry import Geometry, point
from ..core.kinds import GeometryKind
from ..errors import EmptyGeometryError
from ..kernels.loop import ensure_closed
from ..topology.relate import require_supported


def _ring_moments(ring: np.ndarray) -> Tuple[float, float, float]:
    """(signed area, area * cx, area * cy) of a ring, computed about its first vertex."""
    R = ensure_closed(ring)
    if R.shape[0] < 4:
        return 0.0, 0.0, 0.0
    o = R[0]
    P = R - o
    x0, y0 = P[:-1, 0], P[:-1, 1]
    x1, y1 = P[1:, 0], P[1:, 1]
    cross = x0 * y1 - x1 * y0
    a = 0.5 * float(cross.sum())
    mx = float(((x0 + x1) * cross).sum()) / 6.0
    my = float(((y0 + y1) * cross).sum()) / 6.0
    return a, mx + a * o[0], my + a * o[1]


def areal_centroid(polygons: List[Geometry]) -> Optional[Tuple[float, float]]:
    """Area-weighted centroid of polygons, None if the total area is zero."""
    A = Mx = My = 0.0
    for poly in polygons:
        for i, r in enumerate(poly.rings):
            a, mx, my = _ring_moments(r.xy)
            if a == 0.0:
                continue
            # shells add, holes subtract, whatever their stored orientation
            s = (1.0 if i == 0 else -1.0) * (1.0 if a > 0.0 else -1.0)
            A += s * a
            Mx += s * mx
            My += s * my
    if A <= 0.0:
        return None
    return Mx / A, My / A


def linear_centroid(lines: List[np.ndarray]) -> Optional[Tuple[float, float]]:
    """Length-weighted centroid of polylines, None if the total length is zero."""
    L = Mx = My = 0.0
    for xy in lines:
        if xy.shape[0] < 2:
            continue
        seg = np.hypot(xy[1:, 0] - xy[:-1, 0], xy[1:, 1] - xy[:-1, 1])
        mid = 0.5 * (xy[1:] + xy[:-1])
        L += float(seg.sum())
        Mx += float((seg * mid[:, 0]).sum())
        My += float((seg * mid[:, 1]).sum())
    if L <= 0.0:
        return None
    return Mx / L, My / L


def split_by_dimension(g: Geometry):
    """(polygons, line arrays, ring arrays of polygons, point arrays) of the atomic leaves."""
    polys, lines, rings, pts = [], [], [], []
    for leaf in g.iter_atomic():
        if leaf.kind == GeometryKind.POLYGON:
            polys.append(leaf)
            rings.extend(ensure_closed(r.xy) for r in leaf.rings if len(r))
        elif leaf.kind == GeometryKind.LINESTRING:
            lines.append(leaf.coords.xy)
        else:
            pts.append(leaf.coords.xy)
    return polys, lines, rings, pts


def centroid_xy(g: Geometry) -> Tuple[float, float]:
    polys, lines, rings, pts = split_by_dimension(g)
    if polys:
        c = areal_centroid(polys)
        if c is not None:
            return c
    linear = (rings + lines) if polys else lines
    if linear:
        c = linear_centroid(linear)
        if c is not None:
            return c
    V = np.vstack(pts + lines + rings)
    m = V.mean(axis=0)
    return float(m[0]), float(m[1])


def centroid(g: Geometry, config: Optional[EngineConfig] = None) -> Geometry:
    """
    Centroid of `g` as a Point.

    Raises
    ------
    EmptyGeometryError
        If `g` is empty.
    """
    require_supported(g)
    if g.is_empty():
        raise EmptyGeometryError("st_centroid of an empty geometry.", {"kind": g.kind.value})
    return point(*centroid_xy(g))
