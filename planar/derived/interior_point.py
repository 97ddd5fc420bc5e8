# -*- coding: utf-8 -*-
# planar/derived/interior_point.py

"""
Project: Planar
Date: 10/19/2026

Purpose:
--------
A point guaranteed to lie on the geometry (interior when the geometry has one).

Main Tasks:
-----------
   1. Polygons: choose a scan-line y strictly between vertex ordinates (closest
      ordinates above and below the envelope center), intersect it with every
      ring, pair the sorted crossings into interior intervals and return the
      midpoint of the widest interval over all polygons.
   2. Lines: interior vertex nearest the centroid, else the nearest endpoint.
   3. Points: the point nearest the centroid.

Notes:
------
   - The highest dimension with a usable answer wins; polygons with no interior
     interval (zero area) fall back to their rings as lines.
"""

from typing import List, Optional, Tuple
import numpy as np

from ..config import EngineConfig
from ..core.geometry import Geometry, point
from ..errors import EmptyGeometryError
from ..kernels.loop import ensure_closed
from ..topology.relate import require_supported
from .centroid import centroid_xy, linear_centroid, split_by_dimension


def _bisector_y(poly: Geometry) -> float:
    shell = poly.rings[0].xy
    lo, hi = float(shell[:, 1].min()), float(shell[:, 1].max())
    centre = 0.5 * (lo + hi)
    lo_y, hi_y = lo, hi
    for r in poly.rings:
        for y in r.xy[:, 1]:
            y = float(y)
            if y <= centre:
                if y > lo_y:
                    lo_y = y
            elif y < hi_y:
                hi_y = y
    return 0.5 * (lo_y + hi_y)


def _widest_interval(poly: Geometry) -> Optional[Tuple[float, float, float]]:
    """(width, x_mid, y) of the widest interior scan-line interval, or None."""
    y = _bisector_y(poly)
    xs: List[float] = []
    for r in poly.rings:
        R = ensure_closed(r.xy)
        a, b = R[:-1], R[1:]
        # half-open rule: an edge counts if it straddles y (one end strictly above)
        straddle = (a[:, 1] > y) != (b[:, 1] > y)
        if not np.any(straddle):
            continue
        a, b = a[straddle], b[straddle]
        xs.extend((a[:, 0] + (y - a[:, 1]) * (b[:, 0] - a[:, 0]) / (b[:, 1] - a[:, 1])).tolist())
    xs.sort()
    best = None
    for i in range(0, len(xs) - 1, 2):
        w = xs[i + 1] - xs[i]
        if w > 0.0 and (best is None or w > best[0]):
            best = (w, 0.5 * (xs[i] + xs[i + 1]), y)
    return best


def _nearest(cands: np.ndarray, c: Tuple[float, float]) -> Tuple[float, float]:
    d = np.hypot(cands[:, 0] - c[0], cands[:, 1] - c[1])
    p = cands[int(np.argmin(d))]
    return float(p[0]), float(p[1])


def _on_lines(lines: List[np.ndarray]) -> Optional[Tuple[float, float]]:
    c = linear_centroid(lines)
    if c is None:
        return None
    inner = [xy[1:-1] for xy in lines if xy.shape[0] > 2]
    if inner:
        return _nearest(np.vstack(inner), c)
    ends = np.vstack([xy[[0, -1]] for xy in lines if xy.shape[0] >= 2])
    return _nearest(ends, c)


def point_on_surface(g: Geometry, config: Optional[EngineConfig] = None) -> Geometry:
    """
    Point lying on `g`.

    Raises
    ------
    EmptyGeometryError
        If `g` is empty.
    """
    require_supported(g)
    if g.is_empty():
        raise EmptyGeometryError("st_point_on_surface of an empty geometry.", {"kind": g.kind.value})

    polys, lines, rings, pts = split_by_dimension(g)
    if polys:
        best = None
        for poly in polys:
            iv = _widest_interval(poly)
            if iv is not None and (best is None or iv[0] > best[0]):
                best = iv
        if best is not None:
            return point(best[1], best[2])
    linear = (rings + lines) if polys else lines
    if linear:
        p = _on_lines(linear)
        if p is not None:
            return point(*p)
    V = np.vstack(pts + lines + rings)
    return point(*_nearest(V, centroid_xy(g)))
