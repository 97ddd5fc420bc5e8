# -*- coding: utf-8 -*-
# planar/derived/hull.py

"""
Project: Planar
Date: 10/19/2026

Purpose:
--------
Convex hull by Andrew's monotone chain.

Notes:
------
   - Collinear boundary points are excluded from the hull.
   - Degenerate inputs collapse: all points collinear -> LineString between the
     extremes, all points coincident -> Point, no points -> empty
     GeometryCollection.
"""

from typing import Optional
import numpy as np

from ..config import EngineConfig, resolve
from ..core.geometry import Geometry, empty, line_string, point, polygon
from ..core.kinds import GeometryKind
from ..kernels.predicates import orientation_index
from ..topology.relate import require_supported


def hull_xy(pts: np.ndarray, tol: float = 0.0) -> np.ndarray:
    """
    Hull vertices of a point cloud in CCW order (not closed).

    Returns 1 vertex for coincident input and 2 for collinear input.
    """
    P = np.unique(np.asarray(pts, dtype=float).reshape(-1, 2), axis=0)
    if P.shape[0] <= 2:
        return P

    def half(seq):
        chain = []
        for p in seq:
            while len(chain) >= 2 and orientation_index(chain[-2], chain[-1], p, tol) <= 0:
                chain.pop()
            chain.append(p)
        return chain

    lower = half(P)
    upper = half(P[::-1])
    ring = lower[:-1] + upper[:-1]
    return np.array(ring, dtype=float)


def convex_hull(g: Geometry, config: Optional[EngineConfig] = None) -> Geometry:
    """Smallest convex geometry containing every coordinate of `g`."""
    cfg = resolve(config)
    require_supported(g)
    pts = g.all_xy()
    if pts.shape[0] == 0:
        return empty(GeometryKind.GEOMETRYCOLLECTION)
    H = hull_xy(pts, cfg.tolerance)
    if H.shape[0] == 1:
        return point(*H[0])
    if H.shape[0] == 2:
        return line_string(H)
    return polygon(np.vstack((H, H[:1])))
