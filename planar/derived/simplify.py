# -*- coding: utf-8 -*-
# planar/derived/simplify.py

"""
Project: Planar
Date: 10/19/2026

Purpose:
--------
Douglas-Peucker simplification.

Rules:
------
   - A vertex is dropped only if its distance to the chord of its span is
     strictly less than the tolerance; tolerance 0 therefore keeps every vertex.
   - Line endpoints and ring closure vertices are always kept.
   - Rings left with fewer than 4 coordinates are dropped; a collapsed shell
     yields an empty polygon (and collapsed members leave their Multi*).
   - The result is not guaranteed to be valid.
"""

import math
import numpy as np

from ..core.geometry import Geometry, empty
from ..core.buffer import CoordinateBuffer
from ..core.kinds import GeometryKind, COLLECTIONS, MULTI
from ..errors import InvalidParameterError
from ..kernels.predicates import points_segments_distance
from ..topology.relate import require_supported


def douglas_peucker(xy: np.ndarray, tolerance: float) -> np.ndarray:
    """Simplified copy of an (N, 2) polyline; endpoints are kept."""
    n = xy.shape[0]
    if n <= 2:
        return xy.copy()
    keep = np.zeros(n, dtype=bool)
    keep[0] = keep[-1] = True
    stack = [(0, n - 1)]
    while stack:
        i, j = stack.pop()
        if j <= i + 1:
            continue
        d = points_segments_distance(xy[i + 1:j], xy[i:i + 1], xy[j:j + 1])[:, 0]
        k = int(np.argmax(d))
        if d[k] >= tolerance:
            m = i + 1 + k
            keep[m] = True
            stack.append((i, m))
            stack.append((m, j))
    return xy[keep]


def _simplify(g: Geometry, tol: float) -> Geometry:
    if g.kind in COLLECTIONS:
        out = []
        for m in g.members:
            s = _simplify(m, tol)
            if g.kind in MULTI and s.is_empty() and not m.is_empty():
                continue
            out.append(s)
        return Geometry(g.kind, members=tuple(out))
    if g.is_empty() or g.kind == GeometryKind.POINT:
        return g
    if g.kind == GeometryKind.LINESTRING:
        return Geometry(g.kind, coords=CoordinateBuffer.from_xy(douglas_peucker(g.coords.xy, tol)))
    rings = []
    for i, r in enumerate(g.rings):
        s = douglas_peucker(r.xy, tol)
        if s.shape[0] < 4:
            if i == 0:
                return empty(GeometryKind.POLYGON)
            continue
        rings.append(CoordinateBuffer.from_xy(s))
    return Geometry(g.kind, rings=tuple(rings))


def simplify(g: Geometry, tolerance: float) -> Geometry:
    """
    Douglas-Peucker simplification of every line and ring of `g`.

    Raises
    ------
    InvalidParameterError
        If the tolerance is negative or not a finite number.
    UnsupportedOperandError
        If `g` carries a curved kind.
    """
    try:
        tol = float(tolerance)
    except (TypeError, ValueError):
        raise InvalidParameterError("tolerance must be a number.", {"tolerance": tolerance})
    if not math.isfinite(tol) or tol < 0.0:
        raise InvalidParameterError("tolerance must be finite and >= 0.", {"tolerance": tolerance})
    require_supported(g)
    return _simplify(g, tol)
