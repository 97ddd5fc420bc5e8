# -*- coding: utf-8 -*-
# planar/derived/buffer.py

"""
Project: Planar
Date: 10/19/2026

Purpose:
--------
Buffer (Minkowski sum with a disc) of a geometry, approximated with polygons.

Main Tasks:
-----------
   1. Points become circles; segments become capsules (convex hull of the two
      end circles). Every arc vertex sits at a global angle k * pi / (2 * q), so
      capsules sharing an endpoint share their circle vertices exactly.
   2. radius > 0: union of the input polygons, the circles and the capsules of
      every line segment and ring segment (balanced-tree union).
   3. radius < 0: union of the input polygons minus the capsules of their ring
      segments (erosion). Non-areal members contribute nothing.

Notes:
------
   - Non-areal input with radius <= 0 yields an empty Polygon.
   - The result is always a Polygon or MultiPolygon (possibly empty).
"""

import logging
import math
import numbers
from typing import List, Optional
import numpy as np

from ..config import EngineConfig, resolve
from ..core.geometry import Geometry, empty, polygon
from ..core.kinds import GeometryKind
from ..errors import InvalidParameterError
from ..overlay import cascaded_union, difference
from ..topology.relate import require_supported
from .hull import hull_xy

logger = logging.getLogger(__name__)


def circle_xy(cx: float, cy: float, r: float, quad_segs: int) -> np.ndarray:
    """4 * quad_segs circle vertices (CCW, not closed) at the global buffer angles."""
    k = np.arange(4 * quad_segs)
    t = k * (0.5 * math.pi / quad_segs)
    return np.column_stack((cx + r * np.cos(t), cy + r * np.sin(t)))


def _closed(H: np.ndarray) -> Geometry:
    return polygon(np.vstack((H, H[:1])))


def capsule(p, q, r: float, quad_segs: int) -> Geometry:
    """Polygon approximating every point within r of segment PQ."""
    pts = np.vstack((circle_xy(p[0], p[1], r, quad_segs), circle_xy(q[0], q[1], r, quad_segs)))
    return _closed(hull_xy(pts))


def _segments(xy: np.ndarray, close: bool):
    if close and xy.shape[0] and not np.array_equal(xy[0], xy[-1]):
        xy = np.vstack((xy, xy[:1]))
    for i in range(xy.shape[0] - 1):
        if not np.array_equal(xy[i], xy[i + 1]):
            yield xy[i], xy[i + 1]


def _polygonal(g: Geometry) -> Geometry:
    """Keep only the polygon parts of an overlay result."""
    if g.kind in (GeometryKind.POLYGON, GeometryKind.MULTIPOLYGON):
        return g
    polys = [leaf for leaf in g.iter_atomic() if leaf.kind == GeometryKind.POLYGON]
    if not polys:
        return empty(GeometryKind.POLYGON)
    if len(polys) == 1:
        return polys[0]
    return Geometry(GeometryKind.MULTIPOLYGON, members=tuple(polys))


def _check_args(radius, quad_segs) -> None:
    if isinstance(quad_segs, bool) or not isinstance(quad_segs, numbers.Integral):
        raise InvalidParameterError("quad_segs must be an integer.", {"quad_segs": quad_segs})
    if quad_segs < 1:
        raise InvalidParameterError("quad_segs must be >= 1.", {"quad_segs": quad_segs})
    try:
        r = float(radius)
    except (TypeError, ValueError):
        raise InvalidParameterError("radius must be a number.", {"radius": radius})
    if not math.isfinite(r):
        raise InvalidParameterError("radius must be finite.", {"radius": radius})


def buffer(g: Geometry, radius: float, quad_segs: Optional[int] = None,
           config: Optional[EngineConfig] = None) -> Geometry:
    """
    Buffer `g` by `radius`.

    Parameters
    ----------
    g : Geometry
        Any simple-features geometry.
    radius : float
        Signed buffer distance (negative erodes areal input).
    quad_segs : int, optional
        Segments per quarter circle; defaults to `EngineConfig.quad_segs`.
    config : EngineConfig, optional

    Returns
    -------
    Geometry
        Polygon or MultiPolygon (empty Polygon when nothing remains).

    Raises
    ------
    InvalidParameterError
        If quad_segs < 1 or the radius is not finite.
    UnsupportedOperandError
        If `g` carries a curved kind.
    """
    cfg = resolve(config)
    q = cfg.quad_segs if quad_segs is None else quad_segs
    _check_args(radius, q)
    require_supported(g)
    r = float(radius)

    leaves = list(g.iter_atomic())
    polys = [leaf for leaf in leaves if leaf.kind == GeometryKind.POLYGON]
    if not leaves or (r <= 0.0 and not polys):
        return empty(GeometryKind.POLYGON)

    if r == 0.0:
        return _polygonal(cascaded_union(polys, cfg))

    if r > 0.0:
        pieces: List[Geometry] = list(polys)
        for leaf in leaves:
            if leaf.kind == GeometryKind.POINT:
                x, y = leaf.coords.coordinate(0)
                pieces.append(_closed(circle_xy(x, y, r, q)))
            elif leaf.kind == GeometryKind.LINESTRING:
                xy = leaf.coords.xy
                segs = list(_segments(xy, close=False))
                if not segs:
                    pieces.append(_closed(circle_xy(xy[0, 0], xy[0, 1], r, q)))
                pieces.extend(capsule(a, b, r, q) for a, b in segs)
            else:
                for ring in leaf.rings:
                    pieces.extend(capsule(a, b, r, q) for a, b in _segments(ring.xy, close=True))
        logger.debug("[buffer] r=%g q=%d: %d pieces", r, q, len(pieces))
        return _polygonal(cascaded_union(pieces, cfg))

    d = -r
    base = cascaded_union(polys, cfg)
    caps = [
        capsule(a, b, d, q)
        for leaf in polys for ring in leaf.rings for a, b in _segments(ring.xy, close=True)
    ]
    logger.debug("[buffer] r=%g q=%d: eroding with %d capsules", r, q, len(caps))
    if not caps:
        return _polygonal(base)
    return _polygonal(difference(base, cascaded_union(caps, cfg), cfg))
