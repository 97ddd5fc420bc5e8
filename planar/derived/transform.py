# -*- coding: utf-8 -*-
# planar/derived/transform.py

"""
Project: Planar
Date: 10/19/2026

Purpose
-------
Coordinate transforms that rebuild a geometry with mapped coordinates: affine
family (translate, scale, rotate, general 2x2 + offset) and grid snapping.

Main Tasks
----------
    1. Apply an (N,2) -> (N,2) mapping to every coordinate buffer, keeping the
       kind and the member/ring structure.
    2. Snap to a regular grid and drop the consecutive duplicates this creates.

Notes
-----
- Angles are radians, counter-clockwise.
- `origin` defaults to (0, 0); a Point geometry or an (x, y) pair is accepted.
- Curved kinds are rejected like everywhere else.
"""

import math
from typing import Callable
import numpy as np

from ..core._validation import _drop_consecutive_duplicates
from ..core.buffer import CoordinateBuffer
from ..core.geometry import Geometry, empty
from ..core.kinds import GeometryKind, COLLECTIONS, MULTI
from ..errors import InvalidParameterError
from ..topology.relate import require_supported

__all__ = ["affine", "translate", "scale", "rotate", "snap_to_grid"]


def _map(g: Geometry, fn: Callable[[np.ndarray], np.ndarray]) -> Geometry:
    if g.kind in COLLECTIONS:
        return Geometry(g.kind, members=tuple(_map(m, fn) for m in g.members))
    if g.rings:
        return Geometry(g.kind, rings=tuple(CoordinateBuffer.from_xy(fn(r.xy)) for r in g.rings))
    if g.coords.is_empty():
        return g
    return Geometry(g.kind, coords=CoordinateBuffer.from_xy(fn(g.coords.xy)))


def _origin(origin):
    if origin is None:
        return 0.0, 0.0
    if isinstance(origin, Geometry):
        if origin.kind != GeometryKind.POINT or origin.is_empty():
            raise InvalidParameterError("origin must be a non-empty Point.", {"kind": origin.kind.value})
        return origin.coords.coordinate(0)
    try:
        x, y = origin
        return float(x), float(y)
    except (TypeError, ValueError):
        raise InvalidParameterError("origin must be an (x, y) pair or a Point.", {"origin": origin})


def affine(g: Geometry, a: float, b: float, d: float, e: float,
           xoff: float = 0.0, yoff: float = 0.0) -> Geometry:
    """
    Apply x' = a*x + b*y + xoff, y' = d*x + e*y + yoff to every coordinate.
    """
    require_supported(g)
    M = np.array([[a, b], [d, e]], dtype=float)
    off = np.array([xoff, yoff], dtype=float)
    return _map(g, lambda xy: xy @ M.T + off)


def translate(g: Geometry, dx: float, dy: float) -> Geometry:
    return affine(g, 1.0, 0.0, 0.0, 1.0, dx, dy)


def scale(g: Geometry, sx: float, sy: float, origin=None) -> Geometry:
    """Scale by (sx, sy) about `origin`."""
    x0, y0 = _origin(origin)
    return affine(g, sx, 0.0, 0.0, sy, x0 - sx * x0, y0 - sy * y0)


def rotate(g: Geometry, angle: float, origin=None) -> Geometry:
    """Rotate counter-clockwise by `angle` radians about `origin`."""
    x0, y0 = _origin(origin)
    c, s = math.cos(angle), math.sin(angle)
    return affine(g, c, -s, s, c, x0 - c * x0 + s * y0, y0 - s * x0 - c * y0)


def _snap(g: Geometry, size: float) -> Geometry:
    if g.kind in COLLECTIONS:
        out = []
        for m in g.members:
            s = _snap(m, size)
            if g.kind in MULTI and s.is_empty() and not m.is_empty():
                continue
            out.append(s)
        return Geometry(g.kind, members=tuple(out))
    if g.is_empty():
        return g
    if g.kind != GeometryKind.POLYGON:
        xy = _drop_consecutive_duplicates(np.round(g.coords.xy / size) * size)
        return Geometry(g.kind, coords=CoordinateBuffer.from_xy(xy))
    rings = []
    for i, r in enumerate(g.rings):
        xy = _drop_consecutive_duplicates(np.round(r.xy / size) * size)
        if xy.shape[0] < 4:
            if i == 0:
                return empty(GeometryKind.POLYGON)
            continue
        rings.append(CoordinateBuffer.from_xy(xy))
    return Geometry(g.kind, rings=tuple(rings))


def snap_to_grid(g: Geometry, size: float) -> Geometry:
    """
    Round every coordinate to the nearest multiple of `size`.

    Raises
    ------
    InvalidParameterError
        If `size` is not a finite positive number.
    """
    try:
        s = float(size)
    except (TypeError, ValueError):
        raise InvalidParameterError("grid size must be a number.", {"size": size})
    if not math.isfinite(s) or s <= 0.0:
        raise InvalidParameterError("grid size must be finite and > 0.", {"size": size})
    require_supported(g)
    return _snap(g, s)
