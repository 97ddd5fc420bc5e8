# -*- coding: utf-8 -*-
# planar/kernels/loop.py

"""
Project: Planar
Date: 10/19/2026

Purpose:
--------
This module owns *ring-level* concerns:
   - Closure predicates and enforcement,
   - Signed area (positive for CCW rings),
   - Canonical orientation with stable, deterministic behavior,
   - Polyline length.

Notes:
------------
   - Pure NumPy; no logging, plotting, or file I/O.
   - Functions are side-effect free (inputs are never mutated).
   - Works with arrays shaped (N, 2). A "closed" ring repeats its first vertex last;
     functions that accept both open/closed loops document this.
"""

import numpy as np
from ..core._validation import _assert_xy, _is_exactly_closed


def is_closed(points: np.ndarray) -> bool:
    """
    Predicate: does the sequence close on itself with bit-identical endpoints?
    """
    _assert_xy(points)
    return _is_exactly_closed(points)


def ensure_closed(points: np.ndarray) -> np.ndarray:
    """
    Ensure the ring is closed. If last != first, append the first vertex.

    Notes
    -----
    - If already closed, the original array reference is returned (no copy).
    """
    _assert_xy(points)
    if points.shape[0] == 0 or _is_exactly_closed(points):
        return points
    return np.vstack((points, points[0]))


def signed_area(points: np.ndarray) -> float:
    """
    Shoelace signed area for a ring.

    Conventions
    -----------
    - Positive area => counter-clockwise (CCW) orientation.
    - The ring may be explicitly closed or not; the formula connects last->first.
    - Fewer than 3 vertices yields 0.0 (degenerate ring).
    """
    _assert_xy(points)
    if points.shape[0] < 3:
        return 0.0
    # Shift to the first vertex to limit cancellation for far-from-origin rings
    P = points - points[0]
    x = P[:, 0]
    y = P[:, 1]
    area2 = np.dot(x, np.roll(y, -1)) - np.dot(y, np.roll(x, -1))
    return 0.5 * float(area2)


def orient_ring(points: np.ndarray, ccw: bool = True) -> np.ndarray:
    """
    Return the closed ring with the requested orientation.

    The only reordering performed is a full reversal when needed; the closing
    vertex stays equal to the first.
    """
    P = ensure_closed(points)
    if P.shape[0] < 4:
        return P
    if (signed_area(P) > 0.0) == ccw:
        return P
    return P[::-1].copy()


def polyline_length(points: np.ndarray) -> float:
    """Sum of segment lengths of an (N, 2) polyline (0.0 for N < 2)."""
    _assert_xy(points)
    if points.shape[0] < 2:
        return 0.0
    seg = np.linalg.norm(points[1:] - points[:-1], axis=1)
    return float(np.sum(seg))

