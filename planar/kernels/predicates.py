# -*- coding: utf-8 -*-
# planar/kernels/predicates.py

"""
Project: Planar
Date: 10/19/2026

Purpose:
--------
Robust 2D primitives shared by the topology, metric, overlay and validity engines.
NumPy-only routines operating on (x, y) pairs.

Main Tasks:
-----------
   - Orientation with a distance-based zero band.
   - Segment/segment classification: disjoint, proper crossing, endpoint touch,
     collinear overlap, with the intersection point(s).
   - Point/segment distance (scalar and broadcast) and point-in-ring location.

Notes:
------
   - `tol` is an absolute distance; callers pass `EngineConfig.tolerance`.
   - Functions return plain Python floats/tuples where appropriate.
   - No logging, no I/O.
"""

from enum import IntEnum
from typing import Iterator, Optional, Tuple
import math
import numpy as np


class Location(IntEnum):
    """Point-set location; values index rows/columns of the DE-9IM."""
    INTERIOR = 0
    BOUNDARY = 1
    EXTERIOR = 2


class SegmentRelation(IntEnum):
    DISJOINT = 0
    PROPER = 1      # interiors cross at a single point
    TOUCH = 2       # single common point, at an endpoint of at least one segment
    COLLINEAR = 3   # overlap along a sub-segment


Point2 = Tuple[float, float]


# ---------------------------
# Orientation
# ---------------------------
def orient(a, b, c) -> float:
    """Twice the signed area of triangle ABC (CCW > 0)."""
    return (b[0] - a[0]) * (c[1] - a[1]) - (b[1] - a[1]) * (c[0] - a[0])


def orientation_index(a, b, c, tol: float = 0.0) -> int:
    """
    Side of C relative to the directed line A->B: +1 left, -1 right, 0 collinear.

    C is collinear when its distance to the line is <= tol. A degenerate line
    (A == B) reports 0.
    """
    cr = orient(a, b, c)
    ln = math.hypot(b[0] - a[0], b[1] - a[1])
    if ln == 0.0:
        return 0
    if abs(cr) <= tol * ln:
        return 0
    return 1 if cr > 0.0 else -1


# ---------------------------
# Distances
# ---------------------------
def point_segment_distance(p, a, b) -> float:
    """Euclidean distance from P to the closed segment AB."""
    dx = b[0] - a[0]
    dy = b[1] - a[1]
    den = dx * dx + dy * dy
    if den == 0.0:
        return math.hypot(p[0] - a[0], p[1] - a[1])
    t = ((p[0] - a[0]) * dx + (p[1] - a[1]) * dy) / den
    t = min(1.0, max(0.0, t))
    return math.hypot(p[0] - (a[0] + t * dx), p[1] - (a[1] + t * dy))


def points_segments_distance(P: np.ndarray, A: np.ndarray, B: np.ndarray) -> np.ndarray:
    """
    Broadcast distance matrix from points to segments.

    Parameters
    ----------
    P : (n, 2) points
    A, B : (m, 2) segment start/end points

    Returns
    -------
    np.ndarray
        (n, m) distances.
    """
    P = np.asarray(P, dtype=float).reshape(-1, 2)
    A = np.asarray(A, dtype=float).reshape(-1, 2)
    B = np.asarray(B, dtype=float).reshape(-1, 2)
    d = B - A                                   # (m,2)
    den = np.einsum("ij,ij->i", d, d)           # (m,)
    rel = P[:, None, :] - A[None, :, :]         # (n,m,2)
    with np.errstate(invalid="ignore", divide="ignore"):
        t = np.einsum("nmk,mk->nm", rel, d) / np.where(den > 0.0, den, 1.0)
    t = np.clip(np.where(den > 0.0, t, 0.0), 0.0, 1.0)
    proj = A[None, :, :] + t[..., None] * d[None, :, :]
    return np.hypot(P[:, None, 0] - proj[..., 0], P[:, None, 1] - proj[..., 1])


def point_on_segment(p, a, b, tol: float = 0.0) -> bool:
    """True if P lies on the closed segment AB within `tol`."""
    if (p[0] < min(a[0], b[0]) - tol or p[0] > max(a[0], b[0]) + tol or
            p[1] < min(a[1], b[1]) - tol or p[1] > max(a[1], b[1]) + tol):
        return False
    return point_segment_distance(p, a, b) <= tol


def same_point(a, b, tol: float = 0.0) -> bool:
    return abs(a[0] - b[0]) <= tol and abs(a[1] - b[1]) <= tol


# ---------------------------
# Segment intersection
# ---------------------------
def _bbox_disjoint(p, q, r, s, tol: float) -> bool:
    return (max(p[0], q[0]) + tol < min(r[0], s[0]) or
            max(r[0], s[0]) + tol < min(p[0], q[0]) or
            max(p[1], q[1]) + tol < min(r[1], s[1]) or
            max(r[1], s[1]) + tol < min(p[1], q[1]))


def _proper_point(p, q, r, s) -> Point2:
    """Crossing point of two properly intersecting segments, clamped to both boxes."""
    d1x, d1y = q[0] - p[0], q[1] - p[1]
    d2x, d2y = s[0] - r[0], s[1] - r[1]
    den = d1x * d2y - d1y * d2x
    t = ((r[0] - p[0]) * d2y - (r[1] - p[1]) * d2x) / den
    x = p[0] + t * d1x
    y = p[1] + t * d1y
    x = min(max(x, max(min(p[0], q[0]), min(r[0], s[0]))), min(max(p[0], q[0]), max(r[0], s[0])))
    y = min(max(y, max(min(p[1], q[1]), min(r[1], s[1]))), min(max(p[1], q[1]), max(r[1], s[1])))
    return (float(x), float(y))


def classify_segments(p, q, r, s, tol: float = 0.0):
    """
    Classify the intersection of closed segments PQ and RS.

    Returns
    -------
    (SegmentRelation, tuple of points)
        DISJOINT -> ()
        PROPER   -> (x,)       crossing point interior to both
        TOUCH    -> (x,)       an input endpoint lying on the other segment
        COLLINEAR-> (x0, x1)   overlap ends, ordered along PQ

    Notes
    -----
    Endpoint hits always report the input endpoint itself (never a recomputed
    coordinate) so shared vertices stay bit-identical downstream.
    """
    p = (float(p[0]), float(p[1])); q = (float(q[0]), float(q[1]))
    r = (float(r[0]), float(r[1])); s = (float(s[0]), float(s[1]))
    if _bbox_disjoint(p, q, r, s, tol):
        return SegmentRelation.DISJOINT, ()

    o1 = orientation_index(p, q, r, tol)
    o2 = orientation_index(p, q, s, tol)
    o3 = orientation_index(r, s, p, tol)
    o4 = orientation_index(r, s, q, tol)

    hits = []
    if point_on_segment(p, r, s, tol):
        hits.append(p)
    if point_on_segment(q, r, s, tol):
        hits.append(q)
    if point_on_segment(r, p, q, tol):
        hits.append(r)
    if point_on_segment(s, p, q, tol):
        hits.append(s)

    uniq = []
    for h in hits:
        if not any(same_point(h, u, tol) for u in uniq):
            uniq.append(h)

    collinear = (o1 == 0 and o2 == 0) or (o3 == 0 and o4 == 0)
    if collinear:
        if not uniq:
            return SegmentRelation.DISJOINT, ()
        if len(uniq) == 1:
            return SegmentRelation.TOUCH, (uniq[0],)
        dx, dy = q[0] - p[0], q[1] - p[1]
        proj = [(u[0] - p[0]) * dx + (u[1] - p[1]) * dy for u in uniq]
        lo = uniq[int(np.argmin(proj))]
        hi = uniq[int(np.argmax(proj))]
        if same_point(lo, hi, tol):
            return SegmentRelation.TOUCH, (lo,)
        return SegmentRelation.COLLINEAR, (lo, hi)

    if uniq:
        return SegmentRelation.TOUCH, (uniq[0],)

    if o1 * o2 < 0 and o3 * o4 < 0:
        return SegmentRelation.PROPER, (_proper_point(p, q, r, s),)
    return SegmentRelation.DISJOINT, ()


# ---------------------------
# Point in ring
# ---------------------------
def locate_in_ring(pt, ring_xy: np.ndarray, tol: float = 0.0) -> Location:
    """
    Location of a point relative to the area bounded by a closed ring.

    Boundary is tested first (distance to any edge <= tol); otherwise the
    crossing-number rule decides interior/exterior. The ring may be given with or
    without the repeated closing vertex.
    """
    R = np.asarray(ring_xy, dtype=float)
    if R.shape[0] < 2:
        return Location.EXTERIOR
    if not np.array_equal(R[0], R[-1]):
        R = np.vstack((R, R[0]))
    A = R[:-1]
    B = R[1:]
    px, py = float(pt[0]), float(pt[1])

    d = points_segments_distance(np.array([[px, py]]), A, B)[0]
    if d.size and float(np.min(d)) <= tol:
        return Location.BOUNDARY

    ya = A[:, 1]
    yb = B[:, 1]
    straddle = (ya > py) != (yb > py)
    if not np.any(straddle):
        return Location.EXTERIOR
    xa = A[straddle, 0]
    xb = B[straddle, 0]
    ya = ya[straddle]
    yb = yb[straddle]
    xint = xa + (py - ya) * (xb - xa) / (yb - ya)
    crossings = int(np.count_nonzero(xint > px))
    return Location.INTERIOR if crossings % 2 == 1 else Location.EXTERIOR


# ---------------------------
# Candidate pairs
# ---------------------------
def candidate_pairs(A: np.ndarray, B: np.ndarray, tol: float,
                    C: Optional[np.ndarray] = None, D: Optional[np.ndarray] = None
                    ) -> Iterator[Tuple[int, int]]:
    """
    Yield index pairs of segments whose bounding boxes overlap (within tol).

    With one segment set (A, B) pairs are (i, j), i < j. With a second set
    (C, D) pairs are (i, j) across the two sets.
    """
    cross = C is not None
    if not cross:
        C, D = A, B
    if A.shape[0] == 0 or C.shape[0] == 0:
        return
    xmin1 = np.minimum(A[:, 0], B[:, 0]) - tol
    xmax1 = np.maximum(A[:, 0], B[:, 0]) + tol
    ymin1 = np.minimum(A[:, 1], B[:, 1]) - tol
    ymax1 = np.maximum(A[:, 1], B[:, 1]) + tol
    xmin2 = np.minimum(C[:, 0], D[:, 0])
    xmax2 = np.maximum(C[:, 0], D[:, 0])
    ymin2 = np.minimum(C[:, 1], D[:, 1])
    ymax2 = np.maximum(C[:, 1], D[:, 1])
    for i in range(A.shape[0]):
        lo = 0 if cross else i + 1
        hit = np.nonzero(
            (xmin2[lo:] <= xmax1[i]) & (xmax2[lo:] >= xmin1[i]) &
            (ymin2[lo:] <= ymax1[i]) & (ymax2[lo:] >= ymin1[i])
        )[0] + lo
        for j in hit:
            yield i, int(j)
