# -*- coding: utf-8 -*-
# planar/validity/simple.py

"""
Project: Planar
Date: 10/19/2026

Purpose:
--------
Simplicity tests (no anomalous self-intersection / self-tangency).

Rules:
------
   - Point: always simple.
   - MultiPoint: no two coincident points.
   - LineString: non-adjacent segments never meet, adjacent segments share only
     their common vertex; a closed line may meet itself at the closing vertex.
     Consecutive duplicate vertices are ignored.
   - MultiLineString: members are simple and meet only at points that are
     boundary (non-closed endpoints) of both members.
   - Polygon / MultiPolygon: every ring is simple.
   - GeometryCollection: every member is simple.

Notes:
------
   - Candidate segment pairs are prefiltered with a NumPy bbox test.
"""

from typing import List, Optional, Tuple
import numpy as np

from ..config import EngineConfig, resolve
from ..core._validation import _drop_consecutive_duplicates
from ..core.kinds import GeometryKind
from ..kernels.loop import is_closed
from ..kernels.predicates import (
    SegmentRelation, candidate_pairs, classify_segments, same_point,
)
from ..topology.relate import require_supported


def self_intersections(xy: np.ndarray, tol: float) -> List[Tuple[float, float]]:
    """
    Points where a polyline meets itself anomalously (see module rules).

    Returns an empty list for a simple line.
    """
    P = _drop_consecutive_duplicates(np.asarray(xy, dtype=float))
    n = P.shape[0] - 1
    if n < 2:
        return []
    closed = is_closed(P)
    A, B = P[:-1], P[1:]
    bad: List[Tuple[float, float]] = []
    for i, j in candidate_pairs(A, B, tol):
        rel, pts = classify_segments(A[i], B[i], A[j], B[j], tol)
        if rel == SegmentRelation.DISJOINT:
            continue
        if rel == SegmentRelation.TOUCH:
            shared = None
            if j == i + 1:
                shared = B[i]
            elif closed and i == 0 and j == n - 1:
                shared = A[0]
            if shared is not None and same_point(pts[0], shared, tol):
                continue
        bad.append(tuple(float(v) for v in pts[0]))
    return bad


def line_is_simple(xy: np.ndarray, tol: float = 0.0) -> bool:
    return not self_intersections(xy, tol)


def _boundary_points(xy: np.ndarray) -> List[np.ndarray]:
    if xy.shape[0] < 2 or is_closed(xy):
        return []
    return [xy[0], xy[-1]]


def _multiline_is_simple(lines: List[np.ndarray], tol: float) -> bool:
    if not all(line_is_simple(xy, tol) for xy in lines):
        return False
    lines = [_drop_consecutive_duplicates(xy) for xy in lines]
    for a in range(len(lines)):
        for b in range(a + 1, len(lines)):
            La, Lb = lines[a], lines[b]
            if La.shape[0] < 2 or Lb.shape[0] < 2:
                continue
            ends_a = _boundary_points(La)
            ends_b = _boundary_points(Lb)
            for i, j in candidate_pairs(La[:-1], La[1:], tol, Lb[:-1], Lb[1:]):
                rel, pts = classify_segments(La[i], La[i + 1], Lb[j], Lb[j + 1], tol)
                if rel == SegmentRelation.DISJOINT:
                    continue
                if rel != SegmentRelation.TOUCH:
                    return False
                p = pts[0]
                if not (any(same_point(p, e, tol) for e in ends_a) and
                        any(same_point(p, e, tol) for e in ends_b)):
                    return False
    return True


def _multipoint_is_simple(pts: np.ndarray, tol: float) -> bool:
    for i in range(pts.shape[0]):
        d = np.abs(pts[i + 1:] - pts[i])
        if np.any(np.all(d <= tol, axis=1)):
            return False
    return True


def is_simple(g, config: Optional[EngineConfig] = None) -> bool:
    """
    Simplicity of any simple-features geometry.

    Raises
    ------
    UnsupportedOperandError
        If `g` (or a member) carries a curved kind.
    """
    cfg = resolve(config)
    require_supported(g)
    tol = cfg.tolerance
    if g.is_empty():
        return True
    kind = g.kind
    if kind == GeometryKind.POINT:
        return True
    if kind == GeometryKind.LINESTRING:
        return line_is_simple(g.coords.xy, tol)
    if kind == GeometryKind.POLYGON:
        return all(line_is_simple(r.xy, tol) for r in g.rings)
    if kind == GeometryKind.MULTIPOINT:
        pts = np.array([m.coords.coordinate(0) for m in g.members if not m.is_empty()],
                       dtype=float).reshape(-1, 2)
        return _multipoint_is_simple(pts, tol)
    if kind == GeometryKind.MULTILINESTRING:
        return _multiline_is_simple([m.coords.xy for m in g.members if not m.is_empty()], tol)
    return all(is_simple(m, cfg) for m in g.members)
