# -*- coding: utf-8 -*-
# planar/metrics/distance.py

"""
Project: Planar
Date: 10/19/2026

Purpose:
--------
Minimum Euclidean distance between two geometries.

Main Tasks:
-----------
   1. Return 0 when any component of one operand lies in a polygon of the other
      (containment short-circuit, tested at one vertex per component).
   2. Return 0 when any segment pair intersects (bbox-prefiltered).
   3. Otherwise take the minimum over vertex/vertex and vertex/segment distances,
      vectorized with NumPy broadcasting.

Notes:
------
   - For non-intersecting segments the minimum distance is always attained at an
     endpoint of one of them, so vertex/segment terms are sufficient.
"""

from typing import List, Optional, Tuple
import math
import numpy as np

from ..config import EngineConfig, resolve
from ..core.kinds import GeometryKind
from ..errors import EmptyGeometryError
from ..kernels.predicates import (
    Location, SegmentRelation, candidate_pairs, classify_segments, points_segments_distance,
)
from ..topology.locate import PointLocator
from ..topology.relate import require_supported


def _primitives(g) -> Tuple[np.ndarray, np.ndarray, np.ndarray, List[np.ndarray]]:
    """Vertices (V,2), segment starts/ends (S,2) and one probe point per component."""
    verts, starts, ends, probes = [], [], [], []
    for leaf in g.iter_atomic():
        if leaf.kind == GeometryKind.POINT:
            xy = leaf.coords.xy
            verts.append(xy)
            probes.append(xy[0])
            continue
        blocks = [leaf.coords.xy] if leaf.kind == GeometryKind.LINESTRING else [r.xy for r in leaf.rings]
        for i, xy in enumerate(blocks):
            if xy.shape[0] == 0:
                continue
            if leaf.kind == GeometryKind.POLYGON and not np.array_equal(xy[0], xy[-1]):
                xy = np.vstack((xy, xy[0]))
            verts.append(xy)
            starts.append(xy[:-1])
            ends.append(xy[1:])
            if i == 0:
                probes.append(xy[0])
    V = np.vstack(verts) if verts else np.zeros((0, 2))
    A = np.vstack(starts) if starts else np.zeros((0, 2))
    B = np.vstack(ends) if ends else np.zeros((0, 2))
    return V, A, B, probes


def _inside_area(locator: PointLocator, probes) -> bool:
    if not locator.has_area:
        return False
    return any(locator.locate_area(p) != Location.EXTERIOR for p in probes)


def distance(a, b, config: Optional[EngineConfig] = None) -> float:
    """
    Minimum distance between `a` and `b`.

    Raises
    ------
    EmptyGeometryError
        If either operand is empty.
    UnsupportedOperandError
        If either operand carries a curved kind.
    """
    cfg = resolve(config)
    require_supported(a, b)
    if a.is_empty() or b.is_empty():
        raise EmptyGeometryError(
            "st_distance needs two non-empty operands.",
            {"a": a.kind.value, "b": b.kind.value, "a_empty": a.is_empty(), "b_empty": b.is_empty()},
        )
    tol = cfg.tolerance
    Va, Aa, Ba, probes_a = _primitives(a)
    Vb, Ab, Bb, probes_b = _primitives(b)

    if _inside_area(PointLocator(a, tol), probes_b) or _inside_area(PointLocator(b, tol), probes_a):
        return 0.0

    for i, j in candidate_pairs(Aa, Ba, tol, Ab, Bb):
        rel, _ = classify_segments(Aa[i], Ba[i], Ab[j], Bb[j], tol)
        if rel != SegmentRelation.DISJOINT:
            return 0.0

    best = math.inf
    if Va.shape[0] and Vb.shape[0]:
        d = np.hypot(Va[:, None, 0] - Vb[None, :, 0], Va[:, None, 1] - Vb[None, :, 1])
        best = min(best, float(d.min()))
    if Va.shape[0] and Ab.shape[0]:
        best = min(best, float(points_segments_distance(Va, Ab, Bb).min()))
    if Vb.shape[0] and Aa.shape[0]:
        best = min(best, float(points_segments_distance(Vb, Aa, Ba).min()))
    if best <= tol:
        return 0.0
    return best
