# -*- coding: utf-8 -*-
# planar/overlay/overlay.py

"""
Project: Planar
Date: 10/19/2026

Purpose:
--------
Boolean set operations on planar geometries: intersection, union, difference
and symmetric difference.

Main Tasks:
-----------
   1. Node both operands into one planar graph (same arrangement as relate).
   2. Select result elements by evaluating the boolean operation on labels:
        - faces:  an edge side is in the result if op(side in A, side in B);
                  edges with exactly one result side bound the result area,
        - edges:  kept as lines if op(edge in closure A, in closure B) holds
                  and the edge is not already covered by the result area,
        - nodes:  kept as points if op holds and nothing else covers them.
   3. Assemble polygons, lines and points (see `assemble`).

Notes:
------
   - Empty results are typed by the operand dimensions: intersection takes the
     lowest, union and symmetric difference the highest, difference keeps A's.
   - `cascaded_union` merges many geometries pairwise in a balanced tree.
"""

import logging
from typing import Dict, List, Optional, Sequence

from ..config import EngineConfig, resolve
from ..core.geometry import Geometry, empty, point
from ..core.kinds import ATOMIC_OF_DIMENSION, GeometryKind
from ..errors import InvalidParameterError
from ..kernels.predicates import Location
from ..topology.graph import build_graph, EdgeKey
from ..topology.labels import GraphLabeler
from ..topology.relate import require_supported
from .assemble import build_polygons, build_result, merge_lines, trace_rings

logger = logging.getLogger(__name__)

INTERSECTION = "intersection"
UNION = "union"
DIFFERENCE = "difference"
SYMDIFFERENCE = "symdifference"

_OPS = {
    INTERSECTION: lambda a, b: a and b,
    UNION: lambda a, b: a or b,
    DIFFERENCE: lambda a, b: a and not b,
    SYMDIFFERENCE: lambda a, b: a != b,
}


def _empty_kind(a: Geometry, b: Geometry, op: str) -> GeometryKind:
    da, db = a.dimensions(), b.dimensions()
    if op == INTERSECTION:
        dim = min(da, db) if da >= 0 and db >= 0 else -1
    elif op == DIFFERENCE:
        dim = da
    else:
        dim = max(da, db)
    return ATOMIC_OF_DIMENSION.get(dim, GeometryKind.GEOMETRYCOLLECTION)


def overlay(a: Geometry, b: Geometry, op: str, config: Optional[EngineConfig] = None) -> Geometry:
    """
    Compute `a op b`.

    Parameters
    ----------
    a, b : Geometry
        Operands (any simple-features kind, including collections).
    op : str
        One of INTERSECTION, UNION, DIFFERENCE, SYMDIFFERENCE.
    config : EngineConfig, optional
        Tolerance source; defaults to `DEFAULT_CONFIG`.

    Returns
    -------
    Geometry
        Result in lowest-surprise form (atomic, Multi, collection or typed empty).

    Raises
    ------
    UnsupportedOperandError
        If either operand carries a curved kind.
    InvalidParameterError
        If `op` is not a known operation.
    """
    fn = _OPS.get(op)
    if fn is None:
        raise InvalidParameterError("Unknown overlay operation.", {"op": op})
    cfg = resolve(config)
    require_supported(a, b)

    empty_kind = _empty_kind(a, b, op)
    if a.is_empty() and b.is_empty():
        return empty(empty_kind)
    if a.is_empty() and op in (INTERSECTION, DIFFERENCE):
        return empty(empty_kind)
    if b.is_empty() and op == INTERSECTION:
        return empty(empty_kind)

    graph = build_graph([a, b], cfg.tolerance)
    lab = GraphLabeler(graph, (a, b), cfg.tolerance)
    areal = lab.has_area(0) or lab.has_area(1)

    # --- faces ---
    covered = set()
    boundary: List = []
    if areal:
        for key in graph.edges:
            inl = fn(lab.side_in(key, True, 0), lab.side_in(key, True, 1))
            inr = fn(lab.side_in(key, False, 0), lab.side_in(key, False, 1))
            if inl or inr:
                covered.add(key)
            if inl != inr:
                boundary.append(key if inl else (key[1], key[0]))
    rings = trace_rings(graph, boundary)
    polygons = build_polygons(rings, cfg.tolerance)

    # --- edges ---
    line_keys: List[EdgeKey] = []
    direction: Dict[EdgeKey, int] = {}
    for key, e in graph.edges.items():
        if key in covered:
            continue
        if fn(lab.in_closure(key, 0), lab.in_closure(key, 1)):
            line_keys.append(key)
            direction[key] = e.line_dir[0] or e.line_dir[1]
    lines = merge_lines(graph, line_keys, direction)

    # --- nodes ---
    touched = set()
    for u, v in boundary:
        touched.add(u)
        touched.add(v)
    for u, v in line_keys:
        touched.add(u)
        touched.add(v)
    adj = graph.adjacency()
    points: List[Geometry] = []
    for nid, xy in enumerate(graph.nodes):
        if nid in touched:
            continue
        in_a = lab.node_location(nid, 0) != Location.EXTERIOR
        in_b = lab.node_location(nid, 1) != Location.EXTERIOR
        if not fn(in_a, in_b):
            continue
        incident = adj.get(nid)
        if incident:
            if incident[0] in covered:
                continue
        elif areal:
            fa = lab.locators[0].locate_area(xy) == Location.INTERIOR
            fb = lab.locators[1].locate_area(xy) == Location.INTERIOR
            if fn(fa, fb):
                continue
        points.append(point(*xy))

    result = build_result(polygons, lines, points, empty_kind)
    logger.debug("[overlay] %s %s/%s: %d polygons, %d lines, %d points",
                 op, a.kind.value, b.kind.value, len(polygons), len(lines), len(points))
    return result


def intersection(a: Geometry, b: Geometry, config: Optional[EngineConfig] = None) -> Geometry:
    return overlay(a, b, INTERSECTION, config)


def union(a: Geometry, b: Geometry, config: Optional[EngineConfig] = None) -> Geometry:
    return overlay(a, b, UNION, config)


def difference(a: Geometry, b: Geometry, config: Optional[EngineConfig] = None) -> Geometry:
    return overlay(a, b, DIFFERENCE, config)


def sym_difference(a: Geometry, b: Geometry, config: Optional[EngineConfig] = None) -> Geometry:
    return overlay(a, b, SYMDIFFERENCE, config)


def cascaded_union(geoms: Sequence[Geometry], config: Optional[EngineConfig] = None) -> Optional[Geometry]:
    """
    Union a sequence of geometries by merging neighbours pairwise until one is
    left. Returns None for an empty sequence.
    """
    layer = [g for g in geoms]
    if not layer:
        return None
    while len(layer) > 1:
        nxt = []
        for i in range(0, len(layer) - 1, 2):
            nxt.append(overlay(layer[i], layer[i + 1], UNION, config))
        if len(layer) % 2 == 1:
            nxt.append(layer[-1])
        layer = nxt
    return layer[0]
