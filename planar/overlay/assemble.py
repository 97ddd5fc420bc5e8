# -*- coding: utf-8 -*-
# planar/overlay/assemble.py

"""
Project: Planar
Date: 10/19/2026

Purpose:
--------
Turn the edges selected by an overlay back into geometry values.

Main Tasks:
-----------
   1. Trace result rings from directed boundary edges (result interior on the
      left, next edge = first clockwise from the reversed incoming edge, which
      yields minimal rings at nodes where rings touch).
   2. Split traced rings into shells (CCW) and holes (CW) and attach every hole
      to the smallest shell containing it.
   3. Merge result line edges into maximal LineStrings through degree-2 nodes.
   4. Choose the result kind by the lowest-surprise rule.

Notes:
------
   - Rings that fail to close (malformed selections) are dropped, never guessed.
"""

import logging
import math
from typing import Dict, List, Optional, Sequence, Tuple
import numpy as np

from ..core.buffer import CoordinateBuffer
from ..core.geometry import Geometry, empty, geometry_collection
from ..core.kinds import GeometryKind, MULTI_OF
from ..kernels.loop import signed_area
from ..kernels.predicates import Location, locate_in_ring
from ..topology.graph import PlanarGraph, EdgeKey
from ..topology.labels import edge_angle

logger = logging.getLogger(__name__)

_TWO_PI = 2.0 * math.pi


# -----------------------
# Rings
# -----------------------
def _next_edge(graph: PlanarGraph, out: Dict[int, List[Tuple[float, int]]],
               frm: int, to: int) -> Optional[Tuple[int, int]]:
    cands = out.get(to)
    if not cands:
        return None
    back = edge_angle(graph, to, frm)
    best = None
    best_delta = None
    for theta, w in cands:
        delta = (back - theta) % _TWO_PI
        if delta <= 1e-15:
            delta = _TWO_PI
        if best_delta is None or delta < best_delta:
            best_delta = delta
            best = (to, w)
    return best


def trace_rings(graph: PlanarGraph, directed: Sequence[Tuple[int, int]]) -> List[np.ndarray]:
    """
    Trace closed rings from directed edges whose left side is the result interior.

    Returns
    -------
    List[np.ndarray]
        Closed (M, 2) coordinate arrays (first row repeated last).
    """
    out: Dict[int, List[Tuple[float, int]]] = {}
    for frm, to in directed:
        out.setdefault(frm, []).append((edge_angle(graph, frm, to), to))

    used = set()
    rings: List[np.ndarray] = []
    for start in directed:
        if start in used:
            continue
        ids = [start[0]]
        cur = start
        closed = False
        while True:
            used.add(cur)
            ids.append(cur[1])
            nxt = _next_edge(graph, out, cur[0], cur[1])
            if nxt is None:
                break
            if nxt == start:
                closed = True
                break
            if nxt in used:
                break
            cur = nxt
        if closed and len(ids) >= 4:
            rings.append(np.array([graph.nodes[n] for n in ids], dtype=float))
        elif not closed:
            logger.debug("[overlay] dropped unclosed ring fragment of %d edges", len(ids) - 1)
    return rings


def _owner_of(hole: np.ndarray, shells: Sequence, tol: float):
    """
    Smallest shell containing `hole`, judged at the first edge midpoint that lies
    on no shell ring. `shells` is sorted by area.
    """
    for i in range(hole.shape[0] - 1):
        mid = 0.5 * (hole[i] + hole[i + 1])
        for s in shells:
            loc = locate_in_ring(mid, s[1], tol)
            if loc == Location.INTERIOR:
                return s
            if loc == Location.BOUNDARY:
                break
        else:
            return None
    return None


def build_polygons(rings: Sequence[np.ndarray], tol: float) -> List[Geometry]:
    """
    Group traced rings into polygons: CCW rings are shells, CW rings are holes
    assigned to the smallest containing shell.
    """
    shells: List[Tuple[float, np.ndarray, List[np.ndarray]]] = []
    holes: List[np.ndarray] = []
    for r in rings:
        a = signed_area(r)
        if a > 0.0:
            shells.append((a, r, []))
        elif a < 0.0:
            holes.append(r)

    shells.sort(key=lambda s: s[0])
    for h in holes:
        owner = _owner_of(h, shells, tol)
        if owner is None:
            logger.debug("[overlay] hole without containing shell dropped")
            continue
        owner[2].append(h)

    out = []
    for _area, shell, hs in shells:
        rings_buf = (CoordinateBuffer.from_xy(shell),) + tuple(CoordinateBuffer.from_xy(h) for h in hs)
        out.append(Geometry(GeometryKind.POLYGON, rings=rings_buf))
    return out


# -----------------------
# Lines
# -----------------------
def merge_lines(graph: PlanarGraph, keys: Sequence[EdgeKey],
                direction: Optional[Dict[EdgeKey, int]] = None) -> List[Geometry]:
    """
    Merge edges into maximal LineStrings, breaking at nodes whose degree in the
    selected set is not 2. `direction[key]` = +1/-1 orients a chain along its
    first edge's source direction.
    """
    direction = direction or {}
    adj: Dict[int, List[EdgeKey]] = {}
    for k in keys:
        adj.setdefault(k[0], []).append(k)
        adj.setdefault(k[1], []).append(k)

    visited = set()

    def walk(start: int, key: EdgeKey) -> List[int]:
        path = [start]
        cur, k = start, key
        while True:
            visited.add(k)
            nxt = k[1] if k[0] == cur else k[0]
            path.append(nxt)
            if len(adj[nxt]) != 2:
                break
            cand = [x for x in adj[nxt] if x not in visited]
            if not cand:
                break
            cur, k = nxt, cand[0]
        first = key
        d = direction.get(first, 0)
        if (d == -1 and path[0] == first[0]) or (d == 1 and path[0] == first[1]):
            path.reverse()
        return path

    chains: List[List[int]] = []
    for node in sorted(adj):
        if len(adj[node]) != 2:
            for k in adj[node]:
                if k not in visited:
                    chains.append(walk(node, k))
    for k in sorted(keys):
        if k not in visited:
            chains.append(walk(k[0], k))

    return [
        Geometry(GeometryKind.LINESTRING,
                 coords=CoordinateBuffer.from_xy([graph.nodes[n] for n in chain]))
        for chain in chains
    ]


# -----------------------
# Result typing
# -----------------------
def build_result(polygons: Sequence[Geometry], lines: Sequence[Geometry],
                 points: Sequence[Geometry], empty_kind: GeometryKind) -> Geometry:
    """
    Lowest-surprise result: a single component stays atomic, several components
    of one dimension become the matching Multi kind, mixed dimensions become a
    GeometryCollection, nothing becomes a typed empty geometry.
    """
    parts = list(polygons) + list(lines) + list(points)
    if not parts:
        return empty(empty_kind)
    if len(parts) == 1:
        return parts[0]
    kinds = {p.kind for p in parts}
    if len(kinds) == 1:
        return Geometry(MULTI_OF[parts[0].kind], members=tuple(parts))
    return geometry_collection(parts)
