# -*- coding: utf-8 -*-
# planar/topology/graph.py

"""
Project: Planar
Date: 10/19/2026

Purpose:
--------
Build a noded planar graph from the segments of one or two operands. This is the
shared arrangement behind the DE-9IM (relate), the overlay set operations and the
validity checks.

Pipeline:
---------
source segments (lines + rings, per operand) → pairwise classification (bbox
prefilter in NumPy) → split points per segment → snapped nodes → sub-edges merged
by node pair → per-operand labels on every edge.

Edge labels (per operand k):
----------------------------
   - is_line[k]:  the edge lies on a LineString of operand k.
   - is_ring[k]:  the edge lies on a polygon ring of operand k.
   - left_in[k] / right_in[k]: the face on that side of the canonical direction
     (u -> v, u < v) is interior to a polygon of operand k.
   - line_dir[k]: +1/-1 if the first contributing line ran u->v / v->u.

Notes:
------
   - Input endpoints are registered before computed intersections so original
     coordinates survive snapping unchanged.
   - Nodes closer than `tol` are merged (grid hash with neighbour lookup).
"""

from typing import Dict, List, Optional, Sequence, Tuple
import math
import numpy as np

from ..core.kinds import GeometryKind
from ..kernels.loop import signed_area
from ..kernels.predicates import (
    SegmentRelation, classify_segments, points_segments_distance,
)

LINE = 1
RING = 2

EdgeKey = Tuple[int, int]


class Edge:
    """Mutable build-time record of one noded edge (never exposed as a value)."""

    __slots__ = ("u", "v", "is_line", "is_ring", "left_in", "right_in", "line_dir")

    def __init__(self, u: int, v: int, n_ops: int):
        self.u = u
        self.v = v
        self.is_line = [False] * n_ops
        self.is_ring = [False] * n_ops
        self.left_in = [False] * n_ops
        self.right_in = [False] * n_ops
        self.line_dir = [0] * n_ops

    @property
    def key(self) -> EdgeKey:
        return (self.u, self.v)

    def on(self, k: int) -> bool:
        """True if the edge lies on operand k (line or ring)."""
        return self.is_line[k] or self.is_ring[k]


class SourceSegment:
    __slots__ = ("a", "b", "op", "role", "interior_left")

    def __init__(self, a, b, op: int, role: int, interior_left: bool = False):
        self.a = (float(a[0]), float(a[1]))
        self.b = (float(b[0]), float(b[1]))
        self.op = op
        self.role = role
        self.interior_left = interior_left


def source_segments(g, op: int) -> Tuple[List[SourceSegment], List[Tuple[float, float]]]:
    """
    Decompose a geometry into labelled segments and isolated points.

    Zero-length segments are skipped. Rings that are not explicitly closed are
    closed implicitly (last -> first).
    """
    segs: List[SourceSegment] = []
    pts: List[Tuple[float, float]] = []
    for leaf in g.iter_atomic():
        if leaf.kind == GeometryKind.POINT:
            pts.append(leaf.coords.coordinate(0))
        elif leaf.kind == GeometryKind.LINESTRING:
            xy = leaf.coords.xy
            for i in range(xy.shape[0] - 1):
                if not np.array_equal(xy[i], xy[i + 1]):
                    segs.append(SourceSegment(xy[i], xy[i + 1], op, LINE))
        elif leaf.kind == GeometryKind.POLYGON:
            for ri, ring in enumerate(leaf.rings):
                xy = ring.xy
                if xy.shape[0] < 2:
                    continue
                if not np.array_equal(xy[0], xy[-1]):
                    xy = np.vstack((xy, xy[0]))
                area = signed_area(xy)
                interior_left = area > 0.0 if ri == 0 else area < 0.0
                for i in range(xy.shape[0] - 1):
                    if not np.array_equal(xy[i], xy[i + 1]):
                        segs.append(SourceSegment(xy[i], xy[i + 1], op, RING, interior_left))
    return segs, pts


class PlanarGraph:
    """
    Noded arrangement of one or two operands.

    Attributes
    ----------
    nodes : List[Tuple[float, float]]
        Node coordinates by id.
    edges : Dict[EdgeKey, Edge]
        Edges keyed by (u, v) with u < v.
    point_nodes : List[set]
        Per operand, node ids of its isolated Point members.
    """

    def __init__(self, n_ops: int, tol: float):
        self.n_ops = n_ops
        self.tol = float(tol)
        self.nodes: List[Tuple[float, float]] = []
        self.edges: Dict[EdgeKey, Edge] = {}
        self.point_nodes: List[set] = [set() for _ in range(n_ops)]
        self._cells: Dict[Tuple[int, int], List[int]] = {}
        self._adj: Optional[Dict[int, List[EdgeKey]]] = None

    # --------------------
    # Nodes
    # --------------------
    def _cell(self, x: float, y: float) -> Tuple[int, int]:
        return (int(math.floor(x / self.tol)), int(math.floor(y / self.tol)))

    def add_node(self, pt) -> int:
        """Return the id of the node at `pt`, merging with an existing node within tol."""
        x, y = float(pt[0]), float(pt[1])
        if self.tol <= 0.0:
            key = (x, y)
            ids = self._cells.get(key)
            if ids:
                return ids[0]
            nid = len(self.nodes)
            self.nodes.append((x, y))
            self._cells[key] = [nid]
            return nid

        cx, cy = self._cell(x, y)
        for dx in (-1, 0, 1):
            for dy in (-1, 0, 1):
                for nid in self._cells.get((cx + dx, cy + dy), ()):
                    nx, ny = self.nodes[nid]
                    if abs(nx - x) <= self.tol and abs(ny - y) <= self.tol:
                        return nid
        nid = len(self.nodes)
        self.nodes.append((x, y))
        self._cells.setdefault((cx, cy), []).append(nid)
        return nid

    # --------------------
    # Edges
    # --------------------
    def _add_sub_edge(self, seg: SourceSegment, a: int, b: int) -> None:
        forward = a < b
        key = (a, b) if forward else (b, a)
        e = self.edges.get(key)
        if e is None:
            e = Edge(key[0], key[1], self.n_ops)
            self.edges[key] = e
        k = seg.op
        if seg.role == LINE:
            e.is_line[k] = True
            if e.line_dir[k] == 0:
                e.line_dir[k] = 1 if forward else -1
        else:
            e.is_ring[k] = True
            if seg.interior_left == forward:
                e.left_in[k] = True
            else:
                e.right_in[k] = True
        self._adj = None

    def adjacency(self) -> Dict[int, List[EdgeKey]]:
        """Node id -> incident edge keys."""
        if self._adj is None:
            adj: Dict[int, List[EdgeKey]] = {}
            for key in self.edges:
                adj.setdefault(key[0], []).append(key)
                adj.setdefault(key[1], []).append(key)
            self._adj = adj
        return self._adj

    def midpoint(self, key: EdgeKey) -> Tuple[float, float]:
        (x0, y0), (x1, y1) = self.nodes[key[0]], self.nodes[key[1]]
        return (0.5 * (x0 + x1), 0.5 * (y0 + y1))

    def side_point(self, key: EdgeKey, left: bool, offset: float) -> Tuple[float, float]:
        """Point at `offset` from the edge midpoint, on its left/right side."""
        (x0, y0), (x1, y1) = self.nodes[key[0]], self.nodes[key[1]]
        dx, dy = x1 - x0, y1 - y0
        ln = math.hypot(dx, dy) or 1.0
        nx, ny = -dy / ln, dx / ln
        s = offset if left else -offset
        mx, my = self.midpoint(key)
        return (mx + s * nx, my + s * ny)


def build_graph(operands: Sequence, tol: float) -> PlanarGraph:
    """
    Node the segments of all operands against each other.

    Parameters
    ----------
    operands : Sequence[Geometry]
        One or two geometry values (curved kinds must be rejected by the caller).
    tol : float
        Absolute snapping/classification tolerance.

    Returns
    -------
    PlanarGraph
    """
    graph = PlanarGraph(len(operands), tol)
    segs: List[SourceSegment] = []
    iso: List[Tuple[int, Tuple[float, float]]] = []
    for k, g in enumerate(operands):
        s, p = source_segments(g, k)
        segs.extend(s)
        iso.extend((k, pt) for pt in p)

    splits: List[List[int]] = []
    for s in segs:
        splits.append([graph.add_node(s.a), graph.add_node(s.b)])
    for k, pt in iso:
        graph.point_nodes[k].add(graph.add_node(pt))

    n = len(segs)
    if n:
        A = np.array([s.a for s in segs])
        B = np.array([s.b for s in segs])
        xmin = np.minimum(A[:, 0], B[:, 0]) - tol
        xmax = np.maximum(A[:, 0], B[:, 0]) + tol
        ymin = np.minimum(A[:, 1], B[:, 1]) - tol
        ymax = np.maximum(A[:, 1], B[:, 1]) + tol

        for i in range(n - 1):
            cand = np.nonzero(
                (xmin[i + 1:] <= xmax[i]) & (xmax[i + 1:] >= xmin[i]) &
                (ymin[i + 1:] <= ymax[i]) & (ymax[i + 1:] >= ymin[i])
            )[0] + i + 1
            si = segs[i]
            for j in cand:
                sj = segs[j]
                rel, pts = classify_segments(si.a, si.b, sj.a, sj.b, tol)
                if rel == SegmentRelation.DISJOINT:
                    continue
                for p in pts:
                    nid = graph.add_node(p)
                    splits[i].append(nid)
                    splits[j].append(nid)

        # isolated points lying on segments become nodes of those segments
        for k in range(graph.n_ops):
            for nid in graph.point_nodes[k]:
                d = points_segments_distance(np.array([graph.nodes[nid]]), A, B)[0]
                for i in np.nonzero(d <= tol)[0]:
                    splits[int(i)].append(nid)

    for s, ids in zip(segs, splits):
        ax, ay = s.a
        dx, dy = s.b[0] - ax, s.b[1] - ay
        uniq = sorted(set(ids), key=lambda nid: (graph.nodes[nid][0] - ax) * dx + (graph.nodes[nid][1] - ay) * dy)
        for a, b in zip(uniq[:-1], uniq[1:]):
            if a != b:
                graph._add_sub_edge(s, a, b)
    return graph
