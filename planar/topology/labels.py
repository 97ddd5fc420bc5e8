# -*- coding: utf-8 -*-
# planar/topology/labels.py

"""
Project: Planar
Date: 10/19/2026

Purpose:
--------
Assign point-set locations (Interior / Boundary / Exterior) to the elements of a
noded planar graph with respect to each operand:
   - nodes          -> location of the node point,
   - edges          -> location of the open edge,
   - edge sides     -> location of the face on the left/right of the edge,
                       relative to the operand's areal members.

Both the DE-9IM computation and the overlay read these labels, so predicates
and set operations always agree on the same arrangement.
"""

from typing import Dict, Sequence, Tuple
import math

from ..kernels.predicates import Location
from .graph import PlanarGraph, EdgeKey
from .locate import PointLocator


class GraphLabeler:
    """
    Cached location queries over a `PlanarGraph`.

    Parameters
    ----------
    graph : PlanarGraph
        Arrangement built from `operands`.
    operands : Sequence[Geometry]
        The geometries the graph was built from, in the same order.
    tol : float
        Absolute tolerance.
    """

    def __init__(self, graph: PlanarGraph, operands: Sequence, tol: float):
        self.graph = graph
        self.tol = float(tol)
        self.locators = [PointLocator(g, tol) for g in operands]
        self._node_loc: Dict[Tuple[int, int], Location] = {}
        self._mid_area: Dict[Tuple[EdgeKey, int], Location] = {}
        self._offset = self._side_offset()

    def _side_offset(self) -> float:
        nodes = self.graph.nodes
        if not nodes:
            return max(10.0 * self.tol, 1e-9)
        scale = max(max(abs(x), abs(y)) for x, y in nodes)
        return max(10.0 * self.tol, 1e-9 * max(scale, 1.0))

    def has_area(self, k: int) -> bool:
        return self.locators[k].has_area

    # --------------------
    # Nodes
    # --------------------
    def node_location(self, nid: int, k: int) -> Location:
        ck = (nid, k)
        loc = self._node_loc.get(ck)
        if loc is None:
            loc_k = self.locators[k]
            pt = self.graph.nodes[nid]
            area = loc_k.locate_area(pt)
            if area == Location.BOUNDARY and self._surrounded(nid, k):
                area = Location.INTERIOR
            loc = loc_k.locate(pt, area)
            self._node_loc[ck] = loc
        return loc

    def _surrounded(self, nid: int, k: int) -> bool:
        """True if every face around the node is interior to operand k (rings of
        adjacent polygon members meeting along shared edges)."""
        rings = [self.graph.edges[key] for key in self.graph.adjacency().get(nid, ())
                 if self.graph.edges[key].is_ring[k]]
        return bool(rings) and all(e.left_in[k] and e.right_in[k] for e in rings)

    # --------------------
    # Edges
    # --------------------
    def edge_location(self, key: EdgeKey, k: int) -> Location:
        e = self.graph.edges[key]
        if e.is_ring[k]:
            if e.left_in[k] and e.right_in[k]:
                return Location.INTERIOR
            return Location.BOUNDARY
        if e.is_line[k]:
            return Location.INTERIOR
        return self.locators[k].locate(self.graph.midpoint(key))

    def in_closure(self, key: EdgeKey, k: int) -> bool:
        """True if the edge lies in the closure of operand k."""
        if self.graph.edges[key].on(k):
            return True
        return self.edge_location(key, k) != Location.EXTERIOR

    def side_location(self, key: EdgeKey, left: bool, k: int) -> Location:
        """
        Location (INTERIOR or EXTERIOR) of the face on one side of an edge with
        respect to the areal members of operand k.
        """
        e = self.graph.edges[key]
        if e.is_ring[k]:
            inside = e.left_in[k] if left else e.right_in[k]
            return Location.INTERIOR if inside else Location.EXTERIOR
        loc_k = self.locators[k]
        if not loc_k.has_area:
            return Location.EXTERIOR
        ck = (key, k)
        loc = self._mid_area.get(ck)
        if loc is None:
            loc = loc_k.locate_area(self.graph.midpoint(key))
            self._mid_area[ck] = loc
        if loc == Location.BOUNDARY:
            # edge runs along a ring it was not merged with; probe off the edge
            probe = self.graph.side_point(key, left, self._offset)
            loc = loc_k.locate_area(probe)
            if loc == Location.BOUNDARY:
                loc = Location.EXTERIOR
        return loc

    def side_in(self, key: EdgeKey, left: bool, k: int) -> bool:
        return self.side_location(key, left, k) == Location.INTERIOR


def edge_angle(graph: PlanarGraph, frm: int, to: int) -> float:
    """Direction angle (radians) of the directed edge frm -> to."""
    (x0, y0), (x1, y1) = graph.nodes[frm], graph.nodes[to]
    return math.atan2(y1 - y0, x1 - x0)
