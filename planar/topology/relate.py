# -*- coding: utf-8 -*-
# planar/topology/relate.py

"""
Project: Planar
Date: 10/19/2026

Purpose:
--------
Compute the Dimensionally Extended 9-Intersection Model (DE-9IM) of two
geometries: a 3x3 table of the dimension of the intersection between the
{interior, boundary, exterior} of A (rows) and of B (columns).

Main Tasks:
-----------
   1. Node both operands into one planar graph.
   2. Record dimension 0 for every node, 1 for every edge and 2 for every edge
      side (face) at the cell given by the element's location in A and in B.
   3. Provide pattern matching over the matrix for the named predicates.

Notes:
------
   - Cells hold -1 (empty, printed 'F'), 0, 1 or 2.
   - The exterior/exterior cell is always 2 for bounded planar geometries.
"""

import logging
from collections import Counter
from typing import Optional
import numpy as np

from ..config import EngineConfig, resolve
from ..core.kinds import GeometryKind
from ..errors import InvalidParameterError, UnsupportedOperandError
from ..kernels.predicates import Location
from .graph import build_graph
from .labels import GraphLabeler

logger = logging.getLogger(__name__)

_PATTERN_CHARS = set("TF*012")
_DIM_CHARS = {-1: "F", 0: "0", 1: "1", 2: "2"}


class IntersectionMatrix:
    """
    DE-9IM matrix.

    Indexing follows `Location`: rows are A's INTERIOR/BOUNDARY/EXTERIOR, columns
    are B's.
    """

    __slots__ = ("_m",)

    def __init__(self, cells=None):
        m = np.full((3, 3), -1, dtype=np.int8)
        if cells is not None:
            m[:, :] = np.asarray(cells, dtype=np.int8).reshape(3, 3)
        self._m = m

    @classmethod
    def from_string(cls, text: str) -> "IntersectionMatrix":
        """Parse a 9-character matrix string such as '212101212'."""
        if len(text) != 9 or any(c not in "F012" for c in text.upper()):
            raise InvalidParameterError("Malformed DE-9IM matrix string.", {"matrix": text})
        return cls([-1 if c == "F" else int(c) for c in text.upper()])

    def get(self, row: Location, col: Location) -> int:
        return int(self._m[int(row), int(col)])

    def set_at_least(self, row: Location, col: Location, dim: int) -> None:
        if self._m[int(row), int(col)] < dim:
            self._m[int(row), int(col)] = dim

    def transpose(self) -> "IntersectionMatrix":
        return IntersectionMatrix(self._m.T.copy())

    def matches(self, pattern: str) -> bool:
        """
        Match against a 9-character pattern over {T, F, *, 0, 1, 2}.

        Raises
        ------
        InvalidParameterError
            If the pattern is malformed.
        """
        pat = str(pattern).upper()
        if len(pat) != 9 or any(c not in _PATTERN_CHARS for c in pat):
            raise InvalidParameterError("Malformed DE-9IM pattern.", {"pattern": pattern})
        for c, v in zip(pat, self._m.reshape(-1)):
            if c == "*":
                continue
            if c == "T" and v < 0:
                return False
            if c == "F" and v >= 0:
                return False
            if c in "012" and v != int(c):
                return False
        return True

    def __str__(self) -> str:
        return "".join(_DIM_CHARS[int(v)] for v in self._m.reshape(-1))

    def __repr__(self) -> str:
        return f"IntersectionMatrix('{self}')"

    def __eq__(self, other) -> bool:
        if not isinstance(other, IntersectionMatrix):
            return NotImplemented
        return bool(np.array_equal(self._m, other._m))

    def __hash__(self) -> int:
        return hash(str(self))


def require_supported(*geoms) -> None:
    """Raise UnsupportedOperandError if any operand (or member) is a curved kind."""
    for g in geoms:
        stack = [g]
        while stack:
            cur = stack.pop()
            if cur.is_curved:
                raise UnsupportedOperandError(
                    "Curved/surface geometry has no algorithm in this engine.",
                    {"kind": cur.kind.value},
                )
            stack.extend(cur.members)


def boundary_dimension(g) -> int:
    """Dimension of the boundary of `g` (-1 when empty)."""
    ends = Counter()
    for leaf in g.iter_atomic():
        if leaf.kind == GeometryKind.POLYGON:
            return 1
        if leaf.kind == GeometryKind.LINESTRING:
            xy = leaf.coords.xy
            if xy.shape[0] > 1 and not np.array_equal(xy[0], xy[-1]):
                ends[tuple(xy[0])] += 1
                ends[tuple(xy[-1])] += 1
    if any(c % 2 == 1 for c in ends.values()):
        return 0
    return -1


def _relate_with_empty(a, b) -> IntersectionMatrix:
    im = IntersectionMatrix()
    im.set_at_least(Location.EXTERIOR, Location.EXTERIOR, 2)
    if not a.is_empty():
        im.set_at_least(Location.INTERIOR, Location.EXTERIOR, a.dimensions())
        bd = boundary_dimension(a)
        if bd >= 0:
            im.set_at_least(Location.BOUNDARY, Location.EXTERIOR, bd)
    if not b.is_empty():
        im.set_at_least(Location.EXTERIOR, Location.INTERIOR, b.dimensions())
        bd = boundary_dimension(b)
        if bd >= 0:
            im.set_at_least(Location.EXTERIOR, Location.BOUNDARY, bd)
    return im


def relate(a, b, config: Optional[EngineConfig] = None) -> IntersectionMatrix:
    """
    Compute the DE-9IM of `a` against `b`.

    Raises
    ------
    UnsupportedOperandError
        If either operand carries a curved kind.
    """
    cfg = resolve(config)
    require_supported(a, b)
    if a.is_empty() or b.is_empty():
        return _relate_with_empty(a, b)

    graph = build_graph([a, b], cfg.tolerance)
    lab = GraphLabeler(graph, (a, b), cfg.tolerance)
    im = IntersectionMatrix()
    im.set_at_least(Location.EXTERIOR, Location.EXTERIOR, 2)

    for nid in range(len(graph.nodes)):
        im.set_at_least(lab.node_location(nid, 0), lab.node_location(nid, 1), 0)

    areal = lab.has_area(0) or lab.has_area(1)
    for key in graph.edges:
        im.set_at_least(lab.edge_location(key, 0), lab.edge_location(key, 1), 1)
        if areal:
            for left in (True, False):
                im.set_at_least(
                    lab.side_location(key, left, 0), lab.side_location(key, left, 1), 2
                )

    logger.debug("[relate] %s/%s: %d nodes, %d edges -> %s",
                 a.kind.value, b.kind.value, len(graph.nodes), len(graph.edges), im)
    return im
