# -*- coding: utf-8 -*-
# planar/validity/rules.py

"""
Project: Planar
Date: 10/19/2026

Purpose:
--------
Validity rules for simple-features geometries. Each rule inspects a read-only
`GeometryView` and returns one normalized "finding" record that callers can
aggregate or print.

Main Tasks:
-----------
   - Define checks with the uniform signature: `<rule_id>(view, cfg) -> dict`.
   - Emit findings with a stable schema.

Finding Schema:
---------------
    {
      "id": "<rule_id>",     # stable identifier
      "ok": bool,            # True => pass
      "count": int,          # number of violations
      "examples": [...],     # capped sample ({"path": ..., "ring": ..., "at": ...})
      "details": {...},      # extra context
    }

Notes:
------
   - `path` is the tuple of 0-based member indices leading to the offending leaf
     (empty for a top-level atomic geometry).
   - Rules skip rings already reported by an earlier structural rule (too short
     or unclosed), so each defect is reported once.
"""

from typing import Dict, List, Tuple
import numpy as np

from ..config import EngineConfig
from ..core.kinds import GeometryKind, COLLECTIONS
from ..kernels.loop import is_closed
from ..kernels.predicates import (
    Location, SegmentRelation, candidate_pairs, classify_segments, locate_in_ring,
    same_point,
)
from ..topology.relate import relate
from .simple import self_intersections

Path = Tuple[int, ...]


class GeometryView:
    """
    Flattened, read-only view of a geometry for rule evaluation.

    Attributes
    ----------
    points : List[(path, (1, 2) array)]
    lines : List[(path, (N, 2) array)]
    polygons : List[(path, List[(N, 2) array])]
        Rings exactly as stored (no implicit closure).
    multipolygons : List[(path, Geometry)]
    """

    def __init__(self, g):
        self.geometry = g
        self.points: List[Tuple[Path, np.ndarray]] = []
        self.lines: List[Tuple[Path, np.ndarray]] = []
        self.polygons: List[Tuple[Path, List[np.ndarray]]] = []
        self.multipolygons: List[Tuple[Path, object]] = []
        self._walk(g, ())

    def _walk(self, g, path: Path) -> None:
        if g.kind in COLLECTIONS:
            if g.kind == GeometryKind.MULTIPOLYGON:
                self.multipolygons.append((path, g))
            for i, m in enumerate(g.members):
                self._walk(m, path + (i,))
            return
        if g.is_empty():
            return
        if g.kind == GeometryKind.POINT:
            self.points.append((path, g.coords.xy))
        elif g.kind == GeometryKind.LINESTRING:
            self.lines.append((path, g.coords.xy))
        elif g.kind == GeometryKind.POLYGON:
            self.polygons.append((path, [r.xy for r in g.rings]))

    def well_formed_rings(self):
        """Yield (path, ring_index, ring) for rings with >= 4 coords that are closed."""
        for path, rings in self.polygons:
            for ri, r in enumerate(rings):
                if _ring_well_formed(r):
                    yield path, ri, r


def _ring_well_formed(r: np.ndarray) -> bool:
    return r.shape[0] >= 4 and is_closed(r)


def _finding(rule_id: str, ok: bool, count: int, examples: List, details: Dict,
             max_examples: int) -> Dict:
    return {
        "id": rule_id,
        "ok": bool(ok),
        "count": int(count),
        "examples": examples[:max_examples],
        "details": details or {},
    }


def _at(pt) -> List[float]:
    return [float(pt[0]), float(pt[1])]


# ------------------------------------------------------------------------------------
# 1) finite_coordinates
# ------------------------------------------------------------------------------------
def finite_coordinates(view: GeometryView, cfg: EngineConfig) -> Dict:
    """Every coordinate must be a finite number (no NaN / inf)."""
    examples = []
    blocks = [(p, xy) for p, xy in view.points] + [(p, xy) for p, xy in view.lines]
    for path, rings in view.polygons:
        blocks.extend((path, r) for r in rings)
    for path, xy in blocks:
        bad = np.nonzero(~np.isfinite(xy).all(axis=1))[0]
        for i in bad:
            examples.append({"path": list(path), "index": int(i)})
    return _finding("finite_coordinates", not examples, len(examples), examples,
                    {}, cfg.max_examples)


# ------------------------------------------------------------------------------------
# 2) min_vertices
# ------------------------------------------------------------------------------------
def min_vertices(view: GeometryView, cfg: EngineConfig) -> Dict:
    """
    LineStrings need two distinct coordinates; polygon rings need at least four
    coordinates (three distinct vertices plus closure).
    """
    examples = []
    for path, xy in view.lines:
        distinct = np.unique(xy, axis=0).shape[0]
        if distinct < 2:
            examples.append({"path": list(path), "n": int(xy.shape[0])})
    for path, rings in view.polygons:
        for ri, r in enumerate(rings):
            if r.shape[0] < 4 or np.unique(r, axis=0).shape[0] < 3:
                examples.append({"path": list(path), "ring": ri, "n": int(r.shape[0])})
    return _finding("min_vertices", not examples, len(examples), examples,
                    {"line_min": 2, "ring_min": 4}, cfg.max_examples)


# ------------------------------------------------------------------------------------
# 3) ring_closure
# ------------------------------------------------------------------------------------
def ring_closure(view: GeometryView, cfg: EngineConfig) -> Dict:
    """First and last coordinates of every ring must be bit-identical."""
    examples = []
    for path, rings in view.polygons:
        for ri, r in enumerate(rings):
            if r.shape[0] >= 2 and not is_closed(r):
                examples.append({"path": list(path), "ring": ri,
                                 "first": _at(r[0]), "last": _at(r[-1])})
    return _finding("ring_closure", not examples, len(examples), examples,
                    {}, cfg.max_examples)


# ------------------------------------------------------------------------------------
# 4) ring_self_intersection
# ------------------------------------------------------------------------------------
def ring_self_intersection(view: GeometryView, cfg: EngineConfig) -> Dict:
    """A ring must not cross or touch itself (other than at its closing vertex)."""
    examples = []
    for path, ri, r in view.well_formed_rings():
        hits = self_intersections(r, cfg.tolerance)
        if hits:
            examples.append({"path": list(path), "ring": ri, "at": _at(hits[0])})
    return _finding("ring_self_intersection", not examples, len(examples), examples,
                    {}, cfg.max_examples)


# ------------------------------------------------------------------------------------
# Ring-pair helpers
# ------------------------------------------------------------------------------------
def _representative_locations(inner: np.ndarray, outer: np.ndarray, tol: float) -> List[Location]:
    """Locations of `inner` vertices (then edge midpoints) not on `outer`'s boundary."""
    locs = [locate_in_ring(p, outer, tol) for p in inner[:-1]]
    off = [loc for loc in locs if loc != Location.BOUNDARY]
    if off:
        return off
    mids = 0.5 * (inner[:-1] + inner[1:])
    return [loc for loc in (locate_in_ring(m, outer, tol) for m in mids) if loc != Location.BOUNDARY]


def _ring_contacts(r1: np.ndarray, r2: np.ndarray, tol: float):
    """
    Contacts between two rings.

    Returns
    -------
    (bool, list)
        (True if they cross or share a segment, distinct touch points)
    """
    touches: List[Tuple[float, float]] = []
    for i, j in candidate_pairs(r1[:-1], r1[1:], tol, r2[:-1], r2[1:]):
        rel, pts = classify_segments(r1[i], r1[i + 1], r2[j], r2[j + 1], tol)
        if rel == SegmentRelation.DISJOINT:
            continue
        if rel in (SegmentRelation.PROPER, SegmentRelation.COLLINEAR):
            return True, touches
        p = pts[0]
        if not any(same_point(p, t, tol) for t in touches):
            touches.append((float(p[0]), float(p[1])))
    return False, touches


# ------------------------------------------------------------------------------------
# 5) hole_outside_shell
# ------------------------------------------------------------------------------------
def hole_outside_shell(view: GeometryView, cfg: EngineConfig) -> Dict:
    """Every hole must lie inside its polygon's shell."""
    examples = []
    tol = cfg.tolerance
    for path, rings in view.polygons:
        if not rings or not _ring_well_formed(rings[0]):
            continue
        shell = rings[0]
        for hi, h in enumerate(rings[1:], start=1):
            if not _ring_well_formed(h):
                continue
            locs = _representative_locations(h, shell, tol)
            if any(loc == Location.EXTERIOR for loc in locs):
                examples.append({"path": list(path), "ring": hi})
    return _finding("hole_outside_shell", not examples, len(examples), examples,
                    {}, cfg.max_examples)


# ------------------------------------------------------------------------------------
# 6) nested_holes
# ------------------------------------------------------------------------------------
def nested_holes(view: GeometryView, cfg: EngineConfig) -> Dict:
    """No hole may lie inside another hole of the same polygon."""
    examples = []
    tol = cfg.tolerance
    for path, rings in view.polygons:
        holes = [(i, h) for i, h in enumerate(rings[1:], start=1) if _ring_well_formed(h)]
        for a in range(len(holes)):
            for b in range(len(holes)):
                if a == b:
                    continue
                ia, ha = holes[a]
                ib, hb = holes[b]
                locs = _representative_locations(ha, hb, tol)
                if locs and all(loc == Location.INTERIOR for loc in locs):
                    examples.append({"path": list(path), "ring": ia, "inside": ib})
    return _finding("nested_holes", not examples, len(examples), examples,
                    {}, cfg.max_examples)


# ------------------------------------------------------------------------------------
# 7) ring_interaction
# ------------------------------------------------------------------------------------
def ring_interaction(view: GeometryView, cfg: EngineConfig) -> Dict:
    """
    Rings of one polygon may touch, but only at a single point per ring pair;
    crossings and shared segments are invalid.
    """
    examples = []
    tol = cfg.tolerance
    for path, rings in view.polygons:
        good = [(i, r) for i, r in enumerate(rings) if _ring_well_formed(r)]
        for a in range(len(good)):
            for b in range(a + 1, len(good)):
                ia, ra = good[a]
                ib, rb = good[b]
                crossing, touches = _ring_contacts(ra, rb, tol)
                if crossing:
                    examples.append({"path": list(path), "rings": [ia, ib], "kind": "crossing"})
                elif len(touches) > 1:
                    examples.append({"path": list(path), "rings": [ia, ib], "kind": "multi_touch",
                                     "at": [list(t) for t in touches[:2]]})
    return _finding("ring_interaction", not examples, len(examples), examples,
                    {}, cfg.max_examples)


# ------------------------------------------------------------------------------------
# 8) multipolygon_overlap
# ------------------------------------------------------------------------------------
def _bbox(g) -> Tuple[float, float, float, float]:
    xy = g.all_xy()
    return (float(xy[:, 0].min()), float(xy[:, 1].min()),
            float(xy[:, 0].max()), float(xy[:, 1].max()))


def multipolygon_overlap(view: GeometryView, cfg: EngineConfig) -> Dict:
    """
    Elements of a MultiPolygon must have disjoint interiors and may touch only
    at points (never along a segment).
    """
    examples = []
    tol = cfg.tolerance
    for path, mp in view.multipolygons:
        members = [(i, m) for i, m in enumerate(mp.members) if not m.is_empty()]
        boxes = [_bbox(m) for _, m in members]
        for a in range(len(members)):
            for b in range(a + 1, len(members)):
                ba, bb = boxes[a], boxes[b]
                if (ba[2] + tol < bb[0] or bb[2] + tol < ba[0] or
                        ba[3] + tol < bb[1] or bb[3] + tol < ba[1]):
                    continue
                im = relate(members[a][1], members[b][1], cfg)
                if im.get(Location.INTERIOR, Location.INTERIOR) >= 0:
                    examples.append({"path": list(path), "members": [members[a][0], members[b][0]],
                                     "kind": "interior_overlap"})
                elif im.get(Location.BOUNDARY, Location.BOUNDARY) >= 1:
                    examples.append({"path": list(path), "members": [members[a][0], members[b][0]],
                                     "kind": "shared_edge"})
    return _finding("multipolygon_overlap", not examples, len(examples), examples,
                    {}, cfg.max_examples)
