# -*- coding: utf-8 -*-
# planar/metrics/measures.py

"""
Project: Planar
Date: 10/19/2026

Purpose:
--------
Scalar measures of a single geometry: area, length and perimeter.

Conventions:
------------
   - area: |shell| - sum |holes| per polygon (orientation-independent), summed
     over areal members; non-areal geometries measure 0.0.
   - length: summed segment lengths of linear members; rings are not lines.
   - perimeter: summed ring lengths of areal members (unclosed rings are closed
     implicitly); non-areal geometries measure 0.0.
"""

from ..core.kinds import GeometryKind
from ..kernels.loop import ensure_closed, polyline_length, signed_area
from ..topology.relate import require_supported


def _polygons(g):
    return (leaf for leaf in g.iter_atomic() if leaf.kind == GeometryKind.POLYGON)


def area(g) -> float:
    require_supported(g)
    total = 0.0
    for poly in _polygons(g):
        rings = [r.xy for r in poly.rings]
        a = abs(signed_area(rings[0])) - sum(abs(signed_area(h)) for h in rings[1:])
        total += max(a, 0.0)
    return float(total)


def length(g) -> float:
    require_supported(g)
    return float(sum(
        polyline_length(leaf.coords.xy)
        for leaf in g.iter_atomic() if leaf.kind == GeometryKind.LINESTRING
    ))


def perimeter(g) -> float:
    require_supported(g)
    total = 0.0
    for poly in _polygons(g):
        for r in poly.rings:
            if len(r):
                total += polyline_length(ensure_closed(r.xy))
    return float(total)
