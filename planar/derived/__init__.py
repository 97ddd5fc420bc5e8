# -*- coding: utf-8 -*-
# planar/derived/__init__.py

"""
Project: Planar
Date: 10/19/2026

Derived Subfolder:
------------------
Operations that build a new geometry from one input.

Modules:
--------
- hull:           convex hull (monotone chain).
- centroid:       area / length / count weighted centroid.
- interior_point: point guaranteed on the geometry.
- buffer:         disc buffer via circles, capsules and overlay.
- simplify:       Douglas-Peucker.
- transform:      affine family and grid snapping.
- accessors:      rings and members by 1-based index.
"""

__all__ = ["hull", "centroid", "interior_point", "buffer", "simplify", "transform", "accessors"]
