# -*- coding: utf-8 -*-
# planar/overlay/__init__.py

"""
Project: Planar
Date: 10/19/2026

Overlay Subfolder:
------------------
Boolean set operations over the shared planar graph.

Modules:
--------
- overlay:  intersection / union / difference / symmetric difference and the
            balanced-tree union used by buffering.
- assemble: ring tracing, hole assignment, line merging and result typing.
"""

from .overlay import (
    INTERSECTION, UNION, DIFFERENCE, SYMDIFFERENCE,
    overlay, intersection, union, difference, sym_difference, cascaded_union,
)

__all__ = [
    "INTERSECTION", "UNION", "DIFFERENCE", "SYMDIFFERENCE",
    "overlay", "intersection", "union", "difference", "sym_difference", "cascaded_union",
]
