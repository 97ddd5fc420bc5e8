# -*- coding: utf-8 -*-
# planar/topology/__init__.py

"""
Project: Planar
Date: 10/19/2026

Topology Subfolder:
-------------------
Planar arrangement and DE-9IM machinery.

Modules:
--------
- graph:      Noding of operand segments into a planar graph with per-operand
              edge labels (line / ring / side interior flags).
- locate:     Point location (interior / boundary / exterior) (polygon rings are
              boundary, line endpoints follow the mod-2 rule).
- labels:     Cached node / edge / face locations over a graph.
- relate:     IntersectionMatrix and the DE-9IM computation.
- predicates: Named predicates as pattern matches on the matrix.
"""

__all__ = ["graph", "locate", "labels", "relate", "predicates"]
