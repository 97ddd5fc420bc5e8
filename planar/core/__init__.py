# -*- coding: utf-8 -*-
# planar/core/__init__.py

"""
Project: Planar
Date: 10/19/2026

Core Subfolder:
---------------
Value types of the engine.

Modules:
--------
- buffer:      CoordinateBuffer, immutable flat (x, y) storage.
- kinds:       GeometryKind discriminant and per-kind tables.
- base:        Steric / GeometryContract abstract contracts.
- geometry:    Geometry value and constructors.
- _validation: Shared (N, 2) shape guards.
"""

from .buffer import CoordinateBuffer, ARITY
from .kinds import GeometryKind
from .geometry import (
    Geometry, point, line_string, polygon, multi_point, multi_line_string,
    multi_polygon, geometry_collection, empty, curved,
)

__all__ = [
    "CoordinateBuffer", "ARITY", "GeometryKind", "Geometry",
    "point", "line_string", "polygon", "multi_point", "multi_line_string",
    "multi_polygon", "geometry_collection", "empty", "curved",
]
