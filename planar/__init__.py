# -*- coding: utf-8 -*-
# planar/__init__.py

"""
Project: Planar
Date: 10/19/2026

Planar:
-------
Planar OGC Simple Features geometry engine: typed geometry values, DE-9IM
predicates, metrics, overlay set operations and derived geometries.

Subpackages / modules:
----------------------
- core:      CoordinateBuffer, GeometryKind, Geometry value and constructors.
- kernels:   orientation, segment classification, ring helpers (NumPy only).
- topology:  noded planar graph, point location, DE-9IM, named predicates.
- validity:  rule registry behind is_valid / validity_report, and is_simple.
- metrics:   area, length, perimeter, distance.
- overlay:   intersection, union, difference, symmetric difference.
- derived:   hull, centroid, point on surface, buffer, simplify, transforms,
             accessors.
- api:       `st_*` facade (also reachable as Geometry methods).
- config:    EngineConfig (tolerances and defaults).
- errors:    GeometryError hierarchy.
- plot:      matplotlib QA plots (import explicitly: `planar.plot`).
"""

from .config import DEFAULT_CONFIG, EngineConfig, make_config
from .core import (
    ARITY, CoordinateBuffer, Geometry, GeometryKind,
    point, line_string, polygon, multi_point, multi_line_string, multi_polygon,
    geometry_collection, empty, curved,
)
from .errors import (
    GeometryError, EmptyGeometryError, DimensionMismatchError, NotAPolygonError,
    IndexOutOfRangeError, UnsupportedOperandError, InvalidParameterError,
)
from .api import *  # noqa: F401,F403
from . import api

__all__ = [
    "DEFAULT_CONFIG", "EngineConfig", "make_config",
    "ARITY", "CoordinateBuffer", "Geometry", "GeometryKind",
    "point", "line_string", "polygon", "multi_point", "multi_line_string", "multi_polygon",
    "geometry_collection", "empty", "curved",
    "GeometryError", "EmptyGeometryError", "DimensionMismatchError", "NotAPolygonError",
    "IndexOutOfRangeError", "UnsupportedOperandError", "InvalidParameterError",
] + list(api.__all__)
