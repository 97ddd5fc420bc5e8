# -*- coding: utf-8 -*-
# planar/core/kinds.py

"""
Project: Planar
Date: 10/19/2026

Purpose:
--------
Closed set of geometry kinds (the discriminant of the Geometry value) and the
static tables every algorithm dispatches on.

Notes:
------
   - Curved/surface kinds are tags only; algorithms reject them.
   - `MEMBER_KIND` maps each Multi kind to the kind of its members.
"""

from enum import Enum


class GeometryKind(str, Enum):
    POINT = "Point"
    LINESTRING = "LineString"
    POLYGON = "Polygon"

    MULTIPOINT = "MultiPoint"
    MULTILINESTRING = "MultiLineString"
    MULTIPOLYGON = "MultiPolygon"
    GEOMETRYCOLLECTION = "GeometryCollection"

    CIRCULARSTRING = "CircularString"
    COMPOUNDCURVE = "CompoundCurve"
    CURVEPOLYGON = "CurvePolygon"
    POLYHEDRALSURFACE = "PolyhedralSurface"
    TIN = "TriangulatedIrregularNetwork"
    TRIANGLE = "Triangle"


ATOMIC = frozenset({GeometryKind.POINT, GeometryKind.LINESTRING, GeometryKind.POLYGON})

MULTI = frozenset({
    GeometryKind.MULTIPOINT,
    GeometryKind.MULTILINESTRING,
    GeometryKind.MULTIPOLYGON,
})

# Kinds whose payload is a member tuple
COLLECTIONS = MULTI | {GeometryKind.GEOMETRYCOLLECTION}

CURVED = frozenset({
    GeometryKind.CIRCULARSTRING,
    GeometryKind.COMPOUNDCURVE,
    GeometryKind.CURVEPOLYGON,
    GeometryKind.POLYHEDRALSURFACE,
    GeometryKind.TIN,
    GeometryKind.TRIANGLE,
})

MEMBER_KIND = {
    GeometryKind.MULTIPOINT: GeometryKind.POINT,
    GeometryKind.MULTILINESTRING: GeometryKind.LINESTRING,
    GeometryKind.MULTIPOLYGON: GeometryKind.POLYGON,
}

MULTI_OF = {v: k for k, v in MEMBER_KIND.items()}

# Static topological dimension per kind (collections are computed from members)
KIND_DIMENSION = {
    GeometryKind.POINT: 0,
    GeometryKind.MULTIPOINT: 0,
    GeometryKind.LINESTRING: 1,
    GeometryKind.MULTILINESTRING: 1,
    GeometryKind.CIRCULARSTRING: 1,
    GeometryKind.COMPOUNDCURVE: 1,
    GeometryKind.POLYGON: 2,
    GeometryKind.MULTIPOLYGON: 2,
    GeometryKind.CURVEPOLYGON: 2,
    GeometryKind.POLYHEDRALSURFACE: 2,
    GeometryKind.TIN: 2,
    GeometryKind.TRIANGLE: 2,
}

# Atomic kind per dimension, used when a result must be typed
ATOMIC_OF_DIMENSION = {
    0: GeometryKind.POINT,
    1: GeometryKind.LINESTRING,
    2: GeometryKind.POLYGON,
}
