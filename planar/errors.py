# -*- coding: utf-8 -*-
# planar/errors.py

"""
Project: Planar
Date: 10/19/2026

Purpose
-------
Typed exceptions for the geometry engine with compact, context-aware messages so
every failing operation names the kind of failure and the values that caused it.

Main Tasks
----------
    1. Define GeometryError(message, context) with a compact context suffix in __str__.
    2. Provide one subclass per failure kind of the engine contract.
    3. Expose public names via __all__.

Notes
-----
- Context is optional; long values are truncated for readability.
- Geometric degeneracies that are valid outputs (e.g. an empty intersection) are
  results, never errors.
"""

__all__ = [
    "GeometryError",
    "EmptyGeometryError",
    "DimensionMismatchError",
    "NotAPolygonError",
    "IndexOutOfRangeError",
    "UnsupportedOperandError",
    "InvalidParameterError",
]


def _format_context(ctx):
    """Return a compact ' | key1=val1, key2=val2' string or '' if no context."""
    if not ctx:
        return ""
    parts = []
    for k in sorted(ctx.keys()):
        sv = repr(ctx[k])
        if len(sv) > 120:
            sv = sv[:117] + "..."
        parts.append("{}={}".format(k, sv))
    return " | " + ", ".join(parts)


class GeometryError(Exception):
    """
    Base class for all engine errors.

    Parameters
    ----------
    message : str
        Human-readable error.
    context : dict, optional
        Extra fields appended in the string form (e.g., {"op": "st_distance"}).
    """
    def __init__(self, message, context=None):
        self.context = dict(context) if context else None
        super(GeometryError, self).__init__(message)

    def __str__(self):
        base = super(GeometryError, self).__str__()
        return base + _format_context(self.context)


class EmptyGeometryError(GeometryError):
    """
    The operation needs at least one point and an operand is empty
    (distance, centroid, point-on-surface).
    """


class DimensionMismatchError(GeometryError):
    """
    The predicate is undefined for the operand dimensions:
      - st_crosses on point/point or area/area,
      - st_overlaps on operands of different dimension,
      - st_touches on point/point.
    """


class NotAPolygonError(GeometryError):
    """Ring accessor invoked on a non-polygon kind."""


class IndexOutOfRangeError(GeometryError):
    """1-based index outside [1, count] for ring/member accessors."""


class UnsupportedOperandError(GeometryError):
    """A curved/surface kind reached an operation with no algorithm for it."""


class InvalidParameterError(GeometryError):
    """
    Malformed operation argument:
      - quad_segs < 1 or non-finite radius for st_buffer,
      - negative tolerance for st_simplify,
      - non-positive grid size, malformed DE-9IM pattern.
    """
