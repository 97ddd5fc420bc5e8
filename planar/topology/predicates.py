# -*- coding: utf-8 -*-
# planar/topology/predicates.py

"""
Project: Planar
Date: 10/19/2026

Purpose:
--------
Named spatial predicates, each a pattern match against the single DE-9IM of the
operand pair. None is implemented independently, so e.g. contains(A, B) and
within(B, A) always agree on the same (transposed) matrix.

Patterns:
---------
   equals      T*F**FFF*
   disjoint    FF*FF****
   intersects  not disjoint
   touches     FT******* | F**T***** | F***T****      (undefined for P/P)
   crosses     T*T******  dim(A) < dim(B)
               T*****T**  dim(A) > dim(B)
               0********  L/L                          (undefined for P/P, A/A)
   within      T*F**F***
   contains    T*****FF*
   overlaps    T*T***T**  P/P and A/A
               1*T***T**  L/L                          (undefined across dimensions)
"""

from typing import Optional

from ..config import EngineConfig
from ..errors import DimensionMismatchError, InvalidParameterError
from .relate import relate

__all__ = [
    "equals", "disjoint", "intersects", "touches", "crosses",
    "within", "contains", "overlaps", "relate_pattern",
]


def _mismatch(op: str, a, b) -> DimensionMismatchError:
    return DimensionMismatchError(
        f"{op} is undefined for the operand dimensions.",
        {"op": op, "dim_a": a.dimensions(), "dim_b": b.dimensions()},
    )


def equals(a, b, config: Optional[EngineConfig] = None) -> bool:
    if a.is_empty() and b.is_empty():
        return True
    return relate(a, b, config).matches("T*F**FFF*")


def disjoint(a, b, config: Optional[EngineConfig] = None) -> bool:
    return relate(a, b, config).matches("FF*FF****")


def intersects(a, b, config: Optional[EngineConfig] = None) -> bool:
    return not disjoint(a, b, config)


def touches(a, b, config: Optional[EngineConfig] = None) -> bool:
    if a.is_empty() or b.is_empty():
        return False
    if a.dimensions() == 0 and b.dimensions() == 0:
        raise _mismatch("st_touches", a, b)
    im = relate(a, b, config)
    return im.matches("FT*******") or im.matches("F**T*****") or im.matches("F***T****")


def crosses(a, b, config: Optional[EngineConfig] = None) -> bool:
    if a.is_empty() or b.is_empty():
        return False
    da, db = a.dimensions(), b.dimensions()
    if da == db and da in (0, 2):
        raise _mismatch("st_crosses", a, b)
    im = relate(a, b, config)
    if da < db:
        return im.matches("T*T******")
    if da > db:
        return im.matches("T*****T**")
    return im.matches("0********")


def within(a, b, config: Optional[EngineConfig] = None) -> bool:
    return relate(a, b, config).matches("T*F**F***")


def contains(a, b, config: Optional[EngineConfig] = None) -> bool:
    return relate(a, b, config).matches("T*****FF*")


def overlaps(a, b, config: Optional[EngineConfig] = None) -> bool:
    if a.is_empty() or b.is_empty():
        return False
    da, db = a.dimensions(), b.dimensions()
    if da != db:
        raise _mismatch("st_overlaps", a, b)
    im = relate(a, b, config)
    if da == 1:
        return im.matches("1*T***T**")
    return im.matches("T*T***T**")


def relate_pattern(a, b, pattern: Optional[str] = None, config: Optional[EngineConfig] = None):
    """
    Return the DE-9IM string of (a, b), or whether it matches `pattern`.

    Raises
    ------
    InvalidParameterError
        If `pattern` is given but is not a 9-character pattern over T, F, *, 0, 1, 2.
    """
    if pattern is not None and not isinstance(pattern, str):
        raise InvalidParameterError("DE-9IM pattern must be a string.", {"pattern": pattern})
    im = relate(a, b, config)
    if pattern is None:
        return str(im)
    return im.matches(pattern)
