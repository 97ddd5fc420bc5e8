# -*- coding: utf-8 -*-
# planar/config.py

"""
Project: Planar
Date: 10/19/2026

Purpose
-------
Explicit engine configuration. Numeric tolerances and algorithm defaults travel
with each call as an immutable `EngineConfig` instead of living in process-wide
mutable state, so every operation is deterministic and testable on its own.

Main Tasks
----------
    1. Provide curated `DEFAULTS` (same nested layout as user overrides).
    2. Merge user overrides over the defaults without mutating either.
    3. Validate and freeze the result into an `EngineConfig`.

Schema
------
{
  "numeric":  {"tolerance": float},     # absolute distance used by robust predicates
  "buffer":   {"quad_segs": int},       # default segments per quarter circle
  "validity": {"max_examples": int},    # cap on examples kept per validity finding
}
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional
import copy
import math
import numbers

from .errors import InvalidParameterError

__all__ = ["DEFAULTS", "EngineConfig", "make_config", "DEFAULT_CONFIG", "resolve"]


# -------------------------
# Defaults (policy)
# -------------------------
DEFAULTS: Dict[str, Any] = {
    "numeric": {
        "tolerance": 1e-9,
    },
    "buffer": {
        "quad_segs": 8,
    },
    "validity": {
        "max_examples": 25,
    },
}


@dataclass(frozen=True)
class EngineConfig:
    """
    Immutable per-call configuration.

    Attributes
    ----------
    tolerance : float
        Absolute distance below which two points coincide, a point lies on a
        segment, or three points are collinear.
    quad_segs : int
        Default number of segments approximating a quarter circle in st_buffer.
    max_examples : int
        Maximum number of examples recorded per validity finding.
    """
    tolerance: float = 1e-9
    quad_segs: int = 8
    max_examples: int = 25

    def __post_init__(self):
        tol, quad_segs, max_examples = self.tolerance, self.quad_segs, self.max_examples
        if isinstance(tol, bool) or not isinstance(tol, numbers.Real):
            raise InvalidParameterError("tolerance must be a number.", {"tolerance": tol})
        if not math.isfinite(tol) or tol < 0.0:
            raise InvalidParameterError("tolerance must be finite and >= 0.", {"tolerance": tol})
        if isinstance(quad_segs, bool) or not isinstance(quad_segs, numbers.Integral) or quad_segs < 1:
            raise InvalidParameterError("quad_segs must be an integer >= 1.", {"quad_segs": quad_segs})
        if isinstance(max_examples, bool) or not isinstance(max_examples, numbers.Integral) or max_examples < 0:
            raise InvalidParameterError("max_examples must be an integer >= 0.",
                                        {"max_examples": max_examples})


def _deep_merge(base: Dict[str, Any], upd: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    """
    Deep-merge two nested dicts (right-biased), preserving types and not mutating inputs.
    """
    if not upd:
        return copy.deepcopy(base)
    out = copy.deepcopy(base)
    for k, v in upd.items():
        if isinstance(v, dict) and isinstance(out.get(k), dict):
            out[k] = _deep_merge(out[k], v)
        else:
            out[k] = copy.deepcopy(v)
    return out


def make_config(overrides: Optional[Dict[str, Any]] = None) -> EngineConfig:
    """
    Build an `EngineConfig` from `DEFAULTS` merged with `overrides`.

    Parameters
    ----------
    overrides : dict, optional
        Same nested layout as `DEFAULTS`; unknown keys are ignored.

    Returns
    -------
    EngineConfig

    Raises
    ------
    InvalidParameterError
        If the tolerance is negative/non-finite, quad_segs < 1 or max_examples < 0.
    """
    cfg = _deep_merge(DEFAULTS, overrides or {})
    try:
        tol = float(cfg["numeric"]["tolerance"])
        quad_segs = int(cfg["buffer"]["quad_segs"])
        max_examples = int(cfg["validity"]["max_examples"])
    except (TypeError, ValueError) as e:
        raise InvalidParameterError("Malformed engine configuration.", {"error": str(e)})
    return EngineConfig(tolerance=tol, quad_segs=quad_segs, max_examples=max_examples)


DEFAULT_CONFIG = make_config()


def resolve(config: Optional[EngineConfig]) -> EngineConfig:
    """Return `config` or the module default when None."""
    return DEFAULT_CONFIG if config is None else config
