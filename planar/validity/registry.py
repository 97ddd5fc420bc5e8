# -*- coding: utf-8 -*-
# planar/validity/registry.py

"""
Project: Planar
Date: 10/19/2026

Purpose:
--------
Central registry of validity rules. Each rule is defined once here with its
metadata, providing a single source of truth for execution order and selection.

Notes:
------
   - Duplicates are disallowed: adding a rule with an existing id raises ValueError.
   - Structural rules run first so later rules can skip malformed rings.
"""

from dataclasses import dataclass
from typing import Callable, Dict, List, Optional

from . import rules as _r


@dataclass(frozen=True)
class RuleSpec:
    id: str
    fn: Callable  # signature: fn(view, cfg) -> finding_dict
    structural: bool = False


REGISTRY: Dict[str, RuleSpec] = {}


def _add(spec: RuleSpec) -> None:
    if spec.id in REGISTRY:
        raise ValueError(f"Duplicate rule id in registry: {spec.id}")
    REGISTRY[spec.id] = spec


_add(RuleSpec("finite_coordinates",     _r.finite_coordinates,     True))
_add(RuleSpec("min_vertices",           _r.min_vertices,           True))
_add(RuleSpec("ring_closure",           _r.ring_closure,           True))
_add(RuleSpec("ring_self_intersection", _r.ring_self_intersection))
_add(RuleSpec("hole_outside_shell",     _r.hole_outside_shell))
_add(RuleSpec("nested_holes",           _r.nested_holes))
_add(RuleSpec("ring_interaction",       _r.ring_interaction))
_add(RuleSpec("multipolygon_overlap",   _r.multipolygon_overlap))


# Structure first; then ring-level; then ring pairs; then members.
RULES_ORDER: List[str] = [
    "finite_coordinates",
    "min_vertices",
    "ring_closure",
    "ring_self_intersection",
    "hole_outside_shell",
    "nested_holes",
    "ring_interaction",
    "multipolygon_overlap",
]


def get_enabled_ids(enabled_map: Optional[Dict[str, bool]]) -> List[str]:
    """
    Filter RULES_ORDER by an enable/disable map (absent ids default to enabled).
    """
    if not enabled_map:
        return list(RULES_ORDER)
    return [rid for rid in RULES_ORDER if enabled_map.get(rid, True)]
