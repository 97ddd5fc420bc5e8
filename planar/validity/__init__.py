# -*- coding: utf-8 -*-
# planar/validity/__init__.py

"""
Project: Planar
Date: 10/19/2026

Purpose:
--------
Public API for geometry validity and simplicity.

Main Tasks
----------
   - Run registry-defined validity rules over a flattened `GeometryView`.
   - Aggregate findings and compute a top-level `ok` status (`validity_report`).
   - Answer the boolean queries `is_valid` and `is_simple`.

Returned Schema:
----------------
{
  "ok": bool,
  "rules": { <rule_id>: finding_dict, ... },
  "meta": {"kind": str, "n_coords": int, "enabled": [rule ids]}
}

Notes:
------
   - Curved/surface kinds have no validity model here and raise
     `UnsupportedOperandError`.
   - Empty geometries are valid.
"""

import logging
from typing import Any, Dict, Optional

from ..config import EngineConfig, resolve
from ..topology.relate import require_supported
from .registry import REGISTRY, RULES_ORDER, get_enabled_ids
from .rules import GeometryView
from .simple import is_simple

logger = logging.getLogger(__name__)

__all__ = ["validity_report", "is_valid", "is_simple", "REGISTRY", "RULES_ORDER"]


def validity_report(g, config: Optional[EngineConfig] = None,
                    enabled: Optional[Dict[str, bool]] = None) -> Dict[str, Any]:
    """
    Evaluate every enabled validity rule and return the findings.

    Parameters
    ----------
    g : Geometry
        Simple-features geometry.
    config : EngineConfig, optional
        Tolerance and example cap.
    enabled : dict[str, bool], optional
        Rule id -> enabled flag; absent ids are enabled.

    Raises
    ------
    UnsupportedOperandError
        If `g` (or a member) carries a curved kind.
    """
    cfg = resolve(config)
    require_supported(g)
    view = GeometryView(g)
    ids = get_enabled_ids(enabled)

    findings: Dict[str, Dict[str, Any]] = {}
    structural_ok = True
    for rid in ids:
        spec = REGISTRY[rid]
        if not spec.structural and not structural_ok:
            findings[rid] = {"id": rid, "ok": True, "count": 0, "examples": [],
                             "details": {"skipped": "non-finite coordinates"}}
            continue
        f = spec.fn(view, cfg)
        findings[rid] = f
        if rid == "finite_coordinates" and not f["ok"]:
            structural_ok = False

    ok = all(f["ok"] for f in findings.values())
    if not ok:
        failed = [rid for rid in RULES_ORDER if rid in findings and not findings[rid]["ok"]]
        logger.debug("[validity] %s invalid: %s", g.kind.value, ", ".join(failed))
    return {
        "ok": ok,
        "rules": findings,
        "meta": {"kind": g.kind.value, "n_coords": g.num_coordinates(), "enabled": list(ids)},
    }


def is_valid(g, config: Optional[EngineConfig] = None) -> bool:
    """True if `g` satisfies every validity rule."""
    return validity_report(g, config)["ok"]
