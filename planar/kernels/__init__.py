# -*- coding: utf-8 -*-
# planar/kernels/__init__.py

"""
Project: Planar
Date: 10/19/2026

Kernels Subfolder:
------------------
Numeric primitives shared by every engine. Pure NumPy, no logging.

Modules:
--------
- predicates: orientation, segment classification, point/segment distance,
              point-in-ring location.
- loop:       ring closure, signed area, ring orientation, polyline length.
"""

from .predicates import (
    Location, SegmentRelation, orient, orientation_index, classify_segments,
    point_on_segment, point_segment_distance,
    points_segments_distance, locate_in_ring, same_point,
    candidate_pairs,
)
from .loop import (
    is_closed, ensure_closed, signed_area, orient_ring,
    polyline_length,
)

__all__ = [
    "Location", "SegmentRelation", "orient", "orientation_index", "classify_segments",
    "point_on_segment", "point_segment_distance",
    "points_segments_distance", "locate_in_ring", "same_point",
    "candidate_pairs",
    "is_closed", "ensure_closed", "signed_area", "orient_ring",
    "polyline_length",
]
