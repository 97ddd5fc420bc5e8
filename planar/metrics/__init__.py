# -*- coding: utf-8 -*-
# planar/metrics/__init__.py

"""
Project: Planar
Date: 10/19/2026

Metrics Subfolder:
------------------
- measures: area, length, perimeter of one geometry.
- distance: minimum distance between two geometries.
"""

from .measures import area, length, perimeter
from .distance import distance

__all__ = ["area", "length", "perimeter", "distance"]
