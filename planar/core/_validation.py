# -*- coding: utf-8 -*-
# planar/core/_validation.py

"""
Project: Planar
Date: 10/19/2026

Purpose:
--------
Shared shape guards for coordinate input so constructors, kernels and engines
report malformed arrays with one consistent message.

Main Tasks:
   1. Coerce caller coordinates into (N, 2) float64 arrays.
   2. Validate array structure with optional finite-value checking.
   3. Provide the bit-exact closure predicate used for rings.
"""

from typing import Optional
import numpy as np


def _as_xy(coords) -> np.ndarray:
    """
    Coerce a sequence of (x, y) pairs (or an (N, 2) array) to a float64 (N, 2) array.

    An empty sequence yields a (0, 2) array.

    Raises
    ------
    ValueError
        If the input cannot be interpreted as (N, 2).
    """
    arr = np.asarray(coords, dtype=np.float64)
    if arr.size == 0:
        return np.zeros((0, 2), dtype=np.float64)
    if arr.ndim == 1 and arr.shape[0] == 2:
        arr = arr.reshape(1, 2)
    _assert_xy(arr)
    return arr


def _assert_xy(points: Optional[np.ndarray], check_finite: bool = False) -> None:
    """
    Validate that points array is (N, 2) with optional finite value checking.

    Parameters
    ----------
    points : Optional[np.ndarray]
        Points array to validate
    check_finite : bool, optional
        If True, check for finite values (no NaN/Inf), by default False

    Raises
    ------
    ValueError
        If points array fails validation checks
    """
    if points is None:
        raise ValueError("No geometry provided (points is None).")

    if points.ndim != 2 or points.shape[1] != 2:
        raise ValueError(f"Expected (N, 2) array for points, got shape {points.shape}.")

    if check_finite and not np.isfinite(points).all():
        bad_indices = np.argwhere(~np.isfinite(points))
        raise ValueError(f"Non-finite coordinates detected at indices: {bad_indices.tolist()}")


def _is_exactly_closed(points: np.ndarray) -> bool:
    """
    Check that a coordinate sequence is closed with bit-identical endpoints.

    Returns
    -------
    bool
        True if there are at least 2 rows and first == last exactly.
    """
    if points.shape[0] < 2:
        return False
    return bool(np.array_equal(points[0], points[-1]))


def _drop_consecutive_duplicates(pts: np.ndarray, tol: float = 0.0) -> np.ndarray:
    """
    Remove exact (or tolerance-close) consecutive duplicates, retaining order.
    """
    if pts.shape[0] <= 1:
        return pts
    keep = [0]
    for i in range(1, pts.shape[0]):
        if not np.allclose(pts[i], pts[keep[-1]], atol=tol, rtol=0.0):
            keep.append(i)
    return pts[np.array(keep, dtype=int)]
