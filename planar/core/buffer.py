# -*- coding: utf-8 -*-
# planar/core/buffer.py

"""
Project: Planar
Date: 10/19/2026

Purpose:
--------
Flat, ordered, immutable storage of planar coordinates. A buffer holds float64
values interpreted in fixed-size groups (arity 2: x, y) and is owned by the
geometry that embeds it.

Notes:
------
   - The backing numpy array is made read-only at construction; every operation
     that changes coordinates builds a new buffer.
   - Flat index `i` maps to coordinate `i // arity`.
"""

from typing import Iterator, Tuple
import numpy as np

from ._validation import _as_xy

ARITY = 2


class CoordinateBuffer:
    """
    Immutable flat coordinate sequence.

    Parameters
    ----------
    values : array-like
        Flat sequence of floats whose length is a multiple of `ARITY`.

    Raises
    ------
    ValueError
        If the flat length is not a multiple of the arity.
    """

    __slots__ = ("_values",)

    def __init__(self, values=()):
        arr = np.array(values, dtype=np.float64).reshape(-1)
        if arr.shape[0] % ARITY != 0:
            raise ValueError(
                f"Coordinate buffer length {arr.shape[0]} is not a multiple of arity {ARITY}."
            )
        arr.flags.writeable = False
        object.__setattr__(self, "_values", arr)

    def __setattr__(self, name, value):
        raise AttributeError("CoordinateBuffer is immutable")

    # --------------------
    # Construction
    # --------------------
    @classmethod
    def from_xy(cls, coords) -> "CoordinateBuffer":
        """Build a buffer from (x, y) pairs or an (N, 2) array."""
        return cls(_as_xy(coords).reshape(-1))

    # --------------------
    # Queries
    # --------------------
    @property
    def arity(self) -> int:
        return ARITY

    @property
    def values(self) -> np.ndarray:
        """Read-only flat float64 array."""
        return self._values

    @property
    def xy(self) -> np.ndarray:
        """Read-only (N, 2) view of the coordinates."""
        return self._values.reshape(-1, ARITY)

    def group_of(self, flat_index: int) -> int:
        """Coordinate index owning the flat value at `flat_index`."""
        if not 0 <= flat_index < self._values.shape[0]:
            raise IndexError(f"Flat index {flat_index} out of range.")
        return flat_index // ARITY

    def coordinate(self, i: int) -> Tuple[float, float]:
        """Return coordinate `i` (0-based, negative allowed) as an (x, y) tuple."""
        x, y = self.xy[i]
        return float(x), float(y)

    def is_empty(self) -> bool:
        return self._values.shape[0] == 0

    def __len__(self) -> int:
        return self._values.shape[0] // ARITY

    def __iter__(self) -> Iterator[Tuple[float, float]]:
        for x, y in self.xy:
            yield float(x), float(y)

    def __eq__(self, other) -> bool:
        if not isinstance(other, CoordinateBuffer):
            return NotImplemented
        return bool(np.array_equal(self._values, other._values))

    def __hash__(self) -> int:
        return hash(self._values.tobytes())

    def __repr__(self) -> str:
        return f"CoordinateBuffer({self.xy.tolist()!r})"


EMPTY_BUFFER = CoordinateBuffer()
