"""
Shared fixtures: a handful of canonical geometries reused across the unit tests.
"""

import matplotlib

matplotlib.use("Agg")

import pytest  # noqa: E402

from planar import (  # noqa: E402
    line_string, multi_point, point, polygon,
)

SQUARE = [(0, 0), (4, 0), (4, 4), (0, 4), (0, 0)]


@pytest.fixture
def square():
    """4x4 axis-aligned square, CCW."""
    return polygon(SQUARE)


@pytest.fixture
def shifted_square():
    """4x4 square overlapping `square` in [2,4]x[2,4]."""
    return polygon([(2, 2), (6, 2), (6, 6), (2, 6), (2, 2)])


@pytest.fixture
def square_with_hole():
    """10x10 square with a 2x2 hole at [4,6]x[4,6]."""
    return polygon(
        [(0, 0), (10, 0), (10, 10), (0, 10), (0, 0)],
        [[(4, 4), (4, 6), (6, 6), (6, 4), (4, 4)]],
    )


@pytest.fixture
def diagonal():
    return line_string([(0, 0), (4, 4)])


@pytest.fixture
def anti_diagonal():
    return line_string([(0, 4), (4, 0)])


@pytest.fixture
def origin():
    return point(0, 0)


@pytest.fixture
def diamond_points():
    """Diamond corners plus its center."""
    return multi_point([(0, 1), (1, 0), (2, 1), (1, 2), (1, 1)])
