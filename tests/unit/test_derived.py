"""
Derived geometries: buffer, convex hull, centroid, point on surface, simplify.
"""

import math

import pytest

from planar import (
    EmptyGeometryError, GeometryKind, InvalidParameterError, UnsupportedOperandError,
    curved, empty, geometry_collection, line_string, multi_point, point, polygon,
    st_area, st_buffer, st_centroid, st_contains, st_convex_hull, st_equals,
    st_intersects, st_num_geometries, st_num_interior_rings, st_point_on_surface,
    st_simplify,
)
from planar.derived.buffer import circle_xy


def _ngon_area(r: float, quad_segs: int) -> float:
    n = 4 * quad_segs
    return 0.5 * n * r * r * math.sin(2.0 * math.pi / n)


U_SHAPE = [(0, 0), (6, 0), (6, 6), (4, 6), (4, 2), (2, 2), (2, 6), (0, 6), (0, 0)]


class TestBuffer:
    """st_buffer"""

    def test_point(self) -> None:
        r = st_buffer(point(1, 1), 2.0)
        assert r.kind == GeometryKind.POLYGON
        assert len(r.rings[0]) == 33
        assert st_area(r) == pytest.approx(_ngon_area(2.0, 8))

    def test_quad_segs_argument(self) -> None:
        r = st_buffer(point(0, 0), 1.0, quad_segs=2)
        assert len(r.rings[0]) == 9
        assert st_area(r) == pytest.approx(_ngon_area(1.0, 2))

    def test_circle_vertices_hit_the_axes(self) -> None:
        xy = circle_xy(0.0, 0.0, 1.0, 3)
        assert xy.shape == (12, 2)
        assert xy[0] == pytest.approx((1.0, 0.0))
        assert xy[3] == pytest.approx((0.0, 1.0), abs=1e-12)

    def test_segment(self) -> None:
        r = st_buffer(line_string([(0, 0), (10, 0)]), 1.0)
        assert r.kind == GeometryKind.POLYGON
        assert st_area(r) == pytest.approx(20.0 + _ngon_area(1.0, 8))

    def test_square_grows(self, square) -> None:
        r = st_buffer(square, 1.0)
        assert r.kind == GeometryKind.POLYGON
        assert st_area(r) == pytest.approx(32.0 + _ngon_area(1.0, 8), rel=1e-6)
        assert st_contains(r, square)

    def test_square_erodes(self, square) -> None:
        r = st_buffer(square, -1.0)
        assert r.kind == GeometryKind.POLYGON
        assert st_area(r) == pytest.approx(4.0, abs=1e-6)

    def test_erodes_to_nothing(self, square) -> None:
        r = st_buffer(square, -3.0)
        assert r.is_empty() and r.kind == GeometryKind.POLYGON

    def test_zero_radius(self, square, origin) -> None:
        assert st_equals(st_buffer(square, 0.0), square)
        r = st_buffer(origin, 0.0)
        assert r.is_empty() and r.kind == GeometryKind.POLYGON

    def test_non_positive_on_non_areal(self, diagonal) -> None:
        r = st_buffer(diagonal, -1.0)
        assert r.is_empty() and r.kind == GeometryKind.POLYGON

    def test_separate_points_give_multipolygon(self) -> None:
        r = st_buffer(multi_point([(0, 0), (10, 0)]), 1.0)
        assert r.kind == GeometryKind.MULTIPOLYGON
        assert st_num_geometries(r) == 2

    def test_empty_input(self) -> None:
        r = st_buffer(empty(), 1.0)
        assert r.is_empty() and r.kind == GeometryKind.POLYGON

    def test_bad_arguments(self, origin) -> None:
        with pytest.raises(InvalidParameterError):
            st_buffer(origin, 1.0, quad_segs=0)
        with pytest.raises(InvalidParameterError):
            st_buffer(origin, 1.0, quad_segs=2.5)
        with pytest.raises(InvalidParameterError):
            st_buffer(origin, math.nan)
        with pytest.raises(InvalidParameterError):
            st_buffer(origin, math.inf)

    def test_curved(self) -> None:
        with pytest.raises(UnsupportedOperandError):
            st_buffer(curved(GeometryKind.CIRCULARSTRING, [(0, 0), (1, 1), (2, 0)]), 1.0)


class TestConvexHull:
    """st_convex_hull"""

    def test_diamond(self, diamond_points) -> None:
        h = st_convex_hull(diamond_points)
        assert h.kind == GeometryKind.POLYGON
        assert len(h.rings[0]) == 5
        assert st_area(h) == pytest.approx(2.0)

    def test_degenerate_inputs(self) -> None:
        h = st_convex_hull(multi_point([(0, 0), (1, 1), (3, 3)]))
        assert h.kind == GeometryKind.LINESTRING
        assert list(h.coords) == [(0.0, 0.0), (3.0, 3.0)]
        assert st_convex_hull(multi_point([(2, 2), (2, 2)])) == point(2, 2)
        h = st_convex_hull(empty())
        assert h.is_empty() and h.kind == GeometryKind.GEOMETRYCOLLECTION

    def test_polygon_with_hole(self, square_with_hole) -> None:
        h = st_convex_hull(square_with_hole)
        assert st_num_interior_rings(h) == 0
        assert st_area(h) == pytest.approx(100.0)

    def test_contains_input(self) -> None:
        u = polygon(U_SHAPE)
        h = st_convex_hull(u)
        assert st_area(h) == pytest.approx(36.0)
        assert st_contains(h, u)


class TestCentroid:
    """st_centroid"""

    def test_square(self, square) -> None:
        assert st_centroid(square) == point(2, 2)

    def test_hole_is_subtracted(self) -> None:
        g = polygon([(0, 0), (4, 0), (4, 2), (0, 2), (0, 0)],
                    [[(0.5, 0.5), (1.5, 0.5), (1.5, 1.5), (0.5, 1.5), (0.5, 0.5)]])
        c = st_centroid(g)
        # (8 * 2 - 1 * 1) / (8 - 1)
        assert c.coords.coordinate(0) == pytest.approx((15.0 / 7.0, 1.0))

    def test_line_and_points(self, diamond_points) -> None:
        assert st_centroid(line_string([(0, 0), (4, 0)])) == point(2, 0)
        assert st_centroid(diamond_points).coords.coordinate(0) == pytest.approx((1.0, 1.0))

    def test_highest_dimension_wins(self, square) -> None:
        g = geometry_collection([square, point(100, 100)])
        assert st_centroid(g).coords.coordinate(0) == pytest.approx((2.0, 2.0))

    def test_zero_area_polygon_falls_back_to_rings(self) -> None:
        g = polygon([(0, 0), (2, 0), (4, 0), (0, 0)])
        assert st_centroid(g).coords.coordinate(0) == pytest.approx((2.0, 0.0))

    def test_empty(self) -> None:
        with pytest.raises(EmptyGeometryError):
            st_centroid(empty(GeometryKind.POLYGON))


class TestPointOnSurface:
    """st_point_on_surface"""

    def test_square(self, square) -> None:
        p = st_point_on_surface(square)
        assert st_contains(square, p)

    def test_concave_polygon(self) -> None:
        u = polygon(U_SHAPE)
        p = st_point_on_surface(u)
        assert st_contains(u, p)
        assert not st_contains(u, st_centroid(u))

    def test_polygon_with_hole(self, square_with_hole) -> None:
        p = st_point_on_surface(square_with_hole)
        assert st_contains(square_with_hole, p)

    def test_line(self) -> None:
        line = line_string([(0, 0), (1, 0), (5, 0)])
        p = st_point_on_surface(line)
        assert p == point(1, 0)
        assert st_intersects(line, p)

    def test_points(self, diamond_points) -> None:
        assert st_point_on_surface(diamond_points) == point(1, 1)

    def test_empty(self) -> None:
        with pytest.raises(EmptyGeometryError):
            st_point_on_surface(empty())


class TestSimplify:
    """st_simplify"""

    def test_zero_tolerance_is_identity(self, square_with_hole, diagonal) -> None:
        assert st_simplify(square_with_hole, 0.0) == square_with_hole
        assert st_simplify(diagonal, 0.0) == diagonal

    def test_removes_small_deviation(self) -> None:
        r = st_simplify(line_string([(0, 0), (1, 0.01), (2, 0)]), 0.1)
        assert list(r.coords) == [(0.0, 0.0), (2.0, 0.0)]

    def test_deviation_equal_to_tolerance_is_kept(self) -> None:
        line = line_string([(0, 0), (1, 1), (2, 0)])
        assert len(st_simplify(line, 1.0).coords) == 3
        assert len(st_simplify(line, 1.5).coords) == 2

    def test_collapsed_shell_gives_empty(self, square) -> None:
        r = st_simplify(square, 10.0)
        assert r.is_empty() and r.kind == GeometryKind.POLYGON
        assert st_simplify(square, 1.0) == square

    def test_collapsed_hole_is_dropped(self, square_with_hole) -> None:
        r = st_simplify(square_with_hole, 3.0)
        assert st_num_interior_rings(r) == 0
        assert st_area(r) == pytest.approx(100.0)

    def test_points_unchanged(self, diamond_points) -> None:
        assert st_simplify(diamond_points, 5.0) == diamond_points

    def test_bad_tolerance(self, square) -> None:
        with pytest.raises(InvalidParameterError):
            st_simplify(square, -1.0)
        with pytest.raises(InvalidParameterError):
            st_simplify(square, math.nan)
