"""
Area, length, perimeter and distance.
"""

import pytest

from planar import (
    EmptyGeometryError, GeometryKind, UnsupportedOperandError, curved, empty,
    geometry_collection, line_string, multi_polygon, point, polygon,
    st_area, st_distance, st_length, st_perimeter,
)


class TestMeasures:
    """Area / length / perimeter"""

    def test_square(self, square) -> None:
        assert st_area(square) == pytest.approx(16.0)
        assert st_perimeter(square) == pytest.approx(16.0)
        assert st_length(square) == 0.0

    def test_line(self) -> None:
        line = line_string([(0, 0), (3, 4)])
        assert st_length(line) == pytest.approx(5.0)
        assert st_area(line) == 0.0
        assert st_perimeter(line) == 0.0

    def test_polygon_with_hole(self, square_with_hole) -> None:
        assert st_area(square_with_hole) == pytest.approx(96.0)
        assert st_perimeter(square_with_hole) == pytest.approx(48.0)

    def test_orientation_does_not_matter(self) -> None:
        cw = polygon([(0, 0), (0, 4), (4, 4), (4, 0), (0, 0)])
        assert st_area(cw) == pytest.approx(16.0)

    def test_unclosed_ring_is_closed_for_perimeter(self) -> None:
        assert st_perimeter(polygon([(0, 0), (4, 0), (4, 4), (0, 4)])) == pytest.approx(16.0)

    def test_collections_sum(self, square, diagonal, origin) -> None:
        far = polygon([(10, 10), (12, 10), (12, 12), (10, 12), (10, 10)])
        assert st_area(multi_polygon([square, far])) == pytest.approx(20.0)
        gc = geometry_collection([square, diagonal, origin])
        assert st_area(gc) == pytest.approx(16.0)
        assert st_length(gc) == pytest.approx(32 ** 0.5)

    def test_empty_is_zero(self) -> None:
        assert st_area(empty()) == 0.0
        assert st_length(empty(GeometryKind.LINESTRING)) == 0.0

    def test_method_form(self, square) -> None:
        assert square.st_area() == pytest.approx(16.0)


class TestDistance:
    """Minimum distance"""

    def test_points(self) -> None:
        assert st_distance(point(0, 0), point(10, 0)) == pytest.approx(10.0)

    def test_point_polygon(self, square) -> None:
        assert st_distance(point(7, 2), square) == pytest.approx(3.0)
        assert st_distance(point(2, 2), square) == 0.0
        assert st_distance(point(4, 2), square) == 0.0

    def test_point_in_hole(self, square_with_hole) -> None:
        assert st_distance(point(5, 5), square_with_hole) == pytest.approx(1.0)

    def test_parallel_lines(self) -> None:
        a = line_string([(0, 0), (4, 0)])
        b = line_string([(0, 3), (4, 3)])
        assert st_distance(a, b) == pytest.approx(3.0)

    def test_crossing_lines(self, diagonal, anti_diagonal) -> None:
        assert st_distance(diagonal, anti_diagonal) == 0.0

    def test_polygon_inside_polygon(self, square) -> None:
        inner = polygon([(1, 1), (2, 1), (2, 2), (1, 2), (1, 1)])
        assert st_distance(inner, square) == 0.0

    def test_symmetric(self, square, diagonal) -> None:
        other = line_string([(6, 0), (6, 10)])
        assert st_distance(square, other) == pytest.approx(st_distance(other, square))
        assert st_distance(diagonal, other) == pytest.approx(2.0)

    def test_empty_operand(self, square) -> None:
        with pytest.raises(EmptyGeometryError):
            st_distance(square, empty())
        with pytest.raises(EmptyGeometryError):
            st_distance(empty(GeometryKind.POINT), square)

    def test_curved(self, square) -> None:
        with pytest.raises(UnsupportedOperandError):
            st_distance(square, curved(GeometryKind.TRIANGLE, rings=[[(0, 0), (1, 0), (0, 1), (0, 0)]]))
