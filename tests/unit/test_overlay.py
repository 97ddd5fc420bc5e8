"""
Overlay set operations: intersection, union, difference, symmetric difference.

Checks:
1. Areal results (areas, hole assembly, dissolved shared edges)
2. Lower-dimensional results (touching edges/corners, crossing lines)
3. Result typing (atomic, Multi*, GeometryCollection, typed empties)
4. Algebraic identities on simple inputs
5. Ring grouping into polygons
"""

import numpy as np
import pytest

from planar import (
    GeometryKind, InvalidParameterError, UnsupportedOperandError,
    curved, empty, geometry_collection, line_string, point, polygon,
    st_area, st_difference, st_equals, st_intersection, st_length,
    st_num_geometries, st_num_interior_rings, st_sym_difference, st_union,
)
from planar.overlay import cascaded_union, overlay
from planar.overlay.assemble import build_polygons


def _box(x0, y0, x1, y1):
    return polygon([(x0, y0), (x1, y0), (x1, y1), (x0, y1), (x0, y0)])


class TestAreal:
    """Polygon / polygon"""

    def test_intersection_of_overlapping_squares(self, square, shifted_square) -> None:
        r = st_intersection(square, shifted_square)
        assert r.kind == GeometryKind.POLYGON
        assert st_area(r) == pytest.approx(4.0)
        assert st_equals(r, _box(2, 2, 4, 4))

    def test_union_of_overlapping_squares(self, square, shifted_square) -> None:
        r = st_union(square, shifted_square)
        assert r.kind == GeometryKind.POLYGON
        assert st_area(r) == pytest.approx(28.0)
        assert st_num_interior_rings(r) == 0

    def test_difference(self, square, shifted_square) -> None:
        r = st_difference(square, shifted_square)
        assert r.kind == GeometryKind.POLYGON
        assert st_area(r) == pytest.approx(12.0)

    def test_sym_difference_splits_at_touch_points(self, square, shifted_square) -> None:
        r = st_sym_difference(square, shifted_square)
        assert r.kind == GeometryKind.MULTIPOLYGON
        assert st_num_geometries(r) == 2
        assert st_area(r) == pytest.approx(24.0)
        for m in r.members:
            assert st_area(m) == pytest.approx(12.0)

    def test_difference_creates_hole(self) -> None:
        r = st_difference(_box(0, 0, 10, 10), _box(4, 4, 6, 6))
        assert r.kind == GeometryKind.POLYGON
        assert st_num_interior_rings(r) == 1
        assert st_area(r) == pytest.approx(96.0)

    def test_union_dissolves_shared_edge(self, square) -> None:
        r = st_union(square, _box(4, 0, 8, 4))
        assert r.kind == GeometryKind.POLYGON
        assert st_area(r) == pytest.approx(32.0)
        assert st_equals(r, _box(0, 0, 8, 4))

    def test_union_of_disjoint(self, square) -> None:
        r = st_union(square, _box(10, 10, 12, 12))
        assert r.kind == GeometryKind.MULTIPOLYGON
        assert st_num_geometries(r) == 2
        assert st_area(r) == pytest.approx(20.0)

    def test_shells_are_ccw(self, square, shifted_square) -> None:
        from planar.kernels import signed_area
        r = st_union(square, shifted_square)
        assert signed_area(r.rings[0].xy) > 0.0


class TestLowerDimensional:
    """Results of dimension 0 and 1"""

    def test_squares_sharing_edge_intersect_in_line(self, square) -> None:
        r = st_intersection(square, _box(4, 0, 8, 4))
        assert r.kind == GeometryKind.LINESTRING
        assert st_equals(r, line_string([(4, 0), (4, 4)]))

    def test_squares_sharing_corner_intersect_in_point(self, square) -> None:
        r = st_intersection(square, _box(4, 4, 8, 8))
        assert r == point(4, 4)

    def test_crossing_lines(self, diagonal, anti_diagonal) -> None:
        assert st_intersection(diagonal, anti_diagonal) == point(2, 2)

    def test_union_of_crossing_lines_is_noded(self, diagonal, anti_diagonal) -> None:
        r = st_union(diagonal, anti_diagonal)
        assert r.kind == GeometryKind.MULTILINESTRING
        assert st_num_geometries(r) == 4
        assert st_length(r) == pytest.approx(2 * 32 ** 0.5)

    def test_collinear_overlap(self) -> None:
        r = st_intersection(line_string([(0, 0), (4, 0)]), line_string([(2, 0), (6, 0)]))
        assert r.kind == GeometryKind.LINESTRING
        assert list(r.coords) == [(2.0, 0.0), (4.0, 0.0)]

    def test_line_clipped_by_polygon(self, square) -> None:
        r = st_intersection(line_string([(-2, 2), (6, 2)]), square)
        assert r.kind == GeometryKind.LINESTRING
        assert list(r.coords) == [(0.0, 2.0), (4.0, 2.0)]

    def test_line_minus_polygon(self, square) -> None:
        r = st_difference(line_string([(-2, 2), (6, 2)]), square)
        assert r.kind == GeometryKind.MULTILINESTRING
        assert st_length(r) == pytest.approx(4.0)

    def test_point_and_polygon(self, square) -> None:
        inside = point(2, 2)
        assert st_intersection(inside, square) == inside
        diff = st_difference(inside, square)
        assert diff.is_empty() and diff.kind == GeometryKind.POINT
        assert st_equals(st_union(inside, square), square)

    def test_mixed_result_is_collection(self, square, shifted_square, origin) -> None:
        r = st_intersection(square, geometry_collection([shifted_square, origin]))
        assert r.kind == GeometryKind.GEOMETRYCOLLECTION
        assert st_num_geometries(r) == 2
        assert r.dimensions() == 2
        assert st_area(r) == pytest.approx(4.0)
        assert r.members[1] == origin


class TestTyping:
    """Empty results and identities"""

    def test_empty_intersection_is_typed(self, square, diagonal) -> None:
        r = st_intersection(square, _box(10, 10, 12, 12))
        assert r.is_empty() and r.kind == GeometryKind.POLYGON
        r = st_intersection(square, line_string([(10, 10), (12, 12)]))
        assert r.is_empty() and r.kind == GeometryKind.LINESTRING

    def test_empty_operands(self, square) -> None:
        r = st_intersection(empty(GeometryKind.POLYGON), square)
        assert r.is_empty() and r.kind == GeometryKind.POLYGON
        assert st_equals(st_union(empty(), square), square)
        assert st_equals(st_difference(square, empty()), square)
        r = st_difference(empty(GeometryKind.POINT), square)
        assert r.is_empty() and r.kind == GeometryKind.POINT

    def test_idempotence(self, square) -> None:
        assert st_equals(st_union(square, square), square)
        assert st_equals(st_intersection(square, square), square)
        r = st_sym_difference(square, square)
        assert r.is_empty() and r.kind == GeometryKind.POLYGON

    def test_commutative_areas(self, square, shifted_square) -> None:
        for op in (st_intersection, st_union, st_sym_difference):
            assert st_area(op(square, shifted_square)) == pytest.approx(st_area(op(shifted_square, square)))

    def test_unknown_op(self, square) -> None:
        with pytest.raises(InvalidParameterError):
            overlay(square, square, "xor")

    def test_curved(self, square) -> None:
        arc = curved(GeometryKind.COMPOUNDCURVE, [(0, 0), (1, 1)])
        with pytest.raises(UnsupportedOperandError):
            st_union(square, arc)


class TestCascadedUnion:
    def test_many_squares(self) -> None:
        boxes = [_box(i, 0, i + 1, 1) for i in range(5)]
        r = cascaded_union(boxes)
        assert r.kind == GeometryKind.POLYGON
        assert st_area(r) == pytest.approx(5.0)
        assert st_equals(r, _box(0, 0, 5, 1))

    def test_empty_sequence(self) -> None:
        assert cascaded_union([]) is None


def _ring(coords):
    return np.array(coords, dtype=float)


class TestBuildPolygons:
    """Grouping traced rings into shells and holes"""

    SHELL = [(0, 0), (10, 0), (10, 10), (0, 10), (0, 0)]

    def test_hole_goes_to_containing_shell(self) -> None:
        hole = _ring([(2, 2), (2, 4), (4, 4), (4, 2), (2, 2)])
        polys = build_polygons([_ring(self.SHELL), hole], 1e-9)
        assert len(polys) == 1
        assert st_num_interior_rings(polys[0]) == 1
        assert st_area(polys[0]) == pytest.approx(96.0)

    def test_hole_goes_to_smallest_shell(self) -> None:
        inner = _ring([(1, 1), (9, 1), (9, 9), (1, 9), (1, 1)])
        hole = _ring([(2, 2), (2, 4), (4, 4), (4, 2), (2, 2)])
        polys = build_polygons([_ring(self.SHELL), inner, hole], 1e-9)
        counts = sorted(st_num_interior_rings(p) for p in polys)
        assert counts == [0, 1]
        owner = next(p for p in polys if st_num_interior_rings(p) == 1)
        assert owner.rings[0].coordinate(0) == (1.0, 1.0)

    def test_midpoints_on_the_shell_are_skipped(self) -> None:
        # first edge runs along the shell; the next one decides
        hole = _ring([(0, 2), (0, 4), (2, 4), (2, 2), (0, 2)])
        polys = build_polygons([_ring(self.SHELL), hole], 1e-9)
        assert st_num_interior_rings(polys[0]) == 1

    def test_hole_outside_every_shell_is_dropped(self) -> None:
        hole = _ring([(20, 20), (20, 22), (22, 22), (22, 20), (20, 20)])
        polys = build_polygons([_ring(self.SHELL), hole], 1e-9)
        assert len(polys) == 1
        assert st_num_interior_rings(polys[0]) == 0
