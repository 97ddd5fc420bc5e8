"""
Tests for the value layer: CoordinateBuffer, GeometryKind tables and the
Geometry value with its constructors.

Checks:
1. Buffer arity invariant, indexing, immutability, value equality
2. Dimensions / emptiness per kind, including collections
3. Constructor shape and member-kind checks
4. Curved kinds are carried as tags
"""

import dataclasses
import math

import numpy as np
import pytest

from planar import (
    ARITY, CoordinateBuffer, Geometry, GeometryKind,
    curved, empty, geometry_collection, line_string, multi_line_string,
    multi_point, multi_polygon, point, polygon,
)
from planar.core.kinds import CURVED, MEMBER_KIND, MULTI_OF


class TestCoordinateBuffer:
    """CoordinateBuffer invariants"""

    def test_length_must_be_multiple_of_arity(self) -> None:
        with pytest.raises(ValueError):
            CoordinateBuffer((1.0, 2.0, 3.0))

    def test_len_counts_coordinates(self) -> None:
        buf = CoordinateBuffer((0, 0, 1, 2, 3, 4))
        assert ARITY == 2
        assert len(buf) == 3
        assert buf.coordinate(1) == (1.0, 2.0)
        assert buf.coordinate(-1) == (3.0, 4.0)

    def test_group_of_maps_flat_index(self) -> None:
        buf = CoordinateBuffer((0, 0, 1, 2, 3, 4))
        assert buf.group_of(0) == 0
        assert buf.group_of(3) == 1
        assert buf.group_of(5) == 2
        with pytest.raises(IndexError):
            buf.group_of(6)

    def test_from_xy_matches_flat(self) -> None:
        assert CoordinateBuffer.from_xy([(1, 2), (3, 4)]) == CoordinateBuffer((1, 2, 3, 4))

    def test_values_are_read_only(self) -> None:
        buf = CoordinateBuffer.from_xy([(1, 2)])
        with pytest.raises(ValueError):
            buf.values[0] = 5.0
        with pytest.raises(ValueError):
            buf.xy[0, 0] = 5.0

    def test_attributes_are_immutable(self) -> None:
        buf = CoordinateBuffer()
        with pytest.raises(AttributeError):
            buf._values = np.zeros(2)

    def test_equality_and_hash_by_value(self) -> None:
        a = CoordinateBuffer((1, 2, 3, 4))
        b = CoordinateBuffer(np.array([1.0, 2.0, 3.0, 4.0]))
        assert a == b
        assert hash(a) == hash(b)
        assert a != CoordinateBuffer((1, 2))

    def test_iteration_yields_pairs(self) -> None:
        assert list(CoordinateBuffer((1, 2, 3, 4))) == [(1.0, 2.0), (3.0, 4.0)]

    def test_empty_buffer(self) -> None:
        buf = CoordinateBuffer()
        assert buf.is_empty()
        assert len(buf) == 0
        assert buf.xy.shape == (0, 2)

    def test_non_finite_values_are_accepted(self) -> None:
        buf = CoordinateBuffer((math.nan, 1.0))
        assert len(buf) == 1


class TestKindTables:
    """Static per-kind tables"""

    def test_multi_and_member_kinds_are_inverse(self) -> None:
        for multi, member in MEMBER_KIND.items():
            assert MULTI_OF[member] == multi

    def test_curved_kinds(self) -> None:
        assert GeometryKind.CIRCULARSTRING in CURVED
        assert GeometryKind.POLYGON not in CURVED
        assert GeometryKind.TIN.value == "TriangulatedIrregularNetwork"


class TestGeometryValue:
    """Dimensions, emptiness and structure"""

    def test_dimensions_per_kind(self, square, diagonal, origin) -> None:
        assert origin.dimensions() == 0
        assert diagonal.dimensions() == 1
        assert square.dimensions() == 2
        assert multi_point([(0, 0)]).dimensions() == 0
        assert multi_line_string([[(0, 0), (1, 1)]]).dimensions() == 1

    def test_collection_dimension_is_max_of_members(self, square, origin) -> None:
        assert geometry_collection([origin, square]).dimensions() == 2
        assert geometry_collection([origin]).dimensions() == 0
        assert geometry_collection().dimensions() == -1

    def test_emptiness(self, square) -> None:
        assert not square.is_empty()
        assert empty().is_empty()
        assert empty(GeometryKind.POINT).is_empty()
        assert polygon([]).is_empty()
        assert line_string([]).is_empty()
        assert geometry_collection([empty(GeometryKind.POINT)]).is_empty()
        assert not geometry_collection([empty(GeometryKind.POINT), point(1, 1)]).is_empty()

    def test_empty_kind_keeps_static_dimension(self) -> None:
        assert empty(GeometryKind.POLYGON).dimensions() == 2

    def test_values_are_frozen(self, square) -> None:
        with pytest.raises(dataclasses.FrozenInstanceError):
            square.kind = GeometryKind.POINT

    def test_value_equality(self) -> None:
        assert point(1, 2) == point(1, 2)
        assert point(1, 2) != point(2, 1)

    def test_polygon_rings(self, square_with_hole) -> None:
        assert len(square_with_hole.rings) == 2
        assert square_with_hole.shell.coordinate(1) == (10.0, 0.0)
        assert len(square_with_hole.holes) == 1

    def test_iter_atomic_flattens_and_skips_empty(self, square, origin) -> None:
        g = geometry_collection([origin, multi_polygon([square]), empty(GeometryKind.LINESTRING)])
        kinds = [leaf.kind for leaf in g.iter_atomic()]
        assert kinds == [GeometryKind.POINT, GeometryKind.POLYGON]

    def test_all_xy_stacks_coordinates(self, square_with_hole) -> None:
        assert square_with_hole.all_xy().shape == (10, 2)
        assert square_with_hole.num_coordinates() == 10


class TestConstructors:
    """Constructor shape checks"""

    def test_multi_point_accepts_pairs_and_points(self) -> None:
        g = multi_point([(0, 0), point(1, 1)])
        assert g.kind == GeometryKind.MULTIPOINT
        assert len(g.members) == 2

    def test_multi_member_kind_is_checked(self, diagonal) -> None:
        with pytest.raises(ValueError):
            multi_point([diagonal])
        with pytest.raises(ValueError):
            multi_polygon([diagonal])

    def test_multi_polygon_from_shell_hole_pairs(self) -> None:
        g = multi_polygon([([(0, 0), (1, 0), (1, 1), (0, 0)], [])])
        assert g.members[0].kind == GeometryKind.POLYGON

    def test_collection_members_must_be_geometries(self) -> None:
        with pytest.raises(ValueError):
            geometry_collection([(0, 0)])

    def test_empty_polygon_cannot_have_holes(self) -> None:
        with pytest.raises(ValueError):
            polygon([], [[(0, 0), (1, 0), (1, 1), (0, 0)]])

    def test_bad_coordinate_shape(self) -> None:
        with pytest.raises(ValueError):
            line_string([(0, 0, 0), (1, 1, 1)])

    def test_curved_is_tag_only(self) -> None:
        g = curved(GeometryKind.CIRCULARSTRING, [(0, 0), (1, 1), (2, 0)])
        assert g.is_curved
        assert g.dimensions() == 1
        assert isinstance(g, Geometry)
        with pytest.raises(ValueError):
            curved(GeometryKind.POINT, [(0, 0)])
