"""
Validity rules, validity_report schema and simplicity.
"""

import math

import pytest

from planar import (
    GeometryKind, UnsupportedOperandError, curved, empty, is_simple, is_valid,
    line_string, make_config, multi_line_string, multi_point, multi_polygon, point,
    polygon, validity_report,
)
from planar.validity import REGISTRY, RULES_ORDER
from planar.validity.registry import get_enabled_ids

SHELL_10 = [(0, 0), (10, 0), (10, 10), (0, 10), (0, 0)]


def _box(x0, y0, x1, y1):
    return [(x0, y0), (x1, y0), (x1, y1), (x0, y1), (x0, y0)]


class TestRegistry:
    """Rule registry layout"""

    def test_order_covers_registry(self) -> None:
        assert set(RULES_ORDER) == set(REGISTRY)
        assert RULES_ORDER[0] == "finite_coordinates"

    def test_structural_rules_first(self) -> None:
        flags = [REGISTRY[rid].structural for rid in RULES_ORDER]
        assert flags == sorted(flags, reverse=True)

    def test_enabled_filter(self) -> None:
        assert get_enabled_ids(None) == RULES_ORDER
        ids = get_enabled_ids({"nested_holes": False})
        assert "nested_holes" not in ids
        assert len(ids) == len(RULES_ORDER) - 1


class TestValidityReport:
    """Report schema"""

    def test_schema(self, square) -> None:
        rep = validity_report(square)
        assert rep["ok"] is True
        assert set(rep["rules"]) == set(RULES_ORDER)
        assert rep["meta"] == {"kind": "Polygon", "n_coords": 5, "enabled": RULES_ORDER}
        f = rep["rules"]["ring_closure"]
        assert set(f) == {"id", "ok", "count", "examples", "details"}

    def test_examples_are_capped(self) -> None:
        g = line_string([(math.nan, 0)] * 5 + [(1, 1)])
        rep = validity_report(g, make_config({"validity": {"max_examples": 2}}))
        f = rep["rules"]["finite_coordinates"]
        assert f["count"] == 5
        assert len(f["examples"]) == 2

    def test_non_finite_skips_geometric_rules(self) -> None:
        rep = validity_report(line_string([(0, 0), (math.nan, 1)]))
        assert rep["ok"] is False
        assert rep["rules"]["finite_coordinates"]["ok"] is False
        assert "skipped" in rep["rules"]["ring_self_intersection"]["details"]

    def test_disabled_rule_is_not_reported(self) -> None:
        open_ring = polygon([(0, 0), (4, 0), (4, 4), (0, 4)])
        assert not is_valid(open_ring)
        rep = validity_report(open_ring, enabled={"ring_closure": False})
        assert rep["ok"] is True
        assert "ring_closure" not in rep["rules"]
        assert "ring_closure" not in rep["meta"]["enabled"]


class TestIsValid:
    """Polygon / multipolygon validity"""

    def test_valid_basics(self, square, square_with_hole, diagonal, origin) -> None:
        for g in (square, square_with_hole, diagonal, origin, empty()):
            assert is_valid(g)

    def test_bowtie(self) -> None:
        bowtie = polygon([(0, 0), (2, 2), (2, 0), (0, 2), (0, 0)])
        rep = validity_report(bowtie)
        assert not rep["ok"]
        assert not rep["rules"]["ring_self_intersection"]["ok"]
        assert rep["rules"]["ring_self_intersection"]["examples"][0]["at"] == pytest.approx([1.0, 1.0])

    def test_unclosed_ring(self) -> None:
        rep = validity_report(polygon([(0, 0), (4, 0), (4, 4), (0, 4)]))
        assert not rep["rules"]["ring_closure"]["ok"]
        assert rep["rules"]["min_vertices"]["ok"]

    def test_too_few_vertices(self) -> None:
        assert not is_valid(line_string([(1, 1)]))
        assert not is_valid(line_string([(1, 1), (1, 1)]))
        assert not is_valid(polygon([(0, 0), (1, 1), (0, 0)]))

    def test_hole_outside_shell(self) -> None:
        g = polygon(_box(0, 0, 4, 4), [_box(5, 5, 6, 6)])
        rep = validity_report(g)
        assert not rep["rules"]["hole_outside_shell"]["ok"]

    def test_nested_holes(self) -> None:
        g = polygon(SHELL_10, [_box(1, 1, 9, 9), _box(3, 3, 5, 5)])
        rep = validity_report(g)
        f = rep["rules"]["nested_holes"]
        assert not f["ok"]
        assert f["count"] == 1
        assert f["examples"][0]["ring"] == 2

    def test_hole_touching_shell_once_is_valid(self) -> None:
        g = polygon(SHELL_10, [[(0, 5), (3, 3), (3, 7), (0, 5)]])
        assert is_valid(g)

    def test_hole_touching_shell_twice_is_invalid(self) -> None:
        g = polygon(SHELL_10, [[(0, 5), (5, 2), (10, 5), (5, 8), (0, 5)]])
        rep = validity_report(g)
        f = rep["rules"]["ring_interaction"]
        assert not f["ok"]
        assert f["examples"][0]["kind"] == "multi_touch"

    def test_multipolygon_members(self) -> None:
        touching = multi_polygon([(_box(0, 0, 1, 1), []), (_box(1, 1, 2, 2), [])])
        overlapping = multi_polygon([(_box(0, 0, 2, 2), []), (_box(1, 1, 3, 3), [])])
        shared_edge = multi_polygon([(_box(0, 0, 1, 1), []), (_box(1, 0, 2, 1), [])])
        assert is_valid(touching)
        rep = validity_report(overlapping)
        assert rep["rules"]["multipolygon_overlap"]["examples"][0]["kind"] == "interior_overlap"
        rep = validity_report(shared_edge)
        assert rep["rules"]["multipolygon_overlap"]["examples"][0]["kind"] == "shared_edge"

    def test_curved_is_unsupported(self) -> None:
        arc = curved(GeometryKind.CIRCULARSTRING, [(0, 0), (1, 1), (2, 0)])
        with pytest.raises(UnsupportedOperandError):
            is_valid(arc)
        with pytest.raises(UnsupportedOperandError):
            is_simple(arc)

    def test_geometry_method(self, square) -> None:
        assert square.is_valid()


class TestIsSimple:
    """Simplicity per kind"""

    def test_lines(self, diagonal) -> None:
        assert is_simple(diagonal)
        assert not is_simple(line_string([(0, 0), (2, 2), (2, 0), (0, 2)]))
        assert is_simple(line_string(_box(0, 0, 4, 4)))
        assert not is_simple(line_string([(0, 0), (2, 0), (1, 0)]))
        assert is_simple(line_string([(0, 0), (1, 0), (1, 0), (2, 0)]))

    def test_points(self, origin) -> None:
        assert is_simple(origin)
        assert is_simple(multi_point([(0, 0), (1, 1)]))
        assert not is_simple(multi_point([(0, 0), (0, 0)]))

    def test_multilines(self, diagonal, anti_diagonal) -> None:
        chained = multi_line_string([[(0, 0), (1, 0)], [(1, 0), (2, 0)]])
        assert is_simple(chained)
        assert not is_simple(multi_line_string([diagonal, anti_diagonal]))
        t_joint = multi_line_string([[(0, 0), (4, 0)], [(2, 0), (2, 2)]])
        assert not is_simple(t_joint)

    def test_polygons_and_empty(self, square) -> None:
        assert is_simple(square)
        assert not is_simple(polygon([(0, 0), (2, 2), (2, 0), (0, 2), (0, 0)]))
        assert is_simple(empty(GeometryKind.LINESTRING))
        assert point(1, 1).is_simple()
