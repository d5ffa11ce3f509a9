"""Tests for core functionality."""

from types import SimpleNamespace

import pytest

from buildingify.core.coordinates import is_point_pair, normalize_point, reverse_axis_order
from buildingify.core.exceptions import (
    BuildingifyError,
    GeometryError,
    InvalidPointError,
    InvalidSequenceError,
    ValidationError,
)
from buildingify.core.intersections import find_coincident_points


class TestIsPointPair:
    """Tests for is_point_pair."""

    def test_numeric_pairs(self):
        assert is_point_pair([1.5, -2.0])
        assert is_point_pair((1, 2))

    def test_rejects_other_shapes(self):
        assert not is_point_pair([1.0])
        assert not is_point_pair([1.0, 2.0, 3.0])
        assert not is_point_pair(["1", 2.0])
        assert not is_point_pair([True, 2.0])
        assert not is_point_pair("ab")
        assert not is_point_pair(None)
        assert not is_point_pair(3.0)


class TestNormalizePoint:
    """Tests for normalize_point."""

    def test_all_shapes_give_same_pair(self):
        """A labeled point, a point feature and a raw pair for one place agree."""
        labeled = {"lat": 43.3, "lng": -73.7}
        labeled_object = SimpleNamespace(lat=43.3, lng=-73.7)
        feature = {"type": "Feature", "geometry": {"type": "Point", "coordinates": [-73.7, 43.3]}}
        raw = [-73.7, 43.3]

        expected = [-73.7, 43.3]
        assert normalize_point(labeled) == expected
        assert normalize_point(labeled_object) == expected
        assert normalize_point(feature) == expected
        assert normalize_point(raw) == expected

    def test_raw_tuple_returned_as_list(self):
        assert normalize_point((1.0, 2.0)) == [1.0, 2.0]

    @pytest.mark.parametrize(
        "value",
        [
            [1.0, 2.0, 3.0],
            {"lat": "43.3", "lng": -73.7},
            {"geometry": {"coordinates": [[0.0, 0.0], [1.0, 1.0]]}},
            "point",
            [],
        ],
    )
    def test_invalid_point_raises(self, value):
        with pytest.raises(InvalidPointError):
            normalize_point(value)


class TestReverseAxisOrder:
    """Tests for reverse_axis_order."""

    def test_point(self):
        assert reverse_axis_order([1.0, 2.0]) == [2.0, 1.0]

    def test_line(self):
        assert reverse_axis_order([[1.0, 2.0], [3.0, 4.0]]) == [[2.0, 1.0], [4.0, 3.0]]

    def test_polygon_keeps_depth(self):
        polygon = [[[0.0, 1.0], [2.0, 3.0], [4.0, 5.0], [0.0, 1.0]]]
        assert reverse_axis_order(polygon) == [[[1.0, 0.0], [3.0, 2.0], [5.0, 4.0], [1.0, 0.0]]]

    def test_does_not_mutate_input(self):
        line = [[1.0, 2.0], [3.0, 4.0]]
        reverse_axis_order(line)
        assert line == [[1.0, 2.0], [3.0, 4.0]]

    def test_empty_structures(self):
        assert reverse_axis_order([]) == []
        polygon_with_empty_hole = [[[0.0, 1.0], [2.0, 3.0]], []]
        assert reverse_axis_order(polygon_with_empty_hole) == [[[1.0, 0.0], [3.0, 2.0]], []]

    @pytest.mark.parametrize(
        "coordinates", [[], [[]], [[[0.0, 1.0], [2.0, 3.0]], []]]
    )
    def test_double_reverse_empty_is_identity(self, coordinates):
        assert reverse_axis_order(reverse_axis_order(coordinates)) == coordinates

    def test_double_reverse_is_identity(self):
        multi = [[[[0.5, 1.5], [2.5, 3.5]]], [[[4.0, 5.0], [6.0, 7.0]]]]
        assert reverse_axis_order(reverse_axis_order(multi)) == multi


class TestFindCoincidentPoints:
    """Tests for find_coincident_points."""

    def test_points_only_without_tags(self):
        a = [[0.0, 0.0], [1.0, 1.0], [2.0, 2.0]]
        b = [[5.0, 5.0], [2.0, 2.0], [1.0, 1.0]]
        assert find_coincident_points(a, b) == [[1.0, 1.0], [2.0, 2.0]]

    def test_indices_with_tags(self):
        a = [[0.0, 0.0], [1.0, 1.0]]
        b = [[1.0, 1.0], [3.0, 3.0]]
        assert find_coincident_points(a, b, "a", "b") == [([1.0, 1.0], {"a": 1, "b": 0})]

    def test_single_tag_gives_points_only(self):
        a = [[1.0, 1.0]]
        assert find_coincident_points(a, a, "a") == [[1.0, 1.0]]

    def test_integer_tags_zero(self):
        a = [[1.0, 1.0]]
        b = [[1.0, 1.0]]
        assert find_coincident_points(a, b, 0, 1) == [([1.0, 1.0], {0: 0, 1: 0})]

    def test_repeated_vertices_all_kept(self):
        a = [[1.0, 1.0], [2.0, 2.0], [1.0, 1.0]]
        b = [[1.0, 1.0]]
        matches = find_coincident_points(a, b, "a", "b")
        assert [indices for _, indices in matches] == [{"a": 0, "b": 0}, {"a": 2, "b": 0}]

    def test_exact_equality_only(self):
        a = [[1.0, 1.0]]
        b = [[1.0, 1.0 + 1e-12]]
        assert find_coincident_points(a, b) == []

    def test_invalid_element_raises(self):
        with pytest.raises(InvalidSequenceError):
            find_coincident_points([[0.0, 0.0]], [[0.0, 0.0, 0.0]])

    def test_invalid_element_raises_even_without_matches(self):
        with pytest.raises(InvalidSequenceError):
            find_coincident_points([[0.0, 0.0], "x"], [])


class TestExceptions:
    """Tests for the exception hierarchy."""

    @pytest.mark.parametrize(
        "error", [InvalidPointError, InvalidSequenceError, GeometryError, ValidationError]
    )
    def test_subclasses_base(self, error):
        assert issubclass(error, BuildingifyError)
        with pytest.raises(BuildingifyError):
            raise error("boom")
