"""Unit tests for Point and the point helpers."""

import dataclasses

import pytest

from svgeometry.domain import Point, max_point, min_point, turn_angle
from svgeometry.domain.point import format_number, round_coordinate


class TestPointConstruction:
    """Tests for creating points."""

    def test_coordinates_are_rounded(self) -> None:
        """Test values below the precision collapse to the same point."""
        a = Point(1.00001, 2.00004)
        b = Point(1.0, 2.0)
        assert a == b
        assert hash(a) == hash(b)

    def test_negative_zero_is_normalized(self) -> None:
        """Test -0.0 and tiny negatives are stored as 0.0."""
        p = Point(-0.0, -0.00001)
        assert repr(p) == "Point(0, 0)"

    def test_point_immutable(self) -> None:
        """Test that point is immutable."""
        p = Point(1.0, 2.0)
        with pytest.raises(dataclasses.FrozenInstanceError):
            p.x = 3.0  # type: ignore[misc]

    def test_of_tuple(self) -> None:
        """Test coercion from an (x, y) pair."""
        assert Point.of((3, 4)) == Point(3, 4)

    def test_of_point_returns_same_instance(self) -> None:
        p = Point(1, 1)
        assert Point.of(p) is p

    def test_origin(self) -> None:
        assert Point.origin() == Point(0, 0)

    def test_to_tuple_and_unpacking(self) -> None:
        """Test tuple conversion and iteration."""
        p = Point(100.0, 200.0)
        assert p.to_tuple() == (100.0, 200.0)
        x, y = p
        assert (x, y) == (100.0, 200.0)


class TestPointOrdering:
    """Tests for reading-order comparison (Y first, then X)."""

    def test_y_dominates(self) -> None:
        """Test a point on an earlier row sorts first regardless of X."""
        assert Point(50, 0) < Point(0, 1)

    def test_x_breaks_ties(self) -> None:
        assert Point(1, 5) < Point(2, 5)

    def test_compare_to(self) -> None:
        """Test three-way comparison."""
        assert Point(0, 0).compare_to(Point(0, 1)) < 0
        assert Point(0, 1).compare_to(Point(0, 0)) > 0
        assert Point(3, 3).compare_to(Point(3, 3)) == 0

    def test_sorting(self) -> None:
        points = [Point(5, 5), Point(0, 5), Point(9, 0)]
        assert sorted(points) == [Point(9, 0), Point(0, 5), Point(5, 5)]

    def test_min_and_max_point(self) -> None:
        """Test extremes follow reading order, not X order."""
        points = [Point(5, 5), Point(0, 5), Point(9, 0)]
        assert min_point(points) == Point(9, 0)
        assert max_point(points) == Point(5, 5)


class TestPointArithmetic:
    """Tests for vector operations."""

    def test_add_and_subtract(self) -> None:
        assert Point(1, 2) + Point(3, 4) == Point(4, 6)
        assert Point(4, 6) - Point(3, 4) == Point(1, 2)

    def test_scale(self) -> None:
        """Test multiplication by a factor from both sides."""
        assert Point(1, 2) * 2 == Point(2, 4)
        assert 2 * Point(1, 2) == Point(2, 4)

    def test_dot_and_length(self) -> None:
        assert Point(1, 2).dot(Point(3, 4)) == 11
        assert Point(3, 4).length_squared() == 25

    def test_distances(self) -> None:
        """Test Euclidean and squared distance."""
        a = Point(0, 0)
        b = Point(3, 4)
        assert a.distance_to(b) == pytest.approx(5.0)
        assert a.distance_squared(b) == pytest.approx(25.0)
        assert a.is_within_distance(b, 5.0)
        assert not a.is_within_distance(b, 4.9)


class TestPointOnSegment:
    """Tests for point-on-segment checks."""

    def test_midpoint_on_segment(self) -> None:
        assert Point(5, 0).is_on_line_segment(Point(0, 0), Point(10, 0))

    def test_endpoint_on_segment(self) -> None:
        assert Point(10, 0).is_on_line_segment(Point(0, 0), Point(10, 0))

    def test_beyond_segment_end(self) -> None:
        """Test a collinear point past the end is rejected."""
        assert not Point(11, 0).is_on_line_segment(Point(0, 0), Point(10, 0))

    def test_off_line(self) -> None:
        assert not Point(5, 1).is_on_line_segment(Point(0, 0), Point(10, 0))

    def test_diagonal(self) -> None:
        assert Point(2, 2).is_on_line_segment(Point(0, 0), Point(4, 4))


class TestTurnAngle:
    """Tests for signed turn angles."""

    def test_straight(self) -> None:
        assert turn_angle(Point(0, 0), Point(1, 0), Point(2, 0)) == pytest.approx(0.0)

    def test_quarter_turn(self) -> None:
        """Test a turn towards +Y is positive."""
        assert turn_angle(Point(0, 0), Point(1, 0), Point(1, 1)) == pytest.approx(90.0)
        assert turn_angle(Point(0, 0), Point(1, 0), Point(1, -1)) == pytest.approx(-90.0)

    def test_reversal_is_180(self) -> None:
        """Test a full reversal reports +180, never -180."""
        assert turn_angle(Point(0, 0), Point(1, 0), Point(0, 0)) == pytest.approx(180.0)


class TestFormatting:
    """Tests for coordinate formatting."""

    def test_format_number_strips_zeros(self) -> None:
        assert format_number(2.0) == "2"
        assert format_number(1.5) == "1.5"
        assert format_number(-3.25) == "-3.25"

    def test_format_number_negative_zero(self) -> None:
        assert format_number(-0.00001) == "0"

    def test_round_coordinate(self) -> None:
        assert round_coordinate(1.23456) == 1.2346

    def test_str(self) -> None:
        assert str(Point(1.5, 2)) == "(1.5, 2)"
