"""Unit tests for the LineSet merging engine."""

import pytest

from svgeometry.domain import Point
from svgeometry.optimization import FastPolyline, Line, LineSet


def _segments(polylines: list[FastPolyline]) -> set[Line]:
    result: set[Line] = set()
    for polyline in polylines:
        points = polyline.points
        result.update(Line(a, b) for a, b in zip(points, points[1:]))
    return result


class TestLineSetIndex:
    """Tests for adding, removing and looking up segments."""

    def test_add_line_deduplicates(self) -> None:
        line_set = LineSet()
        assert line_set.add_line(Line(Point(0, 0), Point(1, 0)))
        assert not line_set.add_line(Line(Point(1, 0), Point(0, 0)))
        assert len(line_set) == 1
        assert Line(Point(0, 0), Point(1, 0)) in line_set

    def test_remove_missing_line_raises(self) -> None:
        line_set = LineSet()
        with pytest.raises(ValueError):
            line_set.remove_line(Line(Point(0, 0), Point(1, 0)))

    def test_lines_by_endpoint(self) -> None:
        line_set = LineSet()
        a = Line(Point(0, 0), Point(10, 0))
        b = Line(Point(10, 0), Point(20, 0))
        c = Line(Point(10, 0), Point(10, 10))
        for line in (a, b, c):
            line_set.add_line(line)

        assert line_set.lines_with_min_point(Point(10, 0)) == [b, c]
        assert line_set.lines_with_max_point(Point(10, 0)) == [a]
        assert line_set.degree(Point(10, 0)) == 3
        assert line_set.degree(Point(20, 0)) == 1
        assert line_set.degree(Point(50, 50)) == 0

    def test_add_polyline_records_endpoints(self) -> None:
        line_set = LineSet()
        line_set.add_polyline([Point(0, 0), Point(10, 0), Point(10, 10)])
        assert len(line_set) == 2
        assert line_set.original_endpoints == {Point(0, 0), Point(10, 10)}

    def test_shared_segments_stored_once(self) -> None:
        line_set = LineSet()
        line_set.add_polyline([Point(0, 0), Point(10, 0), Point(20, 0)])
        line_set.add_polyline([Point(30, 0), Point(20, 0), Point(10, 0)])
        assert len(line_set) == 3

    def test_loop_passed_through(self) -> None:
        line_set = LineSet()
        line_set.add_polyline([Point(0, 0), Point(10, 0), Point(10, 10), Point(0, 0)])
        assert len(line_set) == 0
        assert line_set.passthrough_count == 1
        assert line_set.original_endpoints == frozenset()


class TestLineSetOptimize:
    """Tests for chaining segments back into polylines."""

    def test_single_polyline_round_trip(self) -> None:
        """Test a lone simple polyline comes back unchanged."""
        points = [Point(0, 0), Point(10, 0), Point(10, 10), Point(20, 10)]
        line_set = LineSet()
        line_set.add_polyline(points)

        result = list(line_set.optimize())

        assert result == [FastPolyline(points)]
        assert len(line_set) == 0
        assert line_set.added_endpoints == frozenset()

    def test_original_endpoints_stop_chains(self) -> None:
        """Test overlapping routes split at every route endpoint."""
        line_set = LineSet()
        line_set.add_polyline([Point(0, 0), Point(10, 0), Point(20, 0)])
        line_set.add_polyline([Point(10, 0), Point(20, 0), Point(30, 0)])

        result = list(line_set.optimize())

        assert set(result) == {
            FastPolyline([Point(0, 0), Point(10, 0)]),
            FastPolyline([Point(10, 0), Point(20, 0)]),
            FastPolyline([Point(20, 0), Point(30, 0)]),
        }

    def test_shared_run_kept_once(self) -> None:
        """Test two routes sharing their middle keep that run once."""
        line_set = LineSet()
        line_set.add_polyline(
            [Point(0, 0), Point(10, 0), Point(20, 0), Point(30, 0), Point(40, 0)]
        )
        line_set.add_polyline(
            [Point(10, -10), Point(10, 0), Point(20, 0), Point(30, 0), Point(30, 10)]
        )

        result = list(line_set.optimize())

        # The side branch at (10, -10) is taken first, after which the shared
        # run continues through (10, 0) into the first route's start.
        assert result == [
            FastPolyline([Point(10, -10), Point(10, 0)]),
            FastPolyline([Point(0, 0), Point(10, 0), Point(20, 0), Point(30, 0)]),
            FastPolyline([Point(30, 10), Point(30, 0), Point(40, 0)]),
        ]
        # Every input segment appears exactly once
        assert sum(len(p) - 1 for p in result) == 6
        assert _segments(result) == {
            Line(Point(0, 0), Point(10, 0)),
            Line(Point(10, 0), Point(20, 0)),
            Line(Point(20, 0), Point(30, 0)),
            Line(Point(30, 0), Point(40, 0)),
            Line(Point(10, -10), Point(10, 0)),
            Line(Point(30, 0), Point(30, 10)),
        }

    def test_branch_point_stops_chain(self) -> None:
        """Test a chain stops where more than one unused segment continues."""
        line_set = LineSet()
        line_set.add_polyline([Point(0, 0), Point(10, 0), Point(20, 0)])
        line_set.add_polyline([Point(0, 0), Point(10, 0), Point(10, 10)])

        result = list(line_set.optimize())

        # The first chain hits the junction at (10, 0) while two segments
        # still touch it; the remaining two are then joined through it.
        assert result == [
            FastPolyline([Point(0, 0), Point(10, 0)]),
            FastPolyline([Point(20, 0), Point(10, 0), Point(10, 10)]),
        ]
        assert line_set.added_endpoints == {Point(10, 0)}

    def test_passthrough_yielded_first(self) -> None:
        loop = [Point(0, 0), Point(10, 0), Point(10, 10), Point(0, 0)]
        line_set = LineSet()
        line_set.add_polyline([Point(50, 50), Point(60, 50)])
        line_set.add_polyline(loop)

        result = list(line_set.optimize())

        assert result[0] == FastPolyline(loop)
        assert result[1] == FastPolyline([Point(50, 50), Point(60, 50)])
        assert line_set.passthrough_count == 0

    def test_optimize_empty(self) -> None:
        assert list(LineSet().optimize()) == []

    def test_segments_preserved(self) -> None:
        """Test merging neither loses nor invents segments."""
        routes = [
            [Point(0, 0), Point(5, 5), Point(10, 5), Point(15, 0)],
            [Point(5, 10), Point(5, 5), Point(10, 5), Point(10, 10)],
            [Point(15, 0), Point(10, 5), Point(5, 5)],
        ]
        line_set = LineSet()
        for route in routes:
            line_set.add_polyline(route)
        expected = _segments([FastPolyline(route) for route in routes])

        result = list(line_set.optimize())

        assert _segments(result) == expected
        assert sum(len(p) - 1 for p in result) == len(expected)
