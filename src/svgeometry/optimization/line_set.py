"""Merging overlapping polylines into maximal non-overlapping ones.

Every input polyline is cut into unit segments. Shared segments collapse
into one, since the set keeps each undirected segment once. The segments
are then chained back together: a chain grows through a point only while
exactly one unused segment touches it, so branch points and the endpoints of
the input polylines end every chain.

Typical use is a transit network, where many routes drive the same streets:

    line_set = LineSet()
    for polyline in routes:
        line_set.add_polyline(polyline)
    merged = list(line_set.optimize())
"""

from collections import deque
from collections.abc import Iterable, Iterator

import structlog
from sortedcontainers import SortedKeyList

from svgeometry.domain.point import Point
from svgeometry.optimization.fast_polyline import FastPolyline
from svgeometry.optimization.line import MIN_LINE_LENGTH, Line

_LOWEST = (float("-inf"), float("-inf"))
_HIGHEST = (float("inf"), float("inf"))


def _by_min_key(line: Line) -> tuple[tuple[float, float], tuple[float, float]]:
    return (line.min_point._key(), line.max_point._key())


def _by_max_key(line: Line) -> tuple[tuple[float, float], tuple[float, float]]:
    return (line.max_point._key(), line.min_point._key())


class LineSet:
    """Working set of undirected segments indexed by both endpoints.

    Two sorted indexes (by min point, by max point) give O(log n) lookup of
    the segments touching a point. The set is consumed by ``optimize``; it
    is single-threaded working state, not a shared structure.
    """

    def __init__(self, logger: structlog.stdlib.BoundLogger | None = None) -> None:
        self._by_min: SortedKeyList = SortedKeyList(key=_by_min_key)
        self._by_max: SortedKeyList = SortedKeyList(key=_by_max_key)
        self._original_endpoints: set[Point] = set()
        self._added_endpoints: set[Point] = set()
        self._passthrough: list[FastPolyline] = []
        self._logger = logger or structlog.get_logger(__name__)

    def __len__(self) -> int:
        return len(self._by_min)

    def __contains__(self, line: object) -> bool:
        return isinstance(line, Line) and line in self._by_min

    @property
    def original_endpoints(self) -> frozenset[Point]:
        """Endpoints of the decomposed input polylines."""
        return frozenset(self._original_endpoints)

    @property
    def added_endpoints(self) -> frozenset[Point]:
        """Chain ends found during ``optimize`` that were not input endpoints."""
        return frozenset(self._added_endpoints)

    @property
    def passthrough_count(self) -> int:
        return len(self._passthrough)

    def add_line(self, line: Line) -> bool:
        """Add a segment; returns False if it was already present."""
        if line in self._by_min:
            return False
        self._by_min.add(line)
        self._by_max.add(line)
        return True

    def remove_line(self, line: Line) -> None:
        """Remove a segment.

        Raises:
            ValueError: If the segment is not in the set
        """
        self._by_min.remove(line)
        self._by_max.remove(line)

    def add_polyline(self, polyline: FastPolyline | Iterable[Point]) -> None:
        """Decompose a polyline into segments.

        Polylines that visit a point twice (loops) are not decomposed; they
        are returned unchanged by ``optimize``.
        """
        if not isinstance(polyline, FastPolyline):
            polyline = FastPolyline(polyline)

        if polyline.has_duplicated_points():
            self._passthrough.append(polyline)
            return

        self._original_endpoints.add(polyline.start)
        self._original_endpoints.add(polyline.end)

        points = polyline.points
        for a, b in zip(points, points[1:]):
            if a.is_within_distance(b, MIN_LINE_LENGTH):
                continue
            self.add_line(Line(a, b))

    def lines_with_min_point(self, point: Point) -> list[Line]:
        key = point._key()
        return list(self._by_min.irange_key((key, _LOWEST), (key, _HIGHEST)))

    def lines_with_max_point(self, point: Point) -> list[Line]:
        key = point._key()
        return list(self._by_max.irange_key((key, _LOWEST), (key, _HIGHEST)))

    def lines_touching(self, point: Point) -> list[Line]:
        return self.lines_with_min_point(point) + self.lines_with_max_point(point)

    def degree(self, point: Point) -> int:
        """Number of remaining segments touching the point."""
        return len(self.lines_touching(point))

    def optimize(self) -> Iterator[FastPolyline]:
        """Chain the segments into maximal polylines, consuming the set.

        Passed-through polylines are yielded first. Then a segment is taken
        and extended at both ends for as long as the end point is not an
        input endpoint and exactly one unused segment touches it.

        Yields:
            Merged polylines
        """
        line_count = len(self)
        self._logger.info(
            "LineSet optimization started",
            lines=line_count,
            passthrough=len(self._passthrough),
        )

        output_count = 0
        output_points = 0

        passthrough, self._passthrough = self._passthrough, []
        for polyline in passthrough:
            output_count += 1
            output_points += len(polyline)
            yield polyline

        while self._by_min:
            line = self._by_min[0]
            self.remove_line(line)

            chain: deque[Point] = deque((line.min_point, line.max_point))
            self._extend(chain, at_start=True)
            self._extend(chain, at_start=False)

            for end in (chain[0], chain[-1]):
                if end not in self._original_endpoints:
                    self._added_endpoints.add(end)

            output_count += 1
            output_points += len(chain)
            yield FastPolyline(chain)

        self._logger.info(
            "LineSet optimization complete",
            lines=line_count,
            polylines=output_count,
            points=output_points,
            added_endpoints=len(self._added_endpoints),
        )

    def _extend(self, chain: deque[Point], at_start: bool) -> None:
        point = chain[0] if at_start else chain[-1]
        while point not in self._original_endpoints:
            touching = self.lines_touching(point)
            if len(touching) != 1:
                break
            line = touching[0]
            self.remove_line(line)
            point = line.other_end(point)
            if at_start:
                chain.appendleft(point)
            else:
                chain.append(point)
