"""Direction-normalized polylines and their simplification algorithms.

FastPolyline is the working type of the optimization pipeline. Its point
order is canonical (the smaller endpoint comes first), so a route and the
same route driven in the opposite direction compare and hash equal.
"""

import logging
import math
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass

from svgeometry.core.geometry import perpendicular_distance_squared
from svgeometry.domain.point import Point, format_number, turn_angle
from svgeometry.domain.polyline import Polyline
from svgeometry.exceptions import MatrixTooSmallError, PolylineTooShortError

logger = logging.getLogger(__name__)

DEFAULT_ADJACENT_THRESHOLD_SQ = 1e-5
DEFAULT_SHARP_TURN_ANGLE = 160.0
DEFAULT_REORDER_ANGLE = 120.0
DEFAULT_RDP_THRESHOLD_SQ = 0.001


@dataclass(frozen=True, slots=True)
class SubstringResult:
    """Longest run of identical consecutive points shared by two polylines.

    Attributes:
        start1: Index of the run in the first polyline
        start2: Index of the run in the second polyline
        length: Number of points in the run (0 if nothing is shared)
    """

    start1: int
    start2: int
    length: int


def create_substring_matrix(rows: int, cols: int) -> list[list[int]]:
    """Allocate a scratch matrix for ``find_longest_common_substring``.

    The matrix must have more rows than the first polyline has points and
    more columns than the second one has.
    """
    return [[0] * cols for _ in range(rows)]


def is_sharp_turn(
    a: Point, b: Point, c: Point, angle_threshold: float = DEFAULT_SHARP_TURN_ANGLE
) -> bool:
    """Check whether a -> b -> c nearly reverses direction at b.

    Args:
        a: Previous point
        b: Turning point
        c: Next point
        angle_threshold: Turn angle in degrees above which the turn is sharp

    Raises:
        ValueError: If angle_threshold is negative
    """
    if angle_threshold < 0:
        raise ValueError(f"Angle threshold must be positive, got {angle_threshold}")
    return abs(turn_angle(a, b, c)) > angle_threshold


def remove_close_points(points: Sequence[Point], min_distance: float) -> list[Point]:
    """Drop points that sit closer than ``min_distance`` to a neighbour.

    Trailing points too close to the first point are removed first, then
    every interior point too close to its predecessor or successor. The
    first point always survives; the result may have a single point.
    """
    min_distance_sq = min_distance * min_distance
    result = list(points)
    if len(result) <= 1:
        return result

    while result[0].distance_squared(result[-1]) < min_distance_sq:
        result.pop()
        if len(result) == 1:
            return result

    i = 1
    while i < len(result) - 1:
        if (
            result[i].distance_squared(result[i - 1]) < min_distance_sq
            or result[i].distance_squared(result[i + 1]) < min_distance_sq
        ):
            del result[i]
        else:
            i += 1
    return result


def _canonical_order(points: tuple[Point, ...]) -> tuple[Point, ...]:
    first, last = points[0], points[-1]
    if first > last:
        return points[::-1]
    if first == last:
        # Closed loop: pick the direction with the smaller point sequence
        reverse = points[::-1]
        if [p._key() for p in reverse] < [p._key() for p in points]:
            return reverse
    return points


class FastPolyline:
    """Immutable polyline with canonical direction.

    The points are stored so that ``points[0] <= points[-1]`` in reading
    order; equality and hashing compare the canonical point sequence.

    Raises:
        PolylineTooShortError: If fewer than two points are given
    """

    __slots__ = ("_points", "_hash")

    def __init__(self, points: Iterable[Point | tuple[float, float]]) -> None:
        pts = tuple(Point.of(p) for p in points)
        if len(pts) < 2:
            raise PolylineTooShortError(len(pts))
        self._points = _canonical_order(pts)
        self._hash = hash(self._points)

    @classmethod
    def from_turns(
        cls, start: Point, turn_angles: Iterable[float], move_distance: float = 10.0
    ) -> "FastPolyline":
        """Build a polyline by walking from ``start`` and turning.

        The walk starts heading along +X. Each angle (degrees) is added to
        the heading, then one step of ``move_distance`` is taken.
        """
        points = [start]
        heading = 0.0
        for angle in turn_angles:
            heading += angle
            radians = math.radians(heading)
            last = points[-1]
            points.append(
                Point(
                    last.x + move_distance * math.cos(radians),
                    last.y + move_distance * math.sin(radians),
                )
            )
        return cls(points)

    @property
    def points(self) -> tuple[Point, ...]:
        return self._points

    @property
    def start(self) -> Point:
        return self._points[0]

    @property
    def end(self) -> Point:
        return self._points[-1]

    def __len__(self) -> int:
        return len(self._points)

    def __getitem__(self, index: int) -> Point:
        return self._points[index]

    def __iter__(self) -> Iterator[Point]:
        return iter(self._points)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FastPolyline):
            return NotImplemented
        return self._hash == other._hash and self._points == other._points

    def __hash__(self) -> int:
        return self._hash

    def length(self) -> float:
        """Total length of all segments."""
        return sum(a.distance_to(b) for a, b in zip(self._points, self._points[1:]))

    def has_duplicated_points(self) -> bool:
        """True if any point occurs more than once (e.g. a loop)."""
        return len(set(self._points)) != len(self._points)

    def to_polyline(self) -> Polyline:
        return Polyline(self._points)

    def to_xml_string(self) -> str:
        return " ".join(f"{format_number(p.x)},{format_number(p.y)}" for p in self._points)

    def remove_equivalent_adjacent_points(
        self, threshold_sq: float = DEFAULT_ADJACENT_THRESHOLD_SQ
    ) -> "FastPolyline":
        """Merge runs of points closer than the threshold.

        A point is kept only if its squared distance to the last kept point
        exceeds ``threshold_sq``. The true last point always survives: if it
        was dropped, it replaces the last kept point.
        """
        if len(self._points) <= 2:
            return self

        kept = [self._points[0]]
        for point in self._points[1:]:
            if kept[-1].distance_squared(point) > threshold_sq:
                kept.append(point)

        last = self._points[-1]
        if kept[-1] != last:
            if len(kept) == 1:
                kept.append(last)
            else:
                kept[-1] = last

        if len(kept) == len(self._points):
            return self
        return FastPolyline(kept)

    def contains_sharp_turns(self, angle_threshold: float = DEFAULT_SHARP_TURN_ANGLE) -> bool:
        pts = self._points
        return any(
            is_sharp_turn(pts[i - 1], pts[i], pts[i + 1], angle_threshold)
            for i in range(1, len(pts) - 1)
        )

    def remove_sharp_turns(self, angle_threshold: float = DEFAULT_SHARP_TURN_ANGLE) -> "FastPolyline":
        """Drop points where the path nearly reverses on itself.

        The first two points are kept. Each following point is appended only
        if it does not make a sharp turn with the last two kept points. The
        last point is never dropped: kept points are popped until it can be
        appended without a sharp turn.
        """
        pts = self._points
        if len(pts) <= 2:
            return self

        kept = [pts[0], pts[1]]
        for point in pts[2:-1]:
            if not is_sharp_turn(kept[-2], kept[-1], point, angle_threshold):
                kept.append(point)

        last = pts[-1]
        while len(kept) >= 2 and is_sharp_turn(kept[-2], kept[-1], last, angle_threshold):
            kept.pop()
        kept.append(last)

        if len(kept) == len(pts):
            return self
        return FastPolyline(kept)

    def reorder_misplaced_points(
        self, angle_threshold: float = DEFAULT_REORDER_ANGLE
    ) -> "FastPolyline":
        """Move points that make the path double back to where they fit.

        Points are replayed in order. A point that makes a sharp turn with the
        last two placed points is inserted at the position where the largest
        turn it creates is smallest, or dropped if even that turn is sharp.
        A polyline without sharp turns is returned unchanged.

        Raises:
            ValueError: If angle_threshold is negative
        """
        if len(self._points) <= 2:
            return self
        if angle_threshold < 0:
            raise ValueError(f"Angle threshold must be positive, got {angle_threshold}")
        if not self.contains_sharp_turns(angle_threshold):
            return self

        placed: list[Point] = []
        for point in self._points:
            if len(placed) > 2 and is_sharp_turn(placed[-2], placed[-1], point, angle_threshold):
                _insert_at_smallest_turn(placed, point, angle_threshold)
            else:
                placed.append(point)

        logger.debug("Reordered polyline: %d -> %d points", len(self._points), len(placed))
        return FastPolyline(placed)

    def apply_rdpa(self, threshold_sq: float = DEFAULT_RDP_THRESHOLD_SQ) -> "FastPolyline":
        """Simplify with the Ramer-Douglas-Peucker algorithm.

        For each range, the point farthest from the chord between the range
        endpoints is kept (and the range split there) if its squared distance
        exceeds ``threshold_sq``; otherwise the range collapses to its
        endpoints. Ranges are processed from an explicit stack, which gives
        the same result as the recursive formulation without its depth limit.
        """
        pts = self._points
        if len(pts) < 3:
            return self

        keep = [False] * len(pts)
        keep[0] = keep[-1] = True
        stack = [(0, len(pts) - 1)]

        while stack:
            first, last = stack.pop()
            index = -1
            max_distance_sq = 0.0
            for i in range(first + 1, last):
                distance_sq = perpendicular_distance_squared(pts[i], pts[first], pts[last])
                if distance_sq > max_distance_sq:
                    index = i
                    max_distance_sq = distance_sq

            if index != -1 and max_distance_sq > threshold_sq:
                keep[index] = True
                stack.append((first, index))
                stack.append((index, last))

        simplified = [p for p, flag in zip(pts, keep) if flag]
        if len(simplified) == len(pts):
            return self
        return FastPolyline(simplified)

    def remove_close_points(self, min_distance: float) -> "FastPolyline | None":
        """Noise filter; returns None when fewer than two points survive."""
        points = remove_close_points(self._points, min_distance)
        if len(points) < 2:
            return None
        return FastPolyline(points)

    def __repr__(self) -> str:
        return f"FastPolyline({self.to_xml_string()!r})"


def _insert_at_smallest_turn(points: list[Point], point: Point, angle_threshold: float) -> None:
    # Largest absolute turn created by inserting point before points[index]
    count = len(points)
    best_angle = abs(turn_angle(point, points[0], points[1]))
    best_index = 0

    for index in range(1, count):
        before = abs(turn_angle(points[index - 2], points[index - 1], point)) if index >= 2 else 0.0
        at = abs(turn_angle(points[index - 1], point, points[index]))
        after = (
            abs(turn_angle(point, points[index], points[index + 1])) if index + 1 < count else 0.0
        )
        angle = max(before, at, after)
        if angle < best_angle:
            best_angle = angle
            best_index = index

    last_angle = abs(turn_angle(points[-2], points[-1], point))
    if last_angle < best_angle:
        best_angle = last_angle
        best_index = count

    if best_angle < angle_threshold:
        points.insert(best_index, point)


def find_longest_common_substring(
    polyline1: Sequence[Point], polyline2: Sequence[Point], matrix: list[list[int]]
) -> SubstringResult:
    """Longest run of consecutive points shared by two polylines.

    Classic dynamic programming over a caller-allocated matrix, which is
    overwritten and can be reused across calls.

    Args:
        polyline1: First point sequence (m points)
        polyline2: Second point sequence (n points)
        matrix: Scratch matrix with more than m rows and more than n columns

    Returns:
        Start index in each sequence and the run length

    Raises:
        MatrixTooSmallError: If the matrix cannot hold the table
    """
    m = len(polyline1)
    n = len(polyline2)
    rows = len(matrix)
    cols = len(matrix[0]) if rows else 0
    if m >= rows or n >= cols:
        raise MatrixTooSmallError((m + 1, n + 1), (rows, cols))

    for j in range(n + 1):
        matrix[0][j] = 0

    best = 0
    end1 = end2 = 0
    for i in range(1, m + 1):
        row = matrix[i]
        previous = matrix[i - 1]
        row[0] = 0
        a = polyline1[i - 1]
        for j in range(1, n + 1):
            if a == polyline2[j - 1]:
                row[j] = previous[j - 1] + 1
                if row[j] > best:
                    best = row[j]
                    end1, end2 = i, j
            else:
                row[j] = 0

    if best == 0:
        return SubstringResult(0, 0, 0)
    return SubstringResult(end1 - best, end2 - best, best)
