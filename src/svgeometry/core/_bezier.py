"""Internal Bezier curve sampling.

This is an internal module containing helper functions for path
approximation. Not intended for public use.
"""

from collections.abc import Iterable

from svgeometry.domain.path import PathCommand, PathVerb
from svgeometry.domain.point import Point


def _parameters(segments: int) -> list[float]:
    if segments < 1:
        raise ValueError(f"segments must be at least 1, got {segments}")
    return [i / segments for i in range(segments + 1)]


def sample_quadratic(p0: Point, p1: Point, p2: Point, segments: int) -> list[Point]:
    """Sample a quadratic Bezier curve at evenly spaced parameters.

    Args:
        p0: Start point
        p1: Control point
        p2: End point
        segments: Number of line segments; ``segments + 1`` points are returned

    Returns:
        Points on the curve from t=0 to t=1
    """
    points = []
    for t in _parameters(segments):
        u = 1.0 - t
        x = u * u * p0.x + 2.0 * u * t * p1.x + t * t * p2.x
        y = u * u * p0.y + 2.0 * u * t * p1.y + t * t * p2.y
        points.append(Point(x, y))
    return points


def sample_cubic(p0: Point, p1: Point, p2: Point, p3: Point, segments: int) -> list[Point]:
    """Sample a cubic Bezier curve at evenly spaced parameters.

    Args:
        p0: Start point
        p1: First control point
        p2: Second control point
        p3: End point
        segments: Number of line segments; ``segments + 1`` points are returned

    Returns:
        Points on the curve from t=0 to t=1
    """
    points = []
    for t in _parameters(segments):
        u = 1.0 - t
        a = u * u * u
        b = 3 * u * u * t
        c = 3 * u * t * t
        d = t * t * t
        x = a * p0.x + b * p1.x + c * p2.x + d * p3.x
        y = a * p0.y + b * p1.y + c * p2.y + d * p3.y
        points.append(Point(x, y))
    return points


def sample_conic(p0: Point, p1: Point, p2: Point, weight: float, segments: int) -> list[Point]:
    """Sample a rational quadratic (conic) curve.

    ``P(t) = (u^2 P0 + 2wut P1 + t^2 P2) / (u^2 + 2wut + t^2)`` with u = 1 - t.
    A weight of 1 gives the plain quadratic curve.
    """
    points = []
    for t in _parameters(segments):
        u = 1.0 - t
        a = u * u
        b = 2.0 * weight * u * t
        c = t * t
        denom = a + b + c
        x = (a * p0.x + b * p1.x + c * p2.x) / denom
        y = (a * p0.y + b * p1.y + c * p2.y) / denom
        points.append(Point(x, y))
    return points


def approximate_commands(commands: Iterable[PathCommand], segments: int) -> list[list[Point]]:
    """Flatten drawing commands into point lists, one per subpath.

    - MOVE emits the pending points (unclosed) and starts a new list
    - LINE appends its end point
    - QUAD, CUBIC and CONIC append ``segments + 1`` samples
    - CLOSE appends the first point of the list and emits it

    Points pending at the end are emitted unclosed.

    Raises:
        ValueError: If segments is less than 1
    """
    _parameters(segments)

    result: list[list[Point]] = []
    current: list[Point] = []

    for command in commands:
        pts = command.points
        if command.verb is PathVerb.MOVE:
            if current:
                result.append(current)
                current = []
            current.append(pts[0])
        elif command.verb is PathVerb.LINE:
            current.append(pts[1])
        elif command.verb is PathVerb.QUAD:
            current.extend(sample_quadratic(pts[0], pts[1], pts[2], segments))
        elif command.verb is PathVerb.CUBIC:
            current.extend(sample_cubic(pts[0], pts[1], pts[2], pts[3], segments))
        elif command.verb is PathVerb.CONIC:
            current.extend(sample_conic(pts[0], pts[1], pts[2], command.weight, segments))
        elif command.verb is PathVerb.CLOSE:
            if current:
                current.append(current[0])
                result.append(current)
                current = []

    if current:
        result.append(current)

    return result
