"""Convex hull extraction using Graham's scan."""

import itertools
import math
from collections.abc import Iterable, Sequence

from svgeometry.domain.point import Point, min_point
from svgeometry.domain.polygon import Polygon
from svgeometry.domain.transform import Transform


def _cross(o: Point, a: Point, b: Point) -> float:
    return (a.x - o.x) * (b.y - o.y) - (a.y - o.y) * (b.x - o.x)


def graham_scan(points: Sequence[Point]) -> list[Point]:
    """Extract the convex hull of a point set.

    The pivot is the smallest point in reading order (Y, then X). The other
    points are sorted by polar angle around it, closer points first on equal
    angles, and the scan pops the stack while the last three points do not
    make a strict left turn. Collinear and duplicate points are dropped.

    Args:
        points: Arbitrary point set

    Returns:
        Hull vertices starting at the pivot. Inputs of two or fewer points
        are returned unchanged.
    """
    if len(points) <= 2:
        return list(points)

    pivot = min_point(points)
    others = sorted(
        (p for p in points if p != pivot),
        key=lambda p: (math.atan2(p.y - pivot.y, p.x - pivot.x), pivot.distance_squared(p)),
    )

    hull = [pivot]
    for point in others:
        while len(hull) >= 2 and _cross(hull[-2], hull[-1], point) <= 0:
            hull.pop()
        hull.append(point)
    return hull


def is_convex(points: Sequence[Point]) -> bool:
    """Check that consecutive vertices always turn strictly the same way.

    Rings of fewer than three points are considered convex.
    """
    count = len(points)
    if count < 3:
        return True

    sign = 0
    for i in range(count):
        cross = _cross(points[i], points[(i + 1) % count], points[(i + 2) % count])
        if cross == 0:
            return False
        current = 1 if cross > 0 else -1
        if sign == 0:
            sign = current
        elif current != sign:
            return False
    return True


class ConvexHull(Polygon):
    """Convex boundary of a point set.

    Constructing a hull always runs Graham's scan over the given points. The
    bounding box is taken from the hull vertices, which include every
    extremal point of the input.
    """

    def __init__(self, points: Iterable[Point | tuple[float, float]] = ()) -> None:
        super().__init__(graham_scan([Point.of(p) for p in points]))

    @classmethod
    def _from_convex_points(cls, points: Iterable[Point]) -> "ConvexHull":
        # Caller guarantees the points already form a convex ring
        hull = cls.__new__(cls)
        Polygon.__init__(hull, points)
        return hull

    @classmethod
    def merge(cls, hulls: Iterable["ConvexHull"]) -> "ConvexHull":
        """Hull of the union of several hulls' vertices."""
        return cls(itertools.chain.from_iterable(hulls))

    def _build_convex_hull(self) -> "ConvexHull":
        return self

    def transform(self, transform: Transform) -> "ConvexHull":
        """Map every vertex through an affine transform.

        Affine maps preserve convexity, so the result is not rescanned.
        """
        return self._from_convex_points(p.transform(transform) for p in self._points)
