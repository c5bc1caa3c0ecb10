"""Geometric primitives for relation tests and simplification.

This module provides core mathematical utilities for:
- Cross products and orientation tests
- Segment crossing detection
- Line-line intersection points
- Point-in-polygon testing (ray casting algorithm)
- Perpendicular distance to a chord

All functions are pure and stateless.
"""

from collections.abc import Sequence

from svgeometry.domain.point import Point

# Below this magnitude a determinant is treated as zero (parallel lines).
PARALLEL_EPSILON = 1e-10


def cross_product(o: Point, a: Point, b: Point) -> float:
    """Z component of (a - o) x (b - o).

    Positive when o -> a -> b turns from the +X axis towards the +Y axis.

    Examples:
        >>> cross_product(Point(0, 0), Point(1, 0), Point(1, 1))
        1.0
    """
    return (a.x - o.x) * (b.y - o.y) - (a.y - o.y) * (b.x - o.x)


def orientation(p: Point, q: Point, r: Point) -> int:
    """Orientation of the ordered triple (p, q, r).

    Returns:
        0 if collinear, 1 for a positive cross product, -1 for a negative one
    """
    cross = cross_product(p, q, r)
    if cross == 0:
        return 0
    return 1 if cross > 0 else -1


def _on_segment(p: Point, q: Point, r: Point) -> bool:
    # q is known to be collinear with p-r
    return min(p.x, r.x) <= q.x <= max(p.x, r.x) and min(p.y, r.y) <= q.y <= max(p.y, r.y)


def segments_intersect(p1: Point, p2: Point, q1: Point, q2: Point) -> bool:
    """Check whether segment p1-p2 and segment q1-q2 share at least one point.

    Uses the classic orientation test, including the collinear cases where
    an endpoint of one segment lies on the other.

    Args:
        p1: First endpoint of segment 1
        p2: Second endpoint of segment 1
        q1: First endpoint of segment 2
        q2: Second endpoint of segment 2

    Returns:
        True if the segments cross or touch
    """
    o1 = orientation(p1, p2, q1)
    o2 = orientation(p1, p2, q2)
    o3 = orientation(q1, q2, p1)
    o4 = orientation(q1, q2, p2)

    if o1 != o2 and o3 != o4:
        return True

    if o1 == 0 and _on_segment(p1, q1, p2):
        return True
    if o2 == 0 and _on_segment(p1, q2, p2):
        return True
    if o3 == 0 and _on_segment(q1, p1, q2):
        return True
    return o4 == 0 and _on_segment(q1, p2, q2)


def line_intersection(p1: Point, p2: Point, p3: Point, p4: Point) -> Point | None:
    """Intersection point of the infinite lines through p1-p2 and p3-p4.

    Args:
        p1: First point on line 1
        p2: Second point on line 1
        p3: First point on line 2
        p4: Second point on line 2

    Returns:
        The (rounded) intersection point, or None for parallel or coincident
        lines

    Examples:
        >>> line_intersection(Point(0, 0), Point(2, 2), Point(0, 2), Point(2, 0))
        Point(1, 1)
    """
    x1, y1 = p1.x, p1.y
    x2, y2 = p2.x, p2.y
    x3, y3 = p3.x, p3.y
    x4, y4 = p4.x, p4.y

    denom = (x1 - x2) * (y3 - y4) - (y1 - y2) * (x3 - x4)
    if abs(denom) < PARALLEL_EPSILON:
        return None

    t = ((x1 - x3) * (y3 - y4) - (y1 - y3) * (x3 - x4)) / denom
    return Point(x1 + t * (x2 - x1), y1 + t * (y2 - y1))


def is_neutral_intersection(p1: Point, p2: Point, q1: Point, q2: Point) -> bool:
    """Check whether two segments only touch instead of crossing.

    The contact is neutral when the lines' intersection coincides with one
    of the four endpoints, or when the segments are parallel (overlapping
    collinear edges are shared boundary, not a crossing).
    """
    point = line_intersection(p1, p2, q1, q2)
    if point is None:
        return True
    return point in (p1, p2, q1, q2)


def point_in_polygon(point: Point, polygon: Sequence[Point]) -> bool:
    """Determine if a point is inside a polygon using the even-odd rule.

    Casts a horizontal ray from the point to the right and counts crossings
    with polygon edges. Odd number of crossings = inside, even = outside.
    Points on the boundary may land on either side; callers that need the
    boundary included test edges first.

    Args:
        point: The point to test
        polygon: Vertices of the ring

    Returns:
        True if point is inside polygon, False otherwise

    Examples:
        >>> square = [Point(0, 0), Point(2, 0), Point(2, 2), Point(0, 2)]
        >>> point_in_polygon(Point(1, 1), square)
        True
        >>> point_in_polygon(Point(3, 3), square)
        False
    """
    n = len(polygon)
    if n < 3:
        return False

    inside = False
    x, y = point.x, point.y
    j = n - 1

    for i in range(n):
        xi, yi = polygon[i].x, polygon[i].y
        xj, yj = polygon[j].x, polygon[j].y

        # Check if ray from point crosses edge (j, i)
        if ((yi > y) != (yj > y)) and (x < (xj - xi) * (y - yi) / (yj - yi) + xi):
            inside = not inside

        j = i

    return inside


def perpendicular_distance_squared(point: Point, start: Point, end: Point) -> float:
    """Squared distance from a point to the line through start and end.

    Falls back to the squared distance to ``start`` when the chord has zero
    length.
    """
    dx = end.x - start.x
    dy = end.y - start.y
    length_sq = dx * dx + dy * dy
    if length_sq == 0:
        return point.distance_squared(start)

    cross = dx * (start.y - point.y) - (start.x - point.x) * dy
    return cross * cross / length_sq
