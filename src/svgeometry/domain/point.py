"""Point primitive for the pixel coordinate system.

The origin (0, 0) is the top-left corner and Y grows downwards, as in SVG.
Coordinates are rounded on construction so that points can be used as
dictionary and set keys: two points built from values that differ only below
the rounding precision compare and hash equal.
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from svgeometry.domain.transform import Transform

# Number of decimals kept for every coordinate.
DECIMAL_PRECISION = 4

# Cross-product tolerance for point-on-segment tests.
ON_SEGMENT_TOLERANCE = 1e-6


def round_coordinate(value: float) -> float:
    """Round a coordinate to the shared decimal precision."""
    rounded = round(float(value), DECIMAL_PRECISION)
    # Normalize negative zero so that repr and serialization are stable
    return rounded + 0.0


def format_number(value: float) -> str:
    """Format a coordinate for SVG attributes, without trailing zeros."""
    text = f"{round_coordinate(value):.4f}".rstrip("0").rstrip(".")
    return "0" if text == "-0" else text


@dataclass(frozen=True, slots=True)
class Point:
    """An immutable 2D point with rounded coordinates.

    Points are ordered by Y, then X: the order in which text is read in an
    English document (left to right, then top to bottom).

    Attributes:
        x: X coordinate in pixels
        y: Y coordinate in pixels
    """

    x: float
    y: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "x", round_coordinate(self.x))
        object.__setattr__(self, "y", round_coordinate(self.y))

    @classmethod
    def origin(cls) -> Point:
        """Return the point at (0, 0)."""
        return cls(0.0, 0.0)

    @classmethod
    def of(cls, value: Point | tuple[float, float] | Any) -> Point:
        """Coerce a Point or an (x, y) pair into a Point."""
        if isinstance(value, Point):
            return value
        x, y = value
        return cls(x, y)

    def to_tuple(self) -> tuple[float, float]:
        """Convert to simple (x, y) tuple."""
        return (self.x, self.y)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def _key(self) -> tuple[float, float]:
        return (self.y, self.x)

    def __lt__(self, other: Point) -> bool:
        return self._key() < other._key()

    def __le__(self, other: Point) -> bool:
        return self._key() <= other._key()

    def __gt__(self, other: Point) -> bool:
        return self._key() > other._key()

    def __ge__(self, other: Point) -> bool:
        return self._key() >= other._key()

    def compare_to(self, other: Point) -> int:
        """Three-way comparison by Y then X.

        Returns:
            Negative if self precedes other, zero if equal, positive otherwise
        """
        a, b = self._key(), other._key()
        return (a > b) - (a < b)

    def __add__(self, other: Point) -> Point:
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Point) -> Point:
        return Point(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: float) -> Point:
        return Point(self.x * factor, self.y * factor)

    __rmul__ = __mul__

    def dot(self, other: Point) -> float:
        """Dot product treating both points as vectors."""
        return self.x * other.x + self.y * other.y

    def length_squared(self) -> float:
        """Squared length treating the point as a vector."""
        return self.x * self.x + self.y * self.y

    def distance_squared(self, other: Point) -> float:
        """Squared Euclidean distance to another point."""
        dx = other.x - self.x
        dy = other.y - self.y
        return dx * dx + dy * dy

    def distance_to(self, other: Point) -> float:
        """Euclidean distance to another point."""
        return math.hypot(other.x - self.x, other.y - self.y)

    def is_within_distance(self, other: Point, distance: float) -> bool:
        """Check distance without taking a square root."""
        return self.distance_squared(other) <= distance * distance

    def is_on_line_segment(
        self, a: Point, b: Point, tolerance: float = ON_SEGMENT_TOLERANCE
    ) -> bool:
        """Determine whether the point lies on segment a-b.

        Args:
            a: Start point of the segment
            b: End point of the segment
            tolerance: Maximum absolute cross product for collinearity

        Returns:
            True if the point is inside the segment's bounding box and
            collinear with it
        """
        if self.x < min(a.x, b.x) or self.x > max(a.x, b.x):
            return False
        if self.y < min(a.y, b.y) or self.y > max(a.y, b.y):
            return False

        cross = (self.y - a.y) * (b.x - a.x) - (self.x - a.x) * (b.y - a.y)
        return abs(cross) <= tolerance

    def transform(self, transform: Transform) -> Point:
        """Apply an affine transform to this point."""
        return transform.apply(self)

    def __repr__(self) -> str:
        return f"Point({self.x:g}, {self.y:g})"

    def __str__(self) -> str:
        return f"({round(self.x, 3):g}, {round(self.y, 3):g})"


def turn_angle(a: Point, b: Point, c: Point) -> float:
    """Signed turn at b when walking a -> b -> c, in degrees.

    The result is normalized to ]-180, 180]. Zero means straight ahead,
    +/-180 means the path reverses on itself.
    """
    v1x, v1y = b.x - a.x, b.y - a.y
    v2x, v2y = c.x - b.x, c.y - b.y
    cross = v1x * v2y - v1y * v2x
    dot = v1x * v2x + v1y * v2y
    angle = math.degrees(math.atan2(cross, dot))
    if angle <= -180.0:
        angle += 360.0
    return angle


def min_point(points: Iterable[Point]) -> Point:
    """Smallest point in reading order."""
    return min(points, key=Point._key)


def max_point(points: Iterable[Point]) -> Point:
    """Largest point in reading order."""
    return max(points, key=Point._key)
