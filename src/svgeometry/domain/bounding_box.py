"""Axis-aligned bounding box."""

from collections.abc import Iterable
from dataclasses import dataclass
from typing import ClassVar

from svgeometry.domain.point import Point


@dataclass(frozen=True, slots=True)
class BoundingBox:
    """Axis-aligned box spanned by its upper-left and lower-right corners.

    Consumers assume ``lower_right.x >= upper_left.x`` and
    ``lower_right.y >= upper_left.y``; the constructor does not enforce it.

    ``BoundingBox.NONE`` is the zero-size box at the origin. It is a sentinel
    returned for empty point sets, not a valid empty state: check ``is_none``
    before using it in unions.

    Attributes:
        upper_left: Corner with the minimum coordinates
        lower_right: Corner with the maximum coordinates
    """

    upper_left: Point
    lower_right: Point

    NONE: ClassVar["BoundingBox"]

    @classmethod
    def from_points(cls, points: Iterable[Point]) -> "BoundingBox":
        """Compute the bounding box of a point set.

        Args:
            points: Points to enclose

        Returns:
            Enclosing box, or ``BoundingBox.NONE`` for an empty sequence
        """
        points = list(points)
        if not points:
            return cls.NONE

        xs = [p.x for p in points]
        ys = [p.y for p in points]
        return cls(Point(min(xs), min(ys)), Point(max(xs), max(ys)))

    @property
    def is_none(self) -> bool:
        """True for the zero-size sentinel at the origin."""
        return self == BoundingBox.NONE

    @property
    def min_x(self) -> float:
        return self.upper_left.x

    @property
    def max_x(self) -> float:
        return self.lower_right.x

    @property
    def mid_x(self) -> float:
        return (self.min_x + self.max_x) / 2

    @property
    def min_y(self) -> float:
        return self.upper_left.y

    @property
    def max_y(self) -> float:
        return self.lower_right.y

    @property
    def mid_y(self) -> float:
        return (self.min_y + self.max_y) / 2

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        return self.max_y - self.min_y

    @property
    def size(self) -> tuple[float, float]:
        """(width, height) of the box."""
        return (self.width, self.height)

    def union_with(self, other: "BoundingBox") -> "BoundingBox":
        """Smallest box containing both boxes."""
        return BoundingBox(
            Point(min(self.min_x, other.min_x), min(self.min_y, other.min_y)),
            Point(max(self.max_x, other.max_x), max(self.max_y, other.max_y)),
        )

    def intersects(self, other: "BoundingBox") -> bool:
        """Check overlap; boxes that only touch count as intersecting."""
        return not (
            self.max_x < other.min_x
            or self.min_x > other.max_x
            or self.max_y < other.min_y
            or self.min_y > other.max_y
        )

    def contains(self, point: Point) -> bool:
        """Check whether a point lies inside or on the border of the box."""
        return self.min_x <= point.x <= self.max_x and self.min_y <= point.y <= self.max_y

    def __str__(self) -> str:
        return f"Upper left: {self.upper_left}, Lower right: {self.lower_right}"


BoundingBox.NONE = BoundingBox(Point.origin(), Point.origin())
