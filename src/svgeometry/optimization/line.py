"""Undirected line segment used by LineSet."""

from dataclasses import dataclass

from svgeometry.domain.point import Point
from svgeometry.exceptions import ZeroLengthLineError

# Endpoints closer than this are rejected as a zero-length line.
MIN_LINE_LENGTH = 1e-5


@dataclass(frozen=True, slots=True, init=False)
class Line:
    """A segment with its endpoints sorted in reading order.

    ``Line(a, b) == Line(b, a)``: the smaller endpoint is always stored as
    ``min_point``.

    Attributes:
        min_point: Smaller endpoint (by Y, then X)
        max_point: Larger endpoint

    Raises:
        ZeroLengthLineError: If the endpoints are (nearly) identical
    """

    min_point: Point
    max_point: Point

    def __init__(self, p1: Point, p2: Point) -> None:
        if p1.is_within_distance(p2, MIN_LINE_LENGTH):
            raise ZeroLengthLineError(p1.distance_to(p2))
        low, high = (p1, p2) if p1 <= p2 else (p2, p1)
        object.__setattr__(self, "min_point", low)
        object.__setattr__(self, "max_point", high)

    def touches(self, point: Point) -> bool:
        return point == self.min_point or point == self.max_point

    def other_end(self, point: Point) -> Point:
        """The endpoint that is not ``point``."""
        return self.max_point if point == self.min_point else self.min_point

    def length(self) -> float:
        return self.min_point.distance_to(self.max_point)

    def __str__(self) -> str:
        return f"({self.min_point}, {self.max_point})"
