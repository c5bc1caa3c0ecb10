"""Immutable point sequences and SVG ``points`` attribute parsing."""

import math
from collections.abc import Iterable, Iterator, Sequence
from typing import overload

from svgeometry.domain.point import Point, format_number
from svgeometry.exceptions import PointListFormatError


def parse_points(text: str) -> list[Point]:
    """Parse SVG points data such as ``"0,0 10,0 10,10"``.

    Args:
        text: Whitespace separated ``x,y`` pairs

    Returns:
        Parsed points in order (empty for blank input)

    Raises:
        PointListFormatError: If a token is not two finite numbers joined by
            a comma
    """
    points = []
    for token in text.split():
        parts = token.split(",")
        if len(parts) != 2:
            raise PointListFormatError(token)
        try:
            x, y = float(parts[0]), float(parts[1])
        except ValueError:
            raise PointListFormatError(token) from None
        if not (math.isfinite(x) and math.isfinite(y)):
            raise PointListFormatError(token)
        points.append(Point(x, y))
    return points


class PointList(Sequence[Point]):
    """An ordered, read-only sequence of points.

    Two point lists are equal when they have the same concrete type and the
    same points in the same order, so a Polygon never equals a Polyline
    built from the same points.
    """

    def __init__(self, points: Iterable[Point | tuple[float, float]] = ()) -> None:
        self._points: tuple[Point, ...] = tuple(Point.of(p) for p in points)

    @property
    def points(self) -> tuple[Point, ...]:
        return self._points

    def __len__(self) -> int:
        return len(self._points)

    @overload
    def __getitem__(self, index: int) -> Point: ...

    @overload
    def __getitem__(self, index: slice) -> tuple[Point, ...]: ...

    def __getitem__(self, index: int | slice) -> Point | tuple[Point, ...]:
        return self._points[index]

    def __iter__(self) -> Iterator[Point]:
        return iter(self._points)

    def contains(self, point: Point) -> bool:
        """Check whether the point is one of the vertices."""
        return point in self._points

    def is_empty(self) -> bool:
        return not self._points

    def __eq__(self, other: object) -> bool:
        if type(self) is not type(other):
            return NotImplemented
        return self._points == other._points  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._points))

    def to_xml_string(self) -> str:
        """Serialize as SVG points data (``"x1,y1 x2,y2 ..."``)."""
        return " ".join(f"{format_number(p.x)},{format_number(p.y)}" for p in self._points)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_xml_string()!r})"
