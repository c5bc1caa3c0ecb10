"""Polyline: an open path of at least two points."""

from collections.abc import Iterable

from svgeometry.domain.bounding_box import BoundingBox
from svgeometry.domain.convex_hull import ConvexHull
from svgeometry.domain.point import Point
from svgeometry.domain.point_list import PointList, parse_points
from svgeometry.exceptions import PolylineTooShortError


class Polyline(PointList):
    """An open path; the last point does not connect back to the first.

    The convex hull is computed on first access and cached.

    Raises:
        PolylineTooShortError: If fewer than two points are given
    """

    def __init__(self, points: Iterable[Point | tuple[float, float]] = ()) -> None:
        super().__init__(points)
        if len(self._points) < 2:
            raise PolylineTooShortError(len(self._points))
        self._convex_hull: ConvexHull | None = None

    @classmethod
    def from_xml_string(cls, text: str) -> "Polyline":
        return cls(parse_points(text))

    @property
    def convex_hull(self) -> ConvexHull:
        if self._convex_hull is None:
            self._convex_hull = ConvexHull(self._points)
        return self._convex_hull

    @property
    def bounding_box(self) -> BoundingBox:
        return self.convex_hull.bounding_box

    @property
    def start(self) -> Point:
        return self._points[0]

    @property
    def end(self) -> Point:
        return self._points[-1]
