"""Polygon: a closed ring of points with containment tests."""

from collections.abc import Iterable, Iterator
from typing import TYPE_CHECKING

from svgeometry.domain.bounding_box import BoundingBox
from svgeometry.domain.point import Point
from svgeometry.domain.point_list import PointList, parse_points
from svgeometry.domain.relation import PointRelation, PolygonRelation

if TYPE_CHECKING:
    from svgeometry.domain.convex_hull import ConvexHull


class Polygon(PointList):
    """A closed ring given by its vertices.

    The first vertex is not repeated at the end; the edge from the last
    vertex back to the first is implied. Self-intersecting rings are not
    rejected.

    The bounding box and convex hull are computed once, at construction.
    """

    def __init__(self, points: Iterable[Point | tuple[float, float]] = ()) -> None:
        super().__init__(points)
        self._bounding_box = BoundingBox.from_points(self._points)
        self._convex_hull = self._build_convex_hull()

    def _build_convex_hull(self) -> "ConvexHull":
        from svgeometry.domain.convex_hull import ConvexHull

        return ConvexHull(self._points)

    @classmethod
    def empty(cls) -> "Polygon":
        return cls()

    @classmethod
    def from_xml_string(cls, text: str) -> "Polygon":
        """Build a polygon from SVG points data.

        Raises:
            PointListFormatError: If the points data is malformed
        """
        return cls(parse_points(text))

    @property
    def bounding_box(self) -> BoundingBox:
        return self._bounding_box

    @property
    def convex_hull(self) -> "ConvexHull":
        return self._convex_hull

    def edges(self) -> Iterator[tuple[Point, Point]]:
        """Iterate over edges, including the closing edge."""
        count = len(self._points)
        for i in range(count):
            yield self._points[i], self._points[(i + 1) % count]

    def is_on_edge(self, point: Point) -> bool:
        """Check whether the point lies on any edge (vertices included)."""
        return any(point.is_on_line_segment(a, b) for a, b in self.edges())

    def relation_to_point(self, point: Point) -> PointRelation:
        """Classify a point as INSIDE (boundary included) or DISJOINT."""
        from svgeometry.core.relation import point_relation

        return point_relation(self, point)

    def relation_to_polygon(self, polygon: "Polygon") -> PolygonRelation:
        """Relation of this polygon to another one.

        Only DISJOINT, INTERSECT or INSIDE are returned; see
        ``svgeometry.core.classify_polygons`` for the full classification.
        """
        from svgeometry.core.relation import polygon_relation

        return polygon_relation(self, polygon)
