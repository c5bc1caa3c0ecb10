"""Point/polygon and polygon/polygon relation tests."""

import logging

from svgeometry.core.geometry import (
    is_neutral_intersection,
    point_in_polygon,
    segments_intersect,
)
from svgeometry.domain.point import Point
from svgeometry.domain.polygon import Polygon
from svgeometry.domain.relation import PointRelation, PolygonRelation

logger = logging.getLogger(__name__)


def point_relation(polygon: Polygon, point: Point) -> PointRelation:
    """Classify a point against a polygon.

    A point on a vertex or an edge (within the segment tolerance) is INSIDE,
    as is a point inside by the even-odd rule. Everything else is DISJOINT.
    """
    if polygon.contains(point) or polygon.is_on_edge(point):
        return PointRelation.INSIDE
    if point_in_polygon(point, polygon.points):
        return PointRelation.INSIDE
    return PointRelation.DISJOINT


def polygon_relation(polygon: Polygon, target: Polygon) -> PolygonRelation:
    """Relation of ``polygon`` to ``target``.

    1. Disjoint bounding boxes give DISJOINT.
    2. Vertices of ``polygon`` lying on an edge of ``target`` are neutral.
       If every other vertex is strictly inside ``target``, the result is
       INSIDE.
    3. Otherwise any edge pair that crosses at a point other than one of
       its four endpoints gives INTERSECT.
    4. Otherwise DISJOINT.

    Never returns COVER or EQUAL.
    """
    if polygon.is_empty() or target.is_empty():
        return PolygonRelation.DISJOINT

    if not polygon.bounding_box.intersects(target.bounding_box):
        return PolygonRelation.DISJOINT

    inside_count = 0
    neutral_count = 0
    for vertex in polygon:
        if target.is_on_edge(vertex):
            neutral_count += 1
        elif point_in_polygon(vertex, target.points):
            inside_count += 1

    if inside_count == len(polygon) - neutral_count:
        return PolygonRelation.INSIDE

    for a1, a2 in polygon.edges():
        for b1, b2 in target.edges():
            if segments_intersect(a1, a2, b1, b2) and not is_neutral_intersection(a1, a2, b1, b2):
                logger.debug("Edges cross: %s-%s and %s-%s", a1, a2, b1, b2)
                return PolygonRelation.INTERSECT

    return PolygonRelation.DISJOINT
