"""Spatial relation enums shared by polygons and multi-polygons."""

from enum import Enum, auto


class PointRelation(Enum):
    """Relation of a point to a polygon.

    There is no separate boundary state: points on a vertex or an edge are
    reported as INSIDE.
    """

    DISJOINT = auto()
    INSIDE = auto()


class PolygonRelation(Enum):
    """Relation of one polygon (the subject) to another (the target).

    - DISJOINT: no interior overlap and no proper edge crossing
    - INTERSECT: edges of the two polygons cross
    - INSIDE: the subject lies within the target
    - COVER: the target lies within the subject
    - EQUAL: both polygons have the same vertices

    ``Polygon.relation_to_polygon`` only produces DISJOINT, INTERSECT and
    INSIDE. COVER and EQUAL come from ``classify_polygons``, which runs the
    test in both directions.
    """

    DISJOINT = auto()
    INTERSECT = auto()
    INSIDE = auto()
    COVER = auto()
    EQUAL = auto()
