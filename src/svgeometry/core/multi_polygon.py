"""Grouping polygons into exteriors with holes.

Polygons are inserted one at a time. Each new polygon is classified against
the exterior of every existing group, in order, and the first group that
contains it or is covered by it takes it. The result therefore depends on
insertion order when polygons overlap ambiguously.
"""

import logging
from dataclasses import dataclass, field

from svgeometry.core.relation import polygon_relation
from svgeometry.domain.multi_polygon import EnclosedPolygonGroup, MultiPolygon
from svgeometry.domain.polygon import Polygon
from svgeometry.domain.relation import PolygonRelation
from svgeometry.exceptions import DuplicatePolygonError, NestingDepthError

logger = logging.getLogger(__name__)

# Relations to an existing hole that would nest rings two levels deep
_NESTED = (PolygonRelation.INSIDE, PolygonRelation.COVER, PolygonRelation.EQUAL)


def classify_polygons(polygon: Polygon, target: Polygon) -> PolygonRelation:
    """Full relation of ``polygon`` to ``target``, including COVER and EQUAL.

    - EQUAL when both polygons have the same set of vertices
    - INSIDE when ``polygon`` lies within ``target``
    - COVER when ``target`` lies within ``polygon``
    - otherwise the forward relation (DISJOINT or INTERSECT)
    """
    if set(polygon.points) == set(target.points):
        return PolygonRelation.EQUAL

    forward = polygon_relation(polygon, target)
    if forward is PolygonRelation.INSIDE:
        return PolygonRelation.INSIDE
    if polygon_relation(target, polygon) is PolygonRelation.INSIDE:
        return PolygonRelation.COVER
    return forward


@dataclass
class _GroupDraft:
    """Mutable group used while inserting polygons."""

    exterior: Polygon
    interiors: list[Polygon] = field(default_factory=list)


class MultiPolygonBuilder:
    """Incrementally groups polygons into exteriors and holes.

    Example:
        builder = MultiPolygonBuilder()
        builder.add(outer)
        builder.add(hole)
        multi_polygon = builder.build()

    A builder is single-use state; do not share one between threads.
    """

    def __init__(self) -> None:
        self._groups: list[_GroupDraft] = []

    def __len__(self) -> int:
        return len(self._groups)

    def add(self, polygon: Polygon) -> "MultiPolygonBuilder":
        """Insert a polygon.

        Args:
            polygon: Polygon to insert

        Returns:
            The builder, for chaining

        Raises:
            DuplicatePolygonError: If the polygon equals an existing exterior
            NestingDepthError: If the polygon nests with an existing hole in
                either direction, or covers a group that already has holes
        """
        for index, group in enumerate(self._groups):
            relation = classify_polygons(polygon, group.exterior)

            if relation is PolygonRelation.INSIDE:
                for hole in group.interiors:
                    if classify_polygons(polygon, hole) in _NESTED:
                        raise NestingDepthError()
                group.interiors.append(polygon)
                logger.debug("Polygon added as hole %d of group %d", len(group.interiors), index)
                return self

            if relation is PolygonRelation.COVER:
                if group.interiors:
                    raise NestingDepthError()
                group.interiors = [group.exterior]
                group.exterior = polygon
                logger.debug("Polygon became exterior of group %d", index)
                return self

            if relation is PolygonRelation.EQUAL:
                raise DuplicatePolygonError()

        self._groups.append(_GroupDraft(polygon))
        logger.debug("Polygon started group %d", len(self._groups) - 1)
        return self

    def build(self) -> MultiPolygon:
        """Freeze the current groups into an immutable MultiPolygon."""
        return MultiPolygon(
            EnclosedPolygonGroup(group.exterior, tuple(group.interiors))
            for group in self._groups
        )
