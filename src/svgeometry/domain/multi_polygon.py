"""Polygons with holes and collections of them."""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from svgeometry.domain.bounding_box import BoundingBox
from svgeometry.domain.convex_hull import ConvexHull
from svgeometry.domain.point import format_number
from svgeometry.domain.polygon import Polygon


def ring_path_data(polygon: Polygon) -> str:
    """SVG path data for one closed ring: ``M x,y L x,y ... Z``."""
    if polygon.is_empty():
        return ""
    coords = [f"{format_number(p.x)},{format_number(p.y)}" for p in polygon]
    return "M " + " L ".join(coords) + " Z"


@dataclass(frozen=True, slots=True)
class EnclosedPolygonGroup:
    """An exterior polygon and the holes cut out of it.

    Only one level of nesting exists: holes never contain further polygons.
    Holes are expected to lie inside the exterior and not to overlap each
    other; this is checked when groups are built by ``MultiPolygonBuilder``,
    not by the constructor.

    Attributes:
        exterior: Outer boundary
        interiors: Holes inside the exterior
    """

    exterior: Polygon
    interiors: tuple[Polygon, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "interiors", tuple(self.interiors))

    @property
    def polygons(self) -> tuple[Polygon, ...]:
        """Exterior followed by the holes."""
        return (self.exterior, *self.interiors)

    @property
    def bounding_box(self) -> BoundingBox:
        return self.exterior.bounding_box

    def has_holes(self) -> bool:
        return bool(self.interiors)

    def to_xml_string(self) -> str:
        return " ".join(ring_path_data(p) for p in self.polygons if not p.is_empty())


class MultiPolygon:
    """Ordered, immutable collection of polygon groups.

    The convex hull and bounding box cover the exterior polygons only, since
    holes always lie within their exterior. Both are computed once at
    construction.

    Use ``MultiPolygon.from_polygons`` (or ``MultiPolygonBuilder``) to group
    loose polygons into exteriors and holes.
    """

    def __init__(self, groups: Iterable[EnclosedPolygonGroup] = ()) -> None:
        self._groups = tuple(groups)
        self._convex_hull = ConvexHull(p for group in self._groups for p in group.exterior)
        self._bounding_box = self._convex_hull.bounding_box

    @classmethod
    def from_polygons(cls, polygons: Iterable[Polygon]) -> "MultiPolygon":
        """Group polygons by containment, in the order given.

        Raises:
            DuplicatePolygonError: If a polygon repeats an exterior
            NestingDepthError: If a polygon would nest inside a hole
        """
        from svgeometry.core.multi_polygon import MultiPolygonBuilder

        builder = MultiPolygonBuilder()
        for polygon in polygons:
            builder.add(polygon)
        return builder.build()

    @property
    def groups(self) -> tuple[EnclosedPolygonGroup, ...]:
        return self._groups

    @property
    def convex_hull(self) -> ConvexHull:
        return self._convex_hull

    @property
    def bounding_box(self) -> BoundingBox:
        return self._bounding_box

    def polygons(self) -> Iterator[Polygon]:
        """All polygons, each exterior followed by its holes."""
        for group in self._groups:
            yield from group.polygons

    def __len__(self) -> int:
        return len(self._groups)

    def __iter__(self) -> Iterator[EnclosedPolygonGroup]:
        return iter(self._groups)

    def __getitem__(self, index: int) -> EnclosedPolygonGroup:
        return self._groups[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MultiPolygon):
            return NotImplemented
        return self._groups == other._groups

    def __hash__(self) -> int:
        return hash(self._groups)

    def to_xml_string(self) -> str:
        """SVG path data with one ``M ... Z`` subpath per ring."""
        return " ".join(group.to_xml_string() for group in self._groups)

    def __repr__(self) -> str:
        return f"MultiPolygon(groups={len(self._groups)})"
