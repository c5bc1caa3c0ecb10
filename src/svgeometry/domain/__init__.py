"""Domain models for svgeometry.

Value types for 2D vector geometry in pixel space (Y grows downwards). All
types are immutable once built; containers compute derived data such as
bounding boxes and convex hulls once and cache it.

Key classes:
- Point: Rounded 2D point ordered by Y, then X
- BoundingBox: Axis-aligned box with a NONE sentinel for empty input
- Transform: 2x3 affine matrix with SVG transform-list parsing
- PointList: Read-only point sequence with SVG points serialization
- Polygon: Closed ring with point and polygon relation tests
- Polyline: Open path of at least two points
- ConvexHull: Graham-scan hull of a point set
- EnclosedPolygonGroup: Exterior polygon with holes
- MultiPolygon: Immutable collection of polygon groups
- Path: Drawing commands with Bezier approximation
"""

from svgeometry.domain.bounding_box import BoundingBox
from svgeometry.domain.convex_hull import ConvexHull, graham_scan, is_convex
from svgeometry.domain.multi_polygon import EnclosedPolygonGroup, MultiPolygon
from svgeometry.domain.path import Path, PathCommand, PathVerb
from svgeometry.domain.point import Point, max_point, min_point, turn_angle
from svgeometry.domain.point_list import PointList, parse_points
from svgeometry.domain.polygon import Polygon
from svgeometry.domain.polyline import Polyline
from svgeometry.domain.relation import PointRelation, PolygonRelation
from svgeometry.domain.transform import Transform

__all__: list[str] = [
    # Enums
    "PathVerb",
    "PointRelation",
    "PolygonRelation",
    # Core types
    "Point",
    "BoundingBox",
    "Transform",
    "PointList",
    "Polygon",
    "Polyline",
    "ConvexHull",
    "EnclosedPolygonGroup",
    "MultiPolygon",
    "Path",
    "PathCommand",
    # Helpers
    "graham_scan",
    "is_convex",
    "max_point",
    "min_point",
    "parse_points",
    "turn_angle",
]
