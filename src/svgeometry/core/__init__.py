"""Core geometry algorithms for svgeometry.

This module contains the core algorithms for:

- Geometry operations (cross products, orientation, segment crossings)
- Point/polygon and polygon/polygon relation tests
- Bezier curve sampling for path approximation
- Multi-polygon construction (exterior/hole grouping)

All functions are pure; the only stateful type is MultiPolygonBuilder,
which produces an immutable MultiPolygon.

Key functions:
- cross_product: Z component of a 2D cross product
- orientation: Turn direction of three points
- segments_intersect: Test if two segments share a point
- line_intersection: Intersection of two infinite lines
- point_in_polygon: Even-odd ray casting test
- perpendicular_distance_squared: Squared distance to a chord
- point_relation / polygon_relation: Relation tests behind Polygon methods
- classify_polygons: Relation including COVER and EQUAL

Key classes:
- MultiPolygonBuilder: Groups polygons into exteriors and holes
"""

from svgeometry.core.geometry import (
    cross_product,
    is_neutral_intersection,
    line_intersection,
    orientation,
    perpendicular_distance_squared,
    point_in_polygon,
    segments_intersect,
)
from svgeometry.core.multi_polygon import MultiPolygonBuilder, classify_polygons
from svgeometry.core.relation import point_relation, polygon_relation

__all__ = [
    # Multi-polygon construction
    "MultiPolygonBuilder",
    "classify_polygons",
    # Geometry functions
    "cross_product",
    "is_neutral_intersection",
    "line_intersection",
    "orientation",
    "perpendicular_distance_squared",
    "point_in_polygon",
    "point_relation",
    "polygon_relation",
    "segments_intersect",
]
