"""Input layer for svgeometry.

This module reads external data into domain models: SVG path data,
font outlines (via fonttools) and GTFS feed shapes.

Key classes:
- PathPen: fontTools pen recording into a Path
- GlyphOutlineReader: Load fonts and draw glyphs or text as paths
- GtfsShape: Shape of a GTFS feed with its points in order
"""

from svgeometry.io.fonts import GlyphOutlineReader
from svgeometry.io.gtfs import (
    GtfsShape,
    GtfsShapePoint,
    ShapeOptimizationResult,
    feed_bounding_box,
    optimize_shapes,
    parse_shapes,
    read_shapes,
    shapes_to_polylines,
)
from svgeometry.io.pens import PathPen
from svgeometry.io.svg_path import read_path_data

__all__ = [
    "GlyphOutlineReader",
    "GtfsShape",
    "GtfsShapePoint",
    "PathPen",
    "ShapeOptimizationResult",
    "feed_bounding_box",
    "optimize_shapes",
    "parse_shapes",
    "read_path_data",
    "read_shapes",
    "shapes_to_polylines",
]
