"""svgeometry - 2D vector geometry for SVG documents and transit maps.

svgeometry provides the geometric core behind an SVG object model: points,
bounding boxes, affine transforms, polygons with containment tests, convex
hulls, polygons-with-holes, Bezier path approximation, and a polyline
optimization suite that merges overlapping route geometry into maximal
non-overlapping polylines.

Example:
    $ svgeometry optimize-shapes gtfs.zip --output shapes.txt

This reads the feed's shapes.txt, projects it to pixel space, and writes one
line of "x,y x,y ..." point data per merged polyline.
"""

__version__ = "0.1.0"
__author__ = "svgeometry contributors"

__all__ = ["__author__", "__version__"]
