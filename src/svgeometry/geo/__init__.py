"""Geographic input for svgeometry.

Key classes:
- Coordinate: Normalized WGS84 position with WebMercator projection
- GeoBoundingBox: North-west / south-east box of coordinates
- PointConverter: Coordinate <-> pixel Point mapping
"""

from svgeometry.geo.converter import PointConverter
from svgeometry.geo.coordinate import Coordinate, GeoBoundingBox

__all__ = [
    "Coordinate",
    "GeoBoundingBox",
    "PointConverter",
]
