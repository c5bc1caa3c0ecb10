"""WGS84 coordinates and their spherical WebMercator projection."""

import math
from collections.abc import Iterable
from dataclasses import dataclass

# WGS84 semi-major axis, the sphere radius used by WebMercator (EPSG:3857).
EARTH_RADIUS_METERS = 6378137.0

# Mean Earth radius for great-circle distances.
MEAN_EARTH_RADIUS_METERS = 6371008.8

# Latitude beyond which WebMercator is undefined (the map becomes square).
MAX_MERCATOR_LATITUDE = 85.05112878


def normalize_longitude(longitude: float) -> float:
    """Wrap a longitude into ]-180, 180].

    Raises:
        ValueError: If the value is not finite
    """
    if not math.isfinite(longitude):
        raise ValueError(f"Longitude must be a finite number, got {longitude}")
    longitude = math.fmod(longitude, 360.0)
    if longitude > 180.0:
        longitude -= 360.0
    elif longitude <= -180.0:
        longitude += 360.0
    return longitude


def normalize_latitude(latitude: float) -> float:
    """Fold a latitude into [-90, 90] by reflecting over the poles.

    Raises:
        ValueError: If the value is not finite
    """
    if not math.isfinite(latitude):
        raise ValueError(f"Latitude must be a finite number, got {latitude}")
    latitude = math.fmod(latitude + 90.0, 360.0)
    if latitude < 0:
        latitude += 360.0
    # latitude + 90 now lies in [0, 360): rising 0..180 then falling back
    if latitude > 180.0:
        latitude = 360.0 - latitude
    return latitude - 90.0


@dataclass(frozen=True, slots=True)
class Coordinate:
    """A WGS84 position.

    Longitude is wrapped into ]-180, 180] and latitude folded into
    [-90, 90] on construction.

    Attributes:
        longitude: Degrees east
        latitude: Degrees north
    """

    longitude: float
    latitude: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "longitude", normalize_longitude(self.longitude))
        object.__setattr__(self, "latitude", normalize_latitude(self.latitude))

    def to_web_mercator(self) -> tuple[float, float]:
        """Project to WebMercator (easting, northing) in meters.

        Latitudes are clamped to the projection's valid range.
        """
        latitude = max(-MAX_MERCATOR_LATITUDE, min(MAX_MERCATOR_LATITUDE, self.latitude))
        x = EARTH_RADIUS_METERS * math.radians(self.longitude)
        y = EARTH_RADIUS_METERS * math.log(math.tan(math.pi / 4 + math.radians(latitude) / 2))
        return (x, y)

    @classmethod
    def from_web_mercator(cls, x: float, y: float) -> "Coordinate":
        longitude = math.degrees(x / EARTH_RADIUS_METERS)
        latitude = math.degrees(2 * math.atan(math.exp(y / EARTH_RADIUS_METERS)) - math.pi / 2)
        return cls(longitude, latitude)

    def distance_to(self, other: "Coordinate") -> float:
        """Great-circle (haversine) distance in meters."""
        lat1 = math.radians(self.latitude)
        lat2 = math.radians(other.latitude)
        dlat = lat2 - lat1
        dlon = math.radians(other.longitude - self.longitude)
        h = math.sin(dlat / 2) ** 2 + math.cos(lat1) * math.cos(lat2) * math.sin(dlon / 2) ** 2
        return 2 * MEAN_EARTH_RADIUS_METERS * math.asin(min(1.0, math.sqrt(h)))

    def is_within(self, box: "GeoBoundingBox") -> bool:
        return (
            box.top_left.longitude <= self.longitude <= box.bottom_right.longitude
            and box.bottom_right.latitude <= self.latitude <= box.top_left.latitude
        )

    def __str__(self) -> str:
        return f"({self.longitude:.6f}, {self.latitude:.6f})"


@dataclass(frozen=True, slots=True)
class GeoBoundingBox:
    """Geographic box given by its north-west and south-east corners.

    Attributes:
        top_left: North-west corner
        bottom_right: South-east corner
    """

    top_left: Coordinate
    bottom_right: Coordinate

    @classmethod
    def from_coordinates(cls, coordinates: Iterable[Coordinate]) -> "GeoBoundingBox":
        """Smallest box containing every coordinate.

        Raises:
            ValueError: If no coordinates are given
        """
        coordinates = list(coordinates)
        if not coordinates:
            raise ValueError("Cannot compute a bounding box of no coordinates")
        longitudes = [c.longitude for c in coordinates]
        latitudes = [c.latitude for c in coordinates]
        return cls(
            Coordinate(min(longitudes), max(latitudes)),
            Coordinate(max(longitudes), min(latitudes)),
        )

    @property
    def top_right(self) -> Coordinate:
        return Coordinate(self.bottom_right.longitude, self.top_left.latitude)

    @property
    def bottom_left(self) -> Coordinate:
        return Coordinate(self.top_left.longitude, self.bottom_right.latitude)

    def union(self, other: "GeoBoundingBox") -> "GeoBoundingBox":
        return GeoBoundingBox.from_coordinates(
            [self.top_left, self.bottom_right, other.top_left, other.bottom_right]
        )
