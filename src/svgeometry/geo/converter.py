"""Conversion between geographic coordinates and SVG pixel points."""

from svgeometry.domain.point import Point
from svgeometry.geo.coordinate import Coordinate, GeoBoundingBox


class PointConverter:
    """Maps WGS84 coordinates to pixel points and back.

    Pixels are WebMercator meters relative to a start coordinate, divided by
    ``meters_per_pixel``. The Y axis is flipped: SVG Y grows downwards while
    WebMercator northing grows upwards.

    Example:
        converter = PointConverter.for_width(feed_box, svg_width=1000)
        point = converter.to_point(Coordinate(10.75, 59.91))
    """

    def __init__(
        self, start: Coordinate, meters_per_pixel: float, segment_count: int = 10
    ) -> None:
        """Initialize the converter.

        Args:
            start: Coordinate mapped to pixel (0, 0)
            meters_per_pixel: WebMercator meters per pixel
            segment_count: Segments per curve when paths are approximated

        Raises:
            ValueError: If meters_per_pixel is not positive
        """
        if meters_per_pixel <= 0:
            raise ValueError(f"meters_per_pixel must be positive, got {meters_per_pixel}")
        self.start = start
        self.meters_per_pixel = meters_per_pixel
        self.segment_count = segment_count
        self._start_x, self._start_y = start.to_web_mercator()

    @classmethod
    def for_width(
        cls, box: GeoBoundingBox, svg_width: float, segment_count: int = 10
    ) -> "PointConverter":
        """Converter that maps the box's top-left corner to the origin and
        its full width to ``svg_width`` pixels.

        Raises:
            ValueError: If the box has no width or svg_width is not positive
        """
        if svg_width <= 0:
            raise ValueError(f"svg_width must be positive, got {svg_width}")
        left, _ = box.top_left.to_web_mercator()
        right, _ = box.top_right.to_web_mercator()
        width_meters = right - left
        if width_meters <= 0:
            raise ValueError("Bounding box has no width")
        return cls(box.top_left, width_meters / svg_width, segment_count)

    def to_point(self, coordinate: Coordinate) -> Point:
        x, y = coordinate.to_web_mercator()
        return Point(
            (x - self._start_x) / self.meters_per_pixel,
            -(y - self._start_y) / self.meters_per_pixel,
        )

    def to_coordinate(self, point: Point) -> Coordinate:
        x = self._start_x + point.x * self.meters_per_pixel
        y = self._start_y - point.y * self.meters_per_pixel
        return Coordinate.from_web_mercator(x, y)

    def __repr__(self) -> str:
        return (
            f"PointConverter(start={self.start}, "
            f"meters_per_pixel={self.meters_per_pixel:g})"
        )
