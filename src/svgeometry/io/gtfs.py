"""GTFS shapes input and the shape merging pipeline.

Reads ``shapes.txt`` from a GTFS feed, projects the shapes to pixel
space and merges overlapping route geometry with a LineSet so every
stretch of road or track is drawn once.
"""

import csv
import io
import math
import time
import zipfile
from collections import defaultdict
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from pathlib import Path

import structlog

from svgeometry.config.settings import Settings
from svgeometry.domain.point import Point
from svgeometry.exceptions import FeedFormatError
from svgeometry.geo.converter import PointConverter
from svgeometry.geo.coordinate import Coordinate, GeoBoundingBox
from svgeometry.optimization.fast_polyline import FastPolyline, remove_close_points
from svgeometry.optimization.line_set import LineSet
from svgeometry.utils.logging import OptimizationLogger, OptimizationStats

SHAPES_FILE = "shapes.txt"

REQUIRED_COLUMNS = ("shape_id", "shape_pt_lat", "shape_pt_lon", "shape_pt_sequence")


@dataclass(frozen=True, slots=True)
class GtfsShapePoint:
    """One row of ``shapes.txt``.

    Attributes:
        shape_id: Shape the point belongs to
        coordinate: Position of the point
        sequence: Order of the point within the shape
        distance_traveled: Optional distance from the first point, None if absent
    """

    shape_id: str
    coordinate: Coordinate
    sequence: int
    distance_traveled: float | None = None


@dataclass(frozen=True, slots=True)
class GtfsShape:
    """All points of one shape in sequence order."""

    shape_id: str
    points: tuple[GtfsShapePoint, ...]

    @property
    def coordinates(self) -> list[Coordinate]:
        return [p.coordinate for p in self.points]

    def __len__(self) -> int:
        return len(self.points)


@dataclass
class ShapeOptimizationResult:
    """Output of ``optimize_shapes``.

    Attributes:
        polylines: Merged polylines in pixel space
        stats: Counts and timing of the run
        converter: Converter used for the projection
        dropped_shapes: Ids of shapes with fewer than two distinct points
    """

    polylines: list[FastPolyline]
    stats: OptimizationStats
    converter: PointConverter | None = None
    dropped_shapes: list[str] = field(default_factory=list)


def read_shapes(path: Path) -> list[GtfsShape]:
    """Read the shapes of a GTFS feed.

    Args:
        path: Feed directory, zipped feed, or the shapes file itself

    Returns:
        Shapes ordered by first appearance, points sorted by sequence

    Raises:
        FileNotFoundError: If the feed has no shapes file
        FeedFormatError: If a row has a missing column or a bad number
    """
    if path.is_dir():
        shapes_path = path / SHAPES_FILE
        if not shapes_path.exists():
            raise FileNotFoundError(f"No {SHAPES_FILE} in {path}")
        with shapes_path.open(encoding="utf-8-sig", newline="") as f:
            return parse_shapes(f)

    if zipfile.is_zipfile(path):
        with zipfile.ZipFile(path) as archive:
            try:
                raw = archive.open(SHAPES_FILE)
            except KeyError as e:
                raise FileNotFoundError(f"No {SHAPES_FILE} in {path}") from e
            with raw, io.TextIOWrapper(raw, encoding="utf-8-sig", newline="") as f:
                return parse_shapes(f)

    with path.open(encoding="utf-8-sig", newline="") as f:
        return parse_shapes(f)


def parse_shapes(lines: Iterable[str], file_name: str = SHAPES_FILE) -> list[GtfsShape]:
    """Parse ``shapes.txt`` content.

    Columns are located by header name, so extra or reordered columns are
    fine. Line numbers in errors count the header as line 1.
    """
    reader = csv.DictReader(lines)
    missing = [c for c in REQUIRED_COLUMNS if c not in (reader.fieldnames or [])]
    if missing:
        raise FeedFormatError(file_name, 1, ",".join(missing))

    grouped: dict[str, list[GtfsShapePoint]] = defaultdict(list)
    for line_number, row in enumerate(reader, start=2):
        point = _parse_row(row, file_name, line_number)
        grouped[point.shape_id].append(point)

    return [
        GtfsShape(shape_id, tuple(sorted(points, key=lambda p: p.sequence)))
        for shape_id, points in grouped.items()
    ]


def _parse_row(row: dict[str, str | None], file_name: str, line_number: int) -> GtfsShapePoint:
    def number(column: str, parse=float):
        token = (row.get(column) or "").strip()
        try:
            value = parse(token)
        except ValueError as e:
            raise FeedFormatError(file_name, line_number, token) from e
        if isinstance(value, float) and not math.isfinite(value):
            raise FeedFormatError(file_name, line_number, token)
        return value

    distance_token = (row.get("shape_dist_traveled") or "").strip()
    distance = number("shape_dist_traveled") if distance_token else None

    return GtfsShapePoint(
        shape_id=(row.get("shape_id") or "").strip(),
        coordinate=Coordinate(number("shape_pt_lon"), number("shape_pt_lat")),
        sequence=number("shape_pt_sequence", int),
        distance_traveled=distance,
    )


def feed_bounding_box(shapes: Iterable[GtfsShape]) -> GeoBoundingBox:
    """Bounding box of every shape point.

    Raises:
        ValueError: If there are no points
    """
    return GeoBoundingBox.from_coordinates(
        p.coordinate for shape in shapes for p in shape.points
    )


def shape_points(shape: GtfsShape, converter: PointConverter) -> list[Point]:
    return [converter.to_point(p.coordinate) for p in shape.points]


def shapes_to_polylines(
    shapes: Iterable[GtfsShape], converter: PointConverter
) -> Iterator[FastPolyline]:
    """Project shapes to pixel polylines.

    Shapes with fewer than two points are skipped.
    """
    for shape in shapes:
        if len(shape) < 2:
            continue
        yield FastPolyline(shape_points(shape, converter))


def optimize_shapes(
    shapes: list[GtfsShape],
    settings: Settings | None = None,
    logger: structlog.stdlib.BoundLogger | None = None,
) -> ShapeOptimizationResult:
    """Merge the shapes of a feed into a minimal set of polylines.

    Steps: project every shape with a converter that maps the feed's
    bounding box to the configured width, drop points closer than the
    close-point distance, merge near-equal adjacent points, merge all
    segments in a LineSet, then optionally simplify with
    Ramer-Douglas-Peucker and remove sharp turns.

    Args:
        shapes: Shapes read from the feed
        settings: Settings to use, defaults if None
        logger: structlog logger, module logger if None

    Returns:
        Merged polylines with statistics
    """
    settings = settings or Settings()
    logger = logger or structlog.get_logger(__name__)
    optimization_logger = OptimizationLogger(logger)
    optimization = settings.optimization

    stats = optimization_logger.stats
    stats.start_time = time.time()
    optimization_logger.log_input(len(shapes), sum(len(s) for s in shapes))

    result = ShapeOptimizationResult(polylines=[], stats=stats)
    if not shapes:
        stats.end_time = time.time()
        optimization_logger.log_output(0, 0, 0.0)
        return result

    converter = PointConverter.for_width(
        feed_bounding_box(shapes),
        settings.map.svg_width,
        settings.geometry.curve_segments,
    )
    result.converter = converter

    line_set = LineSet(logger)
    for shape in shapes:
        points = remove_close_points(
            shape_points(shape, converter), optimization.close_point_distance
        )
        if len(points) < 2:
            result.dropped_shapes.append(shape.shape_id)
            optimization_logger.log_dropped(shape.shape_id, "fewer than two distinct points")
            continue
        polyline = FastPolyline(points).remove_equivalent_adjacent_points(
            optimization.adjacent_threshold_sq
        )
        line_set.add_polyline(polyline)

    optimization_logger.log_passthrough(line_set.passthrough_count)

    for polyline in line_set.optimize():
        if optimization.apply_rdp:
            polyline = polyline.apply_rdpa(optimization.rdp_threshold_sq)
        if optimization.remove_sharp_turns:
            polyline = polyline.remove_sharp_turns(optimization.sharp_turn_angle)
        result.polylines.append(polyline)

    stats.end_time = time.time()
    optimization_logger.log_output(
        len(result.polylines),
        sum(len(p) for p in result.polylines),
        stats.duration_seconds * 1000,
    )
    return result
