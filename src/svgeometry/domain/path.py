"""Vector paths made of lines and Bezier curves.

A Path records drawing commands (move, line, quadratic, cubic, conic,
close) and can approximate its curves with straight segments to produce
polygons.
"""

from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum, auto
from typing import TYPE_CHECKING

from svgeometry.domain.point import Point, format_number
from svgeometry.domain.polygon import Polygon
from svgeometry.domain.transform import Transform

if TYPE_CHECKING:
    from svgeometry.domain.multi_polygon import MultiPolygon

DEFAULT_SEGMENTS = 10


class PathVerb(Enum):
    """Drawing command type."""

    MOVE = auto()
    LINE = auto()
    QUAD = auto()
    CUBIC = auto()
    CONIC = auto()
    CLOSE = auto()


@dataclass(frozen=True, slots=True)
class PathCommand:
    """A single drawing command.

    Curves and lines carry their start point first, so every segment can be
    evaluated without looking at the previous command:

    - MOVE: (point,)
    - LINE: (start, end)
    - QUAD and CONIC: (start, control, end)
    - CUBIC: (start, control1, control2, end)
    - CLOSE: ()

    Attributes:
        verb: Command type
        points: Points as listed above
        weight: Control point weight, only meaningful for CONIC
    """

    verb: PathVerb
    points: tuple[Point, ...] = ()
    weight: float = 1.0

    @property
    def end_point(self) -> Point | None:
        return self.points[-1] if self.points else None


class Path:
    """A sequence of drawing commands with a builder API.

    Builder methods return the path itself so calls can be chained::

        path = Path().move_to(Point(0, 0)).line_to(Point(10, 0)).close()

    Drawing without a preceding ``move_to`` (or after ``close``) implicitly
    starts a new subpath at the last subpath start, or at the origin.

    Paths compare equal when their SVG path data is equal.
    """

    def __init__(self) -> None:
        self._commands: list[PathCommand] = []
        self._contour_start: Point | None = None
        self._current: Point | None = None
        self._needs_move = True

    @classmethod
    def from_xml_string(cls, data: str) -> "Path":
        """Parse SVG path data (the ``d`` attribute).

        Elliptical arcs are converted to cubic curves.

        Raises:
            PathFormatError: If the path data is malformed
        """
        from svgeometry.io.svg_path import read_path_data

        return read_path_data(data)

    @property
    def commands(self) -> tuple[PathCommand, ...]:
        return tuple(self._commands)

    @property
    def current_point(self) -> Point | None:
        return self._current

    def is_empty(self) -> bool:
        return not self._commands

    def __len__(self) -> int:
        return len(self._commands)

    def __iter__(self) -> Iterator[PathCommand]:
        return iter(self._commands)

    def move_to(self, point: Point) -> "Path":
        self._commands.append(PathCommand(PathVerb.MOVE, (point,)))
        self._contour_start = point
        self._current = point
        self._needs_move = False
        return self

    def line_to(self, point: Point) -> "Path":
        start = self._begin_segment()
        self._commands.append(PathCommand(PathVerb.LINE, (start, point)))
        self._current = point
        return self

    def quad_to(self, control: Point, end: Point) -> "Path":
        start = self._begin_segment()
        self._commands.append(PathCommand(PathVerb.QUAD, (start, control, end)))
        self._current = end
        return self

    def cubic_to(self, control1: Point, control2: Point, end: Point) -> "Path":
        start = self._begin_segment()
        self._commands.append(PathCommand(PathVerb.CUBIC, (start, control1, control2, end)))
        self._current = end
        return self

    def conic_to(self, control: Point, end: Point, weight: float) -> "Path":
        start = self._begin_segment()
        self._commands.append(PathCommand(PathVerb.CONIC, (start, control, end), weight))
        self._current = end
        return self

    def close(self) -> "Path":
        if self._needs_move:
            return self
        self._commands.append(PathCommand(PathVerb.CLOSE))
        self._current = self._contour_start
        self._needs_move = True
        return self

    def _begin_segment(self) -> Point:
        if self._needs_move:
            self.move_to(self._contour_start or Point.origin())
        assert self._current is not None
        return self._current

    def append(self, command: PathCommand) -> "Path":
        """Replay a command onto this path.

        The command's own start point is ignored; segments start at the
        current point of this path.
        """
        pts = command.points
        if command.verb is PathVerb.MOVE:
            return self.move_to(pts[0])
        if command.verb is PathVerb.LINE:
            return self.line_to(pts[1])
        if command.verb is PathVerb.QUAD:
            return self.quad_to(pts[1], pts[2])
        if command.verb is PathVerb.CUBIC:
            return self.cubic_to(pts[1], pts[2], pts[3])
        if command.verb is PathVerb.CONIC:
            return self.conic_to(pts[1], pts[2], command.weight)
        return self.close()

    def extend(self, other: "Path") -> "Path":
        for command in other:
            self.append(command)
        return self

    def transform(self, transform: Transform) -> "Path":
        """Copy of the path with every point mapped through a transform.

        Conic weights are unchanged by affine maps.
        """
        result = Path()
        for command in self._commands:
            points = tuple(p.transform(transform) for p in command.points)
            result.append(PathCommand(command.verb, points, command.weight))
        return result

    def to_xml_string(self, segments: int = DEFAULT_SEGMENTS) -> str:
        """Serialize as SVG path data.

        SVG has no conic command, so conics are written as ``segments``
        straight lines.
        """
        from svgeometry.core._bezier import sample_conic

        def fmt(point: Point) -> str:
            return f"{format_number(point.x)},{format_number(point.y)}"

        parts: list[str] = []
        for command in self._commands:
            pts = command.points
            if command.verb is PathVerb.MOVE:
                parts.append(f"M {fmt(pts[0])}")
            elif command.verb is PathVerb.LINE:
                parts.append(f"L {fmt(pts[1])}")
            elif command.verb is PathVerb.QUAD:
                parts.append(f"Q {fmt(pts[1])} {fmt(pts[2])}")
            elif command.verb is PathVerb.CUBIC:
                parts.append(f"C {fmt(pts[1])} {fmt(pts[2])} {fmt(pts[3])}")
            elif command.verb is PathVerb.CONIC:
                samples = sample_conic(pts[0], pts[1], pts[2], command.weight, segments)
                parts.extend(f"L {fmt(p)}" for p in samples[1:])
            else:
                parts.append("Z")
        return " ".join(parts)

    def approximate_to_polygons(self, segments: int = DEFAULT_SEGMENTS) -> list[Polygon]:
        """Flatten the path into polygons.

        Each curve is sampled at ``segments + 1`` evenly spaced parameter
        values, start point included. A move starts a new polygon and emits
        the previous one as is; a close repeats the first point and emits the
        polygon. Points left over at the end form a final, unclosed polygon.

        Args:
            segments: Line segments per curve

        Returns:
            Polygons in path order

        Raises:
            ValueError: If segments is less than 1
        """
        from svgeometry.core._bezier import approximate_commands

        return [Polygon(points) for points in approximate_commands(self._commands, segments)]

    def approximate_to_multi_polygon(self, segments: int = DEFAULT_SEGMENTS) -> "MultiPolygon":
        """Flatten the path and group the polygons into exteriors and holes."""
        from svgeometry.domain.multi_polygon import MultiPolygon

        return MultiPolygon.from_polygons(self.approximate_to_polygons(segments))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Path):
            return NotImplemented
        return self.to_xml_string() == other.to_xml_string()

    def __hash__(self) -> int:
        return hash(self.to_xml_string())

    def __str__(self) -> str:
        return self.to_xml_string()

    def __repr__(self) -> str:
        return f"Path({self.to_xml_string()!r})"
