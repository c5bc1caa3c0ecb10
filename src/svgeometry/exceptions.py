"""Exception hierarchy for svgeometry."""


class SvgGeometryError(Exception):
    """Base exception for all svgeometry errors."""

    pass


class GeometryError(SvgGeometryError):
    """Errors in geometric construction or calculations."""

    pass


class ZeroLengthLineError(GeometryError):
    """A line segment was created with (near) identical endpoints."""

    def __init__(self, distance: float) -> None:
        self.distance = distance
        super().__init__(f"Line has near zero length: {distance}")


class PolylineTooShortError(GeometryError):
    """A polyline was created with fewer than two points."""

    def __init__(self, point_count: int) -> None:
        self.point_count = point_count
        super().__init__(
            f"A polyline must have at least two points, got {point_count}"
        )


class MatrixTooSmallError(GeometryError):
    """Scratch matrix cannot hold the substring table for two polylines."""

    def __init__(self, required: tuple[int, int], actual: tuple[int, int]) -> None:
        self.required = required
        self.actual = actual
        super().__init__(
            f"Pre-allocated matrix is too small: need at least "
            f"{required[0]}x{required[1]}, got {actual[0]}x{actual[1]}"
        )


class MultiPolygonError(SvgGeometryError):
    """Errors building a multi-polygon from individual polygons."""

    pass


class DuplicatePolygonError(MultiPolygonError):
    """Polygon is identical to an exterior polygon already added."""

    def __init__(self) -> None:
        super().__init__(
            "Cannot add polygon to MultiPolygon, since it already contains an identical polygon"
        )


class NestingDepthError(MultiPolygonError):
    """Polygon would create more than one level of containment."""

    def __init__(self) -> None:
        super().__init__(
            "Cannot add polygon to MultiPolygon, since it would create more than 1 level of containment"
        )


class FormatError(SvgGeometryError):
    """Malformed serialized input."""

    def __init__(self, token: str, reason: str) -> None:
        self.token = token
        self.reason = reason
        super().__init__(f"{reason}: '{token}'")


class PointListFormatError(FormatError):
    """Invalid point in SVG points data."""

    def __init__(self, token: str) -> None:
        super().__init__(token, "Invalid point in SVG points data")


class TransformFormatError(FormatError):
    """Invalid or unsupported SVG transform."""

    def __init__(self, token: str, reason: str = "Invalid transform") -> None:
        super().__init__(token, reason)


class PathFormatError(FormatError):
    """Invalid SVG path data."""

    def __init__(self, token: str, reason: str = "Invalid path data") -> None:
        super().__init__(token, reason)


class FeedFormatError(FormatError):
    """Malformed row in a GTFS feed file."""

    def __init__(self, file_name: str, line_number: int, token: str) -> None:
        self.file_name = file_name
        self.line_number = line_number
        super().__init__(token, f"Invalid value in {file_name} line {line_number}")


class FontError(SvgGeometryError):
    """Errors related to font loading."""

    pass


class FontLoadError(FontError):
    """Error loading a font file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load font '{path}': {reason}")


class GlyphNotFoundError(FontError):
    """Requested glyph not found in font."""

    def __init__(self, glyph_name: str) -> None:
        self.glyph_name = glyph_name
        super().__init__(f"Glyph '{glyph_name}' not found in font")
