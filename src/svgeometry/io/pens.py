"""fontTools pen that records outlines into a Path."""

from typing import Any

from fontTools.pens.basePen import BasePen

from svgeometry.domain.path import Path
from svgeometry.domain.point import Point


class PathPen(BasePen):
    """Pen that draws into a svgeometry Path.

    Works with any fontTools drawing source: glyph sets, SVG path parsing
    and other pens. Quadratic runs with implied on-curve points are split
    by BasePen before they reach ``_qCurveToOne``.

    Example:
        pen = PathPen(glyph_set)
        glyph_set["A"].draw(pen)
        path = pen.path
    """

    def __init__(self, glyph_set: Any = None) -> None:
        super().__init__(glyph_set)
        self.path = Path()

    def _moveTo(self, pt: tuple[float, float]) -> None:
        self.path.move_to(Point(*pt))

    def _lineTo(self, pt: tuple[float, float]) -> None:
        self.path.line_to(Point(*pt))

    def _curveToOne(
        self,
        pt1: tuple[float, float],
        pt2: tuple[float, float],
        pt3: tuple[float, float],
    ) -> None:
        self.path.cubic_to(Point(*pt1), Point(*pt2), Point(*pt3))

    def _qCurveToOne(self, pt1: tuple[float, float], pt2: tuple[float, float]) -> None:
        self.path.quad_to(Point(*pt1), Point(*pt2))

    def _closePath(self) -> None:
        self.path.close()

    def _endPath(self) -> None:
        # Open contours stay open; the next moveTo starts a new subpath
        pass
