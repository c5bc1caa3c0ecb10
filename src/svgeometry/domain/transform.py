"""Affine 2x3 transforms with SVG transform-list parsing."""

import math
import re
from dataclasses import dataclass

from svgeometry.domain.point import Point, format_number
from svgeometry.exceptions import TransformFormatError

_TRANSFORM_FUNCTION = re.compile(r"([A-Za-z]+)\s*\(([^)]*)\)")
_PARAM_SEPARATOR = re.compile(r"[\s,]+")

# name -> accepted parameter counts
_PARAM_COUNTS: dict[str, tuple[int, ...]] = {
    "translate": (1, 2),
    "scale": (1, 2),
    "rotate": (1, 3),
    "skewX": (1,),
    "skewY": (1,),
    "matrix": (6,),
}


@dataclass(frozen=True, slots=True)
class Transform:
    """A 2x3 affine matrix using the row-vector convention.

    A point (x, y) maps to::

        x' = x * m11 + y * m21 + dx
        y' = x * m12 + y * m22 + dy

    which is the SVG ``matrix(a b c d e f)`` with a=m11, b=m12, c=m21, d=m22,
    e=dx, f=dy. Entries keep full precision; mapped points and the serialized
    form are rounded.
    """

    m11: float = 1.0
    m12: float = 0.0
    m21: float = 0.0
    m22: float = 1.0
    dx: float = 0.0
    dy: float = 0.0

    @classmethod
    def identity(cls) -> "Transform":
        return cls()

    @classmethod
    def translation(cls, dx: float = 0.0, dy: float = 0.0) -> "Transform":
        return cls(dx=dx, dy=dy)

    @classmethod
    def scale(cls, scale_x: float = 1.0, scale_y: float = 1.0) -> "Transform":
        return cls(m11=scale_x, m22=scale_y)

    @classmethod
    def rotation(
        cls, angle_degrees: float = 0.0, pivot_x: float = 0.0, pivot_y: float = 0.0
    ) -> "Transform":
        """Rotation by angle_degrees around (pivot_x, pivot_y).

        Positive angles rotate from the +X axis towards the +Y axis, which is
        clockwise on screen since Y grows downwards.
        """
        radians = math.radians(angle_degrees)
        cos = math.cos(radians)
        sin = math.sin(radians)
        return cls(
            m11=cos,
            m12=sin,
            m21=-sin,
            m22=cos,
            dx=pivot_x * (1 - cos) + pivot_y * sin,
            dy=pivot_y * (1 - cos) - pivot_x * sin,
        )

    @classmethod
    def skew(cls, skew_x_degrees: float = 0.0, skew_y_degrees: float = 0.0) -> "Transform":
        return cls(
            m12=math.tan(math.radians(skew_y_degrees)),
            m21=math.tan(math.radians(skew_x_degrees)),
        )

    @classmethod
    def matrix(
        cls,
        m11: float = 1.0,
        m12: float = 0.0,
        m21: float = 0.0,
        m22: float = 1.0,
        dx: float = 0.0,
        dy: float = 0.0,
    ) -> "Transform":
        return cls(m11, m12, m21, m22, dx, dy)

    @property
    def translation_part(self) -> tuple[float, float]:
        return (self.dx, self.dy)

    @property
    def scale_part(self) -> tuple[float, float]:
        return (self.m11, self.m22)

    @property
    def skew_part(self) -> tuple[float, float]:
        """(skew_x_degrees, skew_y_degrees) recovered from the matrix."""
        return (
            math.degrees(math.atan2(self.m21, self.m11)),
            math.degrees(math.atan2(self.m12, self.m22)),
        )

    def compose_with(self, other: "Transform") -> "Transform":
        """Transform that applies self first, then other."""
        return Transform(
            m11=self.m11 * other.m11 + self.m12 * other.m21,
            m12=self.m11 * other.m12 + self.m12 * other.m22,
            m21=self.m21 * other.m11 + self.m22 * other.m21,
            m22=self.m21 * other.m12 + self.m22 * other.m22,
            dx=self.dx * other.m11 + self.dy * other.m21 + other.dx,
            dy=self.dx * other.m12 + self.dy * other.m22 + other.dy,
        )

    def apply(self, point: Point) -> Point:
        """Map a point through the transform."""
        return Point(
            point.x * self.m11 + point.y * self.m21 + self.dx,
            point.x * self.m12 + point.y * self.m22 + self.dy,
        )

    def is_identity(self) -> bool:
        return self == Transform()

    def to_xml_string(self) -> str:
        values = (self.m11, self.m12, self.m21, self.m22, self.dx, self.dy)
        return "matrix(" + " ".join(format_number(v) for v in values) + ")"

    def __str__(self) -> str:
        return self.to_xml_string()

    @classmethod
    def from_xml_string(cls, text: str) -> "Transform":
        """Parse an SVG transform list such as ``translate(10 5) rotate(45)``.

        Functions are composed the way SVG nests them: the rightmost function
        is applied to points first.

        Args:
            text: Value of an SVG ``transform`` attribute

        Returns:
            The composed transform (identity for an empty string)

        Raises:
            TransformFormatError: On unknown functions, wrong parameter
                counts, unparsable numbers or stray text
        """
        result = cls.identity()
        position = 0

        for match in _TRANSFORM_FUNCTION.finditer(text):
            stray = text[position : match.start()].strip(" \t\r\n,")
            if stray:
                raise TransformFormatError(stray, "Unexpected text in transform")
            position = match.end()

            name = match.group(1)
            raw = match.group(2).strip()
            tokens = [t for t in _PARAM_SEPARATOR.split(raw) if t] if raw else []

            if name not in _PARAM_COUNTS:
                raise TransformFormatError(name, "Invalid or unsupported transform type")
            if len(tokens) not in _PARAM_COUNTS[name]:
                expected = " or ".join(str(n) for n in _PARAM_COUNTS[name])
                raise TransformFormatError(
                    match.group(0),
                    f"Invalid parameter count for '{name}': expected {expected}, got {len(tokens)}",
                )

            params = [_parse_number(token) for token in tokens]
            result = _function_transform(name, params).compose_with(result)

        stray = text[position:].strip(" \t\r\n,")
        if stray:
            raise TransformFormatError(stray, "Unexpected text in transform")

        return result


def _parse_number(token: str) -> float:
    try:
        return float(token)
    except ValueError:
        raise TransformFormatError(token, "Invalid number in transform") from None


def _function_transform(name: str, params: list[float]) -> Transform:
    if name == "translate":
        return Transform.translation(params[0], params[1] if len(params) > 1 else 0.0)
    if name == "scale":
        return Transform.scale(params[0], params[1] if len(params) > 1 else params[0])
    if name == "rotate":
        if len(params) == 3:
            return Transform.rotation(params[0], params[1], params[2])
        return Transform.rotation(params[0])
    if name == "skewX":
        return Transform.skew(skew_x_degrees=params[0])
    if name == "skewY":
        return Transform.skew(skew_y_degrees=params[0])
    return Transform.matrix(*params)
