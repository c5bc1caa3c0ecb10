"""Font outlines as paths.

This module provides the GlyphOutlineReader class for loading TTF/OTF
fonts and drawing glyphs or whole strings into Path objects.
"""

from pathlib import Path as FilePath

from fontTools.ttLib import TTFont, TTLibError

from svgeometry.domain.path import Path
from svgeometry.domain.point import Point
from svgeometry.domain.transform import Transform
from svgeometry.exceptions import FontLoadError, GlyphNotFoundError
from svgeometry.io.pens import PathPen


class GlyphOutlineReader:
    """Loads TTF/OTF fonts and converts glyph outlines to paths.

    Glyphs are drawn in font units with Y pointing up. ``text_path``
    scales to a font size and flips Y so the result uses SVG coordinates.

    Example:
        with GlyphOutlineReader(FilePath("font.ttf")) as reader:
            path = reader.text_path("Hi", font_size=48)
            polygons = path.approximate_to_polygons()
    """

    def __init__(self, font_path: FilePath) -> None:
        """Initialize the reader.

        Args:
            font_path: Path to the TTF or OTF font file
        """
        self._font_path = font_path
        self._font: TTFont | None = None

    def load(self) -> None:
        """Load the font file.

        Raises:
            FileNotFoundError: If font file does not exist
            FontLoadError: If the file is not a readable font
        """
        if not self._font_path.exists():
            raise FileNotFoundError(f"Font file not found: {self._font_path}")

        try:
            self._font = TTFont(str(self._font_path))
        except TTLibError as e:
            raise FontLoadError(str(self._font_path), str(e)) from e

    def _require_font(self) -> TTFont:
        if self._font is None:
            raise RuntimeError("Font not loaded. Call load() first.")
        return self._font

    @property
    def units_per_em(self) -> int:
        """Return font's units per em.

        Raises:
            RuntimeError: If font has not been loaded yet
        """
        return self._require_font()["head"].unitsPerEm  # type: ignore[attr-defined]

    def glyph_name_for(self, character: str) -> str:
        """Glyph name mapped to a character by the font's cmap.

        Raises:
            GlyphNotFoundError: If the font has no glyph for the character
            RuntimeError: If font has not been loaded yet
        """
        cmap = self._require_font().getBestCmap() or {}
        name = cmap.get(ord(character))
        if name is None:
            raise GlyphNotFoundError(character)
        return name

    def advance_width(self, glyph_name: str) -> int:
        """Horizontal advance of a glyph in font units."""
        advance, _ = self._require_font()["hmtx"][glyph_name]
        return advance

    def glyph_path(self, name: str, transform: Transform | None = None) -> Path:
        """Draw one glyph into a path.

        Composite glyphs are decomposed into their components' outlines.

        Args:
            name: Glyph name
            transform: Optional transform applied to the outline

        Returns:
            Glyph outline in font units (or transformed)

        Raises:
            GlyphNotFoundError: If the glyph does not exist
            RuntimeError: If font has not been loaded yet
        """
        font = self._require_font()
        if name not in font.getGlyphOrder():
            raise GlyphNotFoundError(name)

        glyph_set = font.getGlyphSet()
        pen = PathPen(glyph_set)
        glyph_set[name].draw(pen)

        if transform is None:
            return pen.path
        return pen.path.transform(transform)

    def text_path(
        self, text: str, font_size: float, origin: Point | None = None
    ) -> Path:
        """Lay out a single line of text as one path.

        Glyphs are placed one after another using their advance widths,
        with no kerning. ``origin`` is the left end of the baseline.

        Args:
            text: Characters to draw
            font_size: Em size in pixels
            origin: Baseline start, the origin if not given

        Returns:
            Outline of the text in pixel coordinates, Y pointing down

        Raises:
            GlyphNotFoundError: If a character has no glyph
            RuntimeError: If font has not been loaded yet
        """
        origin = origin or Point.origin()
        scale = font_size / self.units_per_em

        result = Path()
        pen_x = 0.0
        for character in text:
            name = self.glyph_name_for(character)
            placement = Transform.scale(scale, -scale).compose_with(
                Transform.translation(origin.x + pen_x * scale, origin.y)
            )
            result.extend(self.glyph_path(name, placement))
            pen_x += self.advance_width(name)
        return result

    def close(self) -> None:
        """Close the font file and free resources."""
        if self._font is not None:
            self._font.close()
            self._font = None

    def __enter__(self) -> "GlyphOutlineReader":
        """Context manager entry."""
        self.load()
        return self

    def __exit__(self, _exc_type: object, _exc_val: object, _exc_tb: object) -> None:
        """Context manager exit."""
        self.close()
