"""Shared fixtures for integration tests."""

from pathlib import Path

import pytest
from fontTools.fontBuilder import FontBuilder
from fontTools.pens.ttGlyphPen import TTGlyphPen

SHAPES_TXT = """\
shape_id,shape_pt_lat,shape_pt_lon,shape_pt_sequence
A,60.0,10.0,1
A,60.0,10.2,2
A,60.0,10.4,3
B,60.0,10.2,1
B,60.0,10.4,2
B,60.0,10.6,3
"""


def _draw_box(pen, x_min, y_min, x_max, y_max, clockwise=True):
    if clockwise:
        corners = [(x_min, y_min), (x_min, y_max), (x_max, y_max), (x_max, y_min)]
    else:
        corners = [(x_min, y_min), (x_max, y_min), (x_max, y_max), (x_min, y_max)]
    pen.moveTo(corners[0])
    for corner in corners[1:]:
        pen.lineTo(corner)
    pen.closePath()


def _draw_d(pen):
    pen.moveTo((100, 0))
    pen.lineTo((100, 700))
    pen.qCurveTo((500, 700), (500, 0))
    pen.closePath()


def build_test_font(path: Path) -> Path:
    """Write a small TrueType font with three glyphs.

    - A: a box from (100, 0) to (500, 700)
    - O: the same box with a hole from (200, 100) to (400, 600)
    - D: a straight stem closed by one quadratic curve

    Every glyph has an advance of 600 units and its left side bearing
    equal to its xMin, so outlines are drawn at their stored coordinates.
    """
    glyph_order = [".notdef", "A", "O", "D"]

    drawings = {
        ".notdef": lambda pen: None,
        "A": lambda pen: _draw_box(pen, 100, 0, 500, 700),
        "O": lambda pen: (
            _draw_box(pen, 100, 0, 500, 700),
            _draw_box(pen, 200, 100, 400, 600, clockwise=False),
        ),
        "D": _draw_d,
    }
    glyphs = {}
    for name in glyph_order:
        pen = TTGlyphPen(None)
        drawings[name](pen)
        glyphs[name] = pen.glyph()

    builder = FontBuilder(1000, isTTF=True)
    builder.setupGlyphOrder(glyph_order)
    builder.setupCharacterMap({ord("A"): "A", ord("O"): "O", ord("D"): "D"})
    builder.setupGlyf(glyphs)
    builder.setupHorizontalMetrics(
        {".notdef": (600, 0), "A": (600, 100), "O": (600, 100), "D": (600, 100)}
    )
    builder.setupHorizontalHeader(ascent=800, descent=-200)
    builder.setupNameTable({"familyName": "Svgeometry Test", "styleName": "Regular"})
    builder.setupOS2(sTypoAscender=800, usWinAscent=800, usWinDescent=200)
    builder.setupPost()
    builder.save(str(path))
    return path


@pytest.fixture
def test_font(tmp_path: Path) -> Path:
    """Path to a freshly built test font."""
    return build_test_font(tmp_path / "SvgeometryTest.ttf")


@pytest.fixture
def gtfs_feed(tmp_path: Path) -> Path:
    """GTFS feed directory with two routes sharing one segment."""
    feed = tmp_path / "feed"
    feed.mkdir()
    (feed / "shapes.txt").write_text(SHAPES_TXT, encoding="utf-8")
    return feed
