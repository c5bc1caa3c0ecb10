"""SVG path data parsing."""

import logging
import re

from fontTools.svgLib.path import parse_path

from svgeometry.domain.path import Path
from svgeometry.exceptions import PathFormatError
from svgeometry.io.pens import PathPen

logger = logging.getLogger(__name__)

_PATH_CHARACTERS = re.compile(r"^[\sMmZzLlHhVvCcSsQqTtAa0-9eE+\-.,]*$")


def read_path_data(data: str) -> Path:
    """Parse the ``d`` attribute of an SVG path element.

    All SVG commands are accepted, absolute and relative. Smooth curves are
    expanded to regular curves and elliptical arcs to cubic curves.

    Args:
        data: SVG path data

    Returns:
        Path with the parsed commands

    Raises:
        PathFormatError: If the data contains unknown characters, starts
            without a command or has missing arguments
    """
    if not _PATH_CHARACTERS.match(data):
        raise PathFormatError(data, "Unexpected character in path data")

    pen = PathPen()
    try:
        parse_path(data, pen)
    except (ValueError, IndexError) as e:
        raise PathFormatError(data, f"Invalid path data ({e})") from e

    logger.debug("Parsed path data: %d commands", len(pen.path))
    return pen.path
