"""CLI application entry point for svgeometry.

This module provides the main CLI interface using Typer.
"""

from pathlib import Path
from typing import Annotated

import typer

from svgeometry import __version__
from svgeometry.cli.output import (
    console,
    print_bounding_box,
    print_data,
    print_error,
    print_header,
    print_optimization_summary,
    print_polygon_groups,
    print_relation,
    print_step,
)
from svgeometry.config import (
    GeometryConfig,
    LoggingConfig,
    MapConfig,
    OptimizationConfig,
    Settings,
)
from svgeometry.domain import Path as SvgPath
from svgeometry.domain import Point, Polygon
from svgeometry.domain.multi_polygon import ring_path_data
from svgeometry.exceptions import FontLoadError, SvgGeometryError
from svgeometry.io import GlyphOutlineReader, optimize_shapes, read_shapes
from svgeometry.utils import configure_logging

# Create the Typer app
app = typer.Typer(
    name="svgeometry",
    help="Geometry tools for SVG paths, polygons and transit map shapes.",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]svgeometry[/bold blue] v{__version__}")
        raise typer.Exit()


@app.callback()
def main_options(
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Geometry tools for SVG paths, polygons and transit map shapes."""


@app.command()
def approximate(
    path_data: Annotated[
        str,
        typer.Argument(help="SVG path data, e.g. 'M 0,0 L 10,0 L 10,10 Z'", show_default=False),
    ],
    segments: Annotated[
        int,
        typer.Option(
            "--segments",
            "-s",
            help="Line segments per curve",
            min=1,
            max=1000,
        ),
    ] = 10,
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="Print only the resulting path data"),
    ] = False,
) -> None:
    """Flatten curves in SVG path data and group the polygons into shapes with holes.

    Example:
        svgeometry approximate "M 0,0 Q 5,10 10,0 Z" --segments 4
    """
    settings = Settings(geometry=GeometryConfig(curve_segments=segments))

    try:
        path = SvgPath.from_xml_string(path_data)
        multi_polygon = path.approximate_to_multi_polygon(settings.geometry.curve_segments)
    except SvgGeometryError as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    if not quiet:
        print_step(f"{len(multi_polygon)} polygon groups")
        print_polygon_groups(multi_polygon)
        if len(multi_polygon):
            print_bounding_box(multi_polygon.bounding_box)
        print_step("Path data")
    print_data(multi_polygon.to_xml_string())


@app.command()
def relation(
    polygon_a: Annotated[
        str,
        typer.Argument(help="Points of polygon A, e.g. '0,0 10,0 10,10 0,10'", show_default=False),
    ],
    polygon_b: Annotated[
        str,
        typer.Argument(help="Points of polygon B", show_default=False),
    ],
) -> None:
    """Print how two polygons relate, in both directions.

    Example:
        svgeometry relation "2,2 4,2 4,4 2,4" "0,0 10,0 10,10 0,10"
    """
    try:
        a = Polygon.from_xml_string(polygon_a)
        b = Polygon.from_xml_string(polygon_b)
    except SvgGeometryError as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    print_relation("A", "B", a.relation_to_polygon(b).name)
    print_relation("B", "A", b.relation_to_polygon(a).name)


@app.command("optimize-shapes")
def optimize_shapes_command(
    feed: Annotated[
        Path,
        typer.Argument(
            help="GTFS feed: directory, zip archive or shapes.txt",
            show_default=False,
        ),
    ],
    width: Annotated[
        float,
        typer.Option(
            "--width",
            "-w",
            help="Width in pixels of the projected feed",
            min=1.0,
            max=1_000_000.0,
        ),
    ] = 1000.0,
    rdp: Annotated[
        bool,
        typer.Option("--rdp/--no-rdp", help="Simplify merged polylines (Ramer-Douglas-Peucker)"),
    ] = True,
    sharp_turns: Annotated[
        bool,
        typer.Option("--remove-sharp-turns/--keep-sharp-turns", help="Drop near reversals"),
    ] = True,
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Write one line of 'x,y x,y ...' point data per polyline",
        ),
    ] = None,
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Write detailed logs to file",
        ),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option(
            "--log-level",
            help="Logging level (DEBUG|INFO|WARNING|ERROR)",
        ),
    ] = "WARNING",
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Minimal console output",
        ),
    ] = False,
) -> None:
    """Merge overlapping GTFS route shapes into a minimal set of polylines.

    Example:
        svgeometry optimize-shapes gtfs.zip --width 2000 -o shapes.txt
    """
    if not feed.exists():
        print_error(
            f"Input not found: {feed}",
            details=f"The path '{feed}' does not exist or is not accessible.",
        )
        raise typer.Exit(code=1)

    settings = Settings(
        map=MapConfig(svg_width=width),
        optimization=OptimizationConfig(apply_rdp=rdp, remove_sharp_turns=sharp_turns),
        logging=LoggingConfig(log_file=log_file, log_level=log_level),
    )
    logger = configure_logging(
        log_file=settings.logging.log_file,
        console_level=settings.logging.log_level,
        file_level=settings.logging.file_log_level,
        quiet=quiet,
    )

    if not quiet:
        print_header(__version__)
        print_step("Reading shapes")

    try:
        shapes = read_shapes(feed)
        if not quiet:
            console.print(f"  {len(shapes)} shapes")
            print_step("Merging")
        result = optimize_shapes(shapes, settings, logger)
    except FileNotFoundError as e:
        print_error(str(e))
        raise typer.Exit(code=1)
    except SvgGeometryError as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    if output is not None:
        output.write_text(
            "".join(f"{polyline.to_xml_string()}\n" for polyline in result.polylines),
            encoding="utf-8",
        )

    if not quiet:
        print_optimization_summary(result.stats, str(output) if output else None)


@app.command("text-outline")
def text_outline(
    font: Annotated[
        Path,
        typer.Argument(help="Path to TTF/OTF font file", show_default=False),
    ],
    text: Annotated[
        str,
        typer.Argument(help="Text to draw", show_default=False),
    ],
    size: Annotated[
        float,
        typer.Option("--size", "-s", help="Font size in pixels", min=0.1),
    ] = 48.0,
    flatten: Annotated[
        bool,
        typer.Option("--flatten", help="Approximate curves with line segments"),
    ] = False,
    segments: Annotated[
        int,
        typer.Option("--segments", help="Line segments per curve with --flatten", min=1),
    ] = 10,
) -> None:
    """Print the outline of a line of text as SVG path data.

    Example:
        svgeometry text-outline Roboto-Regular.ttf "Hello" --size 24
    """
    if not font.is_file():
        print_error(
            f"Font file not found: {font}",
            details="Please provide a path to a TTF or OTF font file.",
        )
        raise typer.Exit(code=1)

    try:
        with GlyphOutlineReader(font) as reader:
            path = reader.text_path(text, size, Point(0, size))
    except FontLoadError as e:
        print_error(f"Could not load font: {e.reason}")
        raise typer.Exit(code=1)
    except SvgGeometryError as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    if flatten:
        polygons = path.approximate_to_polygons(segments)
        print_data(" ".join(ring_path_data(p) for p in polygons if not p.is_empty()))
    else:
        print_data(path.to_xml_string())


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
