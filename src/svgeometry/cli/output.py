"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with formatted messages and summary tables.
"""

from rich.console import Console
from rich.table import Table
from rich.text import Text

from svgeometry.domain.bounding_box import BoundingBox
from svgeometry.domain.multi_polygon import MultiPolygon
from svgeometry.utils.logging import OptimizationStats

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]svgeometry[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator.

    Args:
        message: Step description message
    """
    console.print(f"\n{SYM_STEP} {message}")


def print_data(data: str) -> None:
    """Print SVG data unwrapped and without markup."""
    console.print(data, soft_wrap=True, markup=False, highlight=False)


def print_bounding_box(box: BoundingBox) -> None:
    console.print(
        f"  bbox {box.upper_left} {SYM_DOT} {box.lower_right} "
        f"{SYM_DOT} {box.width:g} x {box.height:g}",
        highlight=False,
    )


def print_polygon_groups(multi_polygon: MultiPolygon) -> None:
    """Print a table of exterior polygons and their holes.

    Args:
        multi_polygon: Grouped polygons to summarize
    """
    table = Table(show_header=True, header_style="bold", box=None, pad_edge=False)
    table.add_column("group", justify="right")
    table.add_column("points", justify="right")
    table.add_column("holes", justify="right")

    for index, group in enumerate(multi_polygon, start=1):
        table.add_row(str(index), str(len(group.exterior)), str(len(group.interiors)))

    console.print(table)


def print_relation(name_a: str, name_b: str, relation: str) -> None:
    line = Text("  ")
    line.append(name_a, style="bold")
    line.append(f" {SYM_STEP} ")
    line.append(name_b, style="bold")
    line.append(f": {relation}")
    console.print(line)


def _format_time(seconds: float) -> str:
    """Format seconds into human-readable time string."""
    if seconds < 1:
        return f"{seconds * 1000:.0f}ms"
    elif seconds < 60:
        return f"{seconds:.1f}s"
    else:
        mins = int(seconds // 60)
        secs = seconds % 60
        return f"{mins}m {secs:.1f}s"


def print_optimization_summary(stats: OptimizationStats, output_path: str | None = None) -> None:
    """Print success message with optimization summary.

    Args:
        stats: Statistics of the run
        output_path: File the polylines were written to, if any
    """
    time_str = _format_time(stats.duration_seconds)
    console.print(f"\n[bold green]{SYM_OK} Complete[/bold green] in {time_str}")

    if output_path:
        line = Text("  ")
        line.append(output_path, style="bold")
        console.print(line)

    console.print(
        f"  {stats.input_polylines} shapes {SYM_DOT} {stats.input_points} points "
        f"{SYM_STEP} {stats.output_polylines} polylines {SYM_DOT} {stats.output_points} points",
        highlight=False,
    )

    dropped_style = "yellow" if stats.dropped_polylines > 0 else "green"
    console.print(
        f"  [{dropped_style}]{stats.dropped_polylines} dropped[/{dropped_style}] "
        f"{SYM_DOT} {stats.passthrough_polylines} loops kept "
        f"{SYM_DOT} {stats.point_reduction_percent:.1f}% fewer points"
    )


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")
