"""Command-line interface for svgeometry.

This module provides the CLI using Typer with rich output for
user-friendly feedback.

Key features:
- Path approximation and polygon grouping
- Polygon relation checks
- GTFS shape merging with summary statistics
- Text outlines from TTF/OTF fonts
"""

from svgeometry.cli.app import cli, main

__all__ = ["cli", "main"]
