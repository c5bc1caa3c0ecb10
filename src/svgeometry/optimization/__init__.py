"""Polyline optimization for svgeometry.

This module contains the polyline simplification and merging algorithms:

- Near-duplicate and close point removal
- Sharp-turn detection and removal
- Ramer-Douglas-Peucker simplification
- Longest common run of points between two polylines
- Merging overlapping polylines into maximal non-overlapping ones

Key classes:
- FastPolyline: Direction-normalized polyline with simplification methods
- Line: Undirected segment with sorted endpoints
- LineSet: Segment set that rebuilds maximal polylines
"""

from svgeometry.optimization.fast_polyline import (
    FastPolyline,
    SubstringResult,
    create_substring_matrix,
    find_longest_common_substring,
    is_sharp_turn,
    remove_close_points,
)
from svgeometry.optimization.line import Line
from svgeometry.optimization.line_set import LineSet

__all__ = [
    "FastPolyline",
    "Line",
    "LineSet",
    "SubstringResult",
    "create_substring_matrix",
    "find_longest_common_substring",
    "is_sharp_turn",
    "remove_close_points",
]
