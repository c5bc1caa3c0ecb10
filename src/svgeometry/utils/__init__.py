"""Utility functions for svgeometry.

This module provides utility functions including:

- Logging setup and configuration
- Optimization statistics tracking
"""

from svgeometry.utils.logging import (
    OptimizationLogger,
    OptimizationStats,
    configure_logging,
)

__all__ = [
    "OptimizationLogger",
    "OptimizationStats",
    "configure_logging",
]
