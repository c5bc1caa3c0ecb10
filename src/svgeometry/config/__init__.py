"""Configuration management for svgeometry.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- GeometryConfig: Curve approximation and tolerance settings
- OptimizationConfig: Polyline simplification and merging settings
- MapConfig: Geographic projection settings
- LoggingConfig: Logging settings
- Settings: Main application settings
"""

from svgeometry.config.settings import (
    GeometryConfig,
    LoggingConfig,
    MapConfig,
    OptimizationConfig,
    Settings,
    get_default_settings,
)

__all__ = [
    "GeometryConfig",
    "LoggingConfig",
    "MapConfig",
    "OptimizationConfig",
    "Settings",
    "get_default_settings",
]
