"""Configuration settings for svgeometry."""

from pathlib import Path

from pydantic import BaseModel, Field


class GeometryConfig(BaseModel):
    """Configuration for geometry operations."""

    curve_segments: int = Field(
        default=10,
        ge=1,
        le=1000,
        description="Line segments used to approximate each Bezier curve",
    )


class OptimizationConfig(BaseModel):
    """Configuration for polyline simplification and merging."""

    adjacent_threshold_sq: float = Field(
        default=1e-5,
        ge=0.0,
        description="Squared distance below which adjacent points are merged",
    )
    close_point_distance: float = Field(
        default=0.01,
        ge=0.0,
        description="Minimum distance between neighbouring points (noise filter)",
    )
    sharp_turn_angle: float = Field(
        default=160.0,
        ge=0.0,
        le=180.0,
        description="Turn angle in degrees above which a turn counts as sharp",
    )
    rdp_threshold_sq: float = Field(
        default=0.001,
        ge=0.0,
        description="Squared Ramer-Douglas-Peucker tolerance in pixels",
    )
    apply_rdp: bool = Field(
        default=True,
        description="Simplify merged polylines with Ramer-Douglas-Peucker",
    )
    remove_sharp_turns: bool = Field(
        default=True,
        description="Drop points where a merged polyline reverses on itself",
    )


class MapConfig(BaseModel):
    """Configuration for projecting geographic data to pixels."""

    svg_width: float = Field(
        default=1000.0,
        gt=0.0,
        le=1_000_000.0,
        description="Width in pixels of the projected feed bounding box",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class Settings(BaseModel):
    """Main application settings."""

    geometry: GeometryConfig = Field(default_factory=GeometryConfig)
    optimization: OptimizationConfig = Field(default_factory=OptimizationConfig)
    map: MapConfig = Field(default_factory=MapConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> Settings:
    """Get default application settings."""
    return Settings()
