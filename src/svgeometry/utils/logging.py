"""Logging utilities for svgeometry."""

import logging
from dataclasses import dataclass
from pathlib import Path

import structlog

_HANDLER_NAMES = ("svgeometry.file", "svgeometry.console")


@dataclass
class OptimizationStats:
    """Statistics from a polyline optimization run."""

    input_polylines: int = 0
    input_points: int = 0
    dropped_polylines: int = 0
    passthrough_polylines: int = 0
    output_polylines: int = 0
    output_points: int = 0
    start_time: float | None = None
    end_time: float | None = None

    @property
    def duration_seconds(self) -> float:
        """Calculate processing duration."""
        if self.start_time and self.end_time:
            return self.end_time - self.start_time
        return 0.0

    @property
    def point_reduction_percent(self) -> float:
        """Share of input points removed by the optimization."""
        if self.input_points == 0:
            return 0.0
        return 100.0 * (self.input_points - self.output_points) / self.input_points


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "INFO",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure dual-output structured logging.

    Args:
        log_file: Path to log file (no file output if None)
        console_level: Logging level for console output (stderr)
        file_level: Logging level for file output
        quiet: If True, suppress console output

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    # Replace handlers from an earlier call instead of stacking them
    for handler in list(root_logger.handlers):
        if handler.get_name() in _HANDLER_NAMES:
            root_logger.removeHandler(handler)
            handler.close()

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        file_handler.set_name("svgeometry.file")
        root_logger.addHandler(file_handler)

    if not quiet:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(getattr(logging, console_level.upper()))
        console_handler.setFormatter(logging.Formatter("%(message)s"))
        console_handler.set_name("svgeometry.console")
        root_logger.addHandler(console_handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger("svgeometry")
    logger.info("Logging initialized", log_file=str(log_file) if log_file else None, level=file_level)

    return logger


class OptimizationLogger:
    """Logger for tracking optimization progress and statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger) -> None:
        self._logger = logger
        self._stats = OptimizationStats()

    def log_input(self, polylines: int, points: int) -> None:
        """Log the size of the input."""
        self._logger.info("Optimization input", polylines=polylines, points=points)
        self._stats.input_polylines += polylines
        self._stats.input_points += points

    def log_dropped(self, shape_id: str, reason: str) -> None:
        """Log a shape removed before merging."""
        self._logger.debug("Shape dropped", shape=shape_id, reason=reason)
        self._stats.dropped_polylines += 1

    def log_passthrough(self, count: int) -> None:
        """Log polylines that were not decomposed."""
        if count:
            self._logger.debug("Polylines passed through", count=count)
        self._stats.passthrough_polylines += count

    def log_output(self, polylines: int, points: int, duration_ms: float) -> None:
        """Log the merged result."""
        self._logger.info(
            "Optimization complete",
            polylines=polylines,
            points=points,
            duration_ms=round(duration_ms, 2),
        )
        self._stats.output_polylines += polylines
        self._stats.output_points += points

    @property
    def stats(self) -> OptimizationStats:
        """Get current optimization statistics."""
        return self._stats
