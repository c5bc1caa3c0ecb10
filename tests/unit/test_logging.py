"""Unit tests for logging utilities."""

import logging
from unittest.mock import Mock

import pytest

from svgeometry.utils import OptimizationLogger, OptimizationStats, configure_logging


def _named_handlers(name):
    return [h for h in logging.getLogger().handlers if h.get_name() == name]


@pytest.fixture
def restore_logging():
    yield
    # Drops the handlers added by the test
    configure_logging(quiet=True)


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_writes_log_file(self, tmp_path, restore_logging):  # noqa: ARG002
        log_file = tmp_path / "run.log"
        logger = configure_logging(log_file=log_file, quiet=True)
        logger.debug("Something happened", answer=42)

        content = log_file.read_text(encoding="utf-8")
        assert "Logging initialized" in content
        assert "Something happened" in content
        assert '"answer": 42' in content

    def test_no_file_without_path(self, tmp_path, restore_logging):  # noqa: ARG002
        configure_logging(quiet=True)
        assert _named_handlers("svgeometry.file") == []
        assert list(tmp_path.iterdir()) == []

    def test_quiet_has_no_console_handler(self, restore_logging):  # noqa: ARG002
        configure_logging(quiet=True)
        assert _named_handlers("svgeometry.console") == []

    def test_repeated_calls_replace_handlers(self, tmp_path, restore_logging):  # noqa: ARG002
        """Test configuring twice does not duplicate output."""
        configure_logging(log_file=tmp_path / "a.log", console_level="ERROR")
        configure_logging(log_file=tmp_path / "b.log", console_level="ERROR")

        assert len(_named_handlers("svgeometry.console")) == 1
        file_handlers = _named_handlers("svgeometry.file")
        assert len(file_handlers) == 1
        assert file_handlers[0].baseFilename == str(tmp_path / "b.log")

    def test_console_level(self, restore_logging):  # noqa: ARG002
        configure_logging(console_level="warning")
        (handler,) = _named_handlers("svgeometry.console")
        assert handler.level == logging.WARNING


class TestOptimizationStats:
    """Tests for OptimizationStats."""

    def test_duration(self):
        stats = OptimizationStats(start_time=10.0, end_time=12.5)
        assert stats.duration_seconds == 2.5

    def test_duration_unset(self):
        assert OptimizationStats().duration_seconds == 0.0

    def test_point_reduction(self):
        stats = OptimizationStats(input_points=200, output_points=50)
        assert stats.point_reduction_percent == 75.0

    def test_point_reduction_empty(self):
        assert OptimizationStats().point_reduction_percent == 0.0


class TestOptimizationLogger:
    """Tests for OptimizationLogger."""

    def test_accumulates_stats(self):
        optimization_logger = OptimizationLogger(Mock())
        optimization_logger.log_input(polylines=3, points=120)
        optimization_logger.log_dropped("S1", "too short")
        optimization_logger.log_passthrough(1)
        optimization_logger.log_output(polylines=4, points=60, duration_ms=12.345)

        stats = optimization_logger.stats
        assert stats.input_polylines == 3
        assert stats.input_points == 120
        assert stats.dropped_polylines == 1
        assert stats.passthrough_polylines == 1
        assert stats.output_polylines == 4
        assert stats.output_points == 60
        assert stats.point_reduction_percent == 50.0

    def test_log_calls(self):
        logger = Mock()
        optimization_logger = OptimizationLogger(logger)
        optimization_logger.log_passthrough(0)
        logger.debug.assert_not_called()

        optimization_logger.log_output(polylines=1, points=2, duration_ms=3.14159)
        logger.info.assert_called_once_with(
            "Optimization complete", polylines=1, points=2, duration_ms=3.14
        )
