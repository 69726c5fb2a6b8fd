"""Tests for structlog configuration."""

from __future__ import annotations

import json
import logging
from collections.abc import Generator

import pytest
import structlog

from log_config import APP_LOGGERS, configure_logging
from row_coverage import coverage_length
from test_utils import example_sensors


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None, None, None]:
    """Restore root and application logger state after each test."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    app_levels = {name: logging.getLogger(name).level for name in APP_LOGGERS}
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    for name, level in app_levels.items():
        logging.getLogger(name).setLevel(level)


class TestConfigureLogging:
    def test_verbose_enables_debug(self) -> None:
        configure_logging(verbose=True, log_json=False)
        assert logging.getLogger("gaps").level == logging.DEBUG
        assert logging.getLogger().level == logging.WARNING

    def test_non_verbose_sets_warning(self) -> None:
        configure_logging(verbose=False, log_json=False)
        assert logging.getLogger("gaps").level == logging.WARNING

    def test_json_mode_output(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)
        log = structlog.get_logger("gaps")
        log.warning("json test", answer=42)
        captured = capfd.readouterr()
        parsed = json.loads(captured.err.strip())
        assert parsed["event"] == "json test"
        assert parsed["answer"] == 42
        assert parsed["level"] == "warning"
        assert parsed["logger"] == "gaps"
        assert "timestamp" in parsed

    def test_verbose_logs_row_coverage_details(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)
        sensors = example_sensors()
        capfd.readouterr()

        coverage_length(sensors, sensors.markers(), 10)

        lines = [json.loads(line) for line in capfd.readouterr().err.splitlines()]
        assert lines[-1]["event"] == "row coverage"
        assert lines[-1]["y"] == 10
        assert lines[-1]["logger"] == "row_coverage"

    def test_verbose_logs_sensor_set_extent(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)

        example_sensors()

        lines = [json.loads(line) for line in capfd.readouterr().err.splitlines()]
        built = [line for line in lines if line["event"] == "built sensor set"]
        assert len(built) == 1
        assert built[0]["sensors"] == 14
        assert built[0]["markers"] == 6
        assert built[0]["bounds"] == [-8, 28]

    def test_quiet_mode_suppresses_debug(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=False, log_json=True)
        sensors = example_sensors()
        coverage_length(sensors, sensors.markers(), 10)
        assert capfd.readouterr().err == ""

    def test_idempotent_calls(self) -> None:
        configure_logging(verbose=False)
        configure_logging(verbose=False)
        assert len(logging.getLogger().handlers) == 1
