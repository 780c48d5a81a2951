"""Unit tests for logging configuration."""

import pytest
import structlog

from semantic_guard.config.logger import build_processors, configure_logging, get_logger


@pytest.mark.unit
class TestLogger:
    """Test suite for structlog configuration."""

    def test_json_renderer(self):
        """Test json format ends the chain with the JSON renderer."""
        processors = build_processors("json")

        assert isinstance(processors[-1], structlog.processors.JSONRenderer)

    def test_console_renderer(self):
        """Test other formats end the chain with the console renderer."""
        processors = build_processors("console")

        assert isinstance(processors[-1], structlog.dev.ConsoleRenderer)

    def test_configure_is_idempotent(self):
        """Test repeated configuration keeps structlog configured."""
        configure_logging()
        configure_logging()

        assert structlog.is_configured()

    def test_get_logger_logs(self, caplog):
        """Test a bound logger emits events through stdlib logging."""
        caplog.set_level("INFO")
        log = get_logger("semantic_guard.tests")

        log.info("guard_event", source="prices.csv")

        assert "guard_event" in caplog.text
