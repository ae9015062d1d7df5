"""Tests for correlation-aware logging."""

import logging

from rez.shared.logging import CorrelationLogger, get_logger


class TestCorrelationLogger:
    """Tests for CorrelationLogger."""

    def test_component_defaults_to_last_name_segment(self):
        """Test default component naming."""
        logger = get_logger("rez.text.escape")
        assert logger.component == "escape"
        assert logger.correlation_id is None

    def test_records_carry_correlation_fields(self, caplog):
        """Test that component and correlation ID are attached to records."""
        logger = CorrelationLogger("rez.test", correlation_id="req-42", component="unit")

        with caplog.at_level(logging.INFO, logger="rez.test"):
            logger.info("hello", extra={"size": 3})

        record = caplog.records[-1]
        assert record.getMessage() == "hello"
        assert record.component == "unit"
        assert record.correlation_id == "req-42"
        assert record.size == 3

    def test_debug_enabled_follows_level(self, caplog):
        """Test the debug level check."""
        logger = get_logger("rez.test.level")

        with caplog.at_level(logging.DEBUG, logger="rez.test.level"):
            assert logger.is_debug_enabled()
        with caplog.at_level(logging.WARNING, logger="rez.test.level"):
            assert not logger.is_debug_enabled()

    def test_warning_and_error_levels(self, caplog):
        """Test that warning and error keep their levels and correlation fields."""
        logger = get_logger("rez.test.levels", correlation_id="req-7")

        with caplog.at_level(logging.WARNING, logger="rez.test.levels"):
            logger.warning("careful")
            logger.error("failed", extra={"source": "a.html"})

        warning, error = caplog.records[-2:]
        assert warning.levelno == logging.WARNING
        assert error.levelno == logging.ERROR
        assert error.correlation_id == "req-7"
        assert error.source == "a.html"
