"""Tests for logging helpers and correlation IDs."""

import logging

from topic_engine.observability.correlation import (
    CorrelationIdFilter,
    clear_correlation_id,
    get_correlation_id,
    set_correlation_id,
)
from topic_engine.observability.log_utils import (
    log_exception_with_context,
    log_with_context,
    safe_log_value,
)
from topic_engine.observability.logger import configure_logging


class TestSafeLogValue:
    """Tests for safe value rendering."""

    def test_collections_summarized(self) -> None:
        """Lists and dicts are summarized, not dumped."""
        assert safe_log_value([1.0] * 1536) == "list(1536 items)"
        assert safe_log_value({"a": 1, "b": 2}) == "dict(2 keys)"

    def test_none(self) -> None:
        """None renders as text."""
        assert safe_log_value(None) == "None"

    def test_truncation(self) -> None:
        """Long strings are truncated."""
        result = safe_log_value("x" * 600, max_length=10)
        assert result.startswith("x" * 10)
        assert "truncated, 600 total" in result


class TestLogWithContext:
    """Tests for structured logging."""

    def test_context_in_message_and_record(self, caplog) -> None:
        """Context appears in text and as record attributes."""
        logger = logging.getLogger("test.context")

        with caplog.at_level(logging.INFO, logger="test.context"):
            log_with_context(logger, logging.INFO, "Clustered", cluster_count=3)

        record = caplog.records[-1]
        assert record.cluster_count == "3"
        assert "cluster_count=3" in record.getMessage()

    def test_exception_context(self, caplog) -> None:
        """Exceptions are logged with type and message."""
        logger = logging.getLogger("test.exception")

        with caplog.at_level(logging.ERROR, logger="test.exception"):
            try:
                raise ValueError("bad input")
            except ValueError as e:
                log_exception_with_context(logger, "Failed", e, stage="seed")

        record = caplog.records[-1]
        assert record.error_type == "ValueError"
        assert record.error_msg == "bad input"
        assert record.exc_info is not None


class TestCorrelationId:
    """Tests for correlation ID propagation."""

    def test_set_and_clear(self) -> None:
        """IDs can be set, read and cleared."""
        assert set_correlation_id("abc") == "abc"
        assert get_correlation_id() == "abc"

        clear_correlation_id()

        assert get_correlation_id() == ""

    def test_generated_when_missing(self) -> None:
        """A fresh ID is generated when none is given."""
        generated = set_correlation_id()
        try:
            assert len(generated) == 32
        finally:
            clear_correlation_id()

    def test_filter_attaches_id(self) -> None:
        """Log records receive the current ID or a dash."""
        record = logging.LogRecord("t", logging.INFO, __file__, 1, "msg", None, None)
        CorrelationIdFilter().filter(record)
        assert record.correlation_id == "-"

        set_correlation_id("req-1")
        try:
            CorrelationIdFilter().filter(record)
            assert record.correlation_id == "req-1"
        finally:
            clear_correlation_id()


class TestConfigureLogging:
    """Tests for root logger setup."""

    def test_single_handler_and_level(self) -> None:
        """Repeated configuration does not stack handlers."""
        root = logging.getLogger()
        saved_handlers = root.handlers[:]
        saved_level = root.level
        try:
            configure_logging("DEBUG")
            configure_logging("warning")

            assert len(root.handlers) == 1
            assert root.level == logging.WARNING
        finally:
            for handler in root.handlers[:]:
                root.removeHandler(handler)
            for handler in saved_handlers:
                root.addHandler(handler)
            root.setLevel(saved_level)
