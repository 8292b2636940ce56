"""
Observability module.

Provides structured logging helpers and correlation ID tracking.
"""

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
from topic_engine.observability.logger import configure_logging, get_logger

__all__ = [
    "configure_logging",
    "get_logger",
    "log_with_context",
    "log_exception_with_context",
    "safe_log_value",
    "set_correlation_id",
    "get_correlation_id",
    "clear_correlation_id",
    "CorrelationIdFilter",
]
