"""
Exception hierarchy for the topic clustering engine.

Provides layered exception structure for domain-specific errors.
All exceptions include context for observability and debugging.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the application
"""

from typing import Any

TOPIC_CLUSTERING_FAILED = "Could not organize your materials by topic"


class TopicEngineException(Exception):
    """Base exception for all topic engine errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize base exception with message and optional context.

        Args:
            message: Human-readable error message
            details: Optional dictionary of additional context for debugging

        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation including details."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class ValidationError(TopicEngineException):
    """Raised when clustering parameters fail validation."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize validation error.

        Args:
            message: Error message
            field: Field name that failed validation
            details: Additional context
        """
        details = details or {}
        if field:
            details["field"] = field
        super().__init__(message, details)


class ClusteringError(TopicEngineException):
    """Raised when the clustering run itself fails unexpectedly."""

    pass


class TopicClusteringError(TopicEngineException):
    """Raised on the caller side when a clustering task does not succeed."""

    def __init__(
        self,
        reason: str,
        task_id: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize topic clustering error.

        The message is the user-facing failure text; the underlying reason
        is kept in ``details`` for logs.

        Args:
            reason: Underlying failure (worker error text, timeout, ...)
            task_id: Celery task ID of the failed request
            details: Additional context
        """
        details = details or {}
        details["reason"] = reason
        if task_id:
            details["task_id"] = task_id
        self.reason = reason
        super().__init__(TOPIC_CLUSTERING_FAILED, details)
