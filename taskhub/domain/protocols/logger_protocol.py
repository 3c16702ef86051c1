"""LoggerProtocol: structured logging port.

Every log call is an event name plus key-value context. Event names are
snake_case (``task_status_changed``, ``authorization_denied``). Passwords and
tokens are never passed as context.

Usage:
    from taskhub.core.container import get_logger

    logger = get_logger()
    logger.info("task_created", task_id=task.id, created_by=principal.id)

    request_logger = logger.bind(trace_id=trace_id)
    request_logger.warning("dashboard_metric_failed", metric="total_tasks")
"""

from __future__ import annotations

from typing import Any, Protocol


class LoggerProtocol(Protocol):
    """Structured logger with five levels and context binding."""

    def debug(self, message: str, /, **context: Any) -> None:
        """Log a debug-level event."""
        ...

    def info(self, message: str, /, **context: Any) -> None:
        """Log an info-level event."""
        ...

    def warning(self, message: str, /, **context: Any) -> None:
        """Log a warning-level event (degraded but continuing)."""
        ...

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log an error-level event.

        Args:
            message: Event name.
            error: Optional exception; rendered as error_type/error_message.
            **context: Structured context fields.
        """
        ...

    def critical(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log a critical-level event (process-wide failure)."""
        ...

    def bind(self, **context: Any) -> LoggerProtocol:
        """Return a new logger that includes ``context`` in every event.

        The receiver is left unchanged.
        """
        ...

    def with_context(self, **context: Any) -> LoggerProtocol:
        """Alias for bind()."""
        ...
