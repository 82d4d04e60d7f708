"""LoggerProtocol definition for structured logging.

Implementations MUST emit structured logs: a snake_case event name plus
key-value context (never f-strings with data baked in).

Usage:
    from src.core.container import get_logger

    logger = get_logger()
    logger.info("rental_created", rental_id=str(rental.id))

    request_logger = logger.bind(trace_id=trace_id)
    request_logger.info("request_started")  # trace_id auto-included
"""

from __future__ import annotations

from typing import Any, Protocol


class LoggerProtocol(Protocol):
    """Protocol for structured logging adapters.

    Supports 5 standard log levels (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    and context binding for request-scoped logging.
    """

    def debug(self, message: str, /, **context: Any) -> None:
        ...

    def info(self, message: str, /, **context: Any) -> None:
        ...

    def warning(self, message: str, /, **context: Any) -> None:
        ...

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log an error-level message with optional exception details.

        Args:
            message: Event name.
            error: Optional exception; adapters add error_type and
                error_message fields.
            **context: Structured key-value context fields.
        """
        ...

    def critical(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        ...

    def bind(self, **context: Any) -> LoggerProtocol:
        """Return new logger with permanently bound context.

        The original logger instance remains unchanged.
        """
        ...

    def with_context(self, **context: Any) -> LoggerProtocol:
        """Alias for bind()."""
        ...
