"""LoggerProtocol definition for structured logging.

Standardizes structured logging across the codebase while remaining
backend-agnostic. Every call is a constant message plus key-value context;
never interpolate values into the message.

Log levels as used here:
    - DEBUG: Per-token parsing decisions, registrations
    - INFO: Registry built, negotiation failures (client-correctable)
    - WARNING: Deprecated version served
    - ERROR: Unhandled exception at the HTTP boundary
    - CRITICAL: Registry configuration bug at startup

Usage:
    from src.core.container import get_logger

    logger = get_logger()
    logger.info("Version resolved", resource="greeting", version=2)

    request_logger = logger.bind(trace_id=trace_id)
    request_logger.warning("Deprecated version served", resource="greeting")
"""

from __future__ import annotations

from typing import Any, Protocol


class LoggerProtocol(Protocol):
    """Protocol for structured logging adapters."""

    def debug(self, message: str, /, **context: Any) -> None:
        """Log a debug-level message."""
        ...

    def info(self, message: str, /, **context: Any) -> None:
        """Log an info-level message."""
        ...

    def warning(self, message: str, /, **context: Any) -> None:
        """Log a warning-level message."""
        ...

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log an error-level message with optional exception details.

        Args:
            message: Constant human-readable message.
            error: Optional exception; adapters add error_type and
                error_message fields.
            **context: Structured key-value context fields.
        """
        ...

    def critical(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log a critical-level message (startup configuration failures)."""
        ...

    def bind(self, **context: Any) -> LoggerProtocol:
        """Return new logger with permanently bound context.

        The original logger is unchanged.

        Args:
            **context: Context to bind to all future logs.

        Returns:
            New logger instance with bound context.
        """
        ...

    def with_context(self, **context: Any) -> LoggerProtocol:
        """Alias for bind()."""
        ...
