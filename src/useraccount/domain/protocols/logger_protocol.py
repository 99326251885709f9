"""LoggerProtocol definition for structured logging.

Backend-agnostic structured logging: message plus key-value context.

Security:
    - NEVER log passwords or password hashes
    - Log field names, not field values, for validation failures

Usage:
    from useraccount.core.container import get_logger

    logger: LoggerProtocol = get_logger()
    logger.debug("Input validation failed", fields=["email"])
"""

from __future__ import annotations

from typing import Any, Protocol


class LoggerProtocol(Protocol):
    """Protocol for structured logging adapters."""

    def debug(self, message: str, /, **context: Any) -> None: ...

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log an error-level message with optional exception details.

        Args:
            message: Human-readable message (avoid f-strings; use context).
            error: Optional exception instance; implementation may include
                error_type and error_message fields.
            **context: Structured key-value context fields.
        """
        ...

    def bind(self, **context: Any) -> "LoggerProtocol":
        """Return new logger with permanently bound context.

        Original logger instance remains unchanged.
        """
        ...
