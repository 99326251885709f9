"""structlog-backed logger for this package.

JSON lines outside development, colored console output in development. Only
the calls the package makes are exposed: validation failures at debug level,
hashing failures at error level, and context binding.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog


def _processors(use_json: bool) -> list[Any]:
    renderer = (
        structlog.processors.JSONRenderer()
        if use_json
        else structlog.dev.ConsoleRenderer(colors=True)
    )
    return [
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        renderer,
    ]


class ConsoleAdapter:
    """Logger writing to stdout.

    Args:
        use_json: JSON renderer when True, console renderer otherwise.
        level: Minimum level name; lower levels are dropped before rendering.
    """

    def __init__(self, *, use_json: bool = False, level: str = "INFO") -> None:
        structlog.configure(
            processors=_processors(use_json),
            wrapper_class=structlog.make_filtering_bound_logger(
                logging.getLevelName(level.upper())
            ),
            context_class=dict,
            logger_factory=structlog.PrintLoggerFactory(file=sys.stdout),
            cache_logger_on_first_use=True,
        )
        self._logger = structlog.get_logger()

    @classmethod
    def _wrap(cls, logger: Any) -> ConsoleAdapter:
        adapter = cls.__new__(cls)
        adapter._logger = logger
        return adapter

    def debug(self, message: str, /, **context: Any) -> None:
        self._logger.debug(message, **context)

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log at error level, flattening ``error`` into type and message fields."""
        if error is not None:
            context.update(error_type=type(error).__name__, error_message=str(error))
        self._logger.error(message, **context)

    def bind(self, **context: Any) -> ConsoleAdapter:
        """Return an adapter whose records all carry ``context``."""
        return self._wrap(self._logger.bind(**context))
