"""Container module - centralized dependency wiring.

Factory functions are the composition root: adapters are chosen here and
handed out as protocol-typed singletons.

Usage:
    from useraccount.core.container import get_logger, get_password_service

    logger = get_logger()
    password_service = get_password_service()
"""

from functools import lru_cache
from typing import TYPE_CHECKING

from useraccount.core.config import get_settings

if TYPE_CHECKING:
    from useraccount.domain.protocols.logger_protocol import LoggerProtocol
    from useraccount.domain.protocols.password_hashing_protocol import (
        PasswordHashingProtocol,
    )


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Return the application-scoped logger singleton.

    Development gets the human-readable console renderer; every other
    environment (or ``log_json``) gets JSON lines.

    Returns:
        LoggerProtocol: Logger instance implementing the protocol.
    """
    from useraccount.infrastructure.logging.console_adapter import ConsoleAdapter

    settings = get_settings()
    return ConsoleAdapter(use_json=settings.use_json_logs, level=settings.log_level)


@lru_cache()
def get_password_service() -> "PasswordHashingProtocol":
    """Get password hashing service singleton (app-scoped).

    Returns BcryptPasswordService with the configured cost factor.

    Returns:
        Password hashing service implementing PasswordHashingProtocol.
    """
    from useraccount.infrastructure.security import BcryptPasswordService

    return BcryptPasswordService(cost_factor=get_settings().bcrypt_rounds)
