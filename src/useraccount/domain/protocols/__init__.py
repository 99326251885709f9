"""Domain protocols (ports)."""

from useraccount.domain.protocols.account_repository import AccountRepository
from useraccount.domain.protocols.logger_protocol import LoggerProtocol
from useraccount.domain.protocols.password_hashing_protocol import (
    PasswordHashingProtocol,
)

__all__ = [
    "AccountRepository",
    "LoggerProtocol",
    "PasswordHashingProtocol",
]
