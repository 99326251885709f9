"""PasswordHash value object.

One-way, salted hash of a Password. The stored string is self-describing
(algorithm, cost and salt are embedded), so verification needs nothing but
the hash itself. An empty hash means the account has no credential set.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from useraccount.application.errors import ApplicationError, internal_server_error
from useraccount.core.config import get_settings
from useraccount.core.container import get_logger, get_password_service
from useraccount.core.errors import EmptyHashError
from useraccount.core.result import Failure, Result, Success
from useraccount.domain.value_objects.password import Password

if TYPE_CHECKING:
    from useraccount.domain.protocols.password_hashing_protocol import (
        PasswordHashingProtocol,
    )


@dataclass(frozen=True)
class PasswordHash:
    """Hashed password.

    Attributes:
        hash: Opaque digest string; empty when no credential is stored.
    """

    hash: str = ""

    @classmethod
    def empty(cls) -> PasswordHash:
        return cls("")

    @property
    def is_empty(self) -> bool:
        return not self.hash

    @classmethod
    def derive(
        cls,
        key: str,
        password: Password,
        password_service: PasswordHashingProtocol | None = None,
    ) -> Result[PasswordHash, ApplicationError]:
        """Hash ``password``.

        Password strength is not checked here; call ``Password.validate``
        first.

        Args:
            key: Salt setting for the primitive (a bcrypt salt or an existing
                bcrypt hash). Empty generates a fresh random salt.
            password: Password to hash.
            password_service: Hashing adapter; defaults to the container's.

        Returns:
            Success with the hash, or Failure with ``internal_server_error()``
            when the primitive fails.
        """
        service = password_service or get_password_service()
        try:
            digest = service.hash_password(password.value, salt=key or None)
        except ValueError as e:
            get_logger().error("Password hashing failed", error=e)
            return Failure(error=internal_server_error())
        return Success(value=cls(digest))

    @classmethod
    def create(
        cls,
        password: Password,
        password_service: PasswordHashingProtocol | None = None,
    ) -> Result[PasswordHash, ApplicationError]:
        """Hash ``password`` with the configured ``password_hash_key``."""
        return cls.derive(get_settings().password_hash_key, password, password_service)

    def verify(
        self,
        password: Password,
        password_service: PasswordHashingProtocol | None = None,
    ) -> Result[bool, EmptyHashError]:
        """Check ``password`` against this hash.

        Returns:
            Failure(EmptyHashError) if no hash is stored, otherwise
            Success(True) on match and Success(False) on mismatch.
        """
        if self.is_empty:
            return Failure(error=EmptyHashError())
        service = password_service or get_password_service()
        return Success(value=service.verify_password(password.value, self.hash))

    def __str__(self) -> str:
        return self.hash

    def __repr__(self) -> str:
        return "PasswordHash('<empty>')" if self.is_empty else "PasswordHash('<set>')"
