"""Account domain entity.

Pure business data, no framework dependencies. Wire formats live in
``useraccount.presentation.schemas``.
"""

from dataclasses import dataclass
from enum import Enum
from uuid import UUID

from uuid_extensions import uuid7

from useraccount.core.clock import now_unix_seconds
from useraccount.domain.value_objects import Email, PasswordHash


class AccountRole(str, Enum):
    """Account role."""

    ADMIN = "admin"
    USER = "user"

    @classmethod
    def from_str(cls, text: str) -> "AccountRole":
        """Parse a role; anything other than ``admin`` is a plain user."""
        return cls.ADMIN if text == cls.ADMIN.value else cls.USER


class AccountStatus(str, Enum):
    """Account lifecycle status."""

    ACTIVE = "active"
    DELETED = "deleted"

    @classmethod
    def from_str(cls, text: str) -> "AccountStatus":
        """Parse a status; anything other than ``active`` is deleted."""
        return cls.ACTIVE if text == cls.ACTIVE.value else cls.DELETED


@dataclass
class Account:
    """User account.

    Attributes:
        id: Unique account identifier (serialized as ``_id``).
        email: Login email.
        hash: Stored password hash; never serialized outward.
        role: Account role.
        status: Lifecycle status.
        created_at: Creation time, unix seconds.
        updated_at: Last update time, unix seconds.
    """

    id: UUID
    email: Email
    hash: PasswordHash
    role: AccountRole
    status: AccountStatus
    created_at: int
    updated_at: int

    @classmethod
    def create(
        cls,
        email: Email,
        hash: PasswordHash,
        role: AccountRole = AccountRole.USER,
    ) -> "Account":
        """Create a new active account stamped with the current time."""
        now = now_unix_seconds()
        return cls(
            id=uuid7(),
            email=email,
            hash=hash,
            role=role,
            status=AccountStatus.ACTIVE,
            created_at=now,
            updated_at=now,
        )

    @property
    def is_active(self) -> bool:
        return self.status == AccountStatus.ACTIVE
