"""Domain entities."""

from useraccount.domain.entities.account import Account, AccountRole, AccountStatus
from useraccount.domain.entities.registration import Registration

__all__ = [
    "Account",
    "AccountRole",
    "AccountStatus",
    "Registration",
]
