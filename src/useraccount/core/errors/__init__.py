"""Core errors package.

Usage:
    from useraccount.core.errors import DomainError, EmptyHashError
"""

from useraccount.core.errors.credential_errors import EmptyHashError
from useraccount.core.errors.domain_error import DomainError

__all__ = [
    "DomainError",
    "EmptyHashError",
]
