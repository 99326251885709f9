"""Errors produced while checking stored credentials."""

from dataclasses import dataclass, field

from useraccount.core.enums import ErrorCode
from useraccount.core.errors.domain_error import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class EmptyHashError(DomainError):
    """The account has no usable credential.

    Returned by ``PasswordHash.verify`` when the stored hash is empty. Callers
    map it to an authentication failure; it is distinct from a wrong password,
    which verifies as ``Success(False)``.
    """

    code: ErrorCode = field(default=ErrorCode.PASSWORD_HASH_EMPTY)
    message: str = field(default="Hash is empty")
