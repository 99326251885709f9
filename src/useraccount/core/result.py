"""Result types for railway-oriented programming.

Fallible operations in this package return a value instead of raising, so
callers decide how to surface a failure (HTTP status, log, retry).

Usage:
    result = PasswordHash.derive(key, password)
    match result:
        case Success(value=password_hash):
            store(password_hash)
        case Failure(error=error):
            respond(error.code, error.to_dict())
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Successful outcome.

    Attributes:
        value: The produced value.
    """

    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Failed outcome.

    Attributes:
        error: Error value describing the failure.
    """

    error: E


type Result[T, E] = Success[T] | Failure[E]
