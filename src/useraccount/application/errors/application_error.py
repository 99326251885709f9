"""Application layer error types.

``ApplicationError`` is the single error shape handed to the response layer.
It covers operational failures (401/403/429/500, ...) and field-level
validation failures, and knows its own wire representation.

Exports:
    ApplicationErrorStatus: Closed set of error kinds
    ApplicationError: Immutable error value
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from useraccount.core.validation import Validatable


class ApplicationErrorStatus(Enum):
    """Error kinds known to the response layer.

    Never serialized; callers map ``ApplicationError.code`` to a transport
    status separately.
    """

    INTERNAL_SERVER_ERROR = "internal_server_error"
    UNAUTHORIZED_ERROR = "unauthorized_error"
    FORBIDDEN_ERROR = "forbidden_error"
    BAD_REQUEST_ERROR = "bad_request_error"
    NOT_FOUND_ERROR = "not_found_error"
    TOO_MANY_REQUEST_ERROR = "too_many_request_error"
    VALIDATION_ERROR = "validation_error"


@dataclass(frozen=True, slots=True, kw_only=True)
class ApplicationError:
    """Application layer error.

    Attributes:
        status: Error kind (not serialized).
        code: HTTP-style status code, 0-65535 (not serialized).
        error: Short machine-readable tag.
        description: Human-readable message.
        fields: Rendered failures per field name. Present iff ``status`` is
            ``VALIDATION_ERROR``. Stored as a read-only mapping of tuples.

    Examples:
        >>> error = unauthorized_error("Your session has expired", "expired_token")
        >>> error.to_dict()
        {'error': 'expired_token', 'description': 'Your session has expired'}
    """

    status: ApplicationErrorStatus
    code: int
    error: str
    description: str
    fields: Mapping[str, tuple[str, ...]] | None = None

    def __post_init__(self) -> None:
        if not 0 <= self.code <= 0xFFFF:
            raise ValueError(f"Error code out of range: {self.code}")
        if self.is_validation_error and self.fields is None:
            raise ValueError("Validation errors must carry fields")
        if not self.is_validation_error and self.fields is not None:
            raise ValueError(f"{self.status.name} cannot carry fields")
        if self.fields is not None:
            frozen = {name: tuple(messages) for name, messages in self.fields.items()}
            object.__setattr__(self, "fields", MappingProxyType(frozen))

    @property
    def is_validation_error(self) -> bool:
        return self.status is ApplicationErrorStatus.VALIDATION_ERROR

    def to_dict(self) -> dict[str, Any]:
        """Wire representation: ``error``, ``description`` and, if present, ``fields``."""
        body: dict[str, Any] = {"error": self.error, "description": self.description}
        if self.fields is not None:
            body["fields"] = {name: list(messages) for name, messages in self.fields.items()}
        return body

    def to_json(self) -> str:
        return json.dumps(self.to_dict())

    def __str__(self) -> str:
        return self.to_json()

    @classmethod
    def validate(cls, obj: Validatable) -> ApplicationError | None:
        """Validate ``obj`` and convert its failures into a validation error.

        Returns:
            None when ``obj`` is valid, otherwise a ``VALIDATION_ERROR``.
        """
        from useraccount.application.errors.validation import validate

        return validate(obj)
