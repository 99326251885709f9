"""Application layer errors.

Exports:
    ApplicationError: Error value handed to the response layer
    ApplicationErrorStatus: Error kinds
    *_error: Per-kind constructors
    validate: Validation failure aggregation
"""

from useraccount.application.errors.application_error import (
    ApplicationError,
    ApplicationErrorStatus,
)
from useraccount.application.errors.constructors import (
    ERROR_DESCRIPTORS,
    ErrorDescriptor,
    bad_request_error,
    build_error,
    forbidden_error,
    get_error_descriptor,
    internal_server_error,
    not_found_error,
    too_many_request_error,
    unauthorized_error,
)
from useraccount.application.errors.validation import (
    from_validation_errors,
    validate,
)

__all__ = [
    "ApplicationError",
    "ApplicationErrorStatus",
    "ERROR_DESCRIPTORS",
    "ErrorDescriptor",
    "bad_request_error",
    "build_error",
    "forbidden_error",
    "from_validation_errors",
    "get_error_descriptor",
    "internal_server_error",
    "not_found_error",
    "too_many_request_error",
    "unauthorized_error",
    "validate",
]
