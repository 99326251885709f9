"""Per-kind ApplicationError constructors.

Each non-validation status has a fixed ``(code, error, description)``
descriptor. Constructors accept three call shapes:

    internal_server_error()
    internal_server_error("We could not process your request")
    unauthorized_error("Your session has expired", "expired_token")

``fields`` is always None for these errors.
"""

from dataclasses import dataclass

from useraccount.application.errors.application_error import (
    ApplicationError,
    ApplicationErrorStatus,
)


@dataclass(frozen=True, slots=True, kw_only=True)
class ErrorDescriptor:
    """Defaults for one error kind.

    Attributes:
        status: Error kind described.
        code: HTTP-style status code.
        error: Default machine-readable tag.
        description: Default human-readable message.
    """

    status: ApplicationErrorStatus
    code: int
    error: str
    description: str


# =============================================================================
# Descriptor table
# =============================================================================

# NOT_FOUND_ERROR maps to 400, not 404.
ERROR_DESCRIPTORS: dict[ApplicationErrorStatus, ErrorDescriptor] = {
    ApplicationErrorStatus.INTERNAL_SERVER_ERROR: ErrorDescriptor(
        status=ApplicationErrorStatus.INTERNAL_SERVER_ERROR,
        code=500,
        error="internal_server_error",
        description=(
            "It's not you. We are experiencing technical difficulties. "
            "Please try again later."
        ),
    ),
    ApplicationErrorStatus.UNAUTHORIZED_ERROR: ErrorDescriptor(
        status=ApplicationErrorStatus.UNAUTHORIZED_ERROR,
        code=401,
        error="unauthorized",
        description="Sorry, but you need to authenticate to access this resource.",
    ),
    ApplicationErrorStatus.FORBIDDEN_ERROR: ErrorDescriptor(
        status=ApplicationErrorStatus.FORBIDDEN_ERROR,
        code=403,
        error="forbidden",
        description="Sorry, but you are not allowed to access this resource.",
    ),
    ApplicationErrorStatus.BAD_REQUEST_ERROR: ErrorDescriptor(
        status=ApplicationErrorStatus.BAD_REQUEST_ERROR,
        code=400,
        error="bad_request",
        description="Sorry, but your input is not like we are expected. Please try again.",
    ),
    ApplicationErrorStatus.NOT_FOUND_ERROR: ErrorDescriptor(
        status=ApplicationErrorStatus.NOT_FOUND_ERROR,
        code=400,
        error="not_found",
        description="Sorry, but we can't find resource you are looking for.",
    ),
    ApplicationErrorStatus.TOO_MANY_REQUEST_ERROR: ErrorDescriptor(
        status=ApplicationErrorStatus.TOO_MANY_REQUEST_ERROR,
        code=429,
        error="too_many_request",
        description=(
            "Sorry, it seems you are trying too many request. "
            "Please relax a little and try again later."
        ),
    ),
}


def get_error_descriptor(status: ApplicationErrorStatus) -> ErrorDescriptor | None:
    """Get the descriptor for ``status`` (None for ``VALIDATION_ERROR``)."""
    return ERROR_DESCRIPTORS.get(status)


def build_error(
    status: ApplicationErrorStatus,
    description: str | None = None,
    error: str | None = None,
) -> ApplicationError:
    """Build a non-validation error from its descriptor.

    Args:
        status: Error kind; must not be ``VALIDATION_ERROR``.
        description: Replaces the default description when given.
        error: Replaces the default tag when given.

    Raises:
        ValueError: If ``status`` has no descriptor.
    """
    descriptor = get_error_descriptor(status)
    if descriptor is None:
        raise ValueError(f"No error descriptor for {status.name}")
    return ApplicationError(
        status=descriptor.status,
        code=descriptor.code,
        error=descriptor.error if error is None else error,
        description=descriptor.description if description is None else description,
    )


def internal_server_error(
    description: str | None = None, error: str | None = None
) -> ApplicationError:
    return build_error(ApplicationErrorStatus.INTERNAL_SERVER_ERROR, description, error)


def unauthorized_error(
    description: str | None = None, error: str | None = None
) -> ApplicationError:
    return build_error(ApplicationErrorStatus.UNAUTHORIZED_ERROR, description, error)


def forbidden_error(
    description: str | None = None, error: str | None = None
) -> ApplicationError:
    return build_error(ApplicationErrorStatus.FORBIDDEN_ERROR, description, error)


def bad_request_error(
    description: str | None = None, error: str | None = None
) -> ApplicationError:
    return build_error(ApplicationErrorStatus.BAD_REQUEST_ERROR, description, error)


def not_found_error(
    description: str | None = None, error: str | None = None
) -> ApplicationError:
    return build_error(ApplicationErrorStatus.NOT_FOUND_ERROR, description, error)


def too_many_request_error(
    description: str | None = None, error: str | None = None
) -> ApplicationError:
    return build_error(ApplicationErrorStatus.TOO_MANY_REQUEST_ERROR, description, error)
