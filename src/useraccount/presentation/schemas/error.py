"""Error response body schema.

Wire shape of ApplicationError:

    {"error": "<tag>", "description": "<text>"}
    {"error": "invalid_input", "description": "Please check your input",
     "fields": {"<field>": ["<rendered failure>", ...]}}

``status`` and ``code`` never appear in the body; the transport maps
``code`` to its own status line.
"""

from pydantic import BaseModel, Field

from useraccount.application.errors import ApplicationError


class ErrorResponse(BaseModel):
    """Error response body.

    Examples:
        >>> body = ErrorResponse.from_application_error(forbidden_error())
        >>> body.model_dump(exclude_none=True)
        {'error': 'forbidden', 'description': 'Sorry, but you are not allowed ...'}
    """

    error: str = Field(..., description="Short machine-readable error tag")
    description: str = Field(..., description="Human-readable explanation")
    fields: dict[str, list[str]] | None = Field(
        None,
        description="Rendered validation failures per field (validation errors only)",
    )

    @classmethod
    def from_application_error(cls, error: ApplicationError) -> "ErrorResponse":
        return cls(
            error=error.error,
            description=error.description,
            fields=error.to_dict().get("fields"),
        )
