"""Email value object with validation.

Construction accepts any string; validity is checked on demand so that a
request payload can be parsed first and reported field by field later.
"""

from dataclasses import dataclass

from useraccount.core.validation import (
    ValidationErrors,
    check_email,
    collect_errors,
    field_failure,
)


@dataclass(frozen=True)
class Email:
    """Email value object.

    Uses email-validator (no deliverability check) for the shape check:
    a local part, an ``@``, and a domain containing a dot, no whitespace.

    Attributes:
        value: The email address string, kept exactly as given.

    Example:
        >>> Email("harun@digitalsekuriti.id").validate()
        True
        >>> Email("harunasolole").validate()
        False
    """

    value: str

    def validation_errors(self) -> ValidationErrors:
        return collect_errors(("value", field_failure(check_email(self.value))))

    def validate(self) -> bool:
        """Return True if the address is well formed."""
        return not self.validation_errors()

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f"Email('{self.value}')"
