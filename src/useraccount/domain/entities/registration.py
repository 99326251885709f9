"""Registration request entity."""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from useraccount.core.validation import ValidationErrors, collect_errors, nested
from useraccount.domain.value_objects import Email, Password


@dataclass(frozen=True)
class Registration:
    """Email and password submitted to open an account.

    Validation nests the email and password failure trees under their field
    names, so ``ApplicationError.validate(registration)`` reports both.
    """

    email: Email
    password: Password

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "Registration":
        """Build from a decoded request body.

        Raises:
            KeyError: If ``email`` or ``password`` is missing.
        """
        return cls(
            email=Email(str(payload["email"])),
            password=Password(str(payload["password"])),
        )

    def validation_errors(self) -> ValidationErrors:
        return collect_errors(
            ("email", nested(self.email.validation_errors())),
            ("password", nested(self.password.validation_errors())),
        )

    def validate(self) -> bool:
        return not self.validation_errors()
