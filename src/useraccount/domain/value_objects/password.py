"""Password value object with complexity validation.

Password Requirements:
    - Between 8 and 18 characters (inclusive)
    - At least one ASCII lowercase letter
    - At least one ASCII uppercase letter
    - At least one ASCII digit
    - At least one ASCII special (non-alphanumeric) character

Non-ASCII characters count toward the length but never satisfy a
character class.
"""

from dataclasses import dataclass

from useraccount.core.validation import (
    ValidationErrors,
    check_custom,
    check_length,
    collect_errors,
    field_failure,
)

MIN_LENGTH = 8
MAX_LENGTH = 18
STRENGTH_RULE = "password_strength"


def is_strong_password(value: str) -> bool:
    """Check the four ASCII character classes of a password.

    Args:
        value: Plaintext password.

    Returns:
        True if lowercase, uppercase, digit and special characters are all present.
    """
    has_lower = has_upper = has_digit = has_special = False

    for char in value:
        if not char.isascii():
            continue
        if char.isalpha():
            if char.islower():
                has_lower = True
            else:
                has_upper = True
        elif char.isdigit():
            has_digit = True
        else:
            has_special = True

    return has_lower and has_upper and has_digit and has_special


@dataclass(frozen=True)
class Password:
    """Password value object.

    Holds plaintext only until it is hashed; ``str()`` and ``repr()`` are
    masked so the value never reaches logs.

    Attributes:
        value: The plaintext password.

    Example:
        >>> Password("MypassworD1234!").validate()
        True
        >>> Password("MypassworD1234").validate()
        False
    """

    value: str

    def validation_errors(self) -> ValidationErrors:
        return collect_errors(
            (
                "value",
                field_failure(
                    check_length(
                        self.value,
                        min=MIN_LENGTH,
                        max=MAX_LENGTH,
                        include_value=False,
                    ),
                    check_custom(is_strong_password, self.value, STRENGTH_RULE),
                ),
            )
        )

    def validate(self) -> bool:
        """Return True if length and character-class rules both hold."""
        return not self.validation_errors()

    def __str__(self) -> str:
        """Return masked password for security."""
        return "*" * len(self.value)

    def __repr__(self) -> str:
        return f"Password('{'*' * len(self.value)}')"
