"""Domain value objects with validation."""

from useraccount.domain.value_objects.email import Email
from useraccount.domain.value_objects.password import Password, is_strong_password
from useraccount.domain.value_objects.password_hash import PasswordHash

__all__ = [
    "Email",
    "Password",
    "PasswordHash",
    "is_strong_password",
]
