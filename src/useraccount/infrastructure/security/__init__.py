"""Security adapters (password hashing)."""

from useraccount.infrastructure.security.bcrypt_password_service import (
    BcryptPasswordService,
)

__all__ = ["BcryptPasswordService"]
