"""Password hashing protocol for domain layer.

Infrastructure provides the concrete implementation (BcryptPasswordService).
"""

from typing import Protocol


class PasswordHashingProtocol(Protocol):
    """Password hashing and verification interface.

    Usage:
        hashed = password_service.hash_password("MypassworD1234!")
        password_service.verify_password("MypassworD1234!", hashed)  # True
    """

    def hash_password(self, password: str, salt: str | None = None) -> str:
        """Hash a plaintext password.

        Args:
            password: Plaintext password to hash.
            salt: Optional salt setting; a random salt is used when None.

        Returns:
            Self-describing hash string embedding salt and parameters.

        Raises:
            ValueError: If the primitive rejects the salt or the password.
        """
        ...

    def verify_password(self, password: str, password_hash: str) -> bool:
        """Verify a plaintext password against a hash.

        Returns:
            True if password matches hash, False otherwise (no exceptions).
        """
        ...
