"""Bcrypt password hashing service (adapter).

Implements PasswordHashingProtocol with bcrypt. Hashes are self-describing
(``$2b$<cost>$<salt><digest>``), so verification needs no extra state.

Cost factor is logarithmic: each +1 doubles computation time.
    - 10 = ~60ms
    - 12 = ~250ms (default)
    - 14 = ~1000ms
"""

import bcrypt


class BcryptPasswordService:
    """Bcrypt password hashing service.

    Usage:
        password_service = BcryptPasswordService(cost_factor=12)

        # Random salt
        password_hash = password_service.hash_password("MypassworD1234!")

        # Explicit salt setting (or an existing hash whose salt is reused)
        password_hash = password_service.hash_password("MypassworD1234!", salt=setting)

        is_valid = password_service.verify_password("MypassworD1234!", password_hash)
    """

    def __init__(self, cost_factor: int = 12) -> None:
        """Initialize bcrypt password service.

        Args:
            cost_factor: Bcrypt cost factor used for random salts (10-20).

        Raises:
            ValueError: If the cost factor is outside 10-20.
        """
        if cost_factor < 10:
            msg = "Cost factor must be at least 10 for security"
            raise ValueError(msg)
        if cost_factor > 20:
            msg = "Cost factor above 20 is impractically slow"
            raise ValueError(msg)

        self._cost_factor = cost_factor

    @property
    def cost_factor(self) -> int:
        return self._cost_factor

    def hash_password(self, password: str, salt: str | None = None) -> str:
        """Hash a plaintext password using bcrypt.

        Args:
            password: Plaintext password to hash.
            salt: bcrypt salt setting (``$2b$12$`` + 22 salt chars) or a full
                bcrypt hash whose salt should be reused. A fresh random salt
                at the configured cost is generated when None or empty.

        Returns:
            Hashed password string (bcrypt format, 60 characters).

        Raises:
            ValueError: If ``salt`` is malformed or bcrypt rejects the password.
        """
        if salt:
            salt_bytes = salt.encode("utf-8")
        else:
            salt_bytes = bcrypt.gensalt(rounds=self._cost_factor)

        password_hash = bcrypt.hashpw(password.encode("utf-8"), salt_bytes)
        return password_hash.decode("utf-8")

    def verify_password(self, password: str, password_hash: str) -> bool:
        """Verify a plaintext password against a bcrypt hash.

        Returns:
            True if password matches hash, False otherwise (including a
            malformed hash).

        Note:
            - Constant-time comparison (bcrypt.checkpw)
            - Safe to call with untrusted input
        """
        try:
            return bcrypt.checkpw(
                password.encode("utf-8"), password_hash.encode("utf-8")
            )
        except (ValueError, AttributeError):
            return False
