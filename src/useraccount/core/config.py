"""
Configuration management using Pydantic Settings.

Type-safe configuration loaded from environment variables prefixed with
``USERACCOUNT_`` (and an optional ``.env`` file).

Usage:
    from useraccount.core.config import get_settings

    settings = get_settings()
    rounds = settings.bcrypt_rounds
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from useraccount.core.enums import Environment


class Settings(BaseSettings):
    """
    Application settings (flat structure).

    Configuration precedence:
        1. Environment variables (``USERACCOUNT_*``)
        2. ``.env`` file in the working directory
        3. Default values
    """

    model_config = SettingsConfigDict(
        env_prefix="USERACCOUNT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    environment: Environment = Field(
        default=Environment.DEVELOPMENT,
        description="Application environment (development, testing, ci, production)",
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )
    log_json: bool = Field(
        default=False,
        description="Force JSON log output regardless of environment",
    )
    bcrypt_rounds: int = Field(
        default=12,
        description="Number of bcrypt hashing rounds (10-14 recommended, 12 = ~250ms)",
    )
    password_hash_key: str = Field(
        default="",
        description="bcrypt salt setting used when deriving hashes; empty = random salt per hash",
    )

    @field_validator("bcrypt_rounds")
    @classmethod
    def validate_bcrypt_rounds(cls, v: int) -> int:
        """
        Validate bcrypt rounds are within the range the password service accepts.

        Raises:
            ValueError: If rounds are not between 10 and 20.
        """
        if not 10 <= v <= 20:
            raise ValueError("bcrypt_rounds must be between 10 and 20")
        return v

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {v}")
        return level

    @property
    def is_development(self) -> bool:
        return self.environment == Environment.DEVELOPMENT

    @property
    def is_production(self) -> bool:
        return self.environment == Environment.PRODUCTION

    @property
    def use_json_logs(self) -> bool:
        """
        Whether logs should be rendered as JSON.

        Returns:
            bool: True outside development or when ``log_json`` is set.
        """
        return self.log_json or not self.is_development


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Returns:
        Settings: Settings loaded once per process.
    """
    return Settings()
