"""Pytest configuration.

Forces the testing environment before any settings are cached and provides a
low-cost bcrypt service so hashing tests stay fast.
"""

import os

import pytest

os.environ.setdefault("USERACCOUNT_ENVIRONMENT", "testing")
os.environ.setdefault("USERACCOUNT_BCRYPT_ROUNDS", "10")

from useraccount.core.config import get_settings  # noqa: E402
from useraccount.core.container import get_logger, get_password_service  # noqa: E402
from useraccount.infrastructure.security import BcryptPasswordService  # noqa: E402

# bcrypt salt settings (cost 10) used where a deterministic key is needed
HASH_KEY = "$2b$10$abcdefghijklmnopqrstuu"
OTHER_HASH_KEY = "$2b$10$ABCDEFGHIJKLMNOPQRSTUu"


@pytest.fixture(autouse=True)
def _reset_container():
    """Drop cached singletons so env patches in one test don't leak."""
    get_settings.cache_clear()
    get_logger.cache_clear()
    get_password_service.cache_clear()
    yield
    get_settings.cache_clear()
    get_logger.cache_clear()
    get_password_service.cache_clear()


@pytest.fixture
def password_service() -> BcryptPasswordService:
    """bcrypt service at the minimum accepted cost factor."""
    return BcryptPasswordService(cost_factor=10)


@pytest.fixture
def hash_key() -> str:
    return HASH_KEY


@pytest.fixture
def other_hash_key() -> str:
    return OTHER_HASH_KEY
