"""Core enums package.

Usage:
    from useraccount.core.enums import ErrorCode, Environment
"""

from useraccount.core.enums.environment import Environment
from useraccount.core.enums.error_code import ErrorCode

__all__ = ["ErrorCode", "Environment"]
