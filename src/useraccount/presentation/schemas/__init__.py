"""Wire schemas."""

from useraccount.presentation.schemas.account import AccountDocument, AccountResponse
from useraccount.presentation.schemas.error import ErrorResponse

__all__ = [
    "AccountDocument",
    "AccountResponse",
    "ErrorResponse",
]
