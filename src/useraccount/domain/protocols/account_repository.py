"""AccountRepository protocol for account persistence.

Port (interface) for hexagonal architecture. Persistence adapters live
outside this package and don't need to inherit from this class.
"""

from typing import Protocol

from useraccount.application.errors import ApplicationError
from useraccount.core.result import Result
from useraccount.domain.entities.account import Account
from useraccount.domain.entities.registration import Registration


class AccountRepository(Protocol):
    """Account repository protocol (port).

    Methods:
        register: Persist a new account from a validated registration
        get_by_id: Retrieve an account by its id
    """

    def register(self, registration: Registration) -> Result[Account, ApplicationError]:
        """Create an account for ``registration``.

        Args:
            registration: Registration whose email and password already validated.

        Returns:
            Success with the stored Account, or Failure with an
            ApplicationError (e.g. ``bad_request_error`` for a duplicate email).
        """
        ...

    def get_by_id(self, id: str) -> Result[Account | None, ApplicationError]:
        """Find an account by id.

        Returns:
            Success with the Account (None if absent), or Failure when the
            lookup itself failed.
        """
        ...
