"""Unit tests for the AccountRepository contract.

Exercises the protocol through an in-memory double and a mock, the way
callers of the repository use it:
- register: validate, hash, persist, or return an ApplicationError
- get_by_id: Success(None) for unknown ids, Failure on lookup errors
"""

from unittest.mock import Mock

import pytest

from useraccount.application.errors import (
    ApplicationError,
    ApplicationErrorStatus,
    bad_request_error,
    internal_server_error,
)
from useraccount.core.result import Failure, Result, Success
from useraccount.domain.entities import Account, Registration
from useraccount.domain.protocols import AccountRepository, PasswordHashingProtocol
from useraccount.domain.value_objects import Email, Password, PasswordHash


class InMemoryAccountRepository:
    """Dict-backed AccountRepository double."""

    def __init__(self, password_service: PasswordHashingProtocol) -> None:
        self._password_service = password_service
        self._accounts: dict[str, Account] = {}

    def register(self, registration: Registration) -> Result[Account, ApplicationError]:
        error = ApplicationError.validate(registration)
        if error is not None:
            return Failure(error=error)
        if any(a.email == registration.email for a in self._accounts.values()):
            return Failure(error=bad_request_error("Email is already registered"))

        match PasswordHash.create(registration.password, self._password_service):
            case Success(value=password_hash):
                account = Account.create(registration.email, password_hash)
                self._accounts[str(account.id)] = account
                return Success(value=account)
            case Failure(error=hash_error):
                return Failure(error=hash_error)

    def get_by_id(self, id: str) -> Result[Account | None, ApplicationError]:
        return Success(value=self._accounts.get(id))


def accepts_repository(repository: AccountRepository) -> AccountRepository:
    return repository


@pytest.fixture
def repository(password_service) -> InMemoryAccountRepository:
    return InMemoryAccountRepository(password_service)


@pytest.mark.unit
class TestAccountRepositoryContract:
    """Test register / get_by_id through the protocol."""

    def test_register_and_get_by_id(self, repository, password_service):
        repo = accepts_repository(repository)
        registration = Registration(
            email=Email("harun@digitalsekuriti.id"), password=Password("1234qweR!")
        )

        registered = repo.register(registration)

        assert isinstance(registered, Success)
        account = registered.value
        found = repo.get_by_id(str(account.id))
        assert found == Success(value=account)
        assert account.hash.verify(Password("1234qweR!"), password_service) == Success(
            value=True
        )

    def test_register_invalid_input_returns_validation_error(self, repository):
        registration = Registration(email=Email("harunasolole"), password=Password("weak"))

        result = repository.register(registration)

        assert isinstance(result, Failure)
        assert result.error.status == ApplicationErrorStatus.VALIDATION_ERROR
        assert set(result.error.fields) == {"email", "password"}

    def test_register_duplicate_email(self, repository):
        registration = Registration(
            email=Email("harun@digitalsekuriti.id"), password=Password("1234qweR!")
        )
        repository.register(registration)

        result = repository.register(registration)

        assert isinstance(result, Failure)
        assert result.error.code == 400
        assert result.error.error == "bad_request"

    def test_get_by_id_unknown_is_none(self, repository):
        assert repository.get_by_id("61279487-2eab-406c-9265-c6985dcbc3be") == Success(
            value=None
        )

    def test_mocked_repository_failure(self):
        """Test callers can substitute a mock for the protocol."""
        repo = Mock(spec=AccountRepository)
        repo.get_by_id.return_value = Failure(error=internal_server_error())

        result = accepts_repository(repo).get_by_id("any")

        assert isinstance(result, Failure)
        assert result.error.code == 500
        repo.get_by_id.assert_called_once_with("any")
