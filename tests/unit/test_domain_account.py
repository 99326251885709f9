"""Unit tests for Account and Registration entities.

Tests cover:
- AccountRole / AccountStatus lenient parsing
- Account.create defaults and timestamps
- Registration.from_dict
"""

from uuid import UUID

import pytest
from freezegun import freeze_time

from useraccount.domain.entities import Account, AccountRole, AccountStatus, Registration
from useraccount.domain.value_objects import Email, PasswordHash


@pytest.mark.unit
class TestAccountEnums:
    """Test role and status parsing."""

    def test_role_from_str(self):
        assert AccountRole.from_str("admin") is AccountRole.ADMIN
        assert AccountRole.from_str("user") is AccountRole.USER

    def test_unknown_role_is_user(self):
        assert AccountRole.from_str("superuser") is AccountRole.USER

    def test_status_from_str(self):
        assert AccountStatus.from_str("active") is AccountStatus.ACTIVE
        assert AccountStatus.from_str("deleted") is AccountStatus.DELETED

    def test_unknown_status_is_deleted(self):
        assert AccountStatus.from_str("suspended") is AccountStatus.DELETED


@pytest.mark.unit
class TestAccountCreate:
    """Test Account.create."""

    @freeze_time("2022-12-02 08:24:29")
    def test_create_stamps_current_time(self):
        account = Account.create(
            Email("harun@digitalsekuriti.id"), PasswordHash("expected_hash")
        )

        assert account.created_at == 1669969469
        assert account.updated_at == 1669969469

    def test_create_defaults(self):
        account = Account.create(Email("harun@digitalsekuriti.id"), PasswordHash.empty())

        assert isinstance(account.id, UUID)
        assert account.role is AccountRole.USER
        assert account.status is AccountStatus.ACTIVE
        assert account.is_active is True

    def test_create_generates_distinct_ids(self):
        email = Email("harun@digitalsekuriti.id")

        first = Account.create(email, PasswordHash.empty())
        second = Account.create(email, PasswordHash.empty(), role=AccountRole.ADMIN)

        assert first.id != second.id
        assert second.role is AccountRole.ADMIN


@pytest.mark.unit
class TestRegistration:
    """Test Registration parsing."""

    def test_from_dict(self):
        registration = Registration.from_dict(
            {"email": "harun@digitalsekuriti.id", "password": "1234qweR!"}
        )

        assert str(registration.email) == "harun@digitalsekuriti.id"
        assert registration.password.value == "1234qweR!"

    def test_from_dict_missing_field_raises(self):
        with pytest.raises(KeyError):
            Registration.from_dict({"email": "harun@digitalsekuriti.id"})
