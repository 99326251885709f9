"""Unit tests for wire schemas.

Tests cover:
- AccountResponse serialization (no hash, documented key order)
- AccountDocument deserialization back to an entity
- ErrorResponse built from ApplicationError
"""

import json
from uuid import UUID

import pytest
from pydantic import ValidationError

from useraccount.application.errors import forbidden_error, validate
from useraccount.domain.entities import Account, AccountRole, AccountStatus, Registration
from useraccount.domain.value_objects import Email, Password, PasswordHash
from useraccount.presentation.schemas import AccountDocument, AccountResponse, ErrorResponse

ACCOUNT_ID = "61279487-2eab-406c-9265-c6985dcbc3be"
NOW = 1669969469


def make_account() -> Account:
    return Account(
        id=UUID(ACCOUNT_ID),
        email=Email("harun@digitalsekuriti.id"),
        hash=PasswordHash("expected_hash"),
        role=AccountRole.from_str("admin"),
        status=AccountStatus.from_str("active"),
        created_at=NOW,
        updated_at=NOW,
    )


@pytest.mark.unit
class TestAccountSchemas:
    """Test account serialization."""

    def test_serialize(self):
        """Test outward JSON matches the documented shape exactly."""
        serialized = AccountResponse.from_entity(make_account()).to_json()

        expected = (
            '{"_id":"61279487-2eab-406c-9265-c6985dcbc3be",'
            '"email":"harun@digitalsekuriti.id","role":"admin","status":"active",'
            '"created_at":1669969469,"updated_at":1669969469}'
        )
        assert serialized == expected

    def test_serialize_never_includes_hash(self):
        serialized = AccountResponse.from_entity(make_account()).to_json()

        assert "hash" not in json.loads(serialized)
        assert "expected_hash" not in serialized

    def test_deserialize(self):
        payload = """{
            "_id": "61279487-2eab-406c-9265-c6985dcbc3be",
            "email": "harun@digitalsekuriti.id",
            "hash": "123456",
            "role": "admin",
            "status": "active",
            "created_at": 1669969469,
            "updated_at": 1669969469
        }"""

        account = AccountDocument.from_json(payload).to_entity()

        assert str(account.id) == ACCOUNT_ID
        assert str(account.email) == "harun@digitalsekuriti.id"
        assert str(account.hash) == "123456"
        assert account.role is AccountRole.ADMIN
        assert account.status is AccountStatus.ACTIVE
        assert account.created_at == NOW
        assert account.updated_at == NOW

    def test_deserialize_unknown_role_and_status(self):
        document = AccountDocument.model_validate(
            {
                "_id": ACCOUNT_ID,
                "email": "harun@digitalsekuriti.id",
                "role": "owner",
                "status": "archived",
                "created_at": NOW,
                "updated_at": NOW,
            }
        )

        assert document.role is AccountRole.USER
        assert document.status is AccountStatus.DELETED
        assert document.to_entity().hash.is_empty

    def test_deserialize_rejects_bad_id(self):
        with pytest.raises(ValidationError):
            AccountDocument.model_validate(
                {
                    "_id": "not-a-uuid",
                    "email": "harun@digitalsekuriti.id",
                    "role": "user",
                    "status": "active",
                    "created_at": NOW,
                    "updated_at": NOW,
                }
            )


@pytest.mark.unit
class TestErrorResponse:
    """Test error response body."""

    def test_non_validation_body(self):
        body = ErrorResponse.from_application_error(forbidden_error()).model_dump(
            exclude_none=True
        )

        assert body == {
            "error": "forbidden",
            "description": "Sorry, but you are not allowed to access this resource.",
        }

    def test_validation_body_matches_application_error(self):
        error = validate(
            Registration(email=Email("harunasolole"), password=Password("MypassworD1234!"))
        )

        body = ErrorResponse.from_application_error(error).model_dump(exclude_none=True)

        assert body == error.to_dict()
        assert list(body["fields"]) == ["email"]
