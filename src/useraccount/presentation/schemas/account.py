"""Account schemas.

``AccountResponse`` is the outward shape (no credential):

    {"_id": "<uuid>", "email": "...", "role": "admin|user",
     "status": "active|deleted", "created_at": <unix>, "updated_at": <unix>}

``AccountDocument`` additionally accepts the stored ``hash`` so a persisted
record can be turned back into an Account.
"""

from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator

from useraccount.domain.entities import Account, AccountRole, AccountStatus
from useraccount.domain.value_objects import Email, PasswordHash


class AccountResponse(BaseModel):
    """Account as exposed to clients."""

    model_config = ConfigDict(populate_by_name=True)

    id: UUID = Field(..., alias="_id")
    email: str
    role: AccountRole
    status: AccountStatus
    created_at: int = Field(..., ge=0, description="Unix seconds")
    updated_at: int = Field(..., ge=0, description="Unix seconds")

    @field_validator("role", mode="before")
    @classmethod
    def parse_role(cls, v: object) -> AccountRole:
        return v if isinstance(v, AccountRole) else AccountRole.from_str(str(v))

    @field_validator("status", mode="before")
    @classmethod
    def parse_status(cls, v: object) -> AccountStatus:
        return v if isinstance(v, AccountStatus) else AccountStatus.from_str(str(v))

    @classmethod
    def from_entity(cls, account: Account) -> "AccountResponse":
        return cls(
            id=account.id,
            email=account.email.value,
            role=account.role,
            status=account.status,
            created_at=account.created_at,
            updated_at=account.updated_at,
        )

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True)


class AccountDocument(AccountResponse):
    """Stored account record, including the password hash."""

    hash: str = ""

    @classmethod
    def from_json(cls, payload: str) -> "AccountDocument":
        return cls.model_validate_json(payload)

    def to_entity(self) -> Account:
        return Account(
            id=self.id,
            email=Email(self.email),
            hash=PasswordHash(self.hash),
            role=self.role,
            status=self.status,
            created_at=self.created_at,
            updated_at=self.updated_at,
        )
