"""Pydantic schemas for user endpoints."""

from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel, field_validator

from devicehub.common.validation import (
    STRICT_PAYLOAD,
    EmailAddress,
    NameStr,
    NonEmptyStr,
    UUIDStr,
    reject_null,
)

UserRole = Literal["admin", "parent", "child"]


class UserCreate(BaseModel):
    model_config = STRICT_PAYLOAD

    tenant_id: UUIDStr
    external_auth_id: NonEmptyStr
    email: EmailAddress
    name: Optional[NameStr] = None
    role: UserRole


class UserUpdate(BaseModel):
    model_config = STRICT_PAYLOAD

    name: Optional[NameStr] = None
    role: Optional[UserRole] = None

    @field_validator("role")
    @classmethod
    def role_not_null(cls, value):
        return reject_null(value)


class UserResponse(BaseModel):
    id: str
    tenant_id: str
    external_auth_id: str
    email: str
    name: Optional[str] = None
    role: str
    created_at: datetime
    updated_at: datetime
    deleted_at: Optional[datetime] = None

    model_config = {"from_attributes": True}
