"""Pydantic schemas for device endpoints."""

from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel, field_validator

from devicehub.common.validation import (
    STRICT_PAYLOAD,
    NameStr,
    NonEmptyStr,
    ShortStr,
    UUIDStr,
    reject_null,
)

DeviceType = Literal["android", "ios", "web"]
DeviceStatus = Literal["active", "inactive", "blocked"]


class DeviceCreate(BaseModel):
    model_config = STRICT_PAYLOAD

    tenant_id: UUIDStr
    device_uid: NonEmptyStr
    device_name: Optional[NameStr] = None
    device_type: DeviceType
    owner_user_id: Optional[UUIDStr] = None
    child_id: Optional[UUIDStr] = None
    os: Optional[ShortStr] = None
    os_version: Optional[ShortStr] = None
    status: DeviceStatus = "active"


class DeviceUpdate(BaseModel):
    model_config = STRICT_PAYLOAD

    device_name: Optional[NameStr] = None
    device_type: Optional[DeviceType] = None
    owner_user_id: Optional[UUIDStr] = None
    child_id: Optional[UUIDStr] = None
    os: Optional[ShortStr] = None
    os_version: Optional[ShortStr] = None
    status: Optional[DeviceStatus] = None

    @field_validator("device_type", "status")
    @classmethod
    def required_not_null(cls, value):
        return reject_null(value)


class DeviceResponse(BaseModel):
    id: str
    tenant_id: str
    device_uid: str
    device_name: Optional[str] = None
    device_type: str
    owner_user_id: Optional[str] = None
    child_id: Optional[str] = None
    os: Optional[str] = None
    os_version: Optional[str] = None
    status: str
    created_at: datetime
    updated_at: datetime
    deleted_at: Optional[datetime] = None

    model_config = {"from_attributes": True}
