"""Pydantic schemas for installed-app endpoints."""

from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel

from devicehub.common.validation import STRICT_PAYLOAD, NameStr, NonEmptyStr, ShortStr, UUIDStr


class AppCreate(BaseModel):
    model_config = STRICT_PAYLOAD

    tenant_id: UUIDStr
    device_id: UUIDStr
    app_package: NonEmptyStr
    app_name: Optional[NameStr] = None
    app_version: Optional[ShortStr] = None
    app_details: Optional[dict[str, Any]] = None


class AppUpdate(BaseModel):
    model_config = STRICT_PAYLOAD

    app_name: Optional[NameStr] = None
    app_version: Optional[ShortStr] = None
    app_details: Optional[dict[str, Any]] = None


class AppResponse(BaseModel):
    id: str
    tenant_id: str
    device_id: str
    app_package: str
    app_name: Optional[str] = None
    app_version: Optional[str] = None
    app_details: Optional[dict[str, Any]] = None
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
