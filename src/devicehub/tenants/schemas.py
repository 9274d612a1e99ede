"""Pydantic schemas for tenant endpoints."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, field_validator

from devicehub.common.validation import STRICT_PAYLOAD, NameStr, reject_null


class TenantCreate(BaseModel):
    model_config = STRICT_PAYLOAD

    name: NameStr


class TenantUpdate(BaseModel):
    model_config = STRICT_PAYLOAD

    name: Optional[NameStr] = None

    @field_validator("name")
    @classmethod
    def name_not_null(cls, value):
        return reject_null(value)


class TenantResponse(BaseModel):
    id: str
    name: str
    created_at: datetime
    updated_at: datetime
    deleted_at: Optional[datetime] = None

    model_config = {"from_attributes": True}


class TenantSummary(TenantResponse):
    """Tenant plus the number of live users and devices it owns."""
    user_count: int = 0
    device_count: int = 0
