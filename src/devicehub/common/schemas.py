"""Shared Pydantic schemas for DeviceHub."""

from typing import Optional

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    status: str = "healthy"
    database: str = "connected"
    timestamp: str
    uptime: float
    version: str = "0.1.0"
    service: str = "devicehub"


class HealthFailure(BaseModel):
    status: str = "unhealthy"
    database: str = "disconnected"
    error: str


class ErrorResponse(BaseModel):
    message: str
    request_id: Optional[str] = Field(default=None, serialization_alias="requestId")
    error: Optional[str] = None


class MessageResponse(BaseModel):
    message: str
