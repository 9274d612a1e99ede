"""DeviceHub: multi-tenant registry for users, devices and installed apps."""

from devicehub.common.database import Database
from devicehub.common.exceptions import (
    ConflictError,
    DeviceHubError,
    NotFoundError,
    StoreError,
    StoreErrorKind,
    ValidationError,
)

__all__ = [
    "Database",
    "DeviceHubError",
    "ConflictError",
    "NotFoundError",
    "StoreError",
    "StoreErrorKind",
    "ValidationError",
]
__version__ = "0.1.0"
