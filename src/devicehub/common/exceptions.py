"""DeviceHub exception hierarchy."""

from contextlib import contextmanager
from enum import Enum
from typing import Iterator


class DeviceHubError(Exception):
    """Base exception for all DeviceHub errors."""

    status_code = 500

    def __init__(self, message: str = "", code: str = "DEVICEHUB_ERROR"):
        self.message = message
        self.code = code
        super().__init__(message)


class ValidationError(DeviceHubError):
    """Raised when a payload violates its schema."""

    status_code = 400

    def __init__(self, message: str = "Invalid request payload"):
        super().__init__(message, code="VALIDATION_ERROR")


class NotFoundError(DeviceHubError):
    """Raised when no non-deleted row matches an id."""

    status_code = 404

    def __init__(self, message: str = "Resource not found"):
        super().__init__(message, code="NOT_FOUND")


class ConflictError(DeviceHubError):
    """Raised when the store reports a uniqueness violation."""

    status_code = 409

    def __init__(self, message: str = "Resource already exists"):
        super().__init__(message, code="CONFLICT")


class InternalError(DeviceHubError):
    """Generic server-side failure; details are logged, never returned."""

    def __init__(self, message: str = "Internal server error"):
        super().__init__(message, code="INTERNAL_ERROR")


class StoreErrorKind(str, Enum):
    """Store failures, independent of any particular driver's error codes."""

    UNIQUE_VIOLATION = "unique_violation"
    FOREIGN_KEY_VIOLATION = "foreign_key_violation"
    NOT_NULL_VIOLATION = "not_null_violation"
    CHECK_VIOLATION = "check_violation"
    INVALID_INPUT = "invalid_input"
    CONNECTION = "connection"
    TIMEOUT = "timeout"
    UNKNOWN = "unknown"


class StoreError(InternalError):
    """Raised by the persistence gateway when a statement fails."""

    def __init__(self, kind: StoreErrorKind, message: str = "Database error"):
        super().__init__(message)
        self.code = f"STORE_{kind.name}"
        self.kind = kind


@contextmanager
def unique_violation_as_conflict(message: str) -> Iterator[None]:
    """Re-raise a store uniqueness violation as a ConflictError."""
    try:
        yield
    except StoreError as exc:
        if exc.kind is StoreErrorKind.UNIQUE_VIOLATION:
            raise ConflictError(message) from exc
        raise
