"""Shared field types and error formatting for request payload schemas."""

from typing import Annotated, Any, Sequence

from email_validator import EmailNotValidError, validate_email
from pydantic import AfterValidator, ConfigDict, Field

UUID_PATTERN = r"^[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}$"


def _check_email(value: str) -> str:
    """Accept a bare address only, and keep it exactly as given."""
    if "<" in value or ">" in value:
        raise ValueError("value is not a valid email address")
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError as e:
        raise ValueError(f"value is not a valid email address: {e}") from e
    return value


def reject_null(value: Any) -> Any:
    if value is None:
        raise ValueError("must not be null")
    return value


# Upper bounds match the column widths in the table models.
UUIDStr = Annotated[str, Field(pattern=UUID_PATTERN)]
NonEmptyStr = Annotated[str, Field(min_length=1, max_length=255)]
ShortStr = Annotated[str, Field(min_length=1, max_length=100)]
NameStr = Annotated[str, Field(min_length=2, max_length=255)]
EmailAddress = Annotated[str, Field(max_length=255), AfterValidator(_check_email)]

# Schema config shared by every create/update payload: unknown keys are rejected.
STRICT_PAYLOAD = ConfigDict(extra="forbid")


def _field_name(loc: Sequence[Any]) -> str:
    parts = [str(p) for p in loc if p != "body"]
    return ".".join(parts) or "body"


def first_error_message(errors: Sequence[dict[str, Any]]) -> str:
    """Describe the first violated constraint as '<field>: <reason>'."""
    if not errors:
        return "Invalid request payload"
    error = errors[0]
    field = _field_name(error.get("loc", ()))
    if error.get("type") == "missing":
        return f"{field}: field is required"
    if error.get("type") == "extra_forbidden":
        return f"{field}: field is not allowed"
    return f"{field}: {error.get('msg', 'invalid value')}"
