"""User Schemas: pydantic models for the create payload and the public row.

Invariants:
    - UserCreate.name: 1-100 chars
    - UserCreate.email: syntactically valid bare address, stored exactly as sent
    - UserCreate ignores unknown keys, so a client-supplied id never reaches the store
    - UserResponse serializes camelCase keys and UTC ISO-8601 timestamps

Design Decisions:
    - Syntax check over EmailStr: no domain lowercasing, no "Name <addr>" form
"""

from datetime import datetime, timezone
from typing import Annotated

from email_validator import EmailNotValidError, validate_email
from pydantic import AfterValidator, BaseModel, ConfigDict, Field, field_serializer
from pydantic.alias_generators import to_camel

NAME_MAX_LENGTH = 100


def check_email_syntax(value: str) -> str:
    """Reject malformed addresses; return the input unchanged."""
    if "<" in value or ">" in value:
        raise ValueError("display names are not allowed")
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError as e:
        raise ValueError(str(e)) from e
    return value


EmailAddress = Annotated[str, AfterValidator(check_email_syntax)]


class UserCreate(BaseModel):
    """Create-user payload."""
    model_config = ConfigDict(extra="ignore")

    name: str = Field(min_length=1, max_length=NAME_MAX_LENGTH)
    email: EmailAddress


class UserResponse(BaseModel):
    """Public user row."""
    model_config = ConfigDict(
        from_attributes=True, alias_generator=to_camel, populate_by_name=True,
    )

    id: int
    name: str
    email: str
    created_at: datetime
    updated_at: datetime

    @field_serializer("created_at", "updated_at")
    def serialize_timestamp(self, value: datetime) -> str:
        return as_utc(value).isoformat()


def as_utc(value: datetime) -> datetime:
    """SQLite drops tzinfo on read; stored values are always UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)
