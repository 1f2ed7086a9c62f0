"""Input Validation: pure functions from untyped input to a tagged result.

Invariants:
    - Every function returns Valid(value) or Invalid(errors), never raises on bad input
    - Errors are ordered by schema field order, one FieldError per failing field
    - Messages distinguish "required" from "too long" / "invalid"
    - No IO, no logging, deterministic

Design Decisions:
    - Pydantic schemas do the checking; this module only translates pydantic's
      error types into the API's field messages
"""

from typing import Any

from pydantic import PositiveInt, TypeAdapter, ValidationError

from app.core.domain_types import FieldError, Invalid, Valid
from app.schemas.post import PostCreate
from app.schemas.user import UserCreate

_BODY_NOT_OBJECT = FieldError("body", "Request body must be a JSON object")
_INVALID_ID = FieldError("id", "Invalid id")

_ID_ADAPTER = TypeAdapter(PositiveInt)

# (field, pydantic error type) -> message; "*" matches any type for that field
_USER_MESSAGES: dict[tuple[str, str], str] = {
    ("name", "missing"): "Name is required",
    ("name", "string_too_short"): "Name is required",
    ("name", "string_too_long"): "Name too long",
    ("name", "string_type"): "Name must be a string",
    ("email", "missing"): "Email is required",
    ("email", "*"): "Invalid email address",
}

_POST_MESSAGES: dict[tuple[str, str], str] = {
    ("title", "missing"): "Title is required",
    ("title", "string_too_short"): "Title is required",
    ("title", "string_too_long"): "Title too long",
    ("title", "string_type"): "Title must be a string",
    ("content", "*"): "Content must be a string",
    ("authorId", "missing"): "Author id is required",
    ("authorId", "*"): "Author id must be a positive integer",
    ("published", "*"): "Published must be a boolean",
}


def validate_create_user(raw: Any) -> Valid[UserCreate] | Invalid:
    """Validate a create-user payload into UserCreate."""
    if not isinstance(raw, dict):
        return Invalid((_BODY_NOT_OBJECT,))
    try:
        return Valid(UserCreate.model_validate(raw))
    except ValidationError as e:
        return Invalid(_translate(e, _USER_MESSAGES))


def validate_create_post(raw: Any) -> Valid[PostCreate] | Invalid:
    """Validate a create-post payload into PostCreate."""
    if not isinstance(raw, dict):
        return Invalid((_BODY_NOT_OBJECT,))
    try:
        return Valid(PostCreate.model_validate(raw))
    except ValidationError as e:
        return Invalid(_translate(e, _POST_MESSAGES))


def validate_resource_id(raw: Any) -> Valid[int] | Invalid:
    """Coerce a path/query id to a positive integer."""
    if isinstance(raw, bool):
        return Invalid((_INVALID_ID,))
    if isinstance(raw, str):
        raw = raw.strip()
    try:
        return Valid(_ID_ADAPTER.validate_python(raw))
    except ValidationError:
        return Invalid((_INVALID_ID,))


def _translate(
    exc: ValidationError, messages: dict[tuple[str, str], str],
) -> tuple[FieldError, ...]:
    errors: list[FieldError] = []
    seen: set[str] = set()
    for err in exc.errors():
        field = str(err["loc"][0]) if err["loc"] else "body"
        if field in seen:
            continue
        seen.add(field)
        message = (
            messages.get((field, err["type"]))
            or messages.get((field, "*"))
            or err["msg"]
        )
        errors.append(FieldError(field, message))
    return tuple(errors)
