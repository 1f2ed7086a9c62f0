"""Response Envelope: the fixed-shape wrapper every endpoint returns.

Invariants:
    - Shape is {success, data?, error?, message?}
    - success=True implies error is absent; success=False implies data is absent
    - Keys never set are omitted from the serialized JSON (exclude_unset)

Design Decisions:
    - Generic pydantic model: routes declare ApiResponse[UserResponse] for OpenAPI
    - ok()/fail() build plain dicts so handlers stay free of serialization details
"""

from typing import Any, Generic, TypeVar

from pydantic import BaseModel, model_validator

T = TypeVar("T")


class ApiResponse(BaseModel, Generic[T]):
    """Uniform JSON wrapper for all API responses."""
    success: bool
    data: T | None = None
    error: str | None = None
    message: str | None = None

    @model_validator(mode="after")
    def check_success_exclusivity(self):
        if self.success and self.error is not None:
            raise ValueError("successful envelope cannot carry an error")
        if not self.success and "data" in self.model_fields_set:
            raise ValueError("failed envelope cannot carry data")
        if not self.success and not self.error:
            raise ValueError("failed envelope requires an error message")
        return self


def _dump(data: Any) -> Any:
    if isinstance(data, BaseModel):
        return data.model_dump(mode="json", by_alias=True)
    if isinstance(data, (list, tuple)):
        return [_dump(item) for item in data]
    return data


def ok(data: Any = None, message: str | None = None) -> dict:
    """Build a success envelope. data may be a pydantic model or list of them."""
    fields: dict[str, Any] = {"success": True}
    if data is not None:
        fields["data"] = _dump(data)
    if message is not None:
        fields["message"] = message
    return ApiResponse[Any](**fields).model_dump(
        mode="json", by_alias=True, exclude_unset=True,
    )


def fail(error: str) -> dict:
    """Build an error envelope."""
    return ApiResponse[Any](success=False, error=error).model_dump(
        mode="json", exclude_unset=True,
    )
