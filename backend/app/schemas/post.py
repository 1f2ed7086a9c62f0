"""Post Schemas: create payload and public row for the posts resource."""

from datetime import datetime

from pydantic import (
    BaseModel, ConfigDict, Field, PositiveInt, StrictBool, field_serializer,
)
from pydantic.alias_generators import to_camel

from app.schemas.user import as_utc

TITLE_MAX_LENGTH = 200


class PostCreate(BaseModel):
    """Create-post payload. Accepts authorId (wire) or author_id."""
    model_config = ConfigDict(
        extra="ignore", alias_generator=to_camel, populate_by_name=True,
    )

    title: str = Field(min_length=1, max_length=TITLE_MAX_LENGTH)
    content: str | None = None
    author_id: PositiveInt
    published: StrictBool = False


class PostResponse(BaseModel):
    """Public post row."""
    model_config = ConfigDict(
        from_attributes=True, alias_generator=to_camel, populate_by_name=True,
    )

    id: int
    title: str
    content: str | None
    author_id: int
    published: bool
    created_at: datetime
    updated_at: datetime

    @field_serializer("created_at", "updated_at")
    def serialize_timestamp(self, value: datetime) -> str:
        return as_utc(value).isoformat()
