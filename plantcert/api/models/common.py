"""Shared API model helpers."""

from datetime import datetime
from typing import Annotated

from pydantic import BaseModel, Field, PlainSerializer

# Custom datetime serializer for ISO 8601 with Z suffix (Pydantic v2)
DateTimeWithZ = Annotated[
    datetime,
    PlainSerializer(
        lambda v: v.isoformat().replace("+00:00", "Z") if v else None, return_type=str
    ),
]

OptionalDateTimeWithZ = Annotated[
    datetime | None,
    PlainSerializer(
        lambda v: v.isoformat().replace("+00:00", "Z") if v else None,
        return_type=str | None,
    ),
]


class ErrorResponse(BaseModel):
    """RFC 7807 error body (documentation model for OpenAPI)."""

    type: str = Field(..., description="Error type URI")
    title: str = Field(..., description="Short summary")
    status: int = Field(..., description="HTTP status code")
    detail: str = Field(..., description="Human-readable explanation")
    instance: str | None = Field(default=None, description="Request URL")
    error: str | None = Field(default=None, description="Domain error class name")
