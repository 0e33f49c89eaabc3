"""Common Pydantic schemas and base classes."""

from datetime import datetime
from typing import Annotated, Optional

from beanie import PydanticObjectId
from pydantic import BaseModel, ConfigDict, Field, PlainSerializer

# ObjectIds go over the wire as plain hex strings
ObjectIdStr = Annotated[PydanticObjectId, PlainSerializer(str, return_type=str)]


class BaseSchema(BaseModel):
    """Base schema with common configuration."""

    model_config = ConfigDict(
        from_attributes=True,
        populate_by_name=True,
    )


class TimestampSchema(BaseSchema):
    """Schema with timestamp fields."""

    created_at: datetime
    updated_at: datetime


class PageParams(BaseModel):
    """
    Skip/limit pagination parameters.

    Both are optional; the service substitutes the configured defaults for
    missing or zero values.
    """

    page_size: Optional[int] = Field(default=None, ge=0)
    current_page: Optional[int] = Field(default=None, ge=0)


class ErrorDetail(BaseModel):
    code: str
    message: Optional[str] = None


class ErrorResponse(BaseModel):
    """Body returned for every HttpException."""

    error: ErrorDetail
