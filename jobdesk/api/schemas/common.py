"""
Common API schemas.
"""

from datetime import datetime
from typing import Annotated, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from jobdesk.application.services.identifier_resolver import MAX_SURROGATE_KEY

# Ids outside the INTEGER key range are rejected before they reach the store
RecordId = Annotated[int, Field(ge=1, le=MAX_SURROGATE_KEY)]


class CamelModel(BaseModel):
    """Base schema: snake_case attributes, camelCase on the wire."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class ErrorResponse(BaseModel):
    """Error response schema."""

    error: str


class MessageResponse(CamelModel):
    """Plain acknowledgement."""

    message: str


class PageMeta(CamelModel):
    """Pagination metadata."""

    current_page: int
    page_size: int
    total_pages: int


class TimestampMixin(CamelModel):
    """Mixin for timestamp fields."""

    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
