"""
Customer API schemas.
"""

from typing import Optional

from pydantic import Field

from .common import CamelModel, TimestampMixin


class CustomerRequest(CamelModel):
    """Customer create/update request schema."""

    name: str = Field(..., min_length=1, max_length=255)
    phone: Optional[str] = Field(None, max_length=50)
    email: Optional[str] = Field(None, max_length=255)
    address: Optional[str] = None
    contact_name: Optional[str] = Field(None, max_length=255)


class CustomerResponse(TimestampMixin):
    """Customer response schema."""

    id: int
    name: str
    phone: Optional[str] = None
    email: Optional[str] = None
    address: Optional[str] = None
    contact_name: Optional[str] = None


class CustomerSummary(CamelModel):
    """Customer as embedded in a job."""

    id: int
    name: str
