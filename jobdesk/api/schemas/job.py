"""
Job API schemas.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import Field

from .common import CamelModel, PageMeta, RecordId, TimestampMixin
from .customer import CustomerSummary
from .question import JobQuestionResponse


class JobCreateRequest(CamelModel):
    """Job creation request schema."""

    name: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = None
    deadline: Optional[datetime] = None
    customer_id: RecordId


class JobUpdateRequest(CamelModel):
    """Job update request schema. Omitted fields are left unchanged."""

    name: Optional[str] = Field(None, min_length=1, max_length=255)
    description: Optional[str] = None
    deadline: Optional[datetime] = None
    customer_id: Optional[RecordId] = None


class JobResponse(TimestampMixin):
    """Job response schema."""

    id: int
    uuid: str
    name: str
    description: Optional[str] = None
    deadline: Optional[datetime] = None
    customer_id: int
    customer: Optional[CustomerSummary] = None
    questions: Optional[List[JobQuestionResponse]] = None


class JobCreateResponse(JobResponse):
    """Job creation response, with the size of the question snapshot."""

    bound_questions: int


class JobPageMeta(PageMeta):
    """Job list pagination metadata."""

    total_jobs: int


class JobListResponse(CamelModel):
    """Paginated job list."""

    data: List[JobResponse]
    meta: JobPageMeta
