"""
Worker assignment and worker API schemas.
"""

from datetime import date
from typing import List, Optional, Union

from pydantic import Field

from .common import CamelModel, PageMeta, RecordId, TimestampMixin

MAX_HEADCOUNT = 10_000


class WorkerFields(CamelModel):
    """Worker contact fields."""

    name: Optional[str] = Field(None, min_length=1, max_length=255)
    email: Optional[str] = Field(None, max_length=255)
    phone: Optional[str] = Field(None, max_length=50)
    background_check_date: Optional[date] = None


class WorkerCreateRequest(WorkerFields):
    """Worker creation request schema."""

    name: str = Field(..., min_length=1, max_length=255)
    worker_assignment_id: RecordId


class WorkerUpdateRequest(WorkerFields):
    """Worker update request schema."""


class AssignmentWorkerUpdate(WorkerFields):
    """An existing worker edited through its assignment."""

    id: RecordId


class WorkerResponse(TimestampMixin):
    """Worker response schema."""

    id: int
    worker_assignment_id: int
    name: str
    email: Optional[str] = None
    phone: Optional[str] = None
    background_check_date: Optional[date] = None


class WorkerAssignmentCreateRequest(CamelModel):
    """Worker assignment creation request schema."""

    position: str = Field(..., min_length=1, max_length=255)
    number_of_workers: int = Field(..., ge=1, le=MAX_HEADCOUNT)
    job_id: Union[RecordId, str] = Field(..., description="Job id or UUID")


class WorkerAssignmentUpdateRequest(CamelModel):
    """Worker assignment update request schema."""

    position: Optional[str] = Field(None, min_length=1, max_length=255)
    number_of_workers: Optional[int] = Field(None, ge=1, le=MAX_HEADCOUNT)
    workers: Optional[List[AssignmentWorkerUpdate]] = None


class WorkerAssignmentResponse(TimestampMixin):
    """Worker assignment response schema."""

    id: int
    job_id: int
    position: str
    number_of_workers: int
    workers: List[WorkerResponse] = []


class WorkerAssignmentPageMeta(PageMeta):
    """Assignment list pagination metadata."""

    total_assignments: int


class WorkerAssignmentListResponse(CamelModel):
    """Paginated assignments of one job."""

    data: List[WorkerAssignmentResponse]
    meta: WorkerAssignmentPageMeta
