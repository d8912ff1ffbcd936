"""Job repository implementation."""

from typing import List, Optional

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from jobdesk.application.interfaces.repositories import JobRepositoryInterface
from jobdesk.config.logging import get_logger
from jobdesk.domain.exceptions.store_error import RecordNotFoundError
from jobdesk.infrastructure.database.models.job import JobModel, generate_job_uuid
from jobdesk.infrastructure.database.models.job_question import (
    JobQuestionAnswerModel,
    JobQuestionModel,
)
from jobdesk.infrastructure.database.models.worker import (
    WorkerAssignmentModel,
    WorkerModel,
)

logger = get_logger(__name__)

# Fields a client may change after creation; the UUID is not among them
UPDATABLE_FIELDS = ("name", "description", "deadline", "customer_id")


class JobRepository(JobRepositoryInterface):
    """Job repository implementation."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_by_id(self, job_id: int) -> Optional[JobModel]:
        """Get job by ID, with its customer loaded."""
        stmt = (
            select(JobModel)
            .options(selectinload(JobModel.customer))
            .where(JobModel.id == job_id)
            .execution_options(populate_existing=True)
        )
        result = await self.db.execute(stmt)
        return result.scalar_one_or_none()

    async def find_id_by_id(self, job_id: int) -> Optional[int]:
        """Return the key if a job with this surrogate key exists."""
        result = await self.db.execute(select(JobModel.id).where(JobModel.id == job_id))
        return result.scalar_one_or_none()

    async def find_id_by_uuid(self, job_uuid: str) -> Optional[int]:
        """Return the surrogate key of the job with this UUID."""
        result = await self.db.execute(
            select(JobModel.id).where(JobModel.uuid == job_uuid)
        )
        return result.scalar_one_or_none()

    async def get_page(self, offset: int = 0, limit: int = 10) -> List[JobModel]:
        """Get jobs newest first."""
        stmt = (
            select(JobModel)
            .options(selectinload(JobModel.customer))
            .order_by(JobModel.created_at.desc(), JobModel.id.desc())
            .offset(offset)
            .limit(limit)
        )
        result = await self.db.execute(stmt)
        return list(result.scalars().all())

    async def count(self) -> int:
        """Total number of jobs."""
        result = await self.db.execute(select(func.count()).select_from(JobModel))
        return result.scalar_one()

    async def create(self, values: dict) -> JobModel:
        """Create a new job; its UUID is generated here."""
        job = JobModel(
            uuid=generate_job_uuid(),
            **{field: values.get(field) for field in UPDATABLE_FIELDS},
        )
        self.db.add(job)
        # Use flush instead of commit to maintain transaction atomicity
        await self.db.flush()
        await self.db.refresh(job)
        return job

    async def update(self, job_id: int, values: dict) -> JobModel:
        """Update an existing job."""
        job = await self.db.get(JobModel, job_id)
        if not job:
            raise RecordNotFoundError("Job", job_id)

        for field in UPDATABLE_FIELDS:
            if field in values:
                setattr(job, field, values[field])

        await self.db.flush()
        await self.db.refresh(job)
        return job

    async def delete(self, job_id: int) -> None:
        """Delete a job together with its bindings, answers and assignments."""
        if await self.find_id_by_id(job_id) is None:
            raise RecordNotFoundError("Job", job_id)

        assignment_ids = select(WorkerAssignmentModel.id).where(
            WorkerAssignmentModel.job_id == job_id
        )
        statements = [
            delete(WorkerModel).where(
                WorkerModel.worker_assignment_id.in_(assignment_ids)
            ),
            delete(WorkerAssignmentModel).where(WorkerAssignmentModel.job_id == job_id),
            delete(JobQuestionAnswerModel).where(
                JobQuestionAnswerModel.job_id == job_id
            ),
            delete(JobQuestionModel).where(JobQuestionModel.job_id == job_id),
            delete(JobModel).where(JobModel.id == job_id),
        ]
        for stmt in statements:
            await self.db.execute(stmt.execution_options(synchronize_session=False))

        logger.debug("Job and dependent rows deleted", job_id=job_id)
