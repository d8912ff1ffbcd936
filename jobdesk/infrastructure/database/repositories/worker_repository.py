"""
Worker assignment and worker repository implementations.
"""

from typing import List, Optional

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from jobdesk.domain.exceptions.store_error import RecordNotFoundError
from jobdesk.infrastructure.database.models.worker import (
    WorkerAssignmentModel,
    WorkerModel,
)

ASSIGNMENT_FIELDS = ("position", "number_of_workers")
WORKER_FIELDS = ("name", "email", "phone", "background_check_date")


class WorkerAssignmentRepository:
    """Worker assignment repository implementation."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_job(
        self, job_id: int, offset: int = 0, limit: int = 10
    ) -> List[WorkerAssignmentModel]:
        """Get a job's assignments with their workers."""
        result = await self.session.execute(
            select(WorkerAssignmentModel)
            .options(selectinload(WorkerAssignmentModel.workers))
            .where(WorkerAssignmentModel.job_id == job_id)
            .order_by(WorkerAssignmentModel.id)
            .offset(offset)
            .limit(limit)
        )
        return list(result.scalars().all())

    async def count_by_job(self, job_id: int) -> int:
        """Number of assignments for a job."""
        result = await self.session.execute(
            select(func.count())
            .select_from(WorkerAssignmentModel)
            .where(WorkerAssignmentModel.job_id == job_id)
        )
        return result.scalar_one()

    async def get_by_id(self, assignment_id: int) -> Optional[WorkerAssignmentModel]:
        """Get an assignment with its workers."""
        result = await self.session.execute(
            select(WorkerAssignmentModel)
            .options(selectinload(WorkerAssignmentModel.workers))
            .where(WorkerAssignmentModel.id == assignment_id)
            .execution_options(populate_existing=True)
        )
        return result.scalar_one_or_none()

    async def create(self, assignment: WorkerAssignmentModel) -> WorkerAssignmentModel:
        """Create a new assignment."""
        self.session.add(assignment)
        await self.session.flush()
        return await self.get_by_id(assignment.id)

    async def update(
        self,
        assignment_id: int,
        values: dict,
        workers: Optional[List[dict]] = None,
    ) -> WorkerAssignmentModel:
        """
        Update an assignment and, optionally, some of its existing workers.

        Each worker update must carry the id of a worker that belongs to this
        assignment.
        """
        assignment = await self.get_by_id(assignment_id)
        if not assignment:
            raise RecordNotFoundError("WorkerAssignment", assignment_id)

        for field in ASSIGNMENT_FIELDS:
            if field in values:
                setattr(assignment, field, values[field])

        existing = {worker.id: worker for worker in assignment.workers}
        for worker_values in workers or []:
            worker = existing.get(worker_values["id"])
            if worker is None:
                raise RecordNotFoundError("Worker", worker_values["id"])
            for field in WORKER_FIELDS:
                if field in worker_values:
                    setattr(worker, field, worker_values[field])

        await self.session.flush()
        return await self.get_by_id(assignment_id)

    async def delete(self, assignment_id: int) -> None:
        """Delete an assignment and its workers."""
        await self.session.execute(
            delete(WorkerModel)
            .where(WorkerModel.worker_assignment_id == assignment_id)
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(
            delete(WorkerAssignmentModel)
            .where(WorkerAssignmentModel.id == assignment_id)
            .execution_options(synchronize_session=False)
        )
        if result.rowcount == 0:
            raise RecordNotFoundError("WorkerAssignment", assignment_id)


class WorkerRepository:
    """Worker repository implementation."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_all(self, worker_assignment_id: Optional[int] = None) -> List[WorkerModel]:
        """Get workers, optionally only those of one assignment."""
        stmt = select(WorkerModel).order_by(WorkerModel.id)
        if worker_assignment_id is not None:
            stmt = stmt.where(WorkerModel.worker_assignment_id == worker_assignment_id)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def get_by_id(self, worker_id: int) -> Optional[WorkerModel]:
        """Get worker by ID."""
        return await self.session.get(WorkerModel, worker_id)

    async def create(self, worker: WorkerModel) -> WorkerModel:
        """Create a new worker."""
        self.session.add(worker)
        await self.session.flush()
        await self.session.refresh(worker)
        return worker

    async def update(self, worker_id: int, values: dict) -> WorkerModel:
        """Update an existing worker."""
        worker = await self.get_by_id(worker_id)
        if not worker:
            raise RecordNotFoundError("Worker", worker_id)

        for field in WORKER_FIELDS:
            if field in values:
                setattr(worker, field, values[field])

        await self.session.flush()
        await self.session.refresh(worker)
        return worker

    async def delete(self, worker_id: int) -> None:
        """Delete a worker."""
        result = await self.session.execute(
            delete(WorkerModel)
            .where(WorkerModel.id == worker_id)
            .execution_options(synchronize_session=False)
        )
        if result.rowcount == 0:
            raise RecordNotFoundError("Worker", worker_id)
