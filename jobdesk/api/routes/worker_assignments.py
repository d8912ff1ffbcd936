"""Worker assignment API endpoints."""

import math

from fastapi import APIRouter, Query, status

from jobdesk.api.dependencies import (
    JobResolverDep,
    PageQuery,
    RecordIdPath,
    TransactionServiceDep,
    WorkerAssignmentRepositoryDep,
)
from jobdesk.api.schemas.common import MessageResponse
from jobdesk.api.schemas.worker import (
    WorkerAssignmentCreateRequest,
    WorkerAssignmentListResponse,
    WorkerAssignmentPageMeta,
    WorkerAssignmentResponse,
    WorkerAssignmentUpdateRequest,
)
from jobdesk.application.services.error_normalizer import normalized_store_errors
from jobdesk.config.logging import get_logger
from jobdesk.config.settings import settings
from jobdesk.domain.exceptions.not_found_error import NotFoundError
from jobdesk.domain.exceptions.validation_error import ValidationError
from jobdesk.infrastructure.database.models.worker import WorkerAssignmentModel

logger = get_logger(__name__)
router = APIRouter(prefix="/worker-assignments", tags=["worker-assignments"])


@router.get("/jobs/{job_ref}", response_model=WorkerAssignmentListResponse)
async def list_job_assignments(
    job_ref: str,
    resolver: JobResolverDep,
    assignment_repository: WorkerAssignmentRepositoryDep,
    page: PageQuery = 1,
    page_size: int = Query(
        settings.DEFAULT_PAGE_SIZE, alias="pageSize", ge=1, le=settings.MAX_PAGE_SIZE
    ),
):
    """List a job's worker assignments with their workers."""
    job_id = await resolver.require(job_ref)

    with normalized_store_errors("worker assignment", "Failed to fetch worker assignments"):
        assignments = await assignment_repository.get_by_job(
            job_id, offset=(page - 1) * page_size, limit=page_size
        )
        total = await assignment_repository.count_by_job(job_id)

    return WorkerAssignmentListResponse(
        data=[WorkerAssignmentResponse.model_validate(item) for item in assignments],
        meta=WorkerAssignmentPageMeta(
            current_page=page,
            page_size=page_size,
            total_assignments=total,
            total_pages=math.ceil(total / page_size),
        ),
    )


@router.post(
    "", response_model=WorkerAssignmentResponse, status_code=status.HTTP_201_CREATED
)
async def create_assignment(
    assignment_data: WorkerAssignmentCreateRequest,
    resolver: JobResolverDep,
    assignment_repository: WorkerAssignmentRepositoryDep,
    transaction_service: TransactionServiceDep,
):
    """Create a worker assignment for a job."""
    # Either the surrogate id or the UUID
    job_id = await resolver.resolve(str(assignment_data.job_id))
    if job_id is None:
        raise ValidationError(f"Job {assignment_data.job_id} not found")

    assignment = WorkerAssignmentModel(
        job_id=job_id,
        position=assignment_data.position,
        number_of_workers=assignment_data.number_of_workers,
    )
    with normalized_store_errors("worker assignment", "Failed to create worker assignment"):
        assignment = await transaction_service.execute_in_transaction(
            lambda: assignment_repository.create(assignment)
        )

    logger.info("Worker assignment created", assignment_id=assignment.id, job_id=job_id)
    return assignment


@router.get("/{assignment_id}", response_model=WorkerAssignmentResponse)
async def get_assignment(
    assignment_id: RecordIdPath, assignment_repository: WorkerAssignmentRepositoryDep
):
    """Get a worker assignment with its workers."""
    with normalized_store_errors("worker assignment", "Failed to fetch worker assignment"):
        assignment = await assignment_repository.get_by_id(assignment_id)
    if not assignment:
        raise NotFoundError("worker assignment")
    return assignment


@router.put("/{assignment_id}", response_model=WorkerAssignmentResponse)
async def update_assignment(
    assignment_id: RecordIdPath,
    assignment_data: WorkerAssignmentUpdateRequest,
    assignment_repository: WorkerAssignmentRepositoryDep,
    transaction_service: TransactionServiceDep,
):
    """Update an assignment and, in the same transaction, some of its workers."""
    assignment = await assignment_repository.get_by_id(assignment_id)
    if not assignment:
        raise NotFoundError("worker assignment")

    values = assignment_data.model_dump(exclude_unset=True, exclude={"workers"})
    values = {field: value for field, value in values.items() if value is not None}

    workers = None
    if assignment_data.workers is not None:
        known_ids = {worker.id for worker in assignment.workers}
        workers = []
        for worker in assignment_data.workers:
            if worker.id not in known_ids:
                raise ValidationError(
                    f"Worker {worker.id} does not belong to assignment {assignment_id}"
                )
            worker_values = worker.model_dump(exclude_unset=True)
            if worker_values.get("name", "") is None:
                worker_values.pop("name")
            workers.append(worker_values)

    with normalized_store_errors("worker assignment", "Failed to update worker assignment"):
        assignment = await transaction_service.execute_in_transaction(
            lambda: assignment_repository.update(assignment_id, values, workers)
        )

    logger.info(
        "Worker assignment updated",
        assignment_id=assignment_id,
        workers_updated=len(workers or []),
    )
    return assignment


@router.delete("/{assignment_id}", response_model=MessageResponse)
async def delete_assignment(
    assignment_id: RecordIdPath,
    assignment_repository: WorkerAssignmentRepositoryDep,
    transaction_service: TransactionServiceDep,
):
    """Delete an assignment and its workers."""
    with normalized_store_errors("worker assignment", "Failed to delete worker assignment"):
        await transaction_service.execute_in_transaction(
            lambda: assignment_repository.delete(assignment_id)
        )

    logger.info("Worker assignment deleted", assignment_id=assignment_id)
    return MessageResponse(message="Worker assignment deleted successfully")
