"""Worker API endpoints."""

from typing import List, Optional

from fastapi import APIRouter, Query, status

from jobdesk.api.dependencies import (
    RecordIdPath,
    TransactionServiceDep,
    WorkerAssignmentRepositoryDep,
    WorkerRepositoryDep,
)
from jobdesk.api.schemas.common import MessageResponse
from jobdesk.api.schemas.worker import (
    WorkerCreateRequest,
    WorkerResponse,
    WorkerUpdateRequest,
)
from jobdesk.application.services.error_normalizer import normalized_store_errors
from jobdesk.application.services.identifier_resolver import MAX_SURROGATE_KEY
from jobdesk.config.logging import get_logger
from jobdesk.domain.exceptions.not_found_error import NotFoundError
from jobdesk.domain.exceptions.validation_error import ValidationError
from jobdesk.infrastructure.database.models.worker import WorkerModel

logger = get_logger(__name__)
router = APIRouter(prefix="/workers", tags=["workers"])


@router.get("", response_model=List[WorkerResponse])
async def list_workers(
    worker_repository: WorkerRepositoryDep,
    worker_assignment_id: Optional[int] = Query(
        None, alias="workerAssignmentId", ge=1, le=MAX_SURROGATE_KEY
    ),
):
    """List workers, optionally those of one assignment."""
    with normalized_store_errors("worker", "Failed to fetch workers"):
        return await worker_repository.get_all(worker_assignment_id)


@router.get("/assignment/{assignment_id}", response_model=List[WorkerResponse])
async def list_assignment_workers(
    assignment_id: RecordIdPath, worker_repository: WorkerRepositoryDep
):
    """List the workers of one assignment."""
    with normalized_store_errors("worker", "Failed to fetch workers"):
        return await worker_repository.get_all(assignment_id)


@router.post("", response_model=WorkerResponse, status_code=status.HTTP_201_CREATED)
async def create_worker(
    worker_data: WorkerCreateRequest,
    worker_repository: WorkerRepositoryDep,
    assignment_repository: WorkerAssignmentRepositoryDep,
    transaction_service: TransactionServiceDep,
):
    """Add a worker to an assignment."""
    if not await assignment_repository.get_by_id(worker_data.worker_assignment_id):
        raise ValidationError(
            f"Worker assignment {worker_data.worker_assignment_id} not found"
        )

    worker = WorkerModel(**worker_data.model_dump())
    with normalized_store_errors("worker", "Failed to create worker"):
        worker = await transaction_service.execute_in_transaction(
            lambda: worker_repository.create(worker)
        )

    logger.info(
        "Worker created",
        worker_id=worker.id,
        assignment_id=worker.worker_assignment_id,
    )
    return worker


@router.get("/{worker_id}", response_model=WorkerResponse)
async def get_worker(
    worker_id: RecordIdPath, worker_repository: WorkerRepositoryDep
):
    """Get a worker."""
    with normalized_store_errors("worker", "Failed to fetch worker"):
        worker = await worker_repository.get_by_id(worker_id)
    if not worker:
        raise NotFoundError("worker")
    return worker


@router.put("/{worker_id}", response_model=WorkerResponse)
async def update_worker(
    worker_id: RecordIdPath,
    worker_data: WorkerUpdateRequest,
    worker_repository: WorkerRepositoryDep,
    transaction_service: TransactionServiceDep,
):
    """Update a worker's details."""
    if not await worker_repository.get_by_id(worker_id):
        raise NotFoundError("worker")

    values = worker_data.model_dump(exclude_unset=True)
    if values.get("name", "") is None:
        values.pop("name")

    with normalized_store_errors("worker", "Failed to update worker"):
        worker = await transaction_service.execute_in_transaction(
            lambda: worker_repository.update(worker_id, values)
        )

    logger.info("Worker updated", worker_id=worker_id, fields=sorted(values))
    return worker


@router.delete("/{worker_id}", response_model=MessageResponse)
async def delete_worker(
    worker_id: RecordIdPath,
    worker_repository: WorkerRepositoryDep,
    transaction_service: TransactionServiceDep,
):
    """Delete a worker."""
    with normalized_store_errors("worker", "Failed to delete worker"):
        await transaction_service.execute_in_transaction(
            lambda: worker_repository.delete(worker_id)
        )

    logger.info("Worker deleted", worker_id=worker_id)
    return MessageResponse(message="Worker deleted successfully")
