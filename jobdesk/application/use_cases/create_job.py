"""Create job use case."""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Optional

from jobdesk.application.interfaces.repositories import (
    CustomerRepositoryInterface,
    JobQuestionRepositoryInterface,
    JobRepositoryInterface,
    QuestionRepositoryInterface,
)
from jobdesk.config.logging import get_logger
from jobdesk.domain.exceptions.validation_error import ValidationError
from jobdesk.infrastructure.database.repositories.transaction_repository import (
    TransactionService,
)

logger = get_logger(__name__)


@dataclass
class CreateJobRequest:
    """Request for creating a job."""

    name: str
    customer_id: int
    description: Optional[str] = None
    deadline: Optional[datetime] = None


@dataclass
class CreateJobResult:
    """Result of job creation."""

    job: Any
    bound_question_ids: list


class CreateJobUseCase:
    """
    Create a job and bind the full current question set to it.

    The job row and its binding snapshot are written in one transaction, so
    a job never exists without the bindings it was created with.
    """

    def __init__(
        self,
        job_repo: JobRepositoryInterface,
        customer_repo: CustomerRepositoryInterface,
        question_repo: QuestionRepositoryInterface,
        job_question_repo: JobQuestionRepositoryInterface,
        transaction_service: TransactionService,
    ):
        self.job_repo = job_repo
        self.customer_repo = customer_repo
        self.question_repo = question_repo
        self.job_question_repo = job_question_repo
        self.transaction_service = transaction_service

    async def execute(self, request: CreateJobRequest) -> CreateJobResult:
        """Create the job and its question bindings atomically."""

        if not request.name or not request.name.strip():
            raise ValidationError("Job name is required")

        customer = await self.customer_repo.get_by_id(request.customer_id)
        if not customer:
            raise ValidationError(f"Customer {request.customer_id} not found")

        async def operation() -> CreateJobResult:
            job = await self.job_repo.create(
                {
                    "name": request.name.strip(),
                    "description": request.description,
                    "deadline": request.deadline,
                    "customer_id": request.customer_id,
                }
            )
            question_ids = await self.question_repo.get_all_ids()
            await self.job_question_repo.create_many(job.id, question_ids)
            return CreateJobResult(job=job, bound_question_ids=question_ids)

        result = await self.transaction_service.execute_in_transaction(operation)

        logger.info(
            "Job created with question snapshot",
            job_id=result.job.id,
            job_uuid=result.job.uuid,
            customer_id=request.customer_id,
            bindings=len(result.bound_question_ids),
        )
        return result
