"""Job API endpoints, including a job's questions and answers."""

import math
from typing import List

from fastapi import APIRouter, Query, status

from jobdesk.api.dependencies import (
    CreateJobUseCaseDep,
    CustomerRepositoryDep,
    GetJobQuestionsUseCaseDep,
    JobRepositoryDep,
    JobResolverDep,
    ManageAnswersUseCaseDep,
    PageQuery,
    RecordIdPath,
    SyncJobQuestionsUseCaseDep,
    TransactionServiceDep,
)
from jobdesk.api.schemas.answer import (
    AnswerCreateRequest,
    AnswerResponse,
    AnswerUpdateRequest,
)
from jobdesk.api.schemas.common import MessageResponse
from jobdesk.api.schemas.job import (
    JobCreateRequest,
    JobCreateResponse,
    JobListResponse,
    JobPageMeta,
    JobResponse,
    JobUpdateRequest,
)
from jobdesk.api.schemas.question import JobQuestionResponse
from jobdesk.application.services.error_normalizer import normalized_store_errors
from jobdesk.application.use_cases.create_job import CreateJobRequest
from jobdesk.config.logging import get_logger
from jobdesk.config.settings import settings
from jobdesk.domain.exceptions.not_found_error import NotFoundError
from jobdesk.domain.exceptions.validation_error import ValidationError

logger = get_logger(__name__)
router = APIRouter(prefix="/jobs", tags=["jobs"])


def _job_questions(views) -> List[JobQuestionResponse]:
    return [JobQuestionResponse.model_validate(view) for view in views]


@router.get("", response_model=JobListResponse)
async def list_jobs(
    job_repository: JobRepositoryDep,
    page: PageQuery = 1,
    page_size: int = Query(
        settings.DEFAULT_PAGE_SIZE, alias="pageSize", ge=1, le=settings.MAX_PAGE_SIZE
    ),
):
    """List jobs newest first, one page at a time."""
    with normalized_store_errors("job", "Failed to fetch jobs"):
        jobs = await job_repository.get_page(offset=(page - 1) * page_size, limit=page_size)
        total = await job_repository.count()

    return JobListResponse(
        data=[JobResponse.model_validate(job) for job in jobs],
        meta=JobPageMeta(
            current_page=page,
            page_size=page_size,
            total_jobs=total,
            total_pages=math.ceil(total / page_size),
        ),
    )


@router.post("", response_model=JobCreateResponse, status_code=status.HTTP_201_CREATED)
async def create_job(
    job_data: JobCreateRequest,
    use_case: CreateJobUseCaseDep,
    job_repository: JobRepositoryDep,
):
    """Create a job bound to every question that exists right now."""
    with normalized_store_errors("job", "Failed to create job"):
        result = await use_case.execute(
            CreateJobRequest(
                name=job_data.name,
                description=job_data.description,
                deadline=job_data.deadline,
                customer_id=job_data.customer_id,
            )
        )
        job = await job_repository.get_by_id(result.job.id)

    return JobCreateResponse(
        **JobResponse.model_validate(job).model_dump(),
        bound_questions=len(result.bound_question_ids),
    )


@router.get("/{job_ref}", response_model=JobResponse)
async def get_job(
    job_ref: str,
    resolver: JobResolverDep,
    job_repository: JobRepositoryDep,
    questions_use_case: GetJobQuestionsUseCaseDep,
    include_questions: bool = Query(False, alias="includeQuestions"),
):
    """Get a job by id or UUID."""
    job_id = await resolver.require(job_ref)

    with normalized_store_errors("job", "Failed to fetch job"):
        job = await job_repository.get_by_id(job_id)
        response = JobResponse.model_validate(job)
        if include_questions:
            response.questions = _job_questions(
                await questions_use_case.execute(job_id)
            )

    return response


@router.put("/{job_ref}", response_model=JobResponse)
async def update_job(
    job_ref: str,
    job_data: JobUpdateRequest,
    resolver: JobResolverDep,
    job_repository: JobRepositoryDep,
    customer_repository: CustomerRepositoryDep,
    transaction_service: TransactionServiceDep,
):
    """Update a job's details. The UUID never changes."""
    job_id = await resolver.require(job_ref)
    values = job_data.model_dump(exclude_unset=True)

    if values.get("name") is None:
        values.pop("name", None)
    if "customer_id" in values:
        if values["customer_id"] is None:
            values.pop("customer_id")
        elif not await customer_repository.get_by_id(values["customer_id"]):
            raise ValidationError(f"Customer {values['customer_id']} not found")

    with normalized_store_errors("job", "Failed to update job"):
        await transaction_service.execute_in_transaction(
            lambda: job_repository.update(job_id, values)
        )
        job = await job_repository.get_by_id(job_id)

    logger.info("Job updated", job_id=job_id, fields=sorted(values))
    return job


@router.delete("/{job_ref}", response_model=MessageResponse)
async def delete_job(
    job_ref: str,
    resolver: JobResolverDep,
    job_repository: JobRepositoryDep,
    transaction_service: TransactionServiceDep,
):
    """Delete a job with its bindings, answers and worker assignments."""
    job_id = await resolver.require(job_ref)

    with normalized_store_errors("job", "Failed to delete job"):
        await transaction_service.execute_in_transaction(
            lambda: job_repository.delete(job_id)
        )

    logger.info("Job deleted", job_id=job_id)
    return MessageResponse(message="Job deleted successfully")


@router.get("/{job_ref}/questions", response_model=List[JobQuestionResponse])
async def get_job_questions(
    job_ref: str,
    resolver: JobResolverDep,
    use_case: GetJobQuestionsUseCaseDep,
):
    """List the questions bound to a job, by display order."""
    job_id = await resolver.require(job_ref)
    with normalized_store_errors("job question", "Failed to fetch job questions"):
        return _job_questions(await use_case.execute(job_id))


@router.post("/{job_ref}/questions/sync", response_model=List[JobQuestionResponse])
async def sync_job_questions(
    job_ref: str,
    resolver: JobResolverDep,
    sync_use_case: SyncJobQuestionsUseCaseDep,
    questions_use_case: GetJobQuestionsUseCaseDep,
):
    """Bind questions created after the job to it."""
    job_id = await resolver.require(job_ref)
    with normalized_store_errors("job question", "Failed to sync job questions"):
        await sync_use_case.execute(job_id)
        return _job_questions(await questions_use_case.execute(job_id))


@router.get("/{job_ref}/answers", response_model=List[AnswerResponse])
async def list_job_answers(
    job_ref: str,
    resolver: JobResolverDep,
    use_case: ManageAnswersUseCaseDep,
):
    """List every answer row recorded for a job."""
    job_id = await resolver.require(job_ref)
    with normalized_store_errors("job answer", "Failed to fetch job answers"):
        return await use_case.list_for_job(job_id)


@router.post(
    "/{job_ref}/answers",
    response_model=AnswerResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_job_answer(
    job_ref: str,
    answer_data: AnswerCreateRequest,
    resolver: JobResolverDep,
    use_case: ManageAnswersUseCaseDep,
):
    """Record an answer to one of the job's questions."""
    job_id = await resolver.require(job_ref)
    with normalized_store_errors("job answer", "Failed to create job answer"):
        return await use_case.create(job_id, answer_data.question_id, answer_data.answer)


@router.get("/{job_ref}/answers/{question_id}", response_model=AnswerResponse)
async def get_current_answer(
    job_ref: str,
    question_id: RecordIdPath,
    resolver: JobResolverDep,
    use_case: ManageAnswersUseCaseDep,
):
    """Get the current answer for a question."""
    job_id = await resolver.require(job_ref)
    with normalized_store_errors("job answer", "Failed to fetch job answer"):
        answer = await use_case.get_current(job_id, question_id)
    if answer is None:
        raise NotFoundError(
            "answer", f"No answer found for job {job_id} and question {question_id}"
        )
    return answer


@router.put("/{job_ref}/answers/{question_id}", response_model=AnswerResponse)
async def update_job_answer(
    job_ref: str,
    question_id: RecordIdPath,
    answer_data: AnswerUpdateRequest,
    resolver: JobResolverDep,
    use_case: ManageAnswersUseCaseDep,
):
    """Overwrite the current answer for a question."""
    job_id = await resolver.require(job_ref)
    with normalized_store_errors("job answer", "Failed to update job answer"):
        return await use_case.update(job_id, question_id, answer_data.answer)


@router.delete("/{job_ref}/answers/{question_id}", response_model=MessageResponse)
async def delete_job_answer(
    job_ref: str,
    question_id: RecordIdPath,
    resolver: JobResolverDep,
    use_case: ManageAnswersUseCaseDep,
):
    """Delete the current answer for a question."""
    job_id = await resolver.require(job_ref)
    with normalized_store_errors("job answer", "Failed to delete job answer"):
        await use_case.delete(job_id, question_id)
    return MessageResponse(message="Answer deleted successfully")
