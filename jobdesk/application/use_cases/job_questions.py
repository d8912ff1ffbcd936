"""Job question projection and re-sync use cases."""

from typing import List

from jobdesk.application.interfaces.repositories import (
    JobQuestionRepositoryInterface,
    QuestionRepositoryInterface,
)
from jobdesk.config.logging import get_logger
from jobdesk.domain.entities.job_question import JobQuestionView, OptionView
from jobdesk.domain.value_objects.question_type import QuestionType
from jobdesk.infrastructure.database.repositories.transaction_repository import (
    TransactionService,
)

logger = get_logger(__name__)


class GetJobQuestionsUseCase:
    """List the questions bound to a job, flattened with their options."""

    def __init__(self, job_question_repo: JobQuestionRepositoryInterface):
        self.job_question_repo = job_question_repo

    async def execute(self, job_id: int) -> List[JobQuestionView]:
        bindings = await self.job_question_repo.get_for_job(job_id)
        return [
            JobQuestionView(
                question_id=binding.question.id,
                type=QuestionType(binding.question.type),
                text=binding.question.text,
                display_order=binding.question.display_order,
                options=[
                    OptionView(id=option.id, text=option.text)
                    for option in binding.question.options
                ],
            )
            for binding in bindings
        ]


class SyncJobQuestionsUseCase:
    """Bind every question not yet attached to an existing job."""

    def __init__(
        self,
        question_repo: QuestionRepositoryInterface,
        job_question_repo: JobQuestionRepositoryInterface,
        transaction_service: TransactionService,
    ):
        self.question_repo = question_repo
        self.job_question_repo = job_question_repo
        self.transaction_service = transaction_service

    async def execute(self, job_id: int) -> List[int]:
        """Returns the ids of the newly bound questions."""

        async def operation() -> List[int]:
            bound = set(await self.job_question_repo.get_question_ids(job_id))
            missing = [
                question_id
                for question_id in await self.question_repo.get_all_ids()
                if question_id not in bound
            ]
            await self.job_question_repo.create_many(job_id, missing)
            return missing

        added = await self.transaction_service.execute_in_transaction(operation)
        logger.info("Job questions re-synced", job_id=job_id, added=len(added))
        return added
