"""Job question answer use cases."""

from typing import Any, List, Optional

from jobdesk.application.interfaces.repositories import (
    AnswerRepositoryInterface,
    QuestionRepositoryInterface,
)
from jobdesk.config.logging import get_logger
from jobdesk.domain.exceptions.not_found_error import NotFoundError
from jobdesk.domain.exceptions.validation_error import ValidationError
from jobdesk.domain.value_objects.answer_value import normalize_answer_values
from jobdesk.infrastructure.database.repositories.transaction_repository import (
    TransactionService,
)

logger = get_logger(__name__)


class ManageAnswersUseCase:
    """
    Record and edit a job's answers.

    Several rows may exist for one (job, question) pair; the current answer
    is the row with the highest id. Update and delete act on that row only,
    and update overwrites it in place.
    """

    def __init__(
        self,
        answer_repo: AnswerRepositoryInterface,
        question_repo: QuestionRepositoryInterface,
        transaction_service: TransactionService,
    ):
        self.answer_repo = answer_repo
        self.question_repo = question_repo
        self.transaction_service = transaction_service

    async def list_for_job(self, job_id: int) -> List[Any]:
        return await self.answer_repo.get_for_job(job_id)

    async def get_current(self, job_id: int, question_id: int) -> Optional[Any]:
        return await self.answer_repo.get_current(job_id, question_id)

    async def create(self, job_id: int, question_id: int, value: Any) -> Any:
        """Insert a new answer row without looking for earlier ones."""
        values = normalize_answer_values(value)

        if not await self.question_repo.get_by_id(question_id):
            raise ValidationError(f"Question {question_id} does not exist")

        answer = await self.transaction_service.execute_in_transaction(
            lambda: self.answer_repo.create(job_id, question_id, values)
        )
        logger.info(
            "Answer recorded",
            job_id=job_id,
            question_id=question_id,
            answer_id=answer.id,
        )
        return answer

    async def update(self, job_id: int, question_id: int, value: Any) -> Any:
        """Overwrite the values of the current answer."""
        values = normalize_answer_values(value)

        async def operation():
            current = await self.answer_repo.get_current(job_id, question_id)
            if current is None:
                raise NotFoundError(
                    "answer",
                    f"No answer found for job {job_id} and question {question_id}",
                )
            return await self.answer_repo.update_values(current, values)

        answer = await self.transaction_service.execute_in_transaction(operation)
        logger.info(
            "Answer updated",
            job_id=job_id,
            question_id=question_id,
            answer_id=answer.id,
        )
        return answer

    async def delete(self, job_id: int, question_id: int) -> Any:
        """Delete the current answer row, leaving older rows in place."""

        async def operation():
            current = await self.answer_repo.get_current(job_id, question_id)
            if current is None:
                raise NotFoundError(
                    "answer",
                    f"No answer found for job {job_id} and question {question_id}",
                )
            await self.answer_repo.delete(current)
            return current

        deleted = await self.transaction_service.execute_in_transaction(operation)
        logger.info(
            "Answer deleted",
            job_id=job_id,
            question_id=question_id,
            answer_id=deleted.id,
        )
        return deleted
