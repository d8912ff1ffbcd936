"""Job question answer repository implementation."""

from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from jobdesk.application.interfaces.repositories import AnswerRepositoryInterface
from jobdesk.infrastructure.database.models.job_question import JobQuestionAnswerModel


class AnswerRepository(AnswerRepositoryInterface):
    """Job question answer repository implementation."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(
        self, job_id: int, question_id: int, values: List[str]
    ) -> JobQuestionAnswerModel:
        """Insert a new answer row."""
        answer = JobQuestionAnswerModel(
            job_id=job_id, question_id=question_id, answer=list(values)
        )
        self.session.add(answer)
        await self.session.flush()
        await self.session.refresh(answer)
        return answer

    async def get_current(
        self, job_id: int, question_id: int
    ) -> Optional[JobQuestionAnswerModel]:
        """The answer row with the highest id for the pair."""
        result = await self.session.execute(
            select(JobQuestionAnswerModel)
            .where(
                JobQuestionAnswerModel.job_id == job_id,
                JobQuestionAnswerModel.question_id == question_id,
            )
            .order_by(JobQuestionAnswerModel.id.desc())
            .limit(1)
        )
        return result.scalar_one_or_none()

    async def update_values(
        self, answer: JobQuestionAnswerModel, values: List[str]
    ) -> JobQuestionAnswerModel:
        """Overwrite the values of an answer row in place."""
        answer.answer = list(values)
        await self.session.flush()
        await self.session.refresh(answer)
        return answer

    async def delete(self, answer: JobQuestionAnswerModel) -> None:
        """Delete one answer row."""
        await self.session.delete(answer)
        await self.session.flush()

    async def get_for_job(self, job_id: int) -> List[JobQuestionAnswerModel]:
        """All answer rows for a job."""
        result = await self.session.execute(
            select(JobQuestionAnswerModel)
            .where(JobQuestionAnswerModel.job_id == job_id)
            .order_by(JobQuestionAnswerModel.question_id, JobQuestionAnswerModel.id)
        )
        return list(result.scalars().all())

    async def get_for_question(self, question_id: int) -> List[JobQuestionAnswerModel]:
        """All answer rows for a question."""
        result = await self.session.execute(
            select(JobQuestionAnswerModel)
            .where(JobQuestionAnswerModel.question_id == question_id)
            .order_by(JobQuestionAnswerModel.id)
        )
        return list(result.scalars().all())
