"""Job-question binding repository implementation."""

from typing import List, Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from jobdesk.application.interfaces.repositories import JobQuestionRepositoryInterface
from jobdesk.infrastructure.database.models.job_question import JobQuestionModel
from jobdesk.infrastructure.database.models.question import QuestionModel


class JobQuestionRepository(JobQuestionRepositoryInterface):
    """Job-question binding repository implementation."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create_many(self, job_id: int, question_ids: Sequence[int]) -> int:
        """Bind questions to a job. Returns the number of rows created."""
        if not question_ids:
            return 0

        self.session.add_all(
            [
                JobQuestionModel(job_id=job_id, question_id=question_id)
                for question_id in question_ids
            ]
        )
        await self.session.flush()
        return len(question_ids)

    async def get_question_ids(self, job_id: int) -> List[int]:
        """Ids of the questions bound to a job."""
        result = await self.session.execute(
            select(JobQuestionModel.question_id).where(JobQuestionModel.job_id == job_id)
        )
        return list(result.scalars().all())

    async def get_for_job(self, job_id: int) -> List[JobQuestionModel]:
        """Bindings for a job with question and options loaded, by display order."""
        stmt = (
            select(JobQuestionModel)
            .join(QuestionModel, JobQuestionModel.question_id == QuestionModel.id)
            .options(
                selectinload(JobQuestionModel.question).selectinload(
                    QuestionModel.options
                )
            )
            .where(JobQuestionModel.job_id == job_id)
            .order_by(QuestionModel.display_order, QuestionModel.id)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())
