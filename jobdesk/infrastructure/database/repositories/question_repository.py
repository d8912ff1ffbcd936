"""Question template repository implementation."""

from typing import List, Optional, Sequence

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from jobdesk.application.interfaces.repositories import QuestionRepositoryInterface
from jobdesk.domain.exceptions.store_error import RecordNotFoundError
from jobdesk.domain.value_objects.question_type import QuestionType
from jobdesk.infrastructure.database.models.job_question import (
    JobQuestionAnswerModel,
    JobQuestionModel,
)
from jobdesk.infrastructure.database.models.question import (
    QuestionModel,
    QuestionOptionModel,
)


class QuestionRepository(QuestionRepositoryInterface):
    """Question template repository implementation."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, question_id: int) -> Optional[QuestionModel]:
        """Get a question with its options."""
        result = await self.session.execute(
            select(QuestionModel)
            .options(selectinload(QuestionModel.options))
            .where(QuestionModel.id == question_id)
            .execution_options(populate_existing=True)
        )
        return result.scalar_one_or_none()

    async def get_all(self) -> List[QuestionModel]:
        """Get all questions ordered by display order."""
        result = await self.session.execute(
            select(QuestionModel)
            .options(selectinload(QuestionModel.options))
            .order_by(QuestionModel.display_order, QuestionModel.id)
        )
        return list(result.scalars().all())

    async def get_all_ids(self) -> List[int]:
        """Get the ids of every question currently defined."""
        result = await self.session.execute(
            select(QuestionModel.id).order_by(
                QuestionModel.display_order, QuestionModel.id
            )
        )
        return list(result.scalars().all())

    async def next_display_order(self) -> int:
        """Display order for the next created question."""
        result = await self.session.execute(
            select(func.coalesce(func.max(QuestionModel.display_order), 0))
        )
        return result.scalar_one() + 1

    async def create(
        self,
        question_type: QuestionType,
        text: str,
        options: Sequence[str],
        display_order: int,
    ) -> QuestionModel:
        """Create a question with its options."""
        question = QuestionModel(
            type=question_type,
            text=text,
            display_order=display_order,
        )
        question.options = [QuestionOptionModel(text=option) for option in options]

        self.session.add(question)
        await self.session.flush()
        return await self.get_by_id(question.id)

    async def update(
        self,
        question_id: int,
        question_type: QuestionType,
        text: str,
        options: Sequence[str],
    ) -> QuestionModel:
        """Update a question, replacing its whole option set."""
        question = await self.session.get(QuestionModel, question_id)
        if not question:
            raise RecordNotFoundError("Question", question_id)

        question.type = question_type
        question.text = text

        await self.session.execute(
            delete(QuestionOptionModel)
            .where(QuestionOptionModel.question_id == question_id)
            .execution_options(synchronize_session=False)
        )
        self.session.add_all(
            [QuestionOptionModel(question_id=question_id, text=option) for option in options]
        )
        await self.session.flush()
        return await self.get_by_id(question_id)

    async def count_references(self, question_id: int) -> int:
        """Count bindings and answers that reference the question."""
        bindings = await self.session.execute(
            select(func.count())
            .select_from(JobQuestionModel)
            .where(JobQuestionModel.question_id == question_id)
        )
        answers = await self.session.execute(
            select(func.count())
            .select_from(JobQuestionAnswerModel)
            .where(JobQuestionAnswerModel.question_id == question_id)
        )
        return bindings.scalar_one() + answers.scalar_one()

    async def delete_references(self, question_id: int) -> None:
        """Remove bindings and answers that reference the question."""
        for model in (JobQuestionAnswerModel, JobQuestionModel):
            await self.session.execute(
                delete(model)
                .where(model.question_id == question_id)
                .execution_options(synchronize_session=False)
            )

    async def delete(self, question_id: int) -> None:
        """Delete a question and its options."""
        exists = await self.session.execute(
            select(QuestionModel.id).where(QuestionModel.id == question_id)
        )
        if exists.scalar_one_or_none() is None:
            raise RecordNotFoundError("Question", question_id)

        await self.session.execute(
            delete(QuestionOptionModel)
            .where(QuestionOptionModel.question_id == question_id)
            .execution_options(synchronize_session=False)
        )
        await self.session.execute(
            delete(QuestionModel)
            .where(QuestionModel.id == question_id)
            .execution_options(synchronize_session=False)
        )
