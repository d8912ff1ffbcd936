"""Question template use cases."""

from typing import Any, List, Optional, Sequence

from jobdesk.application.interfaces.repositories import QuestionRepositoryInterface
from jobdesk.config.logging import get_logger
from jobdesk.domain.exceptions.not_found_error import NotFoundError
from jobdesk.domain.exceptions.store_error import StoreError, StoreFailureKind
from jobdesk.domain.exceptions.validation_error import ValidationError
from jobdesk.domain.value_objects.question_type import QuestionType
from jobdesk.infrastructure.database.repositories.transaction_repository import (
    TransactionService,
)

logger = get_logger(__name__)


def clean_options(question_type: QuestionType, options: Optional[Sequence[str]]) -> List[str]:
    """Validate the option list against the question type."""
    cleaned = [option.strip() for option in options or []]
    if any(not option for option in cleaned):
        raise ValidationError("Options must be non-empty strings")

    if not question_type.is_choice and cleaned:
        raise ValidationError("Options are only allowed for choice questions")
    if question_type.is_choice and not cleaned:
        raise ValidationError(
            f"A {question_type.value} question needs at least one option"
        )
    return cleaned


class ManageQuestionsUseCase:
    """Create, edit and delete reusable question templates."""

    def __init__(
        self,
        question_repo: QuestionRepositoryInterface,
        transaction_service: TransactionService,
    ):
        self.question_repo = question_repo
        self.transaction_service = transaction_service

    async def create(
        self, question_type: QuestionType, text: str, options: Optional[Sequence[str]]
    ) -> Any:
        """Create a question at the end of the display order."""
        if not text or not text.strip():
            raise ValidationError("Question text and type are required")
        cleaned = clean_options(question_type, options)

        async def operation():
            display_order = await self.question_repo.next_display_order()
            return await self.question_repo.create(
                question_type, text.strip(), cleaned, display_order
            )

        question = await self.transaction_service.execute_in_transaction(operation)
        logger.info(
            "Question created",
            question_id=question.id,
            type=question_type.value,
            options=len(cleaned),
        )
        return question

    async def update(
        self,
        question_id: int,
        question_type: QuestionType,
        text: str,
        options: Optional[Sequence[str]],
    ) -> Any:
        """Update text and type and replace the whole option set."""
        if not text or not text.strip():
            raise ValidationError("Question text and type are required")
        cleaned = clean_options(question_type, options)

        if not await self.question_repo.get_by_id(question_id):
            raise NotFoundError("question")

        question = await self.transaction_service.execute_in_transaction(
            lambda: self.question_repo.update(
                question_id, question_type, text.strip(), cleaned
            )
        )
        logger.info("Question updated", question_id=question_id, options=len(cleaned))
        return question

    async def delete(self, question_id: int, cascade: bool = False) -> None:
        """
        Delete a question.

        Without cascade, a question still bound to a job or answered fails
        with a foreign key violation. With cascade, those rows go first.
        """

        async def operation():
            references = await self.question_repo.count_references(question_id)
            if references and not cascade:
                raise StoreError(
                    StoreFailureKind.FOREIGN_KEY_VIOLATION,
                    f"Question {question_id} has {references} dependent rows",
                )
            if references:
                await self.question_repo.delete_references(question_id)
            await self.question_repo.delete(question_id)
            return references

        removed = await self.transaction_service.execute_in_transaction(operation)
        logger.info(
            "Question deleted",
            question_id=question_id,
            cascade=cascade,
            dependent_rows_removed=removed if cascade else 0,
        )
