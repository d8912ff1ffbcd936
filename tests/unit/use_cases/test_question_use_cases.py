"""
Unit tests for question template and job question use cases.
"""

from types import SimpleNamespace

import pytest

from jobdesk.application.use_cases.job_questions import (
    GetJobQuestionsUseCase,
    SyncJobQuestionsUseCase,
)
from jobdesk.application.use_cases.manage_questions import (
    ManageQuestionsUseCase,
    clean_options,
)
from jobdesk.domain.entities.job_question import JobQuestionView, OptionView
from jobdesk.domain.exceptions.not_found_error import NotFoundError
from jobdesk.domain.exceptions.store_error import StoreError, StoreFailureKind
from jobdesk.domain.exceptions.validation_error import ValidationError
from jobdesk.domain.value_objects.question_type import QuestionType


class TestCleanOptions:
    def test_choice_options_are_stripped(self):
        assert clean_options(QuestionType.RADIO, [" Yes ", "No"]) == ["Yes", "No"]

    def test_text_question_without_options(self):
        assert clean_options(QuestionType.TEXT, None) == []

    def test_text_question_with_options(self):
        with pytest.raises(ValidationError, match="choice questions"):
            clean_options(QuestionType.TEXT, ["Yes"])

    @pytest.mark.parametrize("question_type", [QuestionType.RADIO, QuestionType.CHECKBOX])
    def test_choice_question_needs_options(self, question_type):
        with pytest.raises(ValidationError, match="at least one option"):
            clean_options(question_type, [])

    def test_blank_option(self):
        with pytest.raises(ValidationError, match="non-empty"):
            clean_options(QuestionType.CHECKBOX, ["Gloves", "  "])


class TestManageQuestionsUseCase:
    @pytest.fixture
    def use_case(self, mock_question_repository, transaction_service):
        return ManageQuestionsUseCase(mock_question_repository, transaction_service)

    @pytest.mark.asyncio
    async def test_create_appends_to_display_order(
        self, use_case, mock_question_repository
    ):
        mock_question_repository.next_display_order.return_value = 4
        mock_question_repository.create.return_value = SimpleNamespace(id=12)

        question = await use_case.create(QuestionType.RADIO, " Forklift? ", ["Yes", "No"])

        assert question.id == 12
        mock_question_repository.create.assert_awaited_once_with(
            QuestionType.RADIO, "Forklift?", ["Yes", "No"], 4
        )

    @pytest.mark.asyncio
    async def test_update_replaces_options(self, use_case, mock_question_repository):
        mock_question_repository.get_by_id.return_value = SimpleNamespace(id=12)
        mock_question_repository.update.return_value = SimpleNamespace(id=12)

        await use_case.update(12, QuestionType.CHECKBOX, "Gear?", ["Gloves"])

        mock_question_repository.update.assert_awaited_once_with(
            12, QuestionType.CHECKBOX, "Gear?", ["Gloves"]
        )

    @pytest.mark.asyncio
    async def test_update_missing_question(self, use_case, mock_question_repository):
        mock_question_repository.get_by_id.return_value = None

        with pytest.raises(NotFoundError):
            await use_case.update(12, QuestionType.TEXT, "Notes?", None)
        mock_question_repository.update.assert_not_called()

    @pytest.mark.asyncio
    async def test_delete_unreferenced(self, use_case, mock_question_repository):
        await use_case.delete(5)

        mock_question_repository.delete.assert_awaited_once_with(5)
        mock_question_repository.delete_references.assert_not_called()

    @pytest.mark.asyncio
    async def test_delete_referenced_is_conflict(self, use_case, mock_question_repository):
        mock_question_repository.count_references.return_value = 2

        with pytest.raises(StoreError) as exc_info:
            await use_case.delete(5)

        assert exc_info.value.kind is StoreFailureKind.FOREIGN_KEY_VIOLATION
        mock_question_repository.delete.assert_not_called()

    @pytest.mark.asyncio
    async def test_cascade_delete_removes_references_first(
        self, use_case, mock_question_repository
    ):
        mock_question_repository.count_references.return_value = 2

        await use_case.delete(5, cascade=True)

        mock_question_repository.delete_references.assert_awaited_once_with(5)
        mock_question_repository.delete.assert_awaited_once_with(5)


class TestJobQuestionUseCases:
    @pytest.mark.asyncio
    async def test_projection(self, mock_job_question_repository):
        question = SimpleNamespace(
            id=3,
            type="radio",
            text="Forklift?",
            display_order=1,
            options=[SimpleNamespace(id=1, text="Yes"), SimpleNamespace(id=2, text="No")],
        )
        mock_job_question_repository.get_for_job.return_value = [
            SimpleNamespace(question=question)
        ]

        views = await GetJobQuestionsUseCase(mock_job_question_repository).execute(8)

        assert views == [
            JobQuestionView(
                question_id=3,
                type=QuestionType.RADIO,
                text="Forklift?",
                display_order=1,
                options=[OptionView(1, "Yes"), OptionView(2, "No")],
            )
        ]

    @pytest.mark.asyncio
    async def test_sync_binds_only_missing_questions(
        self,
        mock_question_repository,
        mock_job_question_repository,
        transaction_service,
    ):
        mock_question_repository.get_all_ids.return_value = [1, 2, 3]
        mock_job_question_repository.get_question_ids.return_value = [1, 3]

        use_case = SyncJobQuestionsUseCase(
            mock_question_repository, mock_job_question_repository, transaction_service
        )
        added = await use_case.execute(8)

        assert added == [2]
        mock_job_question_repository.create_many.assert_awaited_once_with(8, [2])
