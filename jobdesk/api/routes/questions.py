"""Question template API endpoints."""

from typing import List, Optional

from fastapi import APIRouter, Query, status

from jobdesk.api.dependencies import (
    AnswerRepositoryDep,
    ManageQuestionsUseCaseDep,
    QuestionRepositoryDep,
    RecordIdPath,
)
from jobdesk.api.schemas.answer import AnswerResponse
from jobdesk.api.schemas.common import MessageResponse
from jobdesk.api.schemas.question import (
    OptionResponse,
    QuestionRequest,
    QuestionResponse,
)
from jobdesk.application.services.error_normalizer import normalized_store_errors
from jobdesk.domain.exceptions.not_found_error import NotFoundError

router = APIRouter(prefix="/questions", tags=["questions"])


def to_question_response(question, answers: Optional[list] = None) -> QuestionResponse:
    """Build the response explicitly; the model's answers relationship is never loaded."""
    return QuestionResponse(
        id=question.id,
        type=question.type,
        text=question.text,
        display_order=question.display_order,
        options=[OptionResponse.model_validate(option) for option in question.options],
        answers=(
            [AnswerResponse.model_validate(answer) for answer in answers]
            if answers is not None
            else None
        ),
        created_at=question.created_at,
        updated_at=question.updated_at,
    )


@router.get("", response_model=List[QuestionResponse], response_model_exclude_none=True)
async def list_questions(question_repository: QuestionRepositoryDep):
    """List questions by display order."""
    with normalized_store_errors("question", "Failed to fetch questions"):
        questions = await question_repository.get_all()
    return [to_question_response(question) for question in questions]


@router.post(
    "",
    response_model=QuestionResponse,
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
)
async def create_question(
    question_data: QuestionRequest,
    use_case: ManageQuestionsUseCaseDep,
):
    """Create a question at the end of the display order."""
    with normalized_store_errors("question", "Failed to create question"):
        question = await use_case.create(
            question_data.type, question_data.text, question_data.options
        )
    return to_question_response(question)


@router.get(
    "/{question_id}", response_model=QuestionResponse, response_model_exclude_none=True
)
async def get_question(
    question_id: RecordIdPath,
    question_repository: QuestionRepositoryDep,
    answer_repository: AnswerRepositoryDep,
    include_answers: bool = Query(False, alias="includeAnswers"),
):
    """Get a question, optionally with every answer given to it."""
    with normalized_store_errors("question", "Failed to fetch question"):
        question = await question_repository.get_by_id(question_id)
        if not question:
            raise NotFoundError("question")
        answers = (
            await answer_repository.get_for_question(question_id)
            if include_answers
            else None
        )
    return to_question_response(question, answers)


@router.put(
    "/{question_id}", response_model=QuestionResponse, response_model_exclude_none=True
)
async def update_question(
    question_id: RecordIdPath,
    question_data: QuestionRequest,
    use_case: ManageQuestionsUseCaseDep,
):
    """Update a question. The option list replaces the existing one."""
    with normalized_store_errors("question", "Failed to update question"):
        question = await use_case.update(
            question_id, question_data.type, question_data.text, question_data.options
        )
    return to_question_response(question)


@router.delete("/{question_id}", response_model=MessageResponse)
async def delete_question(
    question_id: RecordIdPath,
    use_case: ManageQuestionsUseCaseDep,
    cascade: bool = Query(False),
):
    """Delete a question; cascade=true also removes its bindings and answers."""
    with normalized_store_errors("question", "Failed to delete question"):
        await use_case.delete(question_id, cascade=cascade)
    return MessageResponse(message="Question deleted successfully")
