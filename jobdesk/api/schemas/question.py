"""
Question template API schemas.
"""

from typing import List, Optional

from pydantic import Field

from jobdesk.domain.value_objects.question_type import QuestionType

from .answer import AnswerResponse
from .common import CamelModel, TimestampMixin


class QuestionRequest(CamelModel):
    """Question create/update request schema."""

    type: QuestionType
    text: str = Field(..., min_length=1)
    options: Optional[List[str]] = Field(
        None, description="Option labels, in order; choice questions only"
    )


class OptionResponse(CamelModel):
    """Question option schema."""

    id: int
    text: str


class QuestionResponse(TimestampMixin):
    """Question response schema."""

    id: int
    type: QuestionType
    text: str
    display_order: int
    options: List[OptionResponse] = []
    answers: Optional[List[AnswerResponse]] = None


class JobQuestionResponse(CamelModel):
    """A question as bound to a job."""

    question_id: int
    type: QuestionType
    text: str
    display_order: int
    options: List[OptionResponse] = []
