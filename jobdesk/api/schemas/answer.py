"""
Job answer API schemas.
"""

from typing import List, Union

from .common import CamelModel, RecordId, TimestampMixin

# A scalar is stored as a one-element list
AnswerValue = Union[List[Union[str, int, float, bool]], str, int, float, bool]


class AnswerCreateRequest(CamelModel):
    """Answer creation request schema."""

    question_id: RecordId
    answer: AnswerValue


class AnswerUpdateRequest(CamelModel):
    """Answer update request schema."""

    answer: AnswerValue


class AnswerResponse(TimestampMixin):
    """Answer response schema."""

    id: int
    job_id: int
    question_id: int
    answer: List[str]
