"""
Job question projection.
"""

from dataclasses import dataclass, field
from typing import List

from jobdesk.domain.value_objects.question_type import QuestionType


@dataclass(frozen=True)
class OptionView:
    """A single selectable option of a choice question."""

    id: int
    text: str


@dataclass(frozen=True)
class JobQuestionView:
    """A question bound to a job, flattened with its options."""

    question_id: int
    type: QuestionType
    text: str
    display_order: int
    options: List[OptionView] = field(default_factory=list)
