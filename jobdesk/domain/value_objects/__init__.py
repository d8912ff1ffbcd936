"""
Domain value objects package.
"""

from .answer_value import normalize_answer_values
from .question_type import QuestionType
from .role import Role

__all__ = [
    "QuestionType",
    "Role",
    "normalize_answer_values",
]
