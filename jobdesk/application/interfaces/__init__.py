"""
Application interfaces package.
"""

from .repositories import (
    CustomerRepositoryInterface,
    AnswerRepositoryInterface,
    JobQuestionRepositoryInterface,
    JobRepositoryInterface,
    QuestionRepositoryInterface,
)

__all__ = [
    "AnswerRepositoryInterface",
    "CustomerRepositoryInterface",
    "JobQuestionRepositoryInterface",
    "JobRepositoryInterface",
    "QuestionRepositoryInterface",
]
