"""
Application layer package.

This package contains use cases, services, and interfaces that implement
the business logic of the application.
"""

from .interfaces.repositories import (
    AnswerRepositoryInterface,
    CustomerRepositoryInterface,
    JobQuestionRepositoryInterface,
    JobRepositoryInterface,
    QuestionRepositoryInterface,
)
from .services.error_normalizer import ErrorNormalizer, NormalizedError
from .services.identifier_resolver import JobIdentifierResolver
from .use_cases.create_job import CreateJobUseCase
from .use_cases.job_questions import GetJobQuestionsUseCase, SyncJobQuestionsUseCase
from .use_cases.manage_answers import ManageAnswersUseCase
from .use_cases.manage_questions import ManageQuestionsUseCase

__all__ = [
    # Interfaces
    "AnswerRepositoryInterface",
    "CustomerRepositoryInterface",
    "JobQuestionRepositoryInterface",
    "JobRepositoryInterface",
    "QuestionRepositoryInterface",
    # Services
    "ErrorNormalizer",
    "JobIdentifierResolver",
    "NormalizedError",
    # Use Cases
    "CreateJobUseCase",
    "GetJobQuestionsUseCase",
    "ManageAnswersUseCase",
    "ManageQuestionsUseCase",
    "SyncJobQuestionsUseCase",
]
