"""
Use cases package.

This package contains the business logic use cases that orchestrate
the application services and repositories.
"""

from .create_job import CreateJobRequest, CreateJobResult, CreateJobUseCase
from .job_questions import GetJobQuestionsUseCase, SyncJobQuestionsUseCase
from .manage_answers import ManageAnswersUseCase
from .manage_questions import ManageQuestionsUseCase

__all__ = [
    "CreateJobRequest",
    "CreateJobResult",
    "CreateJobUseCase",
    "GetJobQuestionsUseCase",
    "ManageAnswersUseCase",
    "ManageQuestionsUseCase",
    "SyncJobQuestionsUseCase",
]
