"""
Database repositories package.
"""

from .answer_repository import AnswerRepository
from .customer_repository import CustomerRepository
from .job_question_repository import JobQuestionRepository
from .job_repository import JobRepository
from .question_repository import QuestionRepository
from .transaction_repository import TransactionService
from .user_repository import NotificationRepository, UserRepository
from .worker_repository import WorkerAssignmentRepository, WorkerRepository

__all__ = [
    "AnswerRepository",
    "CustomerRepository",
    "JobQuestionRepository",
    "JobRepository",
    "NotificationRepository",
    "QuestionRepository",
    "TransactionService",
    "UserRepository",
    "WorkerAssignmentRepository",
    "WorkerRepository",
]
