"""
Database models package.
"""

from .base import Base, BaseModel
from .customer import CustomerModel
from .job import JobModel
from .job_question import JobQuestionAnswerModel, JobQuestionModel
from .question import QuestionModel, QuestionOptionModel
from .user import NotificationModel, UserModel
from .worker import WorkerAssignmentModel, WorkerModel

__all__ = [
    "Base",
    "BaseModel",
    "CustomerModel",
    "JobModel",
    "JobQuestionModel",
    "JobQuestionAnswerModel",
    "NotificationModel",
    "QuestionModel",
    "QuestionOptionModel",
    "UserModel",
    "WorkerAssignmentModel",
    "WorkerModel",
]
