"""
API request/response schemas.
"""

from .answer import AnswerCreateRequest, AnswerResponse, AnswerUpdateRequest
from .common import CamelModel, ErrorResponse, MessageResponse
from .customer import CustomerRequest, CustomerResponse, CustomerSummary
from .job import (
    JobCreateRequest,
    JobCreateResponse,
    JobListResponse,
    JobResponse,
    JobUpdateRequest,
)
from .question import JobQuestionResponse, QuestionRequest, QuestionResponse
from .user import (
    LoginRequest,
    LoginResponse,
    NotificationRequest,
    NotificationResponse,
    UserCreateRequest,
    UserResponse,
    UserUpdateRequest,
)
from .worker import (
    WorkerAssignmentCreateRequest,
    WorkerAssignmentListResponse,
    WorkerAssignmentResponse,
    WorkerAssignmentUpdateRequest,
    WorkerCreateRequest,
    WorkerResponse,
    WorkerUpdateRequest,
)

__all__ = [
    "AnswerCreateRequest",
    "AnswerResponse",
    "AnswerUpdateRequest",
    "CamelModel",
    "CustomerRequest",
    "CustomerResponse",
    "CustomerSummary",
    "ErrorResponse",
    "JobCreateRequest",
    "JobCreateResponse",
    "JobListResponse",
    "JobQuestionResponse",
    "JobResponse",
    "JobUpdateRequest",
    "LoginRequest",
    "LoginResponse",
    "MessageResponse",
    "NotificationRequest",
    "NotificationResponse",
    "QuestionRequest",
    "QuestionResponse",
    "UserCreateRequest",
    "UserResponse",
    "UserUpdateRequest",
    "WorkerAssignmentCreateRequest",
    "WorkerAssignmentListResponse",
    "WorkerAssignmentResponse",
    "WorkerAssignmentUpdateRequest",
    "WorkerCreateRequest",
    "WorkerResponse",
    "WorkerUpdateRequest",
]
