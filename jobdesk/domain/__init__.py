"""
Domain package.
"""

from .entities import *
from .exceptions import *
from .value_objects import *

__all__ = [
    # Entities
    "JobQuestionView",
    "OptionView",
    # Exceptions
    "AuthenticationError",
    "InvalidReferenceError",
    "NotFoundError",
    "PermissionDeniedError",
    "RecordNotFoundError",
    "StoreError",
    "StoreFailureKind",
    "ValidationError",
    # Value Objects
    "QuestionType",
    "Role",
    "normalize_answer_values",
]
