"""
Domain exceptions package.
"""

from .auth_error import AuthenticationError, PermissionDeniedError
from .not_found_error import NotFoundError
from .store_error import RecordNotFoundError, StoreError, StoreFailureKind
from .validation_error import (
    InvalidFormatError,
    InvalidReferenceError,
    RequiredFieldError,
    ValidationError,
)

__all__ = [
    "AuthenticationError",
    "PermissionDeniedError",
    "NotFoundError",
    "RecordNotFoundError",
    "StoreError",
    "StoreFailureKind",
    "InvalidFormatError",
    "InvalidReferenceError",
    "RequiredFieldError",
    "ValidationError",
]
