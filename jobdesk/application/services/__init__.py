"""
Application services package.
"""

from .auth_service import AuthService, hash_password, verify_password
from .error_normalizer import (
    ErrorNormalizer,
    NormalizedError,
    error_normalizer,
    normalized_store_errors,
)
from .identifier_resolver import JobIdentifierResolver

__all__ = [
    "AuthService",
    "ErrorNormalizer",
    "JobIdentifierResolver",
    "NormalizedError",
    "error_normalizer",
    "hash_password",
    "normalized_store_errors",
    "verify_password",
]
