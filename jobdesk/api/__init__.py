"""
API package.
"""

from .app import create_app
from .dependencies import (
    CurrentUserDep,
    JobRepositoryDep,
    JobResolverDep,
    TransactionServiceDep,
    get_current_user,
    require_roles,
)
from .middleware import ErrorHandlerMiddleware, LoggingMiddleware

__all__ = [
    "create_app",
    # Dependencies
    "CurrentUserDep",
    "JobRepositoryDep",
    "JobResolverDep",
    "TransactionServiceDep",
    "get_current_user",
    "require_roles",
    # Middleware
    "ErrorHandlerMiddleware",
    "LoggingMiddleware",
]
