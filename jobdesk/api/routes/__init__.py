"""
API routes package.
"""

from .customers import router as customers_router
from .health import router as health_router
from .jobs import router as jobs_router
from .notifications import router as notifications_router
from .questions import router as questions_router
from .users import router as users_router
from .worker_assignments import router as worker_assignments_router
from .workers import router as workers_router

__all__ = [
    "customers_router",
    "health_router",
    "jobs_router",
    "notifications_router",
    "questions_router",
    "users_router",
    "worker_assignments_router",
    "workers_router",
]
