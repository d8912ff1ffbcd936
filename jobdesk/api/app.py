"""
FastAPI application factory.
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.sessions import SessionMiddleware

from jobdesk.api.middleware.error_handler import ErrorHandlerMiddleware
from jobdesk.api.middleware.logging import LoggingMiddleware
from jobdesk.api.routes import (
    customers,
    health,
    jobs,
    notifications,
    questions,
    users,
    worker_assignments,
    workers,
)
from jobdesk.config.logging import get_logger
from jobdesk.config.settings import settings

logger = get_logger(__name__)


def create_app() -> FastAPI:
    """Create and configure FastAPI application."""

    app = FastAPI(
        title=settings.APP_NAME,
        version=settings.APP_VERSION,
        description="Job management with per-job question forms and worker staffing",
        openapi_url=f"{settings.API_PREFIX}/openapi.json" if settings.DEBUG else None,
        docs_url=f"{settings.API_PREFIX}/docs" if settings.DEBUG else None,
        redoc_url=f"{settings.API_PREFIX}/redoc" if settings.DEBUG else None,
    )

    # Add CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Login stores the user id in a signed cookie session
    app.add_middleware(
        SessionMiddleware,
        secret_key=settings.SESSION_SECRET,
        https_only=settings.ENVIRONMENT == "production",
    )

    # Add custom middleware
    ErrorHandlerMiddleware(app)
    LoggingMiddleware(app)

    # Add routes
    for router in (
        health.router,
        users.router,
        customers.router,
        jobs.router,
        questions.router,
        worker_assignments.router,
        workers.router,
        notifications.router,
    ):
        app.include_router(router, prefix=settings.API_PREFIX)

    return app
