"""
Main application entry point.
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI

from jobdesk.api.app import create_app
from jobdesk.config.database import close_database_connections
from jobdesk.config.logging import configure_logging, get_logger
from jobdesk.config.settings import settings

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    configure_logging()
    logger.info(
        "Starting Jobdesk API",
        environment=settings.ENVIRONMENT,
        version=settings.APP_VERSION,
    )

    try:
        yield
    finally:
        logger.info("Shutting down Jobdesk API")
        await close_database_connections()


def create_main_app() -> FastAPI:
    """Create the main FastAPI application."""
    app = create_app()
    app.router.lifespan_context = lifespan
    return app


app = create_main_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "jobdesk.main:app",
        host=settings.API_HOST,
        port=settings.API_PORT,
        reload=False,
        log_level=settings.LOG_LEVEL.lower(),
    )
