"""
Health check endpoints for the application.
"""

from datetime import datetime, timezone
from typing import Any, Dict

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from jobdesk.api.dependencies import SessionDep
from jobdesk.config.logging import get_logger
from jobdesk.config.settings import settings
from jobdesk.infrastructure.database.connection import get_database_health

logger = get_logger(__name__)
router = APIRouter(prefix="/health", tags=["health"])


@router.get("")
async def health_check(db: SessionDep) -> Dict[str, Any]:
    """Report service health, including a round trip to the database."""
    database = await get_database_health(db)
    healthy = database["status"] == "healthy"

    body = {
        "status": "healthy" if healthy else "unhealthy",
        "version": settings.APP_VERSION,
        "database": database,
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }
    if not healthy:
        logger.warning("Health check failed", database=database)
        return JSONResponse(status_code=503, content=body)
    return body
