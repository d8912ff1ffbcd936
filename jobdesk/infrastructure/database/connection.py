"""
Database connection utilities.
"""

import time
from typing import Any, Dict

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from jobdesk.config.logging import get_logger

logger = get_logger(__name__)


async def get_database_health(session: AsyncSession) -> Dict[str, Any]:
    """Round-trip a trivial query and report how long the store took."""
    dialect = session.bind.dialect.name if session.bind is not None else None
    start_time = time.perf_counter()

    try:
        await session.execute(text("SELECT 1"))
    except (SQLAlchemyError, OSError) as e:
        logger.error("Database health check failed", dialect=dialect, error=str(e))
        return {"status": "unhealthy", "dialect": dialect, "error": type(e).__name__}

    return {
        "status": "healthy",
        "dialect": dialect,
        "response_time_ms": round((time.perf_counter() - start_time) * 1000, 2),
    }
