"""
Health check implementations for the application.
"""

import time
from typing import Any, Dict

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from repairshop.config.logging import get_logger

logger = get_logger(__name__)


class HealthChecker:
    """Health checker for application components."""

    def __init__(self, db_session: AsyncSession):
        self.db_session = db_session

    async def check_database(self) -> Dict[str, Any]:
        """Round-trip a trivial query to the database."""
        start = time.perf_counter()
        try:
            await self.db_session.execute(text("SELECT 1"))
        except SQLAlchemyError as e:
            logger.error("Database health check failed", error=str(e))
            return {"status": "unhealthy", "error": str(e)}

        return {
            "status": "healthy",
            "response_time_ms": round((time.perf_counter() - start) * 1000, 2),
        }

    async def check_readiness(self) -> bool:
        """Whether the service can serve requests."""
        result = await self.check_database()
        return result["status"] == "healthy"
