"""
Health check endpoints for the application.
"""

from datetime import datetime, timezone
from typing import Any, Dict

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import Response
from sqlalchemy.ext.asyncio import AsyncSession

from repairshop.config.database import get_db_session
from repairshop.config.logging import get_logger
from repairshop.config.settings import settings
from repairshop.infrastructure.monitoring.health_checks import HealthChecker
from repairshop.infrastructure.monitoring.metrics import (
    get_metrics,
    get_metrics_content_type,
)

logger = get_logger(__name__)
router = APIRouter(prefix="/health", tags=["health"])


def _timestamp() -> str:
    return datetime.now(timezone.utc).isoformat()


async def get_health_checker(
    db: AsyncSession = Depends(get_db_session),
) -> HealthChecker:
    """Get health checker instance."""
    return HealthChecker(db)


@router.get("")
async def liveness_check() -> Dict[str, Any]:
    """Liveness check; does not touch the database."""
    return {"status": "alive", "timestamp": _timestamp()}


@router.get("/ready")
async def readiness_check(
    health_checker: HealthChecker = Depends(get_health_checker),
) -> Dict[str, Any]:
    """Readiness check for Kubernetes."""
    database = await health_checker.check_database()
    if database["status"] != "healthy":
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Service not ready",
        )
    return {"status": "ready", "database": database, "timestamp": _timestamp()}


@router.get("/metrics")
async def prometheus_metrics() -> Response:
    """Prometheus metrics endpoint."""
    if not settings.ENABLE_METRICS:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Metrics disabled")

    logger.debug("Prometheus metrics requested")
    return Response(content=get_metrics(), media_type=get_metrics_content_type())
