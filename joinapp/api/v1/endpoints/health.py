"""
Health checks - for load balancers, Kubernetes, and monitoring.
Challenge: Fast liveness; readiness pings the database and Redis.
"""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from redis.asyncio import Redis
from sqlalchemy import text

from joinapp.cache.redis_client import get_redis
from joinapp.config import get_settings
from joinapp.db.session import DbSession

logger = logging.getLogger(__name__)
router = APIRouter()
settings = get_settings()


@router.get("")
async def health():
    """Liveness: is the process up?"""
    return {"status": "ok", "app": settings.app_name}


@router.get("/ready")
async def ready(session: DbSession, redis: Annotated[Redis, Depends(get_redis)]):
    """Readiness: can the database and Redis be reached?"""
    checks = {}
    try:
        await session.execute(text("SELECT 1"))
        checks["database"] = "ok"
    except Exception as exc:
        logger.warning("readiness: database check failed: %s", exc)
        checks["database"] = "unavailable"
    try:
        await redis.ping()
        checks["redis"] = "ok"
    except Exception as exc:
        logger.warning("readiness: redis check failed: %s", exc)
        checks["redis"] = "unavailable"

    if all(v == "ok" for v in checks.values()):
        return {"status": "ready", **checks}
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"status": "not ready", **checks},
    )
