"""
Redis client - key/value cache with TTL used for session markers.
Challenge: Connection pooling, one shared client, errors visible to callers.
Design: Single client instance, dependency injection for testability.
"""

import json
import logging
from typing import Any

from redis.asyncio import Redis

from joinapp.config import get_settings

logger = logging.getLogger(__name__)
settings = get_settings()

# Shared async Redis client (connection pool managed by redis-py)
_redis: Redis | None = None


async def get_redis() -> Redis:
    """Get Redis connection. Used as FastAPI dependency."""
    global _redis
    if _redis is None:
        _redis = Redis.from_url(
            settings.redis_url,
            encoding="utf-8",
            decode_responses=True,
        )
    return _redis


async def close_redis() -> None:
    """Release the shared client's pool (app shutdown)."""
    global _redis
    if _redis is not None:
        await _redis.aclose()
        _redis = None
        logger.info("Redis client closed")


class Cache:
    """Set/Delete/Exists over Redis. Non-string values are stored JSON-encoded. Redis errors propagate."""

    def __init__(self, client: Redis):
        self.client = client

    async def set(self, key: str, value: Any, ttl_seconds: int) -> None:
        if not isinstance(value, (str, bytes)):
            value = json.dumps(value)
        await self.client.set(key, value, ex=ttl_seconds)

    async def delete(self, key: str) -> None:
        """Delete key. Missing keys are fine."""
        await self.client.delete(key)

    async def exists(self, key: str) -> bool:
        return bool(await self.client.exists(key))
