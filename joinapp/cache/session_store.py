"""
Session markers - "is this user logged in" as a Redis key with expiry.

A marker user_uuid:<uid> exists while the session is active. Login writes it
(resetting the TTL), logout deletes it, and Redis drops it when the TTL runs
out. Protected routes check it on top of the token signature, so a logged-out
token stops working before it expires.
"""

import logging

from joinapp.cache.redis_client import Cache
from joinapp.config import get_settings
from joinapp.core.constants import SESSION_KEY_PREFIX

logger = logging.getLogger(__name__)


def session_key(user_uid: str) -> str:
    return SESSION_KEY_PREFIX + user_uid


class SessionStore:
    def __init__(self, cache: Cache, ttl_seconds: int | None = None):
        self.cache = cache
        self.ttl_seconds = ttl_seconds or get_settings().session_ttl_seconds

    async def create_session(self, user_uid: str) -> None:
        await self.cache.set(session_key(user_uid), True, self.ttl_seconds)
        logger.debug("session created for user %s (ttl=%ss)", user_uid, self.ttl_seconds)

    async def delete_session(self, user_uid: str) -> None:
        await self.cache.delete(session_key(user_uid))
        logger.debug("session deleted for user %s", user_uid)

    async def has_session(self, user_uid: str) -> bool:
        return await self.cache.exists(session_key(user_uid))
