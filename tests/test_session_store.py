"""
Session marker tests - key format, TTL, idempotent delete.
"""

from unittest.mock import AsyncMock

import pytest

from joinapp.cache.redis_client import Cache
from joinapp.cache.session_store import SessionStore, session_key


def test_session_key_format():
    assert session_key("u1") == "user_uuid:u1"


@pytest.mark.asyncio
async def test_create_session_sets_marker_with_ttl():
    redis = AsyncMock()
    store = SessionStore(Cache(redis))

    await store.create_session("u1")

    redis.set.assert_awaited_once_with("user_uuid:u1", "true", ex=86400)


@pytest.mark.asyncio
async def test_delete_session_deletes_key():
    redis = AsyncMock()
    store = SessionStore(Cache(redis))

    await store.delete_session("u1")

    redis.delete.assert_awaited_once_with("user_uuid:u1")


@pytest.mark.asyncio
async def test_cache_errors_propagate():
    redis = AsyncMock()
    redis.set.side_effect = ConnectionError("redis down")
    store = SessionStore(Cache(redis))

    with pytest.raises(ConnectionError):
        await store.create_session("u1")


@pytest.mark.asyncio
async def test_session_lifecycle(session_store, fake_redis):
    assert await session_store.has_session("u1") is False

    await session_store.create_session("u1")
    assert await session_store.has_session("u1") is True
    assert await fake_redis.get("user_uuid:u1") == "true"
    assert 86390 <= await fake_redis.ttl("user_uuid:u1") <= 86400

    await session_store.delete_session("u1")
    assert await session_store.has_session("u1") is False

    # deleting again is fine
    await session_store.delete_session("u1")


@pytest.mark.asyncio
async def test_repeated_login_resets_expiry(fake_redis):
    store = SessionStore(Cache(fake_redis), ttl_seconds=60)
    await store.create_session("u1")
    fake_redis.store["user_uuid:u1"] = ("true", fake_redis.store["user_uuid:u1"][1] - 50)
    assert await fake_redis.ttl("user_uuid:u1") <= 10

    await store.create_session("u1")
    assert await fake_redis.ttl("user_uuid:u1") >= 59


@pytest.mark.asyncio
async def test_expired_marker_means_logged_out(fake_redis):
    store = SessionStore(Cache(fake_redis), ttl_seconds=60)
    await store.create_session("u1")
    fake_redis.store["user_uuid:u1"] = ("true", 0.0)

    assert await store.has_session("u1") is False
