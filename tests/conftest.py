"""
Pytest fixtures - test DB, in-memory Redis double, client, auth.
Challenge: Isolated tests; no real PostgreSQL or Redis in unit tests.
"""

import time
from datetime import date
from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from joinapp.cache.redis_client import Cache, get_redis
from joinapp.cache.session_store import SessionStore
from joinapp.core.security import create_access_token, hash_password
from joinapp.db.base import Base
from joinapp.db.models import Authz, Role, User
from joinapp.db.session import get_db
from joinapp.main import app

# One shared in-memory SQLite connection per test
TEST_DATABASE_URL = "sqlite+aiosqlite://"

MENTOR_UID = "role-mentor"
MENTEE_UID = "role-mentee"


class FakeRedis:
    """In-memory stand-in for redis.asyncio.Redis covering the commands the app uses."""

    def __init__(self):
        self.store: dict[str, tuple[str, float | None]] = {}

    def _alive(self, key: str) -> bool:
        entry = self.store.get(key)
        if entry is None:
            return False
        _, expires_at = entry
        if expires_at is not None and expires_at <= time.monotonic():
            del self.store[key]
            return False
        return True

    async def set(self, key, value, ex=None):
        self.store[key] = (value, time.monotonic() + ex if ex else None)
        return True

    async def get(self, key):
        return self.store[key][0] if self._alive(key) else None

    async def exists(self, *keys):
        return sum(1 for k in keys if self._alive(k))

    async def delete(self, *keys):
        removed = 0
        for k in keys:
            if self._alive(k):
                del self.store[k]
                removed += 1
        return removed

    async def ttl(self, key):
        if not self._alive(key):
            return -2
        _, expires_at = self.store[key]
        return -1 if expires_at is None else int(round(expires_at - time.monotonic()))

    async def ping(self):
        return True


@pytest_asyncio.fixture
async def engine():
    engine = create_async_engine(
        TEST_DATABASE_URL,
        echo=False,
        poolclass=StaticPool,
    )

    # pysqlite/aiosqlite need explicit BEGIN for SAVEPOINT to work
    @event.listens_for(engine.sync_engine, "connect")
    def do_connect(dbapi_connection, connection_record):
        dbapi_connection.isolation_level = None

    @event.listens_for(engine.sync_engine, "begin")
    def do_begin(conn):
        conn.exec_driver_sql("BEGIN")

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def session(engine) -> AsyncGenerator[AsyncSession, None]:
    async_session = async_sessionmaker(
        engine, class_=AsyncSession, expire_on_commit=False
    )
    async with async_session() as s:
        yield s


@pytest_asyncio.fixture
async def roles(session: AsyncSession) -> dict[str, Role]:
    mentor = Role(uid=MENTOR_UID, name="mentor")
    mentee = Role(uid=MENTEE_UID, name="mentee")
    session.add_all([mentor, mentee])
    await session.flush()
    return {"mentor": mentor, "mentee": mentee}


@pytest.fixture
def fake_redis() -> FakeRedis:
    return FakeRedis()


@pytest.fixture
def session_store(fake_redis: FakeRedis) -> SessionStore:
    return SessionStore(Cache(fake_redis))


@pytest_asyncio.fixture
async def client(session: AsyncSession, fake_redis: FakeRedis):
    async def override_get_db():
        yield session

    async def override_get_redis():
        return fake_redis

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_redis] = override_get_redis
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac
    app.dependency_overrides.clear()


async def make_user(
    session: AsyncSession,
    role: Role,
    *,
    uid: str,
    first_name: str,
    last_name: str,
    email: str,
    password: str = "password123",
    is_deleted: bool = False,
) -> User:
    """Insert a user with a role directly (no service layer)."""
    user = User(
        uid=uid,
        first_name=first_name,
        last_name=last_name,
        email=email,
        birthdate=date(1990, 1, 1),
        username=email.split("@")[0],
        password=hash_password(password),
        created_by=uid,
        updated_by=uid,
        is_deleted=is_deleted,
    )
    session.add(user)
    session.add(Authz(user_uid=uid, role_uid=role.uid))
    await session.flush()
    return user


@pytest_asyncio.fixture
async def test_user(session: AsyncSession, roles: dict[str, Role]) -> User:
    return await make_user(
        session,
        roles["mentee"],
        uid="u1",
        first_name="John",
        last_name="Doe",
        email="a@x.com",
    )


@pytest_asyncio.fixture
async def auth_headers(test_user: User, session_store: SessionStore) -> dict:
    """Bearer token for test_user with a live session marker."""
    token = create_access_token(test_user.uid, MENTEE_UID)
    await session_store.create_session(test_user.uid)
    return {"Authorization": f"Bearer {token}"}
