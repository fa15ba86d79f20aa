"""
FastAPI dependencies - injection for DB, Redis, auth (SOLID: Dependency Inversion).
Challenge: Reusable auth, consistent error responses.
"""

import logging
from typing import Annotated

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from redis.asyncio import Redis

from joinapp.cache.redis_client import Cache, get_redis
from joinapp.cache.session_store import SessionStore
from joinapp.core.exceptions import InvalidTokenError
from joinapp.core.security import get_user_data
from joinapp.db.repositories.authz_repository import AuthzRepository
from joinapp.db.repositories.role_repository import RoleRepository
from joinapp.db.repositories.user_repository import UserRepository
from joinapp.db.session import DbSession
from joinapp.schemas.user import UserClaims
from joinapp.services.user_service import UserService

logger = logging.getLogger(__name__)

security = HTTPBearer(auto_error=False)


def get_session_store(redis: Annotated[Redis, Depends(get_redis)]) -> SessionStore:
    return SessionStore(Cache(redis))


SessionStoreDep = Annotated[SessionStore, Depends(get_session_store)]


def get_user_service(session: DbSession, sessions: SessionStoreDep) -> UserService:
    """Factory for service with repository injection (Dependency Inversion)."""
    return UserService(
        UserRepository(session),
        RoleRepository(session),
        AuthzRepository(session),
        sessions,
    )


UserServiceDep = Annotated[UserService, Depends(get_user_service)]


async def get_current_claims(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
) -> UserClaims:
    """Resolve JWT to user claims. Raises 401 if missing or invalid."""
    if not credentials:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )
    try:
        return get_user_data(credentials.credentials)
    except InvalidTokenError as exc:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=exc.message,
            headers={"WWW-Authenticate": "Bearer"},
        )


CurrentClaims = Annotated[UserClaims, Depends(get_current_claims)]


async def get_active_claims(claims: CurrentClaims, sessions: SessionStoreDep) -> UserClaims:
    """Valid token AND a live session marker. Logged-out or expired sessions get 401."""
    if not await sessions.has_session(claims.user_uid):
        logger.info("rejected token for user %s: no active session", claims.user_uid)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Session expired or logged out",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return claims
