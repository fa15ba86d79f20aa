"""
User service - registration, login/logout and listing (SOLID: Single Responsibility).
Challenge: Orchestrate repositories and the session cache; keep controllers thin.
Design: Service depends on abstractions (repositories, session store); easy to test with mocks.
"""

import logging
import math
import uuid

from joinapp.cache.session_store import SessionStore
from joinapp.config import get_settings
from joinapp.core.exceptions import InvalidCredentialsError, RoleNotFoundError, UserNotFoundError
from joinapp.core.security import create_access_token, hash_password, verify_password
from joinapp.db.models.user import User
from joinapp.db.repositories.authz_repository import AuthzRepository
from joinapp.db.repositories.role_repository import RoleRepository
from joinapp.db.repositories.user_repository import UserRepository
from joinapp.schemas.user import (
    CreateUserRequest,
    GetUsersWithPaginationRequest,
    GetUsersWithPaginationResponse,
    LoginRequest,
    TokenResponse,
)

logger = logging.getLogger(__name__)
settings = get_settings()


class UserService:
    """Handles all user use cases."""

    def __init__(
        self,
        user_repo: UserRepository,
        role_repo: RoleRepository,
        authz_repo: AuthzRepository,
        sessions: SessionStore,
    ):
        self.user_repo = user_repo
        self.role_repo = role_repo
        self.authz_repo = authz_repo
        self.sessions = sessions

    async def create_user(self, req: CreateUserRequest) -> None:
        """Register a user with a role. Registering an existing email again is a no-op."""
        role = await self.role_repo.get_by_name(req.role.value)
        if role is None:
            raise RoleNotFoundError(f"role {req.role.value} not found")

        uid = str(uuid.uuid4())
        user = User(
            uid=uid,
            first_name=req.first_name,
            last_name=req.last_name,
            email=req.email,
            birthdate=req.birthdate,
            username=req.username,
            password=hash_password(req.password),
            created_by=uid,
            updated_by=uid,
        )
        if not await self.user_repo.create_users(user):
            return
        await self.authz_repo.assign_role(uid, role.uid)
        logger.info("user registered: uid=%s role=%s", uid, role.name)

    async def login(self, req: LoginRequest) -> TokenResponse:
        """Check credentials, issue a token and mark the session active in the cache."""
        try:
            session = await self.user_repo.read_user_by_email(req.email)
        except UserNotFoundError:
            logger.warning("login failed: unknown email %s", req.email)
            raise InvalidCredentialsError() from None

        if not verify_password(req.password, session.password):
            logger.warning("login failed: wrong password for user %s", session.user_uid)
            raise InvalidCredentialsError()

        token = create_access_token(session.user_uid, session.role_uid)
        await self.sessions.create_session(session.user_uid)
        logger.info("user logged in: uid=%s", session.user_uid)
        return TokenResponse(access_token=token, expires_in=settings.jwt_expire_minutes * 60)

    async def logout(self, user_uid: str) -> None:
        await self.sessions.delete_session(user_uid)
        logger.info("user logged out: uid=%s", user_uid)

    async def get_users_with_pagination(
        self, req: GetUsersWithPaginationRequest
    ) -> GetUsersWithPaginationResponse:
        """Page of users with roles, plus the total number of matches."""
        page = await self.user_repo.read_users_with_pagination(req.fullname, req.limit, req.offset)
        total = await self.user_repo.count_listed_users(req.fullname)
        return GetUsersWithPaginationResponse(
            users=page.users,
            page=req.page,
            limit=req.limit,
            per_page=page.per_page,
            total=total,
            total_pages=math.ceil(total / req.limit) if req.limit else 0,
        )

    async def count_users(self, is_deleted: bool = False) -> int:
        return await self.user_repo.count_users(is_deleted)
