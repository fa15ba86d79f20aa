"""
User repository - encapsulates all user data access (SOLID: Single Responsibility).
Challenge: Keep queries in one place for optimization and reuse.
Design: Registration is an idempotent insert; listing is one join query with optional name search.
"""

import logging

from sqlalchemy import Select, func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import aliased

from joinapp.core.exceptions import UserNotFoundError
from joinapp.db.errors import is_unique_violation
from joinapp.db.models.authz import Authz
from joinapp.db.models.role import Role
from joinapp.db.models.user import User
from joinapp.db.repositories.base_repository import BaseRepository
from joinapp.db.search import fullname_predicate
from joinapp.schemas.user import UsersPage, UserSession, UserWithRole

logger = logging.getLogger(__name__)


class UserRepository(BaseRepository[User]):
    """User-specific queries. Extends base CRUD with domain logic."""

    def __init__(self, session):
        super().__init__(session, User)

    async def create_users(self, user: User) -> bool:
        """Insert a user. A duplicate uid/email is not an error: returns False and leaves the row as is."""
        try:
            # SAVEPOINT keeps the outer transaction usable after a constraint violation
            async with self.session.begin_nested():
                self.session.add(user)
        except IntegrityError as exc:
            if not is_unique_violation(exc):
                raise
            logger.info("create_users: duplicate user ignored (email=%s)", user.email)
            return False
        return True

    async def read_user_by_email(self, email: str) -> UserSession:
        """Login lookup: user UID, role UID and password hash. Raises UserNotFoundError on no match."""
        result = await self.session.execute(
            select(Authz.user_uid, Authz.role_uid, User.password)
            .select_from(User)
            .join(Authz, User.uid == Authz.user_uid)
            .where(User.email == email)
        )
        row = result.first()
        if row is None:
            raise UserNotFoundError(f"user with email {email} not found")
        return UserSession(user_uid=row.user_uid, role_uid=row.role_uid, password=row.password)

    def _listing(self, fullname: str, *columns) -> Select:
        """users JOIN authz JOIN roles, filtered by the name search when one is given."""
        stmt = (
            select(*columns)
            .select_from(User)
            .join(Authz, User.uid == Authz.user_uid)
            .join(Role, Authz.role_uid == Role.uid)
        )
        predicate = fullname_predicate(self.dialect_name, fullname)
        if predicate is not None:
            stmt = stmt.where(predicate)
        return stmt

    async def read_users_with_pagination(self, fullname: str, limit: int, offset: int) -> UsersPage:
        """One page of users with role names. per_page accumulates the per-row count of every returned row."""
        us = aliased(User)
        per_page = (
            select(func.count())
            .select_from(us)
            .where(us.id == User.id)
            .scalar_subquery()
            .label("per_page")
        )
        stmt = (
            self._listing(
                fullname,
                User.uid,
                User.first_name,
                User.last_name,
                User.email,
                User.birthdate,
                User.username,
                User.created_at,
                per_page,
                Role.name.label("role_name"),
            )
            .order_by(User.id)
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(stmt)

        page = UsersPage()
        for row in result:
            page.per_page += row.per_page
            page.users.append(UserWithRole.model_validate(row, from_attributes=True))
        return page

    async def count_listed_users(self, fullname: str = "") -> int:
        """Total rows the listing would return without LIMIT/OFFSET."""
        result = await self.session.execute(self._listing(fullname, func.count()))
        return result.scalar_one()

    async def count_users(self, is_deleted: bool = False) -> int:
        """Number of users with the given soft-delete flag."""
        result = await self.session.execute(
            select(func.count()).select_from(User).where(User.is_deleted == is_deleted)
        )
        return result.scalar_one()
