"""
Base repository - generic data access shared by user, role and authz repositories.
Challenge: Consistent data access, testability via mocks, query optimization in one place.
"""

from typing import Generic, TypeVar

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from joinapp.db.base import Base

ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """Generic async repository. Subclasses define model-specific methods."""

    def __init__(self, session: AsyncSession, model: type[ModelType]):
        self.session = session
        self.model = model

    @property
    def dialect_name(self) -> str:
        """Name of the SQL dialect behind the session (mysql, postgresql, sqlite...)."""
        return self.session.get_bind().dialect.name

    async def get_by_uid(self, uid: str) -> ModelType | None:
        """Fetch single entity by its public UID."""
        result = await self.session.execute(select(self.model).where(self.model.uid == uid))
        return result.scalar_one_or_none()

    async def add(self, entity: ModelType) -> ModelType:
        """Persist new entity. Caller commits session."""
        self.session.add(entity)
        await self.session.flush()
        return entity
