"""
Role repository - role lookups for registration.
"""

from sqlalchemy import select

from joinapp.db.models.role import Role
from joinapp.db.repositories.base_repository import BaseRepository


class RoleRepository(BaseRepository[Role]):
    def __init__(self, session):
        super().__init__(session, Role)

    async def get_by_name(self, name: str) -> Role | None:
        result = await self.session.execute(select(Role).where(Role.name == name))
        return result.scalar_one_or_none()
