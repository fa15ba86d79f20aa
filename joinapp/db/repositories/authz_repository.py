"""
Authz repository - user-to-role assignments.
"""

from joinapp.db.models.authz import Authz
from joinapp.db.repositories.base_repository import BaseRepository


class AuthzRepository(BaseRepository[Authz]):
    def __init__(self, session):
        super().__init__(session, Authz)

    async def assign_role(self, user_uid: str, role_uid: str) -> Authz:
        """Link a freshly created user to a role."""
        return await self.add(Authz(user_uid=user_uid, role_uid=role_uid))
