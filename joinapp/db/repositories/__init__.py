# Repository pattern: abstract data access (SOLID - Dependency Inversion)

from joinapp.db.repositories.authz_repository import AuthzRepository
from joinapp.db.repositories.role_repository import RoleRepository
from joinapp.db.repositories.user_repository import UserRepository

__all__ = ["UserRepository", "RoleRepository", "AuthzRepository"]
