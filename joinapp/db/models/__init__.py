# ORM models; importing this package registers every table on Base.metadata

from joinapp.db.models.authz import Authz
from joinapp.db.models.role import Role
from joinapp.db.models.user import User

__all__ = ["User", "Role", "Authz"]
