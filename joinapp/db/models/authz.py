"""
Authorization model - links a user to exactly one role.
"""

from sqlalchemy import ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column

from joinapp.db.base import Base


class Authz(Base):
    __tablename__ = "authz"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    user_uid: Mapped[str] = mapped_column(String(36), ForeignKey("users.uid"), unique=True, nullable=False)
    role_uid: Mapped[str] = mapped_column(String(36), ForeignKey("roles.uid"), index=True, nullable=False)

    def __repr__(self) -> str:
        return f"<Authz(user_uid={self.user_uid}, role_uid={self.role_uid})>"
