"""
Role model - named role a user is authorized as (mentor, mentee).
"""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from joinapp.db.base import Base


class Role(Base):
    __tablename__ = "roles"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    uid: Mapped[str] = mapped_column(String(36), unique=True, nullable=False)
    name: Mapped[str] = mapped_column(String(50), unique=True, nullable=False)

    def __repr__(self) -> str:
        return f"<Role(uid={self.uid}, name={self.name})>"
