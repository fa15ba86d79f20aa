"""
User model - registered account, soft-deleted through is_deleted.
"""

from datetime import date, datetime

from sqlalchemy import Date, DateTime, String, false, func
from sqlalchemy.orm import Mapped, mapped_column

from joinapp.db.base import Base


class User(Base):
    """User entity. The public identifier is uid; id is a surrogate key used for ordering."""

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    uid: Mapped[str] = mapped_column(String(36), unique=True, nullable=False)
    first_name: Mapped[str] = mapped_column(String(100), nullable=False)
    last_name: Mapped[str] = mapped_column(String(100), nullable=False)
    email: Mapped[str] = mapped_column(String(255), unique=True, index=True, nullable=False)
    birthdate: Mapped[date | None] = mapped_column(Date, nullable=True)
    username: Mapped[str] = mapped_column(String(100), nullable=False)
    password: Mapped[str] = mapped_column(String(255), nullable=False)
    created_by: Mapped[str] = mapped_column(String(36), nullable=False, default="")
    updated_by: Mapped[str] = mapped_column(String(36), nullable=False, default="")
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now())
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now()
    )
    is_deleted: Mapped[bool] = mapped_column(default=False, server_default=false(), nullable=False)

    def __repr__(self) -> str:
        return f"<User(uid={self.uid}, email={self.email})>"
