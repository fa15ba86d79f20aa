"""Initial schema: users, roles, authz; seed mentor/mentee roles

Revision ID: 001
Revises:
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

MENTOR_UID = "6f1b3a52-2f8e-4d0c-9a61-0c3c1f0a0001"
MENTEE_UID = "6f1b3a52-2f8e-4d0c-9a61-0c3c1f0a0002"


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("uid", sa.String(36), nullable=False),
        sa.Column("first_name", sa.String(100), nullable=False),
        sa.Column("last_name", sa.String(100), nullable=False),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("birthdate", sa.Date(), nullable=True),
        sa.Column("username", sa.String(100), nullable=False),
        sa.Column("password", sa.String(255), nullable=False),
        sa.Column("created_by", sa.String(36), nullable=False, server_default=""),
        sa.Column("updated_by", sa.String(36), nullable=False, server_default=""),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=True),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=True),
        sa.Column("is_deleted", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.PrimaryKeyConstraint("id", name="pk_users"),
        sa.UniqueConstraint("uid", name="uq_users_uid"),
    )
    op.create_index("ix_users_email", "users", ["email"], unique=True)

    dialect = op.get_bind().dialect.name
    if dialect == "mysql":
        op.create_index("ix_users_fullname_ft", "users", ["first_name", "last_name"], mysql_prefix="FULLTEXT")
    elif dialect == "postgresql":
        op.execute(
            "CREATE INDEX ix_users_fullname_ft ON users "
            "USING gin (to_tsvector('simple', first_name || ' ' || last_name))"
        )

    roles = op.create_table(
        "roles",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("uid", sa.String(36), nullable=False),
        sa.Column("name", sa.String(50), nullable=False),
        sa.PrimaryKeyConstraint("id", name="pk_roles"),
        sa.UniqueConstraint("uid", name="uq_roles_uid"),
        sa.UniqueConstraint("name", name="uq_roles_name"),
    )

    op.create_table(
        "authz",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("user_uid", sa.String(36), nullable=False),
        sa.Column("role_uid", sa.String(36), nullable=False),
        sa.PrimaryKeyConstraint("id", name="pk_authz"),
        sa.UniqueConstraint("user_uid", name="uq_authz_user_uid"),
        sa.ForeignKeyConstraint(["user_uid"], ["users.uid"], name="fk_authz_user_uid_users"),
        sa.ForeignKeyConstraint(["role_uid"], ["roles.uid"], name="fk_authz_role_uid_roles"),
    )
    op.create_index("ix_authz_role_uid", "authz", ["role_uid"], unique=False)

    op.bulk_insert(
        roles,
        [
            {"uid": MENTOR_UID, "name": "mentor"},
            {"uid": MENTEE_UID, "name": "mentee"},
        ],
    )


def downgrade() -> None:
    op.drop_index("ix_authz_role_uid", "authz")
    op.drop_table("authz")
    op.drop_table("roles")
    dialect = op.get_bind().dialect.name
    if dialect in ("mysql", "postgresql"):
        op.drop_index("ix_users_fullname_ft", "users")
    op.drop_index("ix_users_email", "users")
    op.drop_table("users")
