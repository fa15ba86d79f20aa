"""
Unique-violation classification across drivers.
Challenge: PostgreSQL and MySQL duplicates must be told apart from other integrity errors without a live server.
"""

import pytest
from sqlalchemy.exc import IntegrityError

from joinapp.db.errors import is_unique_violation


class AsyncpgError(Exception):
    """Shape of asyncpg errors as wrapped by SQLAlchemy: SQLSTATE on .sqlstate."""

    def __init__(self, sqlstate: str):
        super().__init__(f"sqlstate {sqlstate}")
        self.sqlstate = sqlstate


class Psycopg2Error(Exception):
    """psycopg2 reports SQLSTATE on .pgcode."""

    def __init__(self, pgcode: str):
        super().__init__(f"pgcode {pgcode}")
        self.pgcode = pgcode


class SqliteError(Exception):
    def __init__(self, errorname: str):
        super().__init__(errorname)
        self.sqlite_errorname = errorname


def _wrap(orig: Exception) -> IntegrityError:
    return IntegrityError("INSERT INTO users (uid, email) VALUES (?, ?)", ("u1", "a@x.com"), orig)


@pytest.mark.parametrize(
    "orig, expected",
    [
        (AsyncpgError("23505"), True),
        (AsyncpgError("23503"), False),  # foreign_key_violation
        (AsyncpgError("23502"), False),  # not_null_violation
        (Psycopg2Error("23505"), True),
        (Psycopg2Error("23503"), False),
    ],
)
def test_postgresql_sqlstate(orig, expected):
    assert is_unique_violation(_wrap(orig)) is expected


@pytest.mark.parametrize(
    "orig, expected",
    [
        (Exception(1062, "Duplicate entry 'a@x.com' for key 'users.uq_users_email'"), True),
        (Exception(1452, "Cannot add or update a child row: a foreign key constraint fails"), False),
        (Exception(1048, "Column 'first_name' cannot be null"), False),
    ],
)
def test_mysql_errno(orig, expected):
    assert is_unique_violation(_wrap(orig)) is expected


@pytest.mark.parametrize(
    "orig, expected",
    [
        (SqliteError("SQLITE_CONSTRAINT_UNIQUE"), True),
        (SqliteError("SQLITE_CONSTRAINT_PRIMARYKEY"), True),
        (SqliteError("SQLITE_CONSTRAINT_NOTNULL"), False),
        (SqliteError("SQLITE_CONSTRAINT_FOREIGNKEY"), False),
        (Exception("UNIQUE constraint failed: users.email"), True),
        (Exception("NOT NULL constraint failed: users.first_name"), False),
    ],
)
def test_sqlite_codes_and_message(orig, expected):
    assert is_unique_violation(_wrap(orig)) is expected
