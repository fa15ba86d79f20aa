"""
Driver-independent classification of database errors.
Challenge: Tell a uniqueness violation apart from other integrity errors without parsing messages.
"""

from sqlalchemy.exc import IntegrityError

# SQLSTATE for unique_violation (PostgreSQL, also reported by asyncpg/psycopg)
PG_UNIQUE_VIOLATION = "23505"
# MySQL ER_DUP_ENTRY
MYSQL_DUP_ENTRY = 1062
SQLITE_UNIQUE = {"SQLITE_CONSTRAINT_UNIQUE", "SQLITE_CONSTRAINT_PRIMARYKEY"}


def is_unique_violation(exc: IntegrityError) -> bool:
    """True when the wrapped DBAPI error is a unique/primary key constraint violation."""
    orig = exc.orig
    sqlstate = getattr(orig, "sqlstate", None) or getattr(orig, "pgcode", None)
    if sqlstate:
        return sqlstate == PG_UNIQUE_VIOLATION

    errorname = getattr(orig, "sqlite_errorname", None)
    if errorname:
        return errorname in SQLITE_UNIQUE

    args = getattr(orig, "args", ())
    if args and isinstance(args[0], int):
        return args[0] == MYSQL_DUP_ENTRY

    # sqlite3 before Python 3.11 exposes no error code
    return str(orig).startswith("UNIQUE constraint failed")
