"""
Full-name search predicate for the user listing.

The search term is reduced to word tokens and the last token becomes a prefix
match, so "Jo" finds "John Doe" and "John Do" finds "John Doe" and "Dora Lee".
Every value reaches the database as a bound parameter; nothing typed by a
client is formatted into SQL text.

Per dialect:
  mysql       MATCH (first_name, last_name) AGAINST (:q IN BOOLEAN MODE), q = "john do*"
  postgresql  to_tsvector('simple', first_name || ' ' || last_name) @@ to_tsquery('simple', :q),
              q = "john | do:*"
  other       first_name/last_name LIKE 'token%' for each token (SQLite in tests)
"""

import re

from sqlalchemy import ColumnElement, func, literal_column, or_
from sqlalchemy.dialects.mysql import match

from joinapp.db.models.user import User

_WORD = re.compile(r"\w+", re.UNICODE)


def search_terms(fullname: str) -> list[str]:
    """Word tokens of a search term. Boolean-mode operators and quotes are dropped."""
    return _WORD.findall(fullname or "")


def mysql_boolean_query(terms: list[str]) -> str:
    return " ".join(terms[:-1] + [terms[-1] + "*"])


def pg_tsquery(terms: list[str]) -> str:
    return " | ".join(terms[:-1] + [terms[-1] + ":*"])


def fullname_predicate(dialect_name: str, fullname: str) -> ColumnElement[bool] | None:
    """Build the WHERE predicate for a name search, or None when there is nothing to search."""
    terms = search_terms(fullname)
    if not terms:
        return None

    if dialect_name in ("mysql", "mariadb"):
        return match(User.first_name, User.last_name, against=mysql_boolean_query(terms)).in_boolean_mode()

    if dialect_name == "postgresql":
        simple = literal_column("'simple'")
        document = func.to_tsvector(simple, User.first_name.op("||")(literal_column("' '")).op("||")(User.last_name))
        return document.bool_op("@@")(func.to_tsquery(simple, pg_tsquery(terms)))

    return or_(
        *(
            column.istartswith(term, autoescape=True)
            for term in terms
            for column in (User.first_name, User.last_name)
        )
    )
