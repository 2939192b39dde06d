"""
Identifier Quoting - Default column quoting per dialect

Hosts normally quote identifiers themselves (they know about reserved words
and schema qualification); this module is the fallback used when the caller
does not pass an already-quoted column.
"""

import re

from compiler.dialects import Dialect
from compiler.errors import InvalidIdentifierError

_SEGMENT = r'[A-Za-z_][A-Za-z0-9_$]*'
_IDENTIFIER_RE = re.compile(rf'^{_SEGMENT}(\.{_SEGMENT})*$')

# (open, close) quote characters
_QUOTES = {
    Dialect.MYSQL: ('`', '`'),
    Dialect.POSTGRESQL: ('"', '"'),
    Dialect.SQLITE: ('"', '"'),
    Dialect.SQLSERVER: ('[', ']'),
    Dialect.UNKNOWN: ('`', '`'),
}


def is_valid_identifier(column: str) -> bool:
    """Check that column is a name, optionally dot-qualified (e.g. 'users.email')"""
    return bool(column) and _IDENTIFIER_RE.match(column) is not None


def quote_identifier(column: str, dialect: Dialect) -> str:
    """
    Quote a possibly qualified column name for a dialect

    Args:
        column: Column name, e.g. 'email' or 'users.email'
        dialect: Target dialect

    Returns:
        Quoted identifier, e.g. '"users"."email"' for PostgreSQL

    Raises:
        InvalidIdentifierError: If column is not a valid identifier
    """
    if not isinstance(column, str) or not is_valid_identifier(column):
        raise InvalidIdentifierError(f"Invalid column identifier: {column!r}")

    open_quote, close_quote = _QUOTES[dialect]
    return '.'.join(f"{open_quote}{segment}{close_quote}" for segment in column.split('.'))


__all__ = ['is_valid_identifier', 'quote_identifier']
