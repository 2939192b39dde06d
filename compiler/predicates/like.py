"""
Like Predicate - Substring search with controllable case sensitivity
"""

import string
from typing import List

from compiler.dialects import Dialect
from compiler.requests import CompiledFragment, LikeRequest
from .base_predicate import BasePredicate


_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


def ascii_lower(value: str) -> str:
    """Lower-case A-Z only, the way SQLite's LOWER() does"""
    return value.translate(_ASCII_LOWER)


# Case-sensitive search
CASE_SENSITIVE_TEMPLATES = {
    Dialect.MYSQL: '{column} LIKE BINARY ?',
    Dialect.POSTGRESQL: '{column} LIKE ?',
    Dialect.SQLITE: '{column} LIKE ? COLLATE BINARY',
    Dialect.SQLSERVER: '{column} LIKE ?',
    Dialect.UNKNOWN: '{column} LIKE ?',
}

# Case-insensitive search: (template, how the search value is lower-cased)
CASE_INSENSITIVE_TEMPLATES = {
    Dialect.MYSQL: ('LOWER({column}) LIKE ?', str.lower),
    Dialect.POSTGRESQL: ('{column} ILIKE ?', None),
    Dialect.SQLITE: ('LOWER({column}) LIKE ?', ascii_lower),
    Dialect.SQLSERVER: ('LOWER({column}) LIKE ?', str.lower),
    Dialect.UNKNOWN: ('LOWER({column}) LIKE ?', str.lower),
}

# Dialects without a default LIKE escape character; CHAR(92) is '\'
ESCAPE_CLAUSES = {
    Dialect.SQLITE: ' ESCAPE CHAR(92)',
    Dialect.SQLSERVER: ' ESCAPE CHAR(92)',
}


def escape_wildcards(value: str, escape_brackets: bool = False) -> str:
    """
    Escape LIKE wildcards so they match literally

    The backslash is escaped first so the escapes added for '%' and '_'
    are not escaped a second time.

    Args:
        value: Raw search text
        escape_brackets: Also escape '[' (a wildcard on SQL Server)

    Returns:
        Text with '\\', '%' and '_' prefixed by a backslash
    """
    escaped = value.replace('\\', '\\\\').replace('%', '\\%').replace('_', '\\_')
    if escape_brackets:
        escaped = escaped.replace('[', '\\[')
    return escaped


class LikePredicate(BasePredicate):
    """Substring search predicate (whereLike / orWhereLike)"""

    request_type = LikeRequest

    def compile(self) -> CompiledFragment:
        """Compile substring search"""
        pattern = self.request.pattern
        if self.request.escape_wildcards:
            pattern = escape_wildcards(pattern, escape_brackets=self.dialect == Dialect.SQLSERVER)

        search_value = f"%{pattern}%"

        if self.request.case_sensitive:
            template = CASE_SENSITIVE_TEMPLATES[self.dialect]
        else:
            template, lower = CASE_INSENSITIVE_TEMPLATES[self.dialect]
            if lower is not None:
                search_value = lower(search_value)

        if self.request.escape_wildcards:
            template += ESCAPE_CLAUSES.get(self.dialect, '')

        return CompiledFragment(
            sql=template.format(column=self.quoted_column),
            bindings=(search_value,),
        )

    def untrusted_values(self) -> List[str]:
        return [self.request.pattern]
