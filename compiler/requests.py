"""
Predicate Requests - Immutable inputs and outputs of the predicate compiler
"""

import math
from dataclasses import dataclass, field
from typing import Any, Sequence, Tuple, Union

from compiler.errors import InvalidPredicateError
from compiler.quoting import is_valid_identifier

JsonScalar = Union[str, int, float, bool, None]

PLACEHOLDER = '?'

_SCALAR_TYPES = (str, int, float, bool, type(None))


@dataclass(frozen=True)
class LikeRequest:
    """Substring search on a single column"""
    column: str
    pattern: str
    case_sensitive: bool = False
    escape_wildcards: bool = False
    disjunctive: bool = False

    def __post_init__(self):
        _require_identifier(self.column)
        if not isinstance(self.pattern, str):
            raise InvalidPredicateError(
                f"LIKE pattern must be a string, got {type(self.pattern).__name__}"
            )


@dataclass(frozen=True)
class JsonAnyRequest:
    """Membership test: JSON array column contains any of the given values"""
    column: str
    values: Tuple[JsonScalar, ...] = ()
    disjunctive: bool = False

    def __post_init__(self):
        _require_identifier(self.column)
        if isinstance(self.values, (str, bytes, dict)) or not isinstance(self.values, Sequence):
            raise InvalidPredicateError(
                f"values must be a sequence of JSON scalars, got {type(self.values).__name__}"
            )
        for index, value in enumerate(self.values):
            if not isinstance(value, _SCALAR_TYPES):
                raise InvalidPredicateError(
                    f"values[{index}] must be a JSON scalar (str, number, bool or None), "
                    f"got {type(value).__name__}"
                )
            if isinstance(value, float) and not math.isfinite(value):
                raise InvalidPredicateError(f"values[{index}] is not a finite number: {value!r}")
        object.__setattr__(self, 'values', tuple(self.values))


@dataclass(frozen=True)
class CompiledFragment:
    """
    A boolean SQL expression with positional '?' placeholders

    Bindings are aligned 1:1 with placeholders in order of appearance.
    The PostgreSQL array binding is a list so drivers adapt it to an array,
    which makes those fragments unhashable.
    """
    sql: str
    bindings: Tuple[Any, ...] = field(default_factory=tuple)

    def __post_init__(self):
        object.__setattr__(self, 'bindings', tuple(self.bindings))

    @property
    def placeholder_count(self) -> int:
        return self.sql.count(PLACEHOLDER)

    def to_paramstyle(self, paramstyle: str = 'qmark') -> str:
        """
        Render SQL text for a DB-API paramstyle

        Args:
            paramstyle: 'qmark', 'format' or 'numeric'

        Returns:
            SQL text with placeholders rewritten

        Raises:
            ValueError: If paramstyle is not supported
        """
        return convert_placeholders(self.sql, paramstyle)


def convert_placeholders(sql: str, paramstyle: str) -> str:
    """Rewrite '?' placeholders in compiler output into another DB-API paramstyle"""
    if paramstyle == 'qmark':
        return sql
    if paramstyle == 'format':
        return sql.replace('%', '%%').replace(PLACEHOLDER, '%s')
    if paramstyle == 'numeric':
        parts = sql.split(PLACEHOLDER)
        rendered = parts[0]
        for position, part in enumerate(parts[1:], start=1):
            rendered += f":{position}{part}"
        return rendered
    raise ValueError(
        f"Unsupported paramstyle: {paramstyle}. Supported: qmark, format, numeric"
    )


def _require_identifier(column: Any):
    if not isinstance(column, str) or not is_valid_identifier(column):
        raise InvalidPredicateError(f"Invalid column identifier: {column!r}")


__all__ = [
    'JsonScalar',
    'LikeRequest',
    'JsonAnyRequest',
    'CompiledFragment',
    'convert_placeholders',
    'PLACEHOLDER',
]
