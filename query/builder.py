"""
Query Builder - Composes compiled predicate fragments into a SELECT statement
"""

from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple, Union

from compiler import (
    CompilationError,
    CompiledFragment,
    Dialect,
    JsonAnyRequest,
    LikeRequest,
    PredicateCompiler,
    quote_identifier,
)
from compiler.filter_schema import FilterValidator, build_requests


class QueryBuilder:
    """
    Fluent SELECT builder for a single table

    Each where* call adds one parenthesized clause. The or_* variants join
    their clause to the previous ones with OR, everything else with AND.
    """

    OPERATORS = ('=', '!=', '<>', '<', '<=', '>', '>=')
    DIRECTIONS = ('ASC', 'DESC')

    def __init__(self,
                 table: str,
                 dialect: Union[Dialect, str],
                 columns: Optional[Sequence[str]] = None,
                 compiler: Optional[PredicateCompiler] = None):
        """
        Initialize builder

        Args:
            table: Table name (optionally schema-qualified)
            dialect: Target dialect or driver name
            columns: Columns to select (all columns when omitted)
            compiler: Predicate compiler (default settings when omitted)
        """
        self.dialect = Dialect.from_driver(dialect)
        self.table = table
        self.columns = list(columns or [])
        self.compiler = compiler or PredicateCompiler()
        self._clauses: List[Tuple[str, CompiledFragment]] = []
        self._order: List[Tuple[str, str]] = []
        self._limit: Optional[int] = None

    # Basic comparisons

    def where(self, column: str, operator: str, value: Any) -> 'QueryBuilder':
        return self._add_comparison('AND', column, operator, value)

    def or_where(self, column: str, operator: str, value: Any) -> 'QueryBuilder':
        return self._add_comparison('OR', column, operator, value)

    def where_raw(self, sql: str, bindings: Iterable[Any] = ()) -> 'QueryBuilder':
        self._clauses.append(('AND', CompiledFragment(sql, tuple(bindings))))
        return self

    def or_where_raw(self, sql: str, bindings: Iterable[Any] = ()) -> 'QueryBuilder':
        self._clauses.append(('OR', CompiledFragment(sql, tuple(bindings))))
        return self

    # Compiled predicates

    def where_like(self,
                   column: str,
                   value: str,
                   case_sensitive: bool = False,
                   escape_wildcards: bool = False) -> 'QueryBuilder':
        """Add a substring search joined with AND"""
        return self.apply_request('LIKE', LikeRequest(
            column=column,
            pattern=value,
            case_sensitive=case_sensitive,
            escape_wildcards=escape_wildcards,
        ))

    def or_where_like(self,
                      column: str,
                      value: str,
                      case_sensitive: bool = False,
                      escape_wildcards: bool = False) -> 'QueryBuilder':
        """Add a substring search joined with OR"""
        return self.apply_request('LIKE', LikeRequest(
            column=column,
            pattern=value,
            case_sensitive=case_sensitive,
            escape_wildcards=escape_wildcards,
            disjunctive=True,
        ))

    def where_json_contains_any(self, column: str, values: Sequence[Any]) -> 'QueryBuilder':
        """Add a JSON array membership test joined with AND"""
        return self.apply_request('JSON_CONTAINS_ANY', JsonAnyRequest(column=column, values=values))

    def or_where_json_contains_any(self, column: str, values: Sequence[Any]) -> 'QueryBuilder':
        """Add a JSON array membership test joined with OR"""
        return self.apply_request(
            'JSON_CONTAINS_ANY',
            JsonAnyRequest(column=column, values=values, disjunctive=True),
        )

    def apply_request(self, kind: str, request: Any) -> 'QueryBuilder':
        """
        Compile a predicate request and add it as a clause

        Raises:
            CompilationError: If the request cannot be compiled
        """
        fragment = self.compiler.compile(kind, request, self.dialect)
        connector = 'OR' if request.disjunctive else 'AND'
        self._clauses.append((connector, fragment))
        return self

    def apply_filters(self, filters: Union[Dict[str, Any], List[Tuple[str, Any]]]) -> 'QueryBuilder':
        """
        Apply filter definitions

        Args:
            filters: Raw filter document ({'filters': [...]}) or
                (kind, request) pairs from load_filters()

        Raises:
            FilterValidationError: If a raw document fails validation
        """
        if isinstance(filters, dict):
            FilterValidator().validate_and_raise(filters)
            filters = build_requests(filters)

        for kind, request in filters:
            self.apply_request(kind, request)
        return self

    # Ordering and paging

    def order_by(self, column: str, direction: str = 'ASC') -> 'QueryBuilder':
        direction = direction.upper()
        if direction not in self.DIRECTIONS:
            raise CompilationError(f"Invalid order direction: {direction}")
        self._order.append((quote_identifier(column, self.dialect), direction))
        return self

    def limit(self, count: int) -> 'QueryBuilder':
        if int(count) < 0:
            raise CompilationError(f"Limit must be non-negative, got {count}")
        self._limit = int(count)
        return self

    def _add_comparison(self, connector: str, column: str, operator: str, value: Any) -> 'QueryBuilder':
        if operator not in self.OPERATORS:
            raise CompilationError(
                f"Unsupported operator: {operator}. Supported operators: {', '.join(self.OPERATORS)}"
            )
        fragment = CompiledFragment(f"{quote_identifier(column, self.dialect)} {operator} ?", (value,))
        self._clauses.append((connector, fragment))
        return self

    # Rendering

    def to_fragment(self) -> Optional[CompiledFragment]:
        """Combined WHERE expression, or None when no clauses were added"""
        if not self._clauses:
            return None

        parts = []
        bindings = []
        for index, (connector, fragment) in enumerate(self._clauses):
            if index > 0:
                parts.append(connector)
            parts.append(f"({fragment.sql})")
            bindings.extend(fragment.bindings)
        return CompiledFragment(' '.join(parts), tuple(bindings))

    def to_sql(self) -> Tuple[str, List[Any]]:
        """
        Render SELECT statement

        Returns:
            Tuple of (sql_with_qmark_placeholders, bindings)
        """
        if self.columns:
            column_list = ', '.join(quote_identifier(col, self.dialect) for col in self.columns)
        else:
            column_list = '*'

        top = ''
        if self._limit is not None and self.dialect is Dialect.SQLSERVER:
            top = f"TOP {self._limit} "

        sql = f"SELECT {top}{column_list} FROM {quote_identifier(self.table, self.dialect)}"

        bindings: List[Any] = []
        where = self.to_fragment()
        if where is not None:
            sql += f" WHERE {where.sql}"
            bindings.extend(where.bindings)

        if self._order:
            sql += " ORDER BY " + ', '.join(f"{col} {direction}" for col, direction in self._order)

        if self._limit is not None and self.dialect is not Dialect.SQLSERVER:
            sql += f" LIMIT {self._limit}"

        return sql, bindings


__all__ = ['QueryBuilder']
