"""
JSON Contains Any Predicate - JSON array column holds at least one of the given values
"""

import json
from typing import Any, List, Sequence

from compiler.dialects import Dialect
from compiler.requests import CompiledFragment, JsonAnyRequest
from .base_predicate import BasePredicate


# An empty "any of" set can never match
MATCH_NOTHING = CompiledFragment(sql='1 = 0', bindings=())


def encode_json(value: Any) -> str:
    """JSON-encode a scalar, keeping non-ASCII text as-is"""
    return json.dumps(value, ensure_ascii=False)


def _compile_mysql(column: str, values: Sequence[Any]) -> CompiledFragment:
    conditions = ' OR '.join(f"JSON_CONTAINS({column}, ?)" for _ in values)
    return CompiledFragment(
        sql=f"({conditions})",
        bindings=tuple(encode_json(value) for value in values),
    )


def _compile_postgresql(column: str, values: Sequence[Any]) -> CompiledFragment:
    # jsonb_exists_any is the function form of the ?| operator
    elements = [value if isinstance(value, str) else encode_json(value) for value in values]
    return CompiledFragment(
        sql=f"(jsonb_exists_any({column}::jsonb, ?::text[]))",
        bindings=(elements,),
    )


def _compile_sqlite(column: str, values: Sequence[Any]) -> CompiledFragment:
    conditions = []
    bindings = []
    for value in values:
        if isinstance(value, bool):
            # json_each surfaces true/false as integers
            conditions.append(f"EXISTS (SELECT 1 FROM json_each({column}) WHERE json_each.value = ?)")
            bindings.append(int(value))
        elif isinstance(value, (str, int, float)):
            conditions.append(f"EXISTS (SELECT 1 FROM json_each({column}) WHERE json_each.value = ?)")
            bindings.append(value)
        else:
            conditions.append(
                f"EXISTS (SELECT 1 FROM json_each({column}) "
                f"WHERE json_quote(json_each.value) = json(?))"
            )
            bindings.append(encode_json(value))
    return CompiledFragment(sql=f"({' OR '.join(conditions)})", bindings=tuple(bindings))


def _compile_sqlserver(column: str, values: Sequence[Any]) -> CompiledFragment:
    conditions = ' OR '.join(
        f"EXISTS (SELECT 1 FROM OPENJSON({column}) WHERE value = ?)" for _ in values
    )
    return CompiledFragment(
        sql=f"({conditions})",
        bindings=tuple(value if isinstance(value, str) else encode_json(value) for value in values),
    )


DIALECT_COMPILERS = {
    Dialect.MYSQL: _compile_mysql,
    Dialect.POSTGRESQL: _compile_postgresql,
    Dialect.SQLITE: _compile_sqlite,
    Dialect.SQLSERVER: _compile_sqlserver,
    Dialect.UNKNOWN: _compile_mysql,
}


class JsonContainsAnyPredicate(BasePredicate):
    """JSON array membership predicate (whereJsonContainsAny)"""

    request_type = JsonAnyRequest

    def compile(self) -> CompiledFragment:
        """Compile JSON membership test"""
        values = self.request.values
        if not values:
            return MATCH_NOTHING

        return DIALECT_COMPILERS[self.dialect](self.quoted_column, values)

    def untrusted_values(self) -> List[str]:
        return [value for value in self.request.values if isinstance(value, str)]
