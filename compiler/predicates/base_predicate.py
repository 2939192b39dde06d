"""
Base Predicate - Abstract base class for all compiled predicates
"""

from abc import ABC, abstractmethod
from typing import Any, List, Optional

from compiler.dialects import Dialect
from compiler.quoting import quote_identifier
from compiler.requests import CompiledFragment, PLACEHOLDER


class BasePredicate(ABC):
    """Abstract base class for predicate compilation"""

    # Request class accepted by this predicate
    request_type: type = object

    def __init__(self, request: Any, dialect: Dialect, quoted_column: Optional[str] = None):
        """
        Initialize predicate

        Args:
            request: Predicate request value
            dialect: Target SQL dialect
            quoted_column: Caller-quoted column; quoted with dialect defaults when omitted
        """
        self.request = request
        self.dialect = dialect
        self._quoted_column = quoted_column

    @property
    def quoted_column(self) -> str:
        if self._quoted_column is not None:
            return self._quoted_column
        return quote_identifier(self.request.column, self.dialect)

    def validate_request(self) -> List[str]:
        """
        Validate request against this predicate

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if not isinstance(self.request, self.request_type):
            errors.append(
                f"{type(self).__name__} requires a {self.request_type.__name__}, "
                f"got {type(self.request).__name__}"
            )
            return errors

        if not isinstance(self.dialect, Dialect):
            errors.append(f"Unsupported dialect value: {self.dialect!r}")

        if self._quoted_column is not None:
            if not self._quoted_column.strip():
                errors.append("Quoted column must not be blank")
            elif PLACEHOLDER in self._quoted_column:
                errors.append(f"Quoted column must not contain a '{PLACEHOLDER}' placeholder")

        return errors

    @abstractmethod
    def compile(self) -> CompiledFragment:
        """
        Compile request to a SQL fragment

        Returns:
            Compiled fragment with positional bindings
        """
        pass

    def untrusted_values(self) -> List[str]:
        """User-supplied text that must only ever appear in bindings"""
        return []
