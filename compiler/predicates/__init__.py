"""
Predicate Factory - Creates predicate instances based on kind
"""

from typing import Any, List, Optional

from compiler.dialects import Dialect
from .base_predicate import BasePredicate
from .like import LikePredicate, escape_wildcards
from .json_contains_any import JsonContainsAnyPredicate, MATCH_NOTHING


class PredicateFactory:
    """Factory for creating predicate instances"""

    # Registry of available predicates
    _predicates = {
        'LIKE': LikePredicate,
        'JSON_CONTAINS_ANY': JsonContainsAnyPredicate,
    }

    @classmethod
    def create_predicate(cls,
                         kind: str,
                         request: Any,
                         dialect: Dialect,
                         quoted_column: Optional[str] = None) -> BasePredicate:
        """
        Create predicate instance for a request

        Args:
            kind: Predicate kind, e.g. 'LIKE'
            request: Predicate request value
            dialect: Target SQL dialect
            quoted_column: Optional caller-quoted column

        Returns:
            Predicate instance

        Raises:
            ValueError: If predicate kind not supported
        """
        normalized = kind.upper() if isinstance(kind, str) else kind

        if normalized not in cls._predicates:
            supported = ', '.join(cls._predicates.keys())
            raise ValueError(
                f"Unsupported predicate kind: {kind}. "
                f"Supported predicates: {supported}"
            )

        predicate_class = cls._predicates[normalized]
        return predicate_class(request, dialect, quoted_column)

    @classmethod
    def get_supported_predicates(cls) -> List[str]:
        """Get list of supported predicate kinds"""
        return list(cls._predicates.keys())


__all__ = [
    'PredicateFactory',
    'BasePredicate',
    'LikePredicate',
    'JsonContainsAnyPredicate',
    'MATCH_NOTHING',
    'escape_wildcards',
]
