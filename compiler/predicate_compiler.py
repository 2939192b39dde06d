"""
Predicate Compiler - Compiles predicate requests into dialect-specific SQL fragments
"""

from typing import Any, List, Optional, Tuple, Union

import structlog

from compiler.config import CompilerConfig
from compiler.dialects import Dialect
from compiler.errors import CompilationError
from compiler.guardrails import FragmentGuardrails
from compiler.predicates import PredicateFactory
from compiler.requests import CompiledFragment, JsonAnyRequest, LikeRequest

logger = structlog.get_logger(__name__)

DialectLike = Union[Dialect, str, None]


class PredicateCompiler:
    """Compiles predicate requests into SQL fragments with positional bindings"""

    def __init__(self, strict_guardrails: bool = True, default_dialect: Dialect = Dialect.MYSQL):
        """
        Initialize compiler

        Args:
            strict_guardrails: Whether to enforce fragment guardrails strictly
            default_dialect: Dialect used when a call passes none
        """
        self.guardrails = FragmentGuardrails(strict_mode=strict_guardrails)
        self.strict_guardrails = strict_guardrails
        self.default_dialect = default_dialect

    @classmethod
    def from_config(cls, config: Optional[CompilerConfig] = None) -> 'PredicateCompiler':
        """Create compiler from configuration (environment when omitted)"""
        config = config or CompilerConfig.from_env()
        return cls(
            strict_guardrails=config.strict_guardrails,
            default_dialect=config.default_dialect,
        )

    def compile(self,
                kind: str,
                request: Any,
                dialect: DialectLike = None,
                quoted_column: Optional[str] = None) -> CompiledFragment:
        """
        Compile a predicate request

        Args:
            kind: Predicate kind ('LIKE' or 'JSON_CONTAINS_ANY')
            request: Predicate request value
            dialect: Target dialect or driver name (default dialect when omitted)
            quoted_column: Caller-quoted column (quoted with dialect defaults when omitted)

        Returns:
            Compiled fragment

        Raises:
            CompilationError: If compilation fails
        """
        resolved = self._resolve_dialect(dialect)

        # Create predicate instance
        try:
            predicate = PredicateFactory.create_predicate(kind, request, resolved, quoted_column)
        except ValueError as e:
            raise CompilationError(str(e))

        # Validate request
        errors = predicate.validate_request()
        if errors:
            raise CompilationError(f"Predicate validation failed: {'; '.join(errors)}")

        fragment = predicate.compile()

        # Validate guardrails
        if self.strict_guardrails:
            self.guardrails.validate_and_raise(fragment, predicate.untrusted_values())

        logger.debug(
            "predicate_compiled",
            kind=kind,
            dialect=resolved.value,
            placeholders=fragment.placeholder_count,
        )
        return fragment

    def compile_like(self,
                     request: LikeRequest,
                     dialect: DialectLike = None,
                     quoted_column: Optional[str] = None) -> CompiledFragment:
        """Compile a substring search request"""
        return self.compile('LIKE', request, dialect, quoted_column)

    def compile_json_any(self,
                         request: JsonAnyRequest,
                         dialect: DialectLike = None,
                         quoted_column: Optional[str] = None) -> CompiledFragment:
        """Compile a JSON array membership request"""
        return self.compile('JSON_CONTAINS_ANY', request, dialect, quoted_column)

    def compile_safe(self,
                     kind: str,
                     request: Any,
                     dialect: DialectLike = None,
                     quoted_column: Optional[str] = None) -> Tuple[bool, Optional[CompiledFragment], List[str]]:
        """
        Safely compile request (doesn't raise exceptions)

        Returns:
            Tuple of (success, fragment_or_None, errors)
        """
        try:
            fragment = self.compile(kind, request, dialect, quoted_column)
            return (True, fragment, [])
        except Exception as e:
            logger.warning("predicate_compilation_failed", kind=kind, error=str(e))
            return (False, None, [str(e)])

    def get_supported_predicates(self) -> List[str]:
        """Get list of supported predicate kinds"""
        return PredicateFactory.get_supported_predicates()

    def _resolve_dialect(self, dialect: DialectLike) -> Dialect:
        if dialect is None:
            return self.default_dialect
        resolved = Dialect.from_driver(dialect)
        if resolved is Dialect.UNKNOWN and dialect is not Dialect.UNKNOWN:
            logger.info("unknown_dialect_fallback", driver=str(dialect))
        return resolved


_default_compiler = PredicateCompiler()


def compile_like(request: LikeRequest,
                 dialect: DialectLike,
                 quoted_column: Optional[str] = None) -> CompiledFragment:
    """Compile a substring search request with default settings"""
    return _default_compiler.compile_like(request, dialect, quoted_column)


def compile_json_any(request: JsonAnyRequest,
                     dialect: DialectLike,
                     quoted_column: Optional[str] = None) -> CompiledFragment:
    """Compile a JSON array membership request with default settings"""
    return _default_compiler.compile_json_any(request, dialect, quoted_column)


# Export
__all__ = ['PredicateCompiler', 'compile_like', 'compile_json_any']
