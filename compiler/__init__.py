"""
Compiler Package - Cross-dialect predicate compilation
"""

from .errors import CompilationError, InvalidPredicateError, InvalidIdentifierError
from .dialects import Dialect
from .requests import LikeRequest, JsonAnyRequest, CompiledFragment
from .quoting import quote_identifier, is_valid_identifier
from .predicate_compiler import PredicateCompiler, compile_like, compile_json_any
from .guardrails import FragmentGuardrails, FragmentGuardrailError
from .predicates import PredicateFactory, escape_wildcards
from .config import CompilerConfig
from .filter_schema import FilterValidator, FilterValidationError, load_filters

__all__ = [
    'CompilationError',
    'InvalidPredicateError',
    'InvalidIdentifierError',
    'Dialect',
    'LikeRequest',
    'JsonAnyRequest',
    'CompiledFragment',
    'quote_identifier',
    'is_valid_identifier',
    'PredicateCompiler',
    'compile_like',
    'compile_json_any',
    'FragmentGuardrails',
    'FragmentGuardrailError',
    'PredicateFactory',
    'escape_wildcards',
    'CompilerConfig',
    'FilterValidator',
    'FilterValidationError',
    'load_filters',
]
