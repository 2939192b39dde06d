"""
Compiler Errors - Exceptions raised while building predicate fragments
"""


class CompilationError(Exception):
    """Raised when a predicate cannot be compiled"""
    pass


class InvalidPredicateError(CompilationError, ValueError):
    """Raised when a predicate request violates its input contract"""
    pass


class InvalidIdentifierError(InvalidPredicateError):
    """Raised when a column name is not a valid (optionally qualified) identifier"""
    pass


__all__ = ['CompilationError', 'InvalidPredicateError', 'InvalidIdentifierError']
