"""
Execution Package - Query execution with retry
"""

from .executor import QueryExecutor, ExecutionError
from .retry_handler import RetryHandler, RetryStrategy

__all__ = [
    'QueryExecutor',
    'ExecutionError',
    'RetryHandler',
    'RetryStrategy',
]
