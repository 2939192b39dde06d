"""
Query Package - Host-side composition of compiled predicates
"""

from .builder import QueryBuilder

__all__ = [
    'QueryBuilder',
]
