"""
Query Executor - Runs compiled queries on a DB-API connection
"""

from typing import Any, Dict, List, Optional, Sequence, Union

import structlog

from compiler.config import CompilerConfig
from compiler.requests import convert_placeholders
from query.builder import QueryBuilder
from .retry_handler import RetryHandler

logger = structlog.get_logger(__name__)


class ExecutionError(Exception):
    """Exception raised during query execution"""
    pass


class QueryExecutor:
    """Executes compiled queries with positional bindings and retry"""

    def __init__(self,
                 connection: Any,
                 paramstyle: str = 'qmark',
                 retry_handler: Optional[RetryHandler] = None):
        """
        Initialize executor

        Args:
            connection: Open DB-API 2.0 connection (not closed by the executor)
            paramstyle: Placeholder style of the driver ('qmark', 'format', 'numeric')
            retry_handler: Optional retry handler (creates default if not provided)
        """
        self.connection = connection
        self.paramstyle = paramstyle
        self.retry_handler = retry_handler or RetryHandler()

    @classmethod
    def from_config(cls,
                    connection: Any,
                    paramstyle: str = 'qmark',
                    config: Optional[CompilerConfig] = None) -> 'QueryExecutor':
        """Create executor with retry settings from configuration"""
        config = config or CompilerConfig.from_env()
        return cls(
            connection,
            paramstyle=paramstyle,
            retry_handler=RetryHandler(
                max_retries=config.max_retries,
                base_delay_seconds=config.retry_delay_seconds,
            ),
        )

    def fetch_all(self,
                  query: Union[QueryBuilder, str],
                  bindings: Optional[Sequence[Any]] = None) -> List[Dict[str, Any]]:
        """
        Execute query and return rows as dictionaries

        Args:
            query: QueryBuilder, or SQL text with '?' placeholders
            bindings: Bindings for SQL text (ignored for a QueryBuilder)

        Returns:
            List of row dictionaries keyed by column name

        Raises:
            ExecutionError: If execution fails
        """
        if isinstance(query, QueryBuilder):
            sql, bindings = query.to_sql()
        else:
            sql = query
        bindings = list(bindings or [])

        statement = convert_placeholders(sql, self.paramstyle)

        try:
            rows = self.retry_handler.execute_with_retry(self._execute, statement, bindings)
        except Exception as e:
            logger.error("query_execution_failed", error=str(e), bindings=len(bindings))
            raise ExecutionError(f"Execution failed: {str(e)}") from e

        logger.debug("query_executed", rows=len(rows), bindings=len(bindings))
        return rows

    def _execute(self, statement: str, bindings: List[Any]) -> List[Dict[str, Any]]:
        cursor = self.connection.cursor()
        try:
            cursor.execute(statement, bindings)
            if cursor.description is None:
                return []
            columns = [c[0] for c in cursor.description]
            return [dict(zip(columns, row)) for row in cursor.fetchall()]
        finally:
            cursor.close()


# Export
__all__ = ['QueryExecutor', 'ExecutionError']
