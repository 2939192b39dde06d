"""
Dialects - SQL dialects understood by the predicate compiler
"""

from enum import Enum
from typing import Optional


class Dialect(Enum):
    """Supported SQL dialects"""
    MYSQL = "mysql"
    POSTGRESQL = "postgresql"
    SQLITE = "sqlite"
    SQLSERVER = "sqlserver"
    UNKNOWN = "unknown"

    @classmethod
    def from_driver(cls, driver_name: Optional[str]) -> 'Dialect':
        """
        Resolve a database driver name to a dialect

        Args:
            driver_name: Driver name as reported by the connection
                (e.g. 'pgsql', 'mariadb', 'sqlite3')

        Returns:
            Matching dialect, or UNKNOWN for unrecognized drivers
        """
        if isinstance(driver_name, cls):
            return driver_name
        if not isinstance(driver_name, str) or not driver_name:
            return cls.UNKNOWN
        return _DRIVER_ALIASES.get(driver_name.strip().lower(), cls.UNKNOWN)

    @property
    def is_known(self) -> bool:
        return self is not Dialect.UNKNOWN


_DRIVER_ALIASES = {
    'mysql': Dialect.MYSQL,
    'mariadb': Dialect.MYSQL,
    'pymysql': Dialect.MYSQL,
    'pgsql': Dialect.POSTGRESQL,
    'postgres': Dialect.POSTGRESQL,
    'postgresql': Dialect.POSTGRESQL,
    'psycopg': Dialect.POSTGRESQL,
    'psycopg2': Dialect.POSTGRESQL,
    'sqlite': Dialect.SQLITE,
    'sqlite3': Dialect.SQLITE,
    'sqlsrv': Dialect.SQLSERVER,
    'sqlserver': Dialect.SQLSERVER,
    'mssql': Dialect.SQLSERVER,
    'pyodbc': Dialect.SQLSERVER,
}


__all__ = ['Dialect']
