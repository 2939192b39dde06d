"""
Compiler Configuration - Settings loaded from the environment
"""

import os
from dataclasses import dataclass

from dotenv import find_dotenv, load_dotenv

from compiler.dialects import Dialect


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() == "true"


@dataclass(frozen=True)
class CompilerConfig:
    """Predicate compiler configuration"""

    default_dialect: Dialect = Dialect.MYSQL
    strict_guardrails: bool = True
    log_level: str = "INFO"
    json_logs: bool = False
    max_retries: int = 3
    retry_delay_seconds: float = 1

    @classmethod
    def from_env(cls, load_env_file: bool = True) -> 'CompilerConfig':
        """
        Build configuration from PREDICATE_* environment variables

        Args:
            load_env_file: Load a .env file from the working directory first
                (existing variables are not overridden)

        Returns:
            Configuration instance
        """
        if load_env_file:
            env_file = find_dotenv(usecwd=True)
            if env_file:
                load_dotenv(env_file)

        return cls(
            default_dialect=Dialect.from_driver(os.getenv("PREDICATE_DEFAULT_DIALECT", "mysql")),
            strict_guardrails=_env_bool("PREDICATE_STRICT_GUARDRAILS", "true"),
            log_level=os.getenv("PREDICATE_LOG_LEVEL", "INFO").upper(),
            json_logs=_env_bool("PREDICATE_JSON_LOGS", "false"),
            max_retries=int(os.getenv("PREDICATE_MAX_RETRIES", "3")),
            retry_delay_seconds=float(os.getenv("PREDICATE_RETRY_DELAY_SECONDS", "1")),
        )


__all__ = ['CompilerConfig']
