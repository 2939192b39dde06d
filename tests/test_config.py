"""
Test Suite for Configuration and Logging Setup
"""

import logging

import structlog

from compiler import CompilerConfig, Dialect, LikeRequest, PredicateCompiler
from logging_config import configure_logging


class TestCompilerConfig:
    """Test environment-driven configuration"""

    def test_defaults(self, monkeypatch):
        for name in ("PREDICATE_DEFAULT_DIALECT", "PREDICATE_STRICT_GUARDRAILS", "PREDICATE_LOG_LEVEL",
                     "PREDICATE_JSON_LOGS", "PREDICATE_MAX_RETRIES", "PREDICATE_RETRY_DELAY_SECONDS"):
            monkeypatch.delenv(name, raising=False)

        config = CompilerConfig.from_env(load_env_file=False)

        assert config.default_dialect is Dialect.MYSQL
        assert config.strict_guardrails is True
        assert config.log_level == "INFO"
        assert config.json_logs is False
        assert config.max_retries == 3

    def test_from_environment(self, monkeypatch):
        monkeypatch.setenv("PREDICATE_DEFAULT_DIALECT", "pgsql")
        monkeypatch.setenv("PREDICATE_STRICT_GUARDRAILS", "false")
        monkeypatch.setenv("PREDICATE_LOG_LEVEL", "debug")
        monkeypatch.setenv("PREDICATE_JSON_LOGS", "true")
        monkeypatch.setenv("PREDICATE_MAX_RETRIES", "7")

        config = CompilerConfig.from_env(load_env_file=False)

        assert config.default_dialect is Dialect.POSTGRESQL
        assert config.strict_guardrails is False
        assert config.log_level == "DEBUG"
        assert config.json_logs is True
        assert config.max_retries == 7

    def test_env_file(self, tmp_path, monkeypatch):
        monkeypatch.setenv("PREDICATE_DEFAULT_DIALECT", "unset")
        monkeypatch.delenv("PREDICATE_DEFAULT_DIALECT")
        (tmp_path / ".env").write_text("PREDICATE_DEFAULT_DIALECT=sqlite\n")
        monkeypatch.chdir(tmp_path)

        config = CompilerConfig.from_env()

        assert config.default_dialect is Dialect.SQLITE

    def test_compiler_from_config(self):
        compiler = PredicateCompiler.from_config(CompilerConfig(default_dialect=Dialect.SQLSERVER))

        fragment = compiler.compile_like(LikeRequest(column="name", pattern="x"))

        assert fragment.sql == "LOWER([name]) LIKE ?"


class TestConfigureLogging:
    """Test structlog setup"""

    def test_configure_logging_sets_level(self):
        try:
            configure_logging(log_level="warning", json_logs=True)

            root_logger = logging.getLogger()
            assert root_logger.level == logging.WARNING
            assert len(root_logger.handlers) == 1
            assert isinstance(root_logger.handlers[0].formatter, structlog.stdlib.ProcessorFormatter)
        finally:
            structlog.reset_defaults()
            logging.getLogger().handlers.clear()
            logging.getLogger().setLevel(logging.WARNING)

    def test_configure_logging_from_environment(self, monkeypatch):
        monkeypatch.setenv("PREDICATE_LOG_LEVEL", "error")
        monkeypatch.setenv("PREDICATE_JSON_LOGS", "false")
        try:
            configure_logging()

            assert logging.getLogger().level == logging.ERROR
        finally:
            structlog.reset_defaults()
            logging.getLogger().handlers.clear()
            logging.getLogger().setLevel(logging.WARNING)
