"""
Test Suite for Dialect Discovery, Identifier Quoting and Paramstyles
"""

import pytest

from compiler import CompiledFragment, Dialect, InvalidIdentifierError, is_valid_identifier, quote_identifier


class TestDialectDiscovery:
    """Test driver name to dialect mapping"""

    @pytest.mark.parametrize("driver, expected", [
        ("mysql", Dialect.MYSQL),
        ("mariadb", Dialect.MYSQL),
        ("pgsql", Dialect.POSTGRESQL),
        ("PostgreSQL", Dialect.POSTGRESQL),
        ("sqlite", Dialect.SQLITE),
        ("sqlite3", Dialect.SQLITE),
        ("sqlsrv", Dialect.SQLSERVER),
        ("mssql", Dialect.SQLSERVER),
        (" mysql ", Dialect.MYSQL),
    ])
    def test_known_drivers(self, driver, expected):
        assert Dialect.from_driver(driver) is expected

    @pytest.mark.parametrize("driver", ["oracle", "firebird", "", None, 42])
    def test_unknown_drivers(self, driver):
        assert Dialect.from_driver(driver) is Dialect.UNKNOWN

    def test_dialect_passes_through(self):
        assert Dialect.from_driver(Dialect.SQLITE) is Dialect.SQLITE

    def test_is_known(self):
        assert Dialect.MYSQL.is_known is True
        assert Dialect.UNKNOWN.is_known is False


class TestIdentifierQuoting:
    """Test default identifier quoting"""

    @pytest.mark.parametrize("dialect, expected", [
        (Dialect.MYSQL, "`users`.`email`"),
        (Dialect.POSTGRESQL, '"users"."email"'),
        (Dialect.SQLITE, '"users"."email"'),
        (Dialect.SQLSERVER, "[users].[email]"),
        (Dialect.UNKNOWN, "`users`.`email`"),
    ])
    def test_qualified_column(self, dialect, expected):
        assert quote_identifier("users.email", dialect) == expected

    def test_simple_column(self):
        assert quote_identifier("tags", Dialect.POSTGRESQL) == '"tags"'

    @pytest.mark.parametrize("column", ["", "email;", "a b", ".email", "email.", "users.*", 'x"y'])
    def test_invalid_identifier(self, column):
        assert is_valid_identifier(column) is False
        with pytest.raises(InvalidIdentifierError):
            quote_identifier(column, Dialect.MYSQL)

    def test_valid_identifiers(self):
        assert is_valid_identifier("_private")
        assert is_valid_identifier("schema.table.column")
        assert is_valid_identifier("price$usd")


class TestParamstyles:
    """Test placeholder conversion"""

    def test_qmark_unchanged(self):
        fragment = CompiledFragment("`a` = ? AND `b` = ?", (1, 2))

        assert fragment.to_paramstyle("qmark") == "`a` = ? AND `b` = ?"

    def test_format_escapes_percent(self):
        fragment = CompiledFragment("a LIKE '%x' AND b = ?", (1,))

        assert fragment.to_paramstyle("format") == "a LIKE '%%x' AND b = %s"

    def test_numeric(self):
        fragment = CompiledFragment("a = ? OR b = ? OR c = ?", (1, 2, 3))

        assert fragment.to_paramstyle("numeric") == "a = :1 OR b = :2 OR c = :3"

    def test_unsupported(self):
        with pytest.raises(ValueError):
            CompiledFragment("a = ?", (1,)).to_paramstyle("pyformat")

    def test_placeholder_count(self):
        assert CompiledFragment("1 = 0").placeholder_count == 0
        assert CompiledFragment("a = ? OR b = ?", (1, 2)).placeholder_count == 2
