"""Unit tests for the package-level builder factories."""

import sqlclause
from sqlclause import BuilderConfig, Delete, Dialect, DropIndex, DropTable, Insert, Select, Transaction, Update, Values


def test_factories_return_builders() -> None:
    """Test each factory returns its builder type."""
    assert isinstance(sqlclause.select(), Select)
    assert isinstance(sqlclause.insert(), Insert)
    assert isinstance(sqlclause.update(), Update)
    assert isinstance(sqlclause.delete(), Delete)
    assert isinstance(sqlclause.values(), Values)
    assert isinstance(sqlclause.drop_index(), DropIndex)
    assert isinstance(sqlclause.drop_table(), DropTable)
    assert isinstance(sqlclause.transaction(), Transaction)


def test_factories_pass_dialect_and_config() -> None:
    """Test dialect and config reach the builder."""
    config = BuilderConfig(indent="    ")
    statement = sqlclause.update("users", dialect="sqlite", config=config)

    assert statement.resolved_dialect is Dialect.SQLITE
    assert statement.config is config
    assert statement.as_string() == "UPDATE users"


def test_factories_set_targets() -> None:
    """Test the optional positional arguments."""
    assert sqlclause.insert("users (login)").as_string() == "INSERT INTO users (login)"
    assert sqlclause.delete("users").as_string() == "DELETE FROM users"
    assert sqlclause.select("id", "login").as_string() == "SELECT id, login"
    assert sqlclause.values("(1)", "(2)").as_string() == "VALUES (1), (2)"
    assert sqlclause.transaction(sqlclause.delete("users")).as_string() == "DELETE FROM users;"


def test_version() -> None:
    """Test the package exposes a version string."""
    assert isinstance(sqlclause.__version__, str)
