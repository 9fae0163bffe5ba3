"""sqlclause: fluent builders for SQL statement text."""

from typing import Any, Optional

from sqlclause import builder, exceptions, formatter, utils
from sqlclause.__metadata__ import __version__
from sqlclause.builder import (
    Delete,
    DeleteClause,
    DropIndex,
    DropIndexClause,
    DropTable,
    DropTableClause,
    Insert,
    InsertClause,
    LogicalOperator,
    QueryBuilder,
    Select,
    SelectClause,
    Transaction,
    TransactionClause,
    Update,
    UpdateClause,
    Values,
    ValuesClause,
)
from sqlclause.config import DEFAULT_CONFIG, BuilderConfig
from sqlclause.dialects import Capability, Dialect, DialectLike
from sqlclause.exceptions import (
    DialectNotSupportedError,
    ImproperConfigurationError,
    SQLBuilderError,
    SQLClauseError,
)
from sqlclause.formatter import FormatMode, Formatter, multiline, one_line

__all__ = (
    "DEFAULT_CONFIG",
    "BuilderConfig",
    "Capability",
    "Delete",
    "DeleteClause",
    "Dialect",
    "DialectLike",
    "DialectNotSupportedError",
    "DropIndex",
    "DropIndexClause",
    "DropTable",
    "DropTableClause",
    "FormatMode",
    "Formatter",
    "ImproperConfigurationError",
    "Insert",
    "InsertClause",
    "LogicalOperator",
    "QueryBuilder",
    "SQLBuilderError",
    "SQLClauseError",
    "Select",
    "SelectClause",
    "Transaction",
    "TransactionClause",
    "Update",
    "UpdateClause",
    "Values",
    "ValuesClause",
    "__version__",
    "builder",
    "delete",
    "drop_index",
    "drop_table",
    "exceptions",
    "formatter",
    "insert",
    "multiline",
    "one_line",
    "select",
    "transaction",
    "update",
    "utils",
    "values",
)


def select(
    *columns: str, dialect: "DialectLike" = None, config: BuilderConfig = DEFAULT_CONFIG
) -> Select:
    """Create a SELECT builder.

    Args:
        *columns: Optional column expressions added to the SELECT clause.
        dialect: Optional SQL dialect to build for.
        config: Builder configuration.

    Returns:
        Select: A new Select instance with the specified columns.
    """
    statement = Select(dialect=dialect, config=config)
    for column in columns:
        statement.select(column)
    return statement


def insert(
    table: Optional[str] = None, dialect: "DialectLike" = None, config: BuilderConfig = DEFAULT_CONFIG
) -> Insert:
    """Create an INSERT builder.

    Args:
        table: Optional target, e.g. ``"users (login, name)"``.
        dialect: Optional SQL dialect to build for.
        config: Builder configuration.

    Returns:
        Insert: A new Insert instance, optionally with the target set.
    """
    statement = Insert(dialect=dialect, config=config)
    if table:
        statement.insert_into(table)
    return statement


def update(
    table: Optional[str] = None, dialect: "DialectLike" = None, config: BuilderConfig = DEFAULT_CONFIG
) -> Update:
    """Create an UPDATE builder.

    Args:
        table: Optional table name to update.
        dialect: Optional SQL dialect to build for.
        config: Builder configuration.

    Returns:
        Update: A new Update instance, optionally with the target table set.
    """
    statement = Update(dialect=dialect, config=config)
    if table:
        statement.update(table)
    return statement


def delete(
    table: Optional[str] = None, dialect: "DialectLike" = None, config: BuilderConfig = DEFAULT_CONFIG
) -> Delete:
    """Create a DELETE builder.

    Args:
        table: Optional table name to delete from.
        dialect: Optional SQL dialect to build for.
        config: Builder configuration.

    Returns:
        Delete: A new Delete instance, optionally with the target table set.
    """
    statement = Delete(dialect=dialect, config=config)
    if table:
        statement.delete_from(table)
    return statement


def values(*rows: str, dialect: "DialectLike" = None, config: BuilderConfig = DEFAULT_CONFIG) -> Values:
    statement = Values(dialect=dialect, config=config)
    for row in rows:
        statement.values(row)
    return statement


def drop_index(*names: str, dialect: "DialectLike" = None, config: BuilderConfig = DEFAULT_CONFIG) -> DropIndex:
    """Create a DROP INDEX builder.

    Args:
        *names: Index names, in order. Under dialects without multiple drop
            targets only the last one renders.
        dialect: Optional SQL dialect to build for.
        config: Builder configuration.

    Returns:
        DropIndex: A new DropIndex instance.
    """
    statement = DropIndex(dialect=dialect, config=config)
    for name in names:
        statement.drop_index(name)
    return statement


def drop_table(*names: str, dialect: "DialectLike" = None, config: BuilderConfig = DEFAULT_CONFIG) -> DropTable:
    statement = DropTable(dialect=dialect, config=config)
    for name in names:
        statement.drop_table(name)
    return statement


def transaction(
    *statements: "QueryBuilder[Any]", dialect: "DialectLike" = None, config: BuilderConfig = DEFAULT_CONFIG
) -> Transaction:
    """Create a transaction builder.

    Args:
        *statements: Optional statements appended to the transaction body, in order.
        dialect: Optional SQL dialect to build for.
        config: Builder configuration.

    Returns:
        Transaction: A new Transaction instance. Opening and closing commands
        are not set.
    """
    statement = Transaction(dialect=dialect, config=config)
    for sub_statement in statements:
        statement.add(sub_statement)
    return statement
