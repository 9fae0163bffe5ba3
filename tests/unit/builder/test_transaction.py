"""Unit tests for the transaction builder."""

import pytest

from sqlclause import (
    Delete,
    Insert,
    Select,
    SQLBuilderError,
    Transaction,
    TransactionClause,
    Update,
    transaction,
)


@pytest.fixture
def insert_user() -> Insert:
    return Insert().insert_into("users (login)").values("('foo')")


class TestTransactionCommands:
    """Test command order and termination."""

    def test_begin_statement_commit(self, insert_user: Insert) -> None:
        """Test every command ends with a semicolon."""
        statement = Transaction().begin().insert(insert_user).commit()

        assert statement.as_string() == "BEGIN; INSERT INTO users (login) VALUES ('foo'); COMMIT;"

    def test_multiline_puts_commands_on_their_own_lines(self, insert_user: Insert) -> None:
        """Test statements keep their multi-line layout and are not indented."""
        statement = Transaction().begin().insert(insert_user).commit()

        assert statement.render_multi_line() == "BEGIN;\nINSERT INTO users (login)\nVALUES ('foo');\nCOMMIT;"

    def test_clause_order_invariance(self, insert_user: Insert) -> None:
        """Test opening and closing commands keep their place whatever the call order."""
        statement = Transaction().commit().insert(insert_user).set_transaction("READ WRITE").start_transaction()

        assert statement.as_string() == (
            "START TRANSACTION; SET TRANSACTION READ WRITE; INSERT INTO users (login) VALUES ('foo'); COMMIT;"
        )

    def test_modes(self) -> None:
        """Test optional text after the opening and closing keywords."""
        statement = Transaction().begin("ISOLATION LEVEL SERIALIZABLE").commit(" AND CHAIN ")

        assert statement.as_string() == "BEGIN ISOLATION LEVEL SERIALIZABLE; COMMIT AND CHAIN;"

    def test_last_opening_and_closing_command_wins(self) -> None:
        """Test begin/start_transaction and commit/rollback share a clause."""
        statement = Transaction().begin().start_transaction("READ ONLY").commit().rollback()

        assert statement.as_string() == "START TRANSACTION READ ONLY; ROLLBACK;"

    def test_empty_set_transaction_clears_it(self) -> None:
        """Test an empty mode overrides the previous SET TRANSACTION."""
        statement = Transaction().begin().set_transaction("READ ONLY").set_transaction("  ")

        assert statement.as_string() == "BEGIN;"

    def test_savepoints_keep_call_order(self) -> None:
        """Test savepoint commands interleave with statements in call order."""
        statement = (
            Transaction()
            .begin()
            .savepoint("before_delete")
            .delete(Delete().delete_from("users"))
            .rollback_to_savepoint("before_delete")
            .release_savepoint("before_delete")
            .savepoint("  ")
            .commit()
        )

        assert statement.as_string() == (
            "BEGIN; SAVEPOINT before_delete; DELETE FROM users; "
            "ROLLBACK TO SAVEPOINT before_delete; RELEASE SAVEPOINT before_delete; COMMIT;"
        )

    def test_statements_are_not_deduplicated(self, insert_user: Insert) -> None:
        """Test attaching the same statement twice runs it twice."""
        statement = Transaction().insert(insert_user).insert(insert_user)

        assert statement.as_string() == (
            "INSERT INTO users (login) VALUES ('foo'); INSERT INTO users (login) VALUES ('foo');"
        )

    def test_empty_statement_is_skipped(self) -> None:
        """Test a statement that renders nothing adds no stray semicolon."""
        assert Transaction().begin().select(Select()).commit().as_string() == "BEGIN; COMMIT;"

    def test_raw_injection(self) -> None:
        """Test raw text around transaction clauses."""
        statement = (
            Transaction()
            .begin()
            .update(Update().update("users").set("active = false"))
            .raw_before(TransactionClause.END, "-- done")
            .commit()
        )

        assert statement.render_multi_line() == "BEGIN;\nUPDATE users\nSET active = false;\n-- done COMMIT;"


class TestTransactionAttach:
    """Test which statements can be attached."""

    def test_add_accepts_any_statement(self) -> None:
        """Test the generic attach path."""
        statement = transaction(Select().select("1"), Delete().delete_from("t")).begin().commit()

        assert statement.as_string() == "BEGIN; SELECT 1; DELETE FROM t; COMMIT;"

    def test_typed_attach_rejects_other_kind(self) -> None:
        """Test the typed attach methods check the statement kind."""
        with pytest.raises(SQLBuilderError, match="insert"):
            Transaction().insert(Select())  # type: ignore[arg-type]

    def test_rejects_non_builder(self) -> None:
        """Test SQL text cannot be attached as a statement."""
        with pytest.raises(SQLBuilderError):
            Transaction().add("SELECT 1")  # type: ignore[arg-type]

    def test_rejects_nested_transaction(self) -> None:
        """Test a transaction cannot contain another one."""
        with pytest.raises(SQLBuilderError, match="Transaction"):
            Transaction().add(Transaction())

    def test_rejects_statement_containing_the_transaction(self) -> None:
        """Test a statement that already embeds the transaction is rejected."""
        statement = Transaction().begin()
        wrapper = Select(dialect="postgres").with_("t", statement)

        with pytest.raises(SQLBuilderError, match="inside itself"):
            statement.select(wrapper)

    def test_attached_statement_is_shared(self, insert_user: Insert) -> None:
        """Test the attached statement still renders on its own."""
        statement = Transaction().begin().insert(insert_user).commit()

        assert statement.as_string().startswith("BEGIN;")
        assert insert_user.as_string() == "INSERT INTO users (login) VALUES ('foo')"
