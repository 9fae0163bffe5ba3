"""Transaction builder.

A transaction renders as a sequence of commands, each terminated by ``;``:
the opening command, an optional ``SET TRANSACTION``, the attached statements
and savepoint commands in call order, and the closing ``COMMIT`` or ``ROLLBACK``.
"""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, ClassVar, Union

from typing_extensions import Self

from sqlclause.builder._base import QueryBuilder
from sqlclause.builder._clauses import TransactionClause
from sqlclause.builder._delete import Delete
from sqlclause.builder._insert import Insert
from sqlclause.builder._select import Select
from sqlclause.builder._update import Update
from sqlclause.exceptions import SQLBuilderError

if TYPE_CHECKING:
    from sqlclause.formatter import Formatter

__all__ = ("Transaction",)


@dataclass(eq=False, repr=False)
class Transaction(QueryBuilder[TransactionClause]):
    """Builder for a transaction block.

    Statements are attached by reference and keep their own dialect. Unlike
    clause values, commands are not deduplicated: attaching the same statement
    twice runs it twice.

    Example:
        ```python
        query = (
            Transaction()
            .begin()
            .insert(Insert().insert_into("users (login)").values("('foo')"))
            .commit()
            .as_string()
        )
        # BEGIN; INSERT INTO users (login) VALUES ('foo'); COMMIT;
        ```
    """

    _clause_type: ClassVar[type[TransactionClause]] = TransactionClause
    _clause_order: ClassVar[tuple[TransactionClause, ...]] = (
        TransactionClause.BEGIN,
        TransactionClause.SET_TRANSACTION,
        TransactionClause.COMMANDS,
        TransactionClause.END,
    )
    _keywords: ClassVar[dict[TransactionClause, str]] = {
        TransactionClause.SET_TRANSACTION: "SET TRANSACTION",
    }

    _commands: "list[Union[QueryBuilder[Any], str]]" = field(default_factory=list, init=False)

    def begin(self, mode: str = "") -> Self:
        """Open the transaction with ``BEGIN``.

        ``begin`` and ``start_transaction`` write the same clause, the last call wins.

        Args:
            mode: Optional text after the keyword, e.g. ``"TRANSACTION"`` or ``"ISOLATION LEVEL SERIALIZABLE"``.

        Returns:
            The current builder instance for method chaining.
        """
        self._accumulator.set_singular(TransactionClause.BEGIN, f"BEGIN {mode.strip()}")
        return self

    def start_transaction(self, mode: str = "") -> Self:
        """Open the transaction with ``START TRANSACTION``.

        Returns:
            The current builder instance for method chaining.
        """
        self._accumulator.set_singular(TransactionClause.BEGIN, f"START TRANSACTION {mode.strip()}")
        return self

    def set_transaction(self, mode: str) -> Self:
        """Set the ``SET TRANSACTION`` command, e.g. ``"READ ONLY"``. Overrides the previous value.

        Returns:
            The current builder instance for method chaining.
        """
        self._accumulator.set_singular(TransactionClause.SET_TRANSACTION, mode)
        return self

    def add(self, statement: "QueryBuilder[Any]") -> Self:
        """Append a statement to the transaction body.

        Args:
            statement: Any statement builder other than a transaction.

        Raises:
            SQLBuilderError: If ``statement`` is not a builder, is a transaction,
                or already contains this transaction.

        Returns:
            The current builder instance for method chaining.
        """
        return self._add_statement(statement, QueryBuilder, "add")

    def insert(self, statement: Insert) -> Self:
        return self._add_statement(statement, Insert, "insert")

    def select(self, statement: Select) -> Self:
        return self._add_statement(statement, Select, "select")

    def update(self, statement: Update) -> Self:
        return self._add_statement(statement, Update, "update")

    def delete(self, statement: Delete) -> Self:
        return self._add_statement(statement, Delete, "delete")

    def _add_statement(self, statement: Any, expected: "type[QueryBuilder[Any]]", method: str) -> Self:
        self._ensure_builder(statement, expected, method)
        if isinstance(statement, Transaction):
            msg = f"{method}() cannot nest a Transaction inside another Transaction."
            raise SQLBuilderError(msg)
        self._check_attachable(statement, method)
        self._commands.append(statement)
        return self

    def savepoint(self, name: str) -> Self:
        """Append a ``SAVEPOINT`` command. An empty name is ignored.

        Returns:
            The current builder instance for method chaining.
        """
        return self._add_command("SAVEPOINT", name)

    def release_savepoint(self, name: str) -> Self:
        return self._add_command("RELEASE SAVEPOINT", name)

    def rollback_to_savepoint(self, name: str) -> Self:
        return self._add_command("ROLLBACK TO SAVEPOINT", name)

    def _add_command(self, keyword: str, name: str) -> Self:
        name = name.strip()
        if name:
            self._commands.append(f"{keyword} {name}")
        return self

    def commit(self, mode: str = "") -> Self:
        """Close the transaction with ``COMMIT``.

        ``commit`` and ``rollback`` write the same clause, the last call wins.

        Args:
            mode: Optional text after the keyword, e.g. ``"AND CHAIN"``.

        Returns:
            The current builder instance for method chaining.
        """
        self._accumulator.set_singular(TransactionClause.END, f"COMMIT {mode.strip()}")
        return self

    def rollback(self, mode: str = "") -> Self:
        self._accumulator.set_singular(TransactionClause.END, f"ROLLBACK {mode.strip()}")
        return self

    def _sub_statements(self) -> "list[QueryBuilder[Any]]":
        statements = [command for command in self._commands if isinstance(command, QueryBuilder)]
        return [*super()._sub_statements(), *statements]

    @staticmethod
    def _terminate(command: str) -> str:
        return f"{command};" if command else ""

    def _render_begin(self, fmts: "Formatter") -> str:
        return self._terminate(self._render_keyword_clause(TransactionClause.BEGIN, fmts))

    def _render_set_transaction(self, fmts: "Formatter") -> str:
        return self._terminate(self._render_keyword_clause(TransactionClause.SET_TRANSACTION, fmts))

    def _render_commands(self, fmts: "Formatter") -> str:
        commands = (
            command if isinstance(command, str) else command.concat(fmts).strip() for command in self._commands
        )
        return fmts.separator.join(self._terminate(command) for command in commands if command)

    def _render_end(self, fmts: "Formatter") -> str:
        return self._terminate(self._render_keyword_clause(TransactionClause.END, fmts))
