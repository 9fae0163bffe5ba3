"""INSERT statement builder."""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, ClassVar, Optional

from typing_extensions import Self

from sqlclause.builder._base import QueryBuilder
from sqlclause.builder._clauses import InsertClause
from sqlclause.builder._select import Select
from sqlclause.builder.mixins import CommonTableExpressionMixin, ReturningClauseMixin
from sqlclause.dialects import Capability, requires_capability

if TYPE_CHECKING:
    from sqlclause.formatter import Formatter

__all__ = ("Insert",)


@dataclass(eq=False, repr=False)
class Insert(QueryBuilder[InsertClause], CommonTableExpressionMixin, ReturningClauseMixin):
    """Builder for INSERT statements.

    ``insert_into``, ``insert_or`` and ``replace_into`` write the same clause,
    the last call wins.

    Example:
        ```python
        query = (
            Insert()
            .insert_into("users (login, name)")
            .values("('foo', 'Foo')")
            .values("('bar', 'Bar')")
            .as_string()
        )
        # INSERT INTO users (login, name) VALUES ('foo', 'Foo'), ('bar', 'Bar')
        ```
    """

    _clause_type: ClassVar[type[InsertClause]] = InsertClause
    _clause_order: ClassVar[tuple[InsertClause, ...]] = (
        InsertClause.WITH,
        InsertClause.INSERT_INTO,
        InsertClause.OVERRIDING,
        InsertClause.VALUES,
        InsertClause.DEFAULT_VALUES,
        InsertClause.SELECT,
        InsertClause.ON_CONFLICT,
        InsertClause.ON_DUPLICATE_KEY_UPDATE,
        InsertClause.RETURNING,
    )
    _keywords: ClassVar[dict[InsertClause, str]] = {
        InsertClause.OVERRIDING: "OVERRIDING",
        InsertClause.VALUES: "VALUES",
        InsertClause.ON_CONFLICT: "ON CONFLICT",
        InsertClause.ON_DUPLICATE_KEY_UPDATE: "ON DUPLICATE KEY UPDATE",
        InsertClause.RETURNING: "RETURNING",
    }

    _insert_keyword: str = field(default="INSERT INTO", init=False)
    _default_values: bool = field(default=False, init=False)
    _select: Optional[Select] = field(default=None, init=False)

    def insert_into(self, table_name: str) -> Self:
        """Set the target table, optionally with a column list.

        Args:
            table_name: E.g. ``"users (login, name)"``.

        Returns:
            The current builder instance for method chaining.
        """
        return self._set_target("INSERT INTO", table_name)

    @requires_capability(Capability.CONFLICT_RESOLUTION)
    def insert_or(self, expression: str) -> Self:
        """Set an ``INSERT OR <action> INTO`` target.

        Args:
            expression: E.g. ``"abort into users (login, name)"``.

        Returns:
            The current builder instance for method chaining.
        """
        return self._set_target("INSERT OR", expression)

    @requires_capability(Capability.CONFLICT_RESOLUTION)
    def replace_into(self, table_name: str) -> Self:
        return self._set_target("REPLACE INTO", table_name)

    def _set_target(self, keyword: str, expression: str) -> Self:
        self._insert_keyword = keyword
        self._accumulator.set_singular(InsertClause.INSERT_INTO, expression)
        return self

    @requires_capability(Capability.OVERRIDING)
    def overriding(self, option: str) -> Self:
        """Set the OVERRIDING clause, e.g. ``"SYSTEM VALUE"``. Overrides the previous value.

        Returns:
            The current builder instance for method chaining.
        """
        self._accumulator.set_singular(InsertClause.OVERRIDING, option)
        return self

    def values(self, value: str) -> Self:
        """Add a row to the VALUES clause.

        Args:
            value: A parenthesized row, e.g. ``"('foo', 'Foo')"``. Repeating a row has no effect.

        Returns:
            The current builder instance for method chaining.
        """
        self._accumulator.append_unique(InsertClause.VALUES, value)
        return self

    @requires_capability(Capability.DEFAULT_VALUES)
    def default_values(self) -> Self:
        self._default_values = True
        return self

    def select(self, select: Select) -> Self:
        """Insert the rows produced by a SELECT statement.

        The statement is attached by reference and replaces any previously attached one.

        Args:
            select: The SELECT builder.

        Raises:
            SQLBuilderError: If ``select`` is not a :class:`Select` builder, or if
                this statement is already nested inside it.

        Returns:
            The current builder instance for method chaining.
        """
        self._ensure_builder(select, Select, "select")
        self._check_attachable(select, "select")
        self._select = select
        return self

    def on_conflict(self, conflict: str) -> Self:
        """Set the ON CONFLICT clause, e.g. ``"DO NOTHING"``. Overrides the previous value.

        Returns:
            The current builder instance for method chaining.
        """
        self._accumulator.set_singular(InsertClause.ON_CONFLICT, conflict)
        return self

    @requires_capability(Capability.ON_DUPLICATE_KEY_UPDATE)
    def on_duplicate_key_update(self, assignment: str) -> Self:
        """Add an assignment to the ON DUPLICATE KEY UPDATE clause.

        Returns:
            The current builder instance for method chaining.
        """
        self._accumulator.append_unique(InsertClause.ON_DUPLICATE_KEY_UPDATE, assignment)
        return self

    def _sub_statements(self) -> "list[QueryBuilder[Any]]":
        if self._select is None:
            return super()._sub_statements()
        return [*super()._sub_statements(), self._select]

    def _render_insert_into(self, fmts: "Formatter") -> str:
        target = self._accumulator.get_singular(InsertClause.INSERT_INTO)
        return f"{self._insert_keyword}{fmts.space}{target}" if target else ""

    def _render_default_values(self, fmts: "Formatter") -> str:
        return f"DEFAULT{fmts.space}VALUES" if self._default_values else ""

    def _render_select(self, fmts: "Formatter") -> str:
        if self._select is None:
            return ""
        return self._render_nested(self._select, fmts)
