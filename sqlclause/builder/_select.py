# ruff: noqa: PLR0904
"""SELECT statement builder."""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, ClassVar

from typing_extensions import Self

from sqlclause.builder._base import QueryBuilder
from sqlclause.builder._clauses import LogicalOperator, SelectClause
from sqlclause.builder.mixins import CommonTableExpressionMixin, WhereClauseMixin
from sqlclause.dialects import Capability, requires_capability

if TYPE_CHECKING:
    from sqlclause.formatter import Formatter

__all__ = ("Select",)


@dataclass(eq=False, repr=False)
class Select(QueryBuilder[SelectClause], CommonTableExpressionMixin, WhereClauseMixin):
    """Builder for SELECT statements.

    Example:
        ```python
        query = (
            Select()
            .select("id, login")
            .from_("users")
            .inner_join("orders ON orders.login = users.login")
            .where_clause("login = 'foo'")
            .as_string()
        )
        # SELECT id, login FROM users INNER JOIN orders ON orders.login = users.login WHERE login = 'foo'
        ```
    """

    _clause_type: ClassVar[type[SelectClause]] = SelectClause
    _clause_order: ClassVar[tuple[SelectClause, ...]] = (
        SelectClause.WITH,
        SelectClause.SELECT,
        SelectClause.FROM,
        SelectClause.JOIN,
        SelectClause.WHERE,
        SelectClause.GROUP_BY,
        SelectClause.HAVING,
        SelectClause.WINDOW,
        SelectClause.ORDER_BY,
        SelectClause.LIMIT,
        SelectClause.OFFSET,
        SelectClause.EXCEPT,
        SelectClause.INTERSECT,
        SelectClause.UNION,
    )
    _keywords: ClassVar[dict[SelectClause, str]] = {
        SelectClause.SELECT: "SELECT",
        SelectClause.FROM: "FROM",
        SelectClause.WHERE: "WHERE",
        SelectClause.GROUP_BY: "GROUP BY",
        SelectClause.HAVING: "HAVING",
        SelectClause.WINDOW: "WINDOW",
        SelectClause.ORDER_BY: "ORDER BY",
        SelectClause.LIMIT: "LIMIT",
        SelectClause.OFFSET: "OFFSET",
    }

    _set_operations: "dict[SelectClause, list[Select]]" = field(default_factory=dict, init=False)

    def select(self, column: str) -> Self:
        """Add columns or expressions to the SELECT clause.

        Args:
            column: Column list or expression, e.g. ``"id, login"``.

        Returns:
            The current builder instance for method chaining.
        """
        self._accumulator.append_unique(SelectClause.SELECT, column)
        return self

    def from_(self, table: str) -> Self:
        """Add a table or table expression to the FROM clause.

        Returns:
            The current builder instance for method chaining.
        """
        self._accumulator.append_unique(SelectClause.FROM, table)
        return self

    def join(self, join: str) -> Self:
        """Add a plain ``JOIN``.

        Args:
            join: Table and join condition, e.g. ``"addresses ON addresses.login = users.login"``.

        Returns:
            The current builder instance for method chaining.
        """
        return self._add_join("JOIN", join)

    def inner_join(self, join: str) -> Self:
        return self._add_join("INNER JOIN", join)

    def left_join(self, join: str) -> Self:
        return self._add_join("LEFT JOIN", join)

    def right_join(self, join: str) -> Self:
        return self._add_join("RIGHT JOIN", join)

    def full_join(self, join: str) -> Self:
        return self._add_join("FULL JOIN", join)

    def cross_join(self, table: str) -> Self:
        return self._add_join("CROSS JOIN", table)

    def _add_join(self, keyword: str, join: str) -> Self:
        join = join.strip()
        if join:
            self._accumulator.append_unique(SelectClause.JOIN, f"{keyword} {join}")
        return self

    def group_by(self, column: str) -> Self:
        self._accumulator.append_unique(SelectClause.GROUP_BY, column)
        return self

    def having(self, condition: str) -> Self:
        """Add a condition to the HAVING clause, joined with ``AND``.

        Returns:
            The current builder instance for method chaining.
        """
        self._accumulator.append_condition(SelectClause.HAVING, LogicalOperator.AND, condition)
        return self

    def window(self, definition: str) -> Self:
        """Add a named window definition, e.g. ``"win AS (PARTITION BY dept)"``.

        Returns:
            The current builder instance for method chaining.
        """
        self._accumulator.append_unique(SelectClause.WINDOW, definition)
        return self

    def order_by(self, column: str) -> Self:
        self._accumulator.append_unique(SelectClause.ORDER_BY, column)
        return self

    @requires_capability(Capability.LIMIT_OFFSET)
    def limit(self, num: str) -> Self:
        """Set the LIMIT clause. Overrides the previous value.

        Returns:
            The current builder instance for method chaining.
        """
        self._accumulator.set_singular(SelectClause.LIMIT, num)
        return self

    @requires_capability(Capability.LIMIT_OFFSET)
    def offset(self, num: str) -> Self:
        """Set the OFFSET clause. Overrides the previous value.

        Returns:
            The current builder instance for method chaining.
        """
        self._accumulator.set_singular(SelectClause.OFFSET, num)
        return self

    @requires_capability(Capability.SET_OPERATIONS)
    def except_(self, select: "Select") -> Self:
        """Combine with another SELECT using ``EXCEPT``.

        Returns:
            The current builder instance for method chaining.
        """
        return self._add_set_operation(SelectClause.EXCEPT, select, "except_")

    @requires_capability(Capability.SET_OPERATIONS)
    def intersect(self, select: "Select") -> Self:
        return self._add_set_operation(SelectClause.INTERSECT, select, "intersect")

    @requires_capability(Capability.SET_OPERATIONS)
    def union(self, select: "Select") -> Self:
        return self._add_set_operation(SelectClause.UNION, select, "union")

    def _add_set_operation(self, clause: SelectClause, select: "Select", method: str) -> Self:
        self._ensure_builder(select, Select, method)
        self._check_attachable(select, method)
        operands = self._set_operations.setdefault(clause, [])
        if not any(operand is select for operand in operands):
            operands.append(select)
        return self

    def _sub_statements(self) -> "list[QueryBuilder[Any]]":
        operands = [select for selects in self._set_operations.values() for select in selects]
        return [*super()._sub_statements(), *operands]

    def _render_join(self, fmts: "Formatter") -> str:
        return fmts.separator.join(self._accumulator.get_many(SelectClause.JOIN))

    def _render_set_operation(self, clause: SelectClause, keyword: str, fmts: "Formatter") -> str:
        return fmts.separator.join(
            f"{keyword}{fmts.space}({fmts.lb}{self._render_nested(select, fmts)}{fmts.lb})"
            for select in self._set_operations.get(clause, ())
        )

    def _render_except(self, fmts: "Formatter") -> str:
        return self._render_set_operation(SelectClause.EXCEPT, "EXCEPT", fmts)

    def _render_intersect(self, fmts: "Formatter") -> str:
        return self._render_set_operation(SelectClause.INTERSECT, "INTERSECT", fmts)

    def _render_union(self, fmts: "Formatter") -> str:
        return self._render_set_operation(SelectClause.UNION, "UNION", fmts)
