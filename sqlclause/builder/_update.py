"""UPDATE statement builder."""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, ClassVar

from typing_extensions import Self

from sqlclause.builder._base import QueryBuilder
from sqlclause.builder._clauses import UpdateClause
from sqlclause.builder.mixins import CommonTableExpressionMixin, ReturningClauseMixin, WhereClauseMixin
from sqlclause.dialects import Capability, requires_capability

if TYPE_CHECKING:
    from sqlclause.formatter import Formatter

__all__ = ("Update",)


@dataclass(eq=False, repr=False)
class Update(QueryBuilder[UpdateClause], CommonTableExpressionMixin, WhereClauseMixin, ReturningClauseMixin):
    """Builder for UPDATE statements.

    Example:
        ```python
        query = Update().update("users").set("login = 'foo'").where_clause("id = 1").as_string()
        # UPDATE users SET login = 'foo' WHERE id = 1
        ```
    """

    _clause_type: ClassVar[type[UpdateClause]] = UpdateClause
    _clause_order: ClassVar[tuple[UpdateClause, ...]] = (
        UpdateClause.WITH,
        UpdateClause.UPDATE,
        UpdateClause.SET,
        UpdateClause.FROM,
        UpdateClause.WHERE,
        UpdateClause.RETURNING,
    )
    _keywords: ClassVar[dict[UpdateClause, str]] = {
        UpdateClause.SET: "SET",
        UpdateClause.FROM: "FROM",
        UpdateClause.WHERE: "WHERE",
        UpdateClause.RETURNING: "RETURNING",
    }

    _update_keyword: str = field(default="UPDATE", init=False)

    def update(self, table_name: str) -> Self:
        """Set the table to update. Overrides the previous value.

        Returns:
            The current builder instance for method chaining.
        """
        self._update_keyword = "UPDATE"
        self._accumulator.set_singular(UpdateClause.UPDATE, table_name)
        return self

    @requires_capability(Capability.CONFLICT_RESOLUTION)
    def update_or(self, expression: str) -> Self:
        """Set an ``UPDATE OR <action>`` target, e.g. ``"ROLLBACK users"``.

        Shares the UPDATE clause with :meth:`update`; the last call wins.

        Returns:
            The current builder instance for method chaining.
        """
        self._update_keyword = "UPDATE OR"
        self._accumulator.set_singular(UpdateClause.UPDATE, expression)
        return self

    def set(self, assignment: str) -> Self:
        """Add an assignment to the SET clause, e.g. ``"login = 'foo'"``.

        Returns:
            The current builder instance for method chaining.
        """
        self._accumulator.append_unique(UpdateClause.SET, assignment)
        return self

    @requires_capability(Capability.UPDATE_FROM)
    def from_(self, table: str) -> Self:
        self._accumulator.append_unique(UpdateClause.FROM, table)
        return self

    def _render_update(self, fmts: "Formatter") -> str:
        target = self._accumulator.get_singular(UpdateClause.UPDATE)
        return f"{self._update_keyword}{fmts.space}{target}" if target else ""
