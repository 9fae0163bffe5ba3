"""DELETE statement builder."""

from dataclasses import dataclass
from typing import ClassVar

from typing_extensions import Self

from sqlclause.builder._base import QueryBuilder
from sqlclause.builder._clauses import DeleteClause
from sqlclause.builder.mixins import CommonTableExpressionMixin, ReturningClauseMixin, WhereClauseMixin

__all__ = ("Delete",)


@dataclass(eq=False, repr=False)
class Delete(QueryBuilder[DeleteClause], CommonTableExpressionMixin, WhereClauseMixin, ReturningClauseMixin):
    """Builder for DELETE statements.

    Example:
        ```python
        query = Delete().delete_from("users").where_clause("login = 'foo'").as_string()
        # DELETE FROM users WHERE login = 'foo'
        ```
    """

    _clause_type: ClassVar[type[DeleteClause]] = DeleteClause
    _clause_order: ClassVar[tuple[DeleteClause, ...]] = (
        DeleteClause.WITH,
        DeleteClause.DELETE_FROM,
        DeleteClause.WHERE,
        DeleteClause.RETURNING,
    )
    _keywords: ClassVar[dict[DeleteClause, str]] = {
        DeleteClause.DELETE_FROM: "DELETE FROM",
        DeleteClause.WHERE: "WHERE",
        DeleteClause.RETURNING: "RETURNING",
    }

    def delete_from(self, table_name: str) -> Self:
        """Set the table to delete from. Overrides the previous value.

        Returns:
            The current builder instance for method chaining.
        """
        self._accumulator.set_singular(DeleteClause.DELETE_FROM, table_name)
        return self
