from typing import TYPE_CHECKING, Any

from mypy_extensions import trait
from typing_extensions import Self

from sqlclause.builder._clauses import LogicalOperator

if TYPE_CHECKING:
    from sqlclause.builder._accumulator import ClauseAccumulator

__all__ = ("WhereClauseMixin",)


@trait
class WhereClauseMixin:
    """Mixin providing WHERE clause methods for SELECT, UPDATE, and DELETE builders."""

    __slots__ = ()

    _accumulator: "ClauseAccumulator[Any]"

    def _clause(self, name: str) -> Any: ...

    def where_clause(self, condition: str) -> Self:
        """Add a condition to the WHERE clause, joined with ``AND``.

        Args:
            condition: The condition text. Repeating an identical condition has no effect.

        Returns:
            The current builder instance for method chaining.
        """
        return self.where_and(condition)

    def where_and(self, condition: str) -> Self:
        """Add a condition joined to the previous ones with ``AND``.

        Returns:
            The current builder instance for method chaining.
        """
        self._accumulator.append_condition(self._clause("WHERE"), LogicalOperator.AND, condition)
        return self

    def where_or(self, condition: str) -> Self:
        """Add a condition joined to the previous ones with ``OR``.

        On an empty WHERE clause the operator is dropped.

        Returns:
            The current builder instance for method chaining.
        """
        self._accumulator.append_condition(self._clause("WHERE"), LogicalOperator.OR, condition)
        return self
