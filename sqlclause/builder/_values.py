"""Standalone VALUES statement builder."""

from dataclasses import dataclass
from typing import ClassVar

from typing_extensions import Self

from sqlclause.builder._base import QueryBuilder
from sqlclause.builder._clauses import ValuesClause

__all__ = ("Values",)


@dataclass(eq=False, repr=False)
class Values(QueryBuilder[ValuesClause]):
    """Builder for a bare VALUES list, usable on its own or as a CTE body.

    Example:
        ```python
        rows = Values().values("('foo', 'Foo')").values("('bar', 'Bar')")
        Select(dialect="postgres").with_("new_users (login, name)", rows).select("*").from_("new_users")
        ```
    """

    _clause_type: ClassVar[type[ValuesClause]] = ValuesClause
    _clause_order: ClassVar[tuple[ValuesClause, ...]] = (ValuesClause.VALUES,)
    _keywords: ClassVar[dict[ValuesClause, str]] = {ValuesClause.VALUES: "VALUES"}

    def values(self, row: str) -> Self:
        self._accumulator.append_unique(ValuesClause.VALUES, row)
        return self
