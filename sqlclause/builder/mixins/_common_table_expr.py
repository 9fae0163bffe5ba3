from typing import TYPE_CHECKING, Any, Union

from mypy_extensions import trait
from typing_extensions import Self

from sqlclause.dialects import Capability, requires_capability
from sqlclause.exceptions import SQLBuilderError

if TYPE_CHECKING:
    from sqlclause.builder._base import QueryBuilder
    from sqlclause.formatter import Formatter

__all__ = ("CommonTableExpressionMixin",)


@trait
class CommonTableExpressionMixin:
    """Mixin providing the WITH clause (Common Table Expressions)."""

    __slots__ = ()

    _ctes: "list[tuple[str, Union[QueryBuilder[Any], str]]]"

    def _render_nested(self, statement: "Union[QueryBuilder[Any], str]", fmts: "Formatter") -> str: ...

    def _check_attachable(self, statement: "QueryBuilder[Any]", method: str) -> None: ...

    @requires_capability(Capability.WITH)
    def with_(self, name: str, query: "Union[QueryBuilder[Any], str]") -> Self:
        """Add a named Common Table Expression.

        The query is attached by reference, so one query can be shared by
        several statements. Attaching the same name and query twice has no
        additional effect.

        Args:
            name: The name of the CTE, optionally with a column list (``"totals (id, n)"``).
            query: Another statement builder, or raw SQL text.

        Raises:
            SQLBuilderError: If ``query`` is neither a builder nor a string, or if
                this statement is already nested inside ``query``.

        Returns:
            The current builder instance for method chaining.
        """
        from sqlclause.builder._base import QueryBuilder

        if not isinstance(query, (QueryBuilder, str)):
            msg = f"Invalid query type for CTE {name!r}: {type(query).__name__}. Must be a builder or str."
            raise SQLBuilderError(msg)
        if isinstance(query, QueryBuilder):
            self._check_attachable(query, "with_")

        name = name.strip()
        if not name:
            return self
        if any(existing == name and attached is query for existing, attached in self._ctes):
            return self
        self._ctes.append((name, query))
        return self

    def _render_with(self, fmts: "Formatter") -> str:
        if not self._ctes:
            return ""
        joiner = f",{fmts.lb}" if fmts.is_multiline else fmts.comma
        ctes = joiner.join(
            f"{name}{fmts.space}AS{fmts.space}({fmts.lb}{self._render_nested(query, fmts)}{fmts.lb})"
            for name, query in self._ctes
        )
        return f"WITH{fmts.space}{ctes}"
