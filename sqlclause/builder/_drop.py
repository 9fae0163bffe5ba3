"""DROP INDEX and DROP TABLE statement builders.

Both statements accumulate target names. Dialects with the
``MULTIPLE_DROP_TARGETS`` capability render every name comma separated; the
others render only the most recently added name.
"""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, ClassVar

from typing_extensions import Self

from sqlclause.builder._accumulator import ClauseT
from sqlclause.builder._base import QueryBuilder
from sqlclause.builder._clauses import DropIndexClause, DropTableClause
from sqlclause.dialects import Capability
from sqlclause.utils.logging import get_logger

if TYPE_CHECKING:
    from sqlclause.formatter import Formatter

__all__ = ("DropIndex", "DropTable")

logger = get_logger("builder.drop")


@dataclass(eq=False, repr=False)
class _DropStatement(QueryBuilder[ClauseT]):
    """Shared target handling for DROP statements."""

    _drop_keyword: ClassVar[str]

    _if_exists: bool = field(default=False, init=False)

    @property
    def _targets_clause(self) -> ClauseT:
        return self._clause_order[0]  # type: ignore[return-value]

    def _add_target(self, name: str, if_exists: bool = False) -> Self:
        if if_exists:
            self._if_exists = True
        self._accumulator.append_unique(self._targets_clause, name)
        return self

    def _render_targets(self, fmts: "Formatter") -> str:
        names = self._accumulator.get_many(self._targets_clause)
        if not names:
            return ""
        if self.resolved_dialect.supports(Capability.MULTIPLE_DROP_TARGETS):
            targets = fmts.comma.join(names)
        else:
            if len(names) > 1:
                logger.debug(
                    "%s dialect drops a single target, ignoring %s", self.resolved_dialect, ", ".join(names[:-1])
                )
            targets = names[-1]
        if_exists = f"IF{fmts.space}EXISTS{fmts.space}" if self._if_exists else ""
        return f"{self._drop_keyword}{fmts.space}{if_exists}{targets}"


@dataclass(eq=False, repr=False)
class DropIndex(_DropStatement[DropIndexClause]):
    """Builder for DROP INDEX statements.

    Example:
        ```python
        DropIndex(dialect="postgres").drop_index("users_login_idx").drop_index("users_name_idx").as_string()
        # DROP INDEX users_login_idx, users_name_idx

        DropIndex(dialect="sqlite").drop_index("users_login_idx").drop_index("users_name_idx").as_string()
        # DROP INDEX users_name_idx
        ```
    """

    _clause_type: ClassVar[type[DropIndexClause]] = DropIndexClause
    _clause_order: ClassVar[tuple[DropIndexClause, ...]] = (DropIndexClause.DROP_INDEX,)
    _drop_keyword: ClassVar[str] = "DROP INDEX"

    def drop_index(self, index_name: str) -> Self:
        """Add an index to drop.

        Args:
            index_name: The index name. Repeating a name has no effect.

        Returns:
            The current builder instance for method chaining.
        """
        return self._add_target(index_name)

    def drop_index_if_exists(self, index_name: str) -> Self:
        """Add an index to drop and guard the statement with ``IF EXISTS``.

        Returns:
            The current builder instance for method chaining.
        """
        return self._add_target(index_name, if_exists=True)

    def _render_drop_index(self, fmts: "Formatter") -> str:
        return self._render_targets(fmts)


@dataclass(eq=False, repr=False)
class DropTable(_DropStatement[DropTableClause]):
    """Builder for DROP TABLE statements."""

    _clause_type: ClassVar[type[DropTableClause]] = DropTableClause
    _clause_order: ClassVar[tuple[DropTableClause, ...]] = (DropTableClause.DROP_TABLE,)
    _drop_keyword: ClassVar[str] = "DROP TABLE"

    def drop_table(self, table_name: str) -> Self:
        return self._add_target(table_name)

    def drop_table_if_exists(self, table_name: str) -> Self:
        return self._add_target(table_name, if_exists=True)

    def _render_drop_table(self, fmts: "Formatter") -> str:
        return self._render_targets(fmts)
