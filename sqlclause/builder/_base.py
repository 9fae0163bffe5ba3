"""Clause concatenation engine shared by every statement builder.

A builder stores clause values in a :class:`ClauseAccumulator` and raw
fragments in a :class:`RawInjectionLedger`. Rendering walks the builder's fixed
``_clause_order``; for each clause it joins the "before" injections, the clause
body and the "after" injections, drops empty segments and joins what is left
with the formatter's separator. Call order never affects clause order.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any, ClassVar, Generic, Optional, Union

from typing_extensions import Self

from sqlclause.builder._accumulator import ClauseAccumulator, ClauseT
from sqlclause.builder._clauses import LogicalOperator
from sqlclause.builder._ledger import RawInjectionLedger
from sqlclause.config import DEFAULT_CONFIG, BuilderConfig
from sqlclause.dialects import Dialect, resolve_dialect
from sqlclause.exceptions import SQLBuilderError
from sqlclause.formatter import Formatter, format
from sqlclause.utils.logging import get_logger

if TYPE_CHECKING:
    from sqlclause.dialects import DialectLike

__all__ = ("QueryBuilder",)

logger = get_logger("builder")


@dataclass(eq=False, repr=False)
class QueryBuilder(Generic[ClauseT]):
    """Base class for SQL statement builders.

    Subclasses declare the clause enumeration they accept (``_clause_type``),
    the order clauses render in (``_clause_order``) and the keyword of every
    clause rendered by the default renderer (``_keywords``). A clause needing
    more than ``KEYWORD body`` provides a ``_render_<clause value>`` method.
    """

    _clause_type: ClassVar[type[Enum]]
    _clause_order: ClassVar[tuple[Enum, ...]]
    _keywords: ClassVar[dict[Any, str]] = {}

    dialect: "DialectLike" = None
    config: BuilderConfig = field(default=DEFAULT_CONFIG)
    _dialect: Dialect = field(default=Dialect.STANDARD, init=False)
    _accumulator: ClauseAccumulator[ClauseT] = field(default_factory=ClauseAccumulator, init=False)
    _ledger: RawInjectionLedger[ClauseT] = field(default_factory=RawInjectionLedger, init=False)
    _ctes: "list[tuple[str, Union[QueryBuilder[Any], str]]]" = field(default_factory=list, init=False)

    def __post_init__(self) -> None:
        if self.dialect is None:
            self.dialect = self.config.dialect
        self._dialect = resolve_dialect(self.dialect)

    @property
    def resolved_dialect(self) -> Dialect:
        """The supported dialect this builder renders for."""
        return self._dialect

    @property
    def dialect_name(self) -> str:
        return self._dialect.value

    def _clause(self, name: str) -> ClauseT:
        """Look up a clause of this statement kind by member name."""
        return self._clause_type[name]  # type: ignore[return-value]

    def _check_clause(self, clause: Any) -> None:
        if not isinstance(clause, self._clause_type):
            msg = (
                f"{type(self).__name__} clauses are {self._clause_type.__name__} members, "
                f"got {type(clause).__name__} {clause!r}."
            )
            raise SQLBuilderError(msg)

    # Raw injection

    def raw(self, raw_sql: str) -> Self:
        """Add raw SQL at the beginning of the statement.

        Args:
            raw_sql: The fragment. Repeating an identical fragment has no effect.

        Returns:
            The current builder instance for method chaining.
        """
        self._ledger.add_raw(raw_sql)
        return self

    def raw_before(self, clause: ClauseT, raw_sql: str) -> Self:
        """Add raw SQL before a clause.

        Several fragments against the same clause render in call order. The
        fragment renders even if the clause itself is empty.

        Args:
            clause: The clause the fragment precedes.
            raw_sql: The fragment.

        Raises:
            SQLBuilderError: If ``clause`` belongs to another statement kind.

        Returns:
            The current builder instance for method chaining.
        """
        self._check_clause(clause)
        self._ledger.add_before(clause, raw_sql)
        return self

    def raw_after(self, clause: ClauseT, raw_sql: str) -> Self:
        """Add raw SQL after a clause.

        Args:
            clause: The clause the fragment follows.
            raw_sql: The fragment.

        Raises:
            SQLBuilderError: If ``clause`` belongs to another statement kind.

        Returns:
            The current builder instance for method chaining.
        """
        self._check_clause(clause)
        self._ledger.add_after(clause, raw_sql)
        return self

    # Assembly

    def concat(self, fmts: Formatter) -> str:
        """Assemble the statement with the separators of ``fmts``.

        Args:
            fmts: The formatter to assemble with.

        Returns:
            The statement text, without the final whitespace pass.
        """
        segments = [fmts.space.join(fragment for fragment in self._ledger.raw if fragment)]
        segments.extend(self._concat_clause(clause, fmts) for clause in self._clause_order)  # type: ignore[arg-type]
        return fmts.separator.join(segment for segment in segments if segment).rstrip()

    def _concat_clause(self, clause: ClauseT, fmts: Formatter) -> str:
        parts = [*self._ledger.before(clause), self._render_clause(clause, fmts), *self._ledger.after(clause)]
        return fmts.space.join(part for part in parts if part)

    def _render_clause(self, clause: ClauseT, fmts: Formatter) -> str:
        renderer = getattr(self, f"_render_{clause.value}", None)
        if renderer is not None:
            return renderer(fmts)  # type: ignore[no-any-return]
        return self._render_keyword_clause(clause, fmts)

    def _render_keyword_clause(self, clause: ClauseT, fmts: Formatter) -> str:
        if not self._accumulator.has(clause):
            return ""
        body = self._render_body(clause, fmts)
        keyword = self._keywords.get(clause)
        return f"{keyword}{fmts.space}{body}" if keyword else body

    def _render_body(self, clause: ClauseT, fmts: Formatter) -> str:
        conditions = self._accumulator.get_conditions(clause)
        if conditions:
            return self._join_conditions(conditions, fmts)
        items = self._accumulator.get_many(clause)
        if items:
            return fmts.comma.join(items)
        return self._accumulator.get_singular(clause) or ""

    @staticmethod
    def _join_conditions(conditions: "list[tuple[LogicalOperator, str]]", fmts: Formatter) -> str:
        (_, first), *rest = conditions
        return "".join([first, *(f"{fmts.continuation}{operator}{fmts.space}{text}" for operator, text in rest)])

    @staticmethod
    def _render_nested(statement: "Union[QueryBuilder[Any], str]", fmts: Formatter) -> str:
        """Render a sub-statement one indentation level deeper than its parent."""
        text = statement.strip() if isinstance(statement, str) else statement.concat(fmts)
        return fmts.indent_block(text)

    @staticmethod
    def _ensure_builder(statement: Any, expected: "type[QueryBuilder[Any]]", method: str) -> None:
        if not isinstance(statement, expected):
            msg = f"{method}() expects a {expected.__name__} builder, got {type(statement).__name__}."
            raise SQLBuilderError(msg)

    def _sub_statements(self) -> "list[QueryBuilder[Any]]":
        """Builders attached to this statement by reference."""
        return [query for _, query in self._ctes if isinstance(query, QueryBuilder)]

    def _check_attachable(self, statement: "QueryBuilder[Any]", method: str) -> None:
        """Reject attaching ``statement`` when this statement is reachable from it.

        Attached statements form a tree; a statement nested in itself, directly
        or through other statements, could never finish rendering.

        Raises:
            SQLBuilderError: If attaching ``statement`` would create a cycle.
        """
        if statement is self:
            msg = f"{method}() cannot attach a {type(self).__name__} to itself."
            raise SQLBuilderError(msg)

        pending = [statement]
        seen: set[int] = set()
        while pending:
            current = pending.pop()
            if current is self:
                msg = (
                    f"{method}() would nest this {type(self).__name__} inside itself: "
                    f"it is already attached to the {type(statement).__name__} being added."
                )
                raise SQLBuilderError(msg)
            if id(current) in seen:
                continue
            seen.add(id(current))
            pending.extend(current._sub_statements())

    # Rendering

    def render(self, fmts: Optional[Formatter] = None) -> str:
        """Render the statement.

        Args:
            fmts: The formatter to render with. Defaults to one-line output.

        Returns:
            The statement text after the formatter's whitespace pass.
        """
        fmts = fmts or self.config.one_line_formatter()
        query = format(self.concat(fmts), fmts)
        logger.debug("Rendered %s statement (%s, %s)", type(self).__name__, fmts.mode.value, self._dialect)
        return query

    def render_one_line(self) -> str:
        return self.render(self.config.one_line_formatter())

    def render_multi_line(self) -> str:
        return self.render(self.config.multiline_formatter())

    def as_string(self) -> str:
        """Get the current state of the statement as a one-line string.

        Returns:
            The assembled statement. An empty builder renders ``""``.
        """
        return self.concat(self.config.one_line_formatter())

    def print(self) -> Self:
        """Print the statement on one line and return the builder unchanged.

        Returns:
            The current builder instance for method chaining.
        """
        print(self.render_one_line(), file=self.config.output)
        return self

    def debug(self) -> Self:
        """Print the statement in its multi-line form and return the builder unchanged.

        Useful while composing complex statements.

        Returns:
            The current builder instance for method chaining.
        """
        print(self.render_multi_line(), file=self.config.output)
        return self

    def __str__(self) -> str:
        return self.as_string()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.render_multi_line()!r}, dialect={self.dialect_name!r})"
