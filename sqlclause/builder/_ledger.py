"""Raw SQL injected around clauses."""

from typing import Generic

from sqlclause.builder._accumulator import ClauseT

__all__ = ("RawInjectionLedger",)


class RawInjectionLedger(Generic[ClauseT]):
    """Chronological record of raw fragments for one statement.

    ``before`` and ``after`` are filters over the ledger rather than lookups in
    a map, so several injections against the same clause keep their call order.
    """

    __slots__ = ("_after", "_before", "_raw")

    def __init__(self) -> None:
        self._raw: list[str] = []
        self._before: list[tuple[ClauseT, str]] = []
        self._after: list[tuple[ClauseT, str]] = []

    def add_raw(self, text: str) -> None:
        """Record a fragment rendered ahead of every clause. Exact duplicates are ignored."""
        value = text.strip()
        if value not in self._raw:
            self._raw.append(value)

    def add_before(self, clause: ClauseT, text: str) -> None:
        self._before.append((clause, text.strip()))

    def add_after(self, clause: ClauseT, text: str) -> None:
        self._after.append((clause, text.strip()))

    @property
    def raw(self) -> list[str]:
        return list(self._raw)

    def before(self, clause: ClauseT) -> list[str]:
        return [text for target, text in self._before if target is clause]

    def after(self, clause: ClauseT) -> list[str]:
        return [text for target, text in self._after if target is clause]
