"""Per-clause value storage."""

from enum import Enum
from typing import Generic, Optional, TypeVar

from sqlclause.builder._clauses import LogicalOperator

__all__ = ("ClauseAccumulator", "ClauseT")

ClauseT = TypeVar("ClauseT", bound=Enum)


class ClauseAccumulator(Generic[ClauseT]):
    """Current value of every clause of one statement.

    Singular clauses keep the last value written, including an empty one.
    Multi-valued clauses keep an ordered set: values are appended in call
    order, exact duplicates and values that trim to nothing are ignored.
    Conditions (WHERE, HAVING) are multi-valued over ``(operator, text)`` pairs.
    """

    __slots__ = ("_conditions", "_many", "_singular")

    def __init__(self) -> None:
        self._singular: dict[ClauseT, str] = {}
        self._many: dict[ClauseT, list[str]] = {}
        self._conditions: dict[ClauseT, list[tuple[LogicalOperator, str]]] = {}

    def set_singular(self, clause: ClauseT, text: str) -> None:
        self._singular[clause] = text.strip()

    def append_unique(self, clause: ClauseT, text: str) -> bool:
        """Append ``text`` to a multi-valued clause.

        Args:
            clause: The clause to append to.
            text: The value; surrounding whitespace is trimmed.

        Returns:
            ``True`` if the value was added, ``False`` if it was empty or already present.
        """
        value = text.strip()
        if not value:
            return False
        items = self._many.setdefault(clause, [])
        if value in items:
            return False
        items.append(value)
        return True

    def append_condition(self, clause: ClauseT, operator: LogicalOperator, text: str) -> bool:
        """Append a condition joined by ``operator`` to the ones already stored.

        The operator of the first stored condition is never rendered.

        Returns:
            ``True`` if the condition was added.
        """
        value = text.strip()
        if not value:
            return False
        items = self._conditions.setdefault(clause, [])
        entry = (operator, value)
        if entry in items:
            return False
        items.append(entry)
        return True

    def get_singular(self, clause: ClauseT) -> Optional[str]:
        return self._singular.get(clause)

    def get_many(self, clause: ClauseT) -> list[str]:
        return list(self._many.get(clause, ()))

    def get_conditions(self, clause: ClauseT) -> list[tuple[LogicalOperator, str]]:
        return list(self._conditions.get(clause, ()))

    def has(self, clause: ClauseT) -> bool:
        """Whether the clause holds anything that renders."""
        return bool(self._singular.get(clause) or self._many.get(clause) or self._conditions.get(clause))
