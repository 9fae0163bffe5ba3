from typing import TYPE_CHECKING, Any

from mypy_extensions import trait
from typing_extensions import Self

from sqlclause.dialects import Capability, requires_capability

if TYPE_CHECKING:
    from sqlclause.builder._accumulator import ClauseAccumulator

__all__ = ("ReturningClauseMixin",)


@trait
class ReturningClauseMixin:
    """Mixin providing the RETURNING clause for INSERT, UPDATE, and DELETE builders."""

    __slots__ = ()

    _accumulator: "ClauseAccumulator[Any]"

    def _clause(self, name: str) -> Any: ...

    @requires_capability(Capability.RETURNING)
    def returning(self, output_name: str) -> Self:
        """Add an output expression to the RETURNING clause.

        Args:
            output_name: A column or expression. Values accumulate comma separated.

        Returns:
            The current builder instance for method chaining.
        """
        self._accumulator.append_unique(self._clause("RETURNING"), output_name)
        return self
