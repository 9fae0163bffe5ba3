"""Builder configuration."""

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Optional

from sqlclause.formatter import DEFAULT_INDENT, Formatter, multiline, one_line

if TYPE_CHECKING:
    from typing import TextIO

    from sqlclause.dialects import DialectLike

__all__ = ("DEFAULT_CONFIG", "BuilderConfig")


@dataclass(frozen=True)
class BuilderConfig:
    """Defaults shared by statement builders.

    Attributes:
        dialect: Dialect used when a builder is created without one.
        indent: Indentation token for multi-line rendering.
        output: Stream written by ``print()`` and ``debug()``. ``None`` means stdout.
    """

    dialect: "DialectLike" = None
    indent: str = DEFAULT_INDENT
    output: "Optional[TextIO]" = None

    def one_line_formatter(self) -> Formatter:
        return one_line()

    def multiline_formatter(self) -> Formatter:
        return multiline(indent=self.indent)

    def replace(self, **changes: object) -> "BuilderConfig":
        """Return a copy of this config with ``changes`` applied."""
        return replace(self, **changes)  # type: ignore[arg-type]


DEFAULT_CONFIG = BuilderConfig()
