"""Rendering configuration for one-line and multi-line statement output.

The assembler only ever joins clause segments with the tokens held by a
:class:`Formatter`; :func:`format` is the final whitespace pass. Neither looks at
the SQL itself.
"""

import re
from dataclasses import dataclass
from enum import Enum

__all__ = (
    "FormatMode",
    "Formatter",
    "format",
    "multiline",
    "one_line",
)

DEFAULT_INDENT = "  "

_WHITESPACE_RE = re.compile(r"\s+")


class FormatMode(Enum):
    """Rendering mode of a :class:`Formatter`."""

    ONE_LINE = "one_line"
    MULTILINE = "multiline"


@dataclass(frozen=True)
class Formatter:
    """Separator tokens used while concatenating clauses.

    Attributes:
        mode: Whether clauses are laid out on one line or one clause per line.
        comma: Separator between items of a multi-valued clause.
        lb: Line-break token placed between clauses. Empty in one-line mode.
        space: Separator between a keyword and its body, and between raw fragments.
        indent: Indentation for nested sub-statements and continuation lines.
    """

    mode: FormatMode = FormatMode.ONE_LINE
    comma: str = ", "
    lb: str = ""
    space: str = " "
    indent: str = ""

    @property
    def is_multiline(self) -> bool:
        return self.mode is FormatMode.MULTILINE

    @property
    def separator(self) -> str:
        """Token placed between two clause segments."""
        return self.lb if self.is_multiline else self.space

    @property
    def continuation(self) -> str:
        """Token placed before a continuation line (``AND b``, a second JOIN)."""
        return f"{self.lb}{self.indent}" if self.is_multiline else self.space

    def indent_block(self, text: str) -> str:
        """Indent every line of ``text`` one level deeper.

        Leading blank lines and trailing whitespace are dropped. In one-line
        mode the text is only trimmed.

        Args:
            text: A rendered sub-statement.

        Returns:
            The indented text.
        """
        if not self.is_multiline:
            return text.strip()
        lines = text.rstrip().split(self.lb)
        while lines and not lines[0].strip():
            lines.pop(0)
        return self.lb.join(f"{self.indent}{line}" if line.strip() else line for line in lines)


def one_line() -> Formatter:
    """Formatter that renders the whole statement on a single line."""
    return Formatter(mode=FormatMode.ONE_LINE, comma=", ", lb="", space=" ", indent="")


def multiline(indent: str = DEFAULT_INDENT) -> Formatter:
    """Formatter that renders one clause per line.

    Args:
        indent: Indentation token used for nested statements.

    Returns:
        A multi-line formatter.
    """
    return Formatter(mode=FormatMode.MULTILINE, comma=", ", lb="\n", space=" ", indent=indent)


def format(query: str, fmts: Formatter) -> str:  # noqa: A001
    """Normalize whitespace of an assembled statement.

    One-line mode turns every line break into a space and collapses runs of
    whitespace into a single space. Multi-line mode strips trailing whitespace from
    each line and drops blank lines.

    Args:
        query: The assembled statement text.
        fmts: The formatter used to assemble it.

    Returns:
        The normalized statement.
    """
    if not fmts.is_multiline:
        return _WHITESPACE_RE.sub(fmts.space, query).strip()

    lines = (line.rstrip() for line in query.splitlines())
    return fmts.lb.join(line for line in lines if line)
