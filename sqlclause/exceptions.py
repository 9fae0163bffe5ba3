from typing import Any, Optional

__all__ = (
    "DialectNotSupportedError",
    "ImproperConfigurationError",
    "SQLBuilderError",
    "SQLClauseError",
)


class SQLClauseError(Exception):
    """Base exception class from which all sqlclause exceptions inherit."""

    detail: str

    def __init__(self, *args: Any, detail: str = "") -> None:
        """Initialize ``SQLClauseError``.

        Args:
            *args: args are converted to :class:`str` before passing to :class:`Exception`
            detail: detail of the exception.
        """
        str_args = [str(arg) for arg in args if arg]
        if not detail:
            if str_args:
                detail, *str_args = str_args
            elif hasattr(self, "detail"):
                detail = self.detail
        self.detail = detail
        super().__init__(*str_args)

    def __repr__(self) -> str:
        if self.detail:
            return f"{self.__class__.__name__} - {self.detail}"
        return self.__class__.__name__

    def __str__(self) -> str:
        return " ".join((*self.args, self.detail)).strip()


class SQLBuilderError(SQLClauseError):
    """Misuse of the statement builder API."""

    def __init__(self, message: Optional[str] = None) -> None:
        if message is None:
            message = "Issues building SQL statement."
        super().__init__(message)


class DialectNotSupportedError(SQLBuilderError):
    """A clause method was called on a builder whose dialect does not provide it."""

    dialect: str
    capability: str

    def __init__(self, dialect: str, capability: str, method: Optional[str] = None) -> None:
        self.dialect = dialect
        self.capability = capability
        target = f"{method}()" if method else capability
        super().__init__(f"{target} is not supported by the {dialect!r} dialect (requires {capability}).")


class ImproperConfigurationError(SQLClauseError):
    """Improper Configuration error.

    Raised when a builder is configured with an unknown or unsupported dialect.
    """
