"""Dialect capability gate.

Builders accept the same ``dialect`` values as sqlglot (names, ``Dialect``
classes or instances). The value is resolved once, at construction, to one of
the closed set of :class:`Dialect` members; each member carries a fixed set of
:class:`Capability` flags that decide which clause methods exist and how
multi-valued DROP targets render.
"""

from enum import Enum
from functools import wraps
from typing import TYPE_CHECKING, Any, Callable, TypeVar, Union

from sqlglot.dialects.dialect import Dialect as SQLGlotDialect
from sqlglot.dialects.dialect import DialectType
from sqlglot.dialects.mysql import MySQL
from sqlglot.dialects.postgres import Postgres
from sqlglot.dialects.sqlite import SQLite

from sqlclause.exceptions import DialectNotSupportedError, ImproperConfigurationError
from sqlclause.utils.logging import get_logger

if TYPE_CHECKING:
    from typing_extensions import ParamSpec

    P = ParamSpec("P")

__all__ = (
    "DIALECT_CAPABILITIES",
    "Capability",
    "Dialect",
    "DialectLike",
    "requires_capability",
    "resolve_dialect",
)

logger = get_logger("dialects")

R = TypeVar("R")


class Dialect(Enum):
    """Target databases supported by the builders."""

    STANDARD = "standard"
    POSTGRES = "postgres"
    SQLITE = "sqlite"
    MYSQL = "mysql"

    def __str__(self) -> str:
        return self.value

    @property
    def capabilities(self) -> "frozenset[Capability]":
        return DIALECT_CAPABILITIES[self]

    def supports(self, capability: "Capability") -> bool:
        return capability in DIALECT_CAPABILITIES[self]


class Capability(Enum):
    """Dialect-specific clause features."""

    WITH = "with"
    RETURNING = "returning"
    LIMIT_OFFSET = "limit_offset"
    SET_OPERATIONS = "set_operations"
    OVERRIDING = "overriding"
    DEFAULT_VALUES = "default_values"
    CONFLICT_RESOLUTION = "conflict_resolution"
    ON_DUPLICATE_KEY_UPDATE = "on_duplicate_key_update"
    UPDATE_FROM = "update_from"
    MULTIPLE_DROP_TARGETS = "multiple_drop_targets"

    def __str__(self) -> str:
        return self.name


DIALECT_CAPABILITIES: "dict[Dialect, frozenset[Capability]]" = {
    Dialect.STANDARD: frozenset({Capability.OVERRIDING}),
    Dialect.POSTGRES: frozenset(
        {
            Capability.WITH,
            Capability.RETURNING,
            Capability.LIMIT_OFFSET,
            Capability.SET_OPERATIONS,
            Capability.OVERRIDING,
            Capability.DEFAULT_VALUES,
            Capability.UPDATE_FROM,
            Capability.MULTIPLE_DROP_TARGETS,
        }
    ),
    Dialect.SQLITE: frozenset(
        {
            Capability.WITH,
            Capability.RETURNING,
            Capability.LIMIT_OFFSET,
            Capability.SET_OPERATIONS,
            Capability.DEFAULT_VALUES,
            Capability.CONFLICT_RESOLUTION,
            Capability.UPDATE_FROM,
        }
    ),
    Dialect.MYSQL: frozenset(
        {
            Capability.WITH,
            Capability.LIMIT_OFFSET,
            Capability.SET_OPERATIONS,
            Capability.ON_DUPLICATE_KEY_UPDATE,
        }
    ),
}

DialectLike = Union[Dialect, DialectType]

# Spellings sqlglot does not register itself.
_ALIASES = {"postgresql": "postgres", "pg": "postgres", "sqlite3": "sqlite", "mariadb": "mysql"}


def resolve_dialect(dialect: "DialectLike") -> Dialect:
    """Resolve a dialect value to one of the supported :class:`Dialect` members.

    Args:
        dialect: A :class:`Dialect`, a sqlglot dialect name, class or instance, or ``None``.

    Raises:
        ImproperConfigurationError: If sqlglot does not know the dialect, or it is
            not one of the supported dialects.

    Returns:
        The resolved dialect. ``None`` resolves to :attr:`Dialect.STANDARD`.
    """
    if isinstance(dialect, Dialect):
        return dialect
    if isinstance(dialect, str):
        normalized = dialect.strip().lower()
        if normalized == Dialect.STANDARD.value:
            return Dialect.STANDARD
        dialect = _ALIASES.get(normalized, normalized)

    try:
        sqlglot_dialect = SQLGlotDialect.get_or_raise(dialect)
    except ValueError as e:
        msg = f"Unknown SQL dialect: {dialect!r}"
        raise ImproperConfigurationError(msg) from e

    # Subclasses (e.g. Redshift for Postgres) keep their parent's clause set.
    resolved: Dialect
    if isinstance(sqlglot_dialect, Postgres):
        resolved = Dialect.POSTGRES
    elif isinstance(sqlglot_dialect, SQLite):
        resolved = Dialect.SQLITE
    elif isinstance(sqlglot_dialect, MySQL):
        resolved = Dialect.MYSQL
    elif type(sqlglot_dialect) is SQLGlotDialect:
        resolved = Dialect.STANDARD
    else:
        msg = (
            f"Unsupported SQL dialect: {type(sqlglot_dialect).__name__}. "
            f"Supported dialects: {', '.join(d.value for d in Dialect)}"
        )
        raise ImproperConfigurationError(msg)

    logger.debug("Resolved dialect %r to %s", dialect, resolved)
    return resolved


def requires_capability(capability: Capability) -> "Callable[[Callable[P, R]], Callable[P, R]]":
    """Gate a builder method on a dialect capability.

    The decorated method raises :class:`~sqlclause.exceptions.DialectNotSupportedError`
    before doing anything when the builder's dialect lacks ``capability``.

    Args:
        capability: The capability the method needs.

    Returns:
        The decorator.
    """

    def decorator(method: "Callable[P, R]") -> "Callable[P, R]":
        @wraps(method)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            builder = args[0]
            dialect: Dialect = builder.resolved_dialect
            if not dialect.supports(capability):
                raise DialectNotSupportedError(str(dialect), str(capability), method.__name__)
            return method(*args, **kwargs)

        return wrapper  # type: ignore[return-value]

    return decorator
