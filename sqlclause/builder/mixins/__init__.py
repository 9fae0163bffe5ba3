"""SQL statement builder mixins."""

from sqlclause.builder.mixins._common_table_expr import CommonTableExpressionMixin
from sqlclause.builder.mixins._returning import ReturningClauseMixin
from sqlclause.builder.mixins._where import WhereClauseMixin

__all__ = (
    "CommonTableExpressionMixin",
    "ReturningClauseMixin",
    "WhereClauseMixin",
)
