"""Clause identifiers, one closed enumeration per statement kind.

Members double as the targets of ``raw_before`` / ``raw_after``. Their
definition order is not the render order; each builder declares that in
``_clause_order``.
"""

from enum import Enum

__all__ = (
    "DeleteClause",
    "DropIndexClause",
    "DropTableClause",
    "InsertClause",
    "LogicalOperator",
    "SelectClause",
    "TransactionClause",
    "UpdateClause",
    "ValuesClause",
)


class LogicalOperator(Enum):
    """Operator joining a condition to the ones before it."""

    AND = "AND"
    OR = "OR"

    def __str__(self) -> str:
        return self.value


class SelectClause(Enum):
    WITH = "with"
    SELECT = "select"
    FROM = "from"
    JOIN = "join"
    WHERE = "where"
    GROUP_BY = "group_by"
    HAVING = "having"
    WINDOW = "window"
    ORDER_BY = "order_by"
    LIMIT = "limit"
    OFFSET = "offset"
    EXCEPT = "except"
    INTERSECT = "intersect"
    UNION = "union"


class InsertClause(Enum):
    WITH = "with"
    INSERT_INTO = "insert_into"
    OVERRIDING = "overriding"
    VALUES = "values"
    DEFAULT_VALUES = "default_values"
    SELECT = "select"
    ON_CONFLICT = "on_conflict"
    ON_DUPLICATE_KEY_UPDATE = "on_duplicate_key_update"
    RETURNING = "returning"


class UpdateClause(Enum):
    WITH = "with"
    UPDATE = "update"
    SET = "set"
    FROM = "from"
    WHERE = "where"
    RETURNING = "returning"


class DeleteClause(Enum):
    WITH = "with"
    DELETE_FROM = "delete_from"
    WHERE = "where"
    RETURNING = "returning"


class ValuesClause(Enum):
    VALUES = "values"


class DropIndexClause(Enum):
    DROP_INDEX = "drop_index"


class DropTableClause(Enum):
    DROP_TABLE = "drop_table"


class TransactionClause(Enum):
    BEGIN = "begin"
    SET_TRANSACTION = "set_transaction"
    COMMANDS = "commands"
    END = "end"
