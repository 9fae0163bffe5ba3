"""Fluent SQL statement builders."""

from sqlclause.builder._base import QueryBuilder
from sqlclause.builder._clauses import (
    DeleteClause,
    DropIndexClause,
    DropTableClause,
    InsertClause,
    LogicalOperator,
    SelectClause,
    TransactionClause,
    UpdateClause,
    ValuesClause,
)
from sqlclause.builder._delete import Delete
from sqlclause.builder._drop import DropIndex, DropTable
from sqlclause.builder._insert import Insert
from sqlclause.builder._select import Select
from sqlclause.builder._transaction import Transaction
from sqlclause.builder._update import Update
from sqlclause.builder._values import Values

__all__ = (
    "Delete",
    "DeleteClause",
    "DropIndex",
    "DropIndexClause",
    "DropTable",
    "DropTableClause",
    "Insert",
    "InsertClause",
    "LogicalOperator",
    "QueryBuilder",
    "Select",
    "SelectClause",
    "Transaction",
    "TransactionClause",
    "Update",
    "UpdateClause",
    "Values",
    "ValuesClause",
)
