"""Fluent SQL query builder.

Statements are accumulated through chained calls and rendered with
positional parameters on ``build()``.
"""

from sqlchain.builder._base import QueryBuilder, SafeQuery
from sqlchain.builder._state import OPERATION_KINDS, Clause, StatementKind
from sqlchain.exceptions import SQLBuilderError

__all__ = (
    "OPERATION_KINDS",
    "Clause",
    "QueryBuilder",
    "SQLBuilderError",
    "SafeQuery",
    "StatementKind",
)
