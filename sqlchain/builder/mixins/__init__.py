"""Fluent clause mixins composed into :class:`~sqlchain.builder.QueryBuilder`."""

from sqlchain.builder.mixins._delete_from import DeleteFromMixin
from sqlchain.builder.mixins._insert_values import InsertValuesMixin
from sqlchain.builder.mixins._limit_offset import LimitOffsetClauseMixin
from sqlchain.builder.mixins._order_by import OrderByClauseMixin
from sqlchain.builder.mixins._returning import ReturningClauseMixin
from sqlchain.builder.mixins._select_columns import SelectColumnsMixin
from sqlchain.builder.mixins._update_set import UpdateSetMixin
from sqlchain.builder.mixins._where import WhereClauseMixin

__all__ = (
    "DeleteFromMixin",
    "InsertValuesMixin",
    "LimitOffsetClauseMixin",
    "OrderByClauseMixin",
    "ReturningClauseMixin",
    "SelectColumnsMixin",
    "UpdateSetMixin",
    "WhereClauseMixin",
)
