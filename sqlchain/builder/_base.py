"""Immutable fluent SQL query builder with positional parameter binding.

Every fluent call returns a new builder, so a partially built query can be
reused as a base for several derived queries without the branches affecting
each other.
"""

from collections.abc import Iterator
from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING, Any, Callable, Final, Optional

from typing_extensions import Self

from sqlchain.builder._delete import render_delete
from sqlchain.builder._insert import render_insert
from sqlchain.builder._select import render_select
from sqlchain.builder._state import Clause, StatementKind
from sqlchain.builder._update import render_update
from sqlchain.builder.mixins import (
    DeleteFromMixin,
    InsertValuesMixin,
    LimitOffsetClauseMixin,
    OrderByClauseMixin,
    ReturningClauseMixin,
    SelectColumnsMixin,
    UpdateSetMixin,
    WhereClauseMixin,
)
from sqlchain.config import BuilderConfig
from sqlchain.exceptions import IncompatibleOperationError, MalformedQueryError, SQLChainError
from sqlchain.parameters import ParameterStyle, PlaceholderRenumberer
from sqlchain.typing import to_typed_parameters
from sqlchain.utils.logging import get_logger

if TYPE_CHECKING:
    from sqlchain.typing import TypedParameter

__all__ = ("QueryBuilder", "SafeQuery")

logger = get_logger("builder")

_Renderer = Callable[["QueryBuilder", PlaceholderRenumberer], "tuple[str, list[Any]]"]

_RENDERERS: Final[dict[StatementKind, _Renderer]] = {
    StatementKind.SELECT: render_select,
    StatementKind.INSERT: render_insert,
    StatementKind.UPDATE: render_update,
    StatementKind.DELETE: render_delete,
}


@dataclass(frozen=True)
class SafeQuery:
    """A rendered SQL statement with its positional parameters.

    Unpacks as ``sql, parameters = builder.build()``.
    """

    sql: str
    parameters: "list[Any]" = field(default_factory=list)
    parameter_style: ParameterStyle = ParameterStyle.NUMERIC
    statement_kind: StatementKind = StatementKind.UNSET

    def __iter__(self) -> "Iterator[Any]":
        yield self.sql
        yield self.parameters

    def typed_parameters(self) -> "tuple[TypedParameter, ...]":
        """Tag each parameter with its value kind, in placeholder order.

        Raises:
            UnsupportedParameterTypeError: If a parameter is not a supported kind.

        Returns:
            One :class:`~sqlchain.typing.TypedParameter` per parameter.
        """
        return to_typed_parameters(self.parameters)


@dataclass(frozen=True)
class QueryBuilder(
    SelectColumnsMixin,
    InsertValuesMixin,
    UpdateSetMixin,
    DeleteFromMixin,
    WhereClauseMixin,
    ReturningClauseMixin,
    OrderByClauseMixin,
    LimitOffsetClauseMixin,
):
    """Accumulates the pieces of one SQL statement and renders it on :meth:`build`.

    Example:
        >>> query = (
        ...     QueryBuilder()
        ...     .select("id", "name")
        ...     .from_("users")
        ...     .where("age > ?", 18)
        ...     .limit(10)
        ...     .build()
        ... )
        >>> query.sql
        'SELECT id, name FROM users WHERE age > $1 LIMIT 10'
        >>> query.parameters
        [18]
    """

    statement_kind: StatementKind = StatementKind.UNSET
    table: str = ""
    select_columns: "tuple[str, ...]" = ()
    insert_columns: "tuple[str, ...]" = ()
    insert_values: "tuple[Any, ...]" = ()
    set_clauses: "tuple[Clause, ...]" = ()
    where_clauses: "tuple[Clause, ...]" = ()
    returning_columns: "tuple[str, ...]" = ()
    order_by_expression: Optional[str] = None
    limit_value: Optional[int] = None
    offset_value: Optional[int] = None
    from_called: bool = False
    config: BuilderConfig = field(default_factory=BuilderConfig)

    def _replace(self, **changes: Any) -> Self:
        return replace(self, **changes)

    def with_config(self, config: BuilderConfig) -> Self:
        """Return a builder with the same clauses rendered under ``config``."""
        return self._replace(config=config)

    def _used_operations(self) -> "Iterator[str]":
        if self.from_called:
            yield "from_"
        if self.insert_columns:
            yield "columns"
        if self.insert_values:
            yield "values"
        if self.set_clauses:
            yield "set"
        if self.where_clauses:
            yield "where"
        if self.returning_columns:
            yield "returning"
        if self.order_by_expression:
            yield "order_by"
        if self.limit_value is not None:
            yield "limit"
        if self.offset_value is not None:
            yield "offset"

    def _validate_state(self) -> None:
        """Reject builder state that cannot render a complete statement.

        Only called when ``config.strict`` is enabled.

        Raises:
            MalformedQueryError: If no statement kind was chosen, the table is missing,
                an INSERT has no values or its columns and values do not line up,
                or an UPDATE has no SET assignment.
            IncompatibleOperationError: If a modifier does not apply to the statement kind.
        """
        kind = self.statement_kind
        if kind is StatementKind.UNSET:
            msg = "Cannot build a query before select(), insert(), update() or delete() is called."
            raise MalformedQueryError(msg)

        for operation in self._used_operations():
            if not kind.allows(operation):
                raise IncompatibleOperationError(operation, kind)

        if kind is not StatementKind.SELECT and not self.table:
            msg = f"{kind.name} statement requires a table name."
            raise MalformedQueryError(msg)

        if kind is StatementKind.INSERT:
            if not self.insert_values:
                msg = "INSERT statement requires at least one value."
                raise MalformedQueryError(msg)
            if self.insert_columns and len(self.insert_columns) != len(self.insert_values):
                msg = (
                    f"INSERT statement has {len(self.insert_columns)} column(s) "
                    f"but {len(self.insert_values)} value(s)."
                )
                raise MalformedQueryError(msg)

        if kind is StatementKind.UPDATE and not self.set_clauses:
            msg = "UPDATE statement requires at least one set() assignment."
            raise MalformedQueryError(msg)

    def build(self) -> SafeQuery:
        """Render the SQL statement and its parameters.

        Building does not change the builder; calling it twice yields identical results.

        Raises:
            MalformedQueryError: In strict mode, if the builder state is incomplete or inconsistent.
            ParameterError: In strict mode, if a clause's placeholders and arguments differ in number.
            UnsupportedParameterTypeError: If ``config.validate_parameter_types`` is set and a
                parameter is not a supported value kind.

        Returns:
            SafeQuery: The SQL text and its parameters in placeholder order.
        """
        config = self.config
        if config.strict:
            self._validate_state()

        kind = self.statement_kind
        if kind is StatementKind.UNSET:
            logger.debug("build() called before a statement kind was chosen; returning an empty query")
            return SafeQuery(sql="", parameters=[], parameter_style=config.parameter_style, statement_kind=kind)

        renumberer = PlaceholderRenumberer(config.parameter_style)
        sql, parameters = _RENDERERS[kind](self, renumberer)

        if config.validate_parameter_types:
            to_typed_parameters(parameters)

        logger.debug(
            "Built %s statement with %d parameter(s)",
            kind,
            len(parameters),
            extra={"extra_fields": {"statement_kind": kind.value, "parameter_count": len(parameters)}},
        )
        return SafeQuery(sql=sql, parameters=parameters, parameter_style=config.parameter_style, statement_kind=kind)

    def __str__(self) -> str:
        """Return the SQL string for this query.

        Returns:
            str: The SQL string, or the dataclass representation if the builder cannot be rendered.
        """
        try:
            return self.build().sql
        except SQLChainError:
            return repr(self)
