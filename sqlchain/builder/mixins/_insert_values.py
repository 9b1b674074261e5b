from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, cast

from typing_extensions import Self

from sqlchain.builder._state import StatementKind

if TYPE_CHECKING:
    from sqlchain.builder.protocols import BuilderProtocol

__all__ = ("InsertValuesMixin",)


class InsertValuesMixin:
    """Mixin providing INSERT target, columns and values."""

    def insert(self, table: str) -> Self:
        """Start an INSERT statement into ``table``.

        Args:
            table: The table to insert into.

        Returns:
            A new builder.
        """
        builder = cast("BuilderProtocol", self)
        return cast("Self", builder._replace(statement_kind=StatementKind.INSERT, table=table, from_called=False))

    def columns(self, *names: str) -> Self:
        """Append column names to the INSERT column list.

        When no columns are given the statement renders without a column list.

        Args:
            *names: Column names, in the same order as the values.

        Returns:
            A new builder.
        """
        builder = cast("BuilderProtocol", self)
        return cast("Self", builder._replace(insert_columns=(*builder.insert_columns, *names)))

    def values(self, *values: Any) -> Self:
        """Append values to insert. Each value gets its own placeholder.

        Args:
            *values: The values, in column order.

        Returns:
            A new builder.
        """
        builder = cast("BuilderProtocol", self)
        return cast("Self", builder._replace(insert_values=(*builder.insert_values, *values)))

    def values_from_dict(self, data: "Mapping[str, Any]") -> Self:
        """Append columns and values from a mapping of column name to value.

        Args:
            data: Column names mapped to the values to insert.

        Returns:
            A new builder.
        """
        builder = cast("BuilderProtocol", self)
        return cast(
            "Self",
            builder._replace(
                insert_columns=(*builder.insert_columns, *data.keys()),
                insert_values=(*builder.insert_values, *data.values()),
            ),
        )
