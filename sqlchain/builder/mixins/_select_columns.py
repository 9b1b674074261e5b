from typing import TYPE_CHECKING, cast

from typing_extensions import Self

from sqlchain.builder._state import StatementKind

if TYPE_CHECKING:
    from sqlchain.builder.protocols import BuilderProtocol

__all__ = ("SelectColumnsMixin",)


class SelectColumnsMixin:
    """Mixin providing the SELECT entry point and the FROM table."""

    def select(self, *columns: str) -> Self:
        """Start (or continue) a SELECT statement.

        Columns accumulate across calls. With no columns at all the statement
        renders ``SELECT *``.

        Args:
            *columns: Column names or expressions to select.

        Returns:
            A new builder with the columns appended.
        """
        builder = cast("BuilderProtocol", self)
        return cast(
            "Self",
            builder._replace(
                statement_kind=StatementKind.SELECT,
                select_columns=(*builder.select_columns, *columns),
            ),
        )

    def from_(self, table: str) -> Self:
        """Set the table a SELECT or DELETE statement reads from.

        An empty table name omits the FROM clause of a SELECT entirely.

        Args:
            table: The table name.

        Returns:
            A new builder with the table set.
        """
        builder = cast("BuilderProtocol", self)
        return cast("Self", builder._replace(table=table, from_called=True))
