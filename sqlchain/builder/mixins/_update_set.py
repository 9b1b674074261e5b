from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, cast

from typing_extensions import Self

from sqlchain.builder._state import Clause, StatementKind

if TYPE_CHECKING:
    from sqlchain.builder.protocols import BuilderProtocol

__all__ = ("UpdateSetMixin",)


class UpdateSetMixin:
    """Mixin providing the UPDATE entry point and SET assignments."""

    def update(self, table: str) -> Self:
        """Start an UPDATE statement on ``table``.

        Args:
            table: The table to update.

        Returns:
            A new builder.
        """
        builder = cast("BuilderProtocol", self)
        return cast("Self", builder._replace(statement_kind=StatementKind.UPDATE, table=table, from_called=False))

    def set(self, template: str, *args: Any) -> Self:
        """Add one SET assignment.

        Assignments are comma-joined in the order they were added and are
        numbered before any WHERE condition.

        Args:
            template: An assignment such as ``"price = ?"``.
            *args: One value per ``?`` in ``template``.

        Returns:
            A new builder.
        """
        builder = cast("BuilderProtocol", self)
        return cast("Self", builder._replace(set_clauses=(*builder.set_clauses, Clause(template, args))))

    def set_from_dict(self, data: "Mapping[str, Any]") -> Self:
        """Add a ``column = ?`` assignment for every item of ``data``.

        Args:
            data: Column names mapped to their new values.

        Returns:
            A new builder.
        """
        builder = cast("BuilderProtocol", self)
        clauses = tuple(Clause(f"{column} = ?", (value,)) for column, value in data.items())
        return cast("Self", builder._replace(set_clauses=(*builder.set_clauses, *clauses)))
