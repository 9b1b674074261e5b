from typing import TYPE_CHECKING, cast

from typing_extensions import Self

from sqlchain.builder._state import StatementKind

if TYPE_CHECKING:
    from sqlchain.builder.protocols import BuilderProtocol

__all__ = ("DeleteFromMixin",)


class DeleteFromMixin:
    """Mixin providing the DELETE entry point."""

    def delete(self) -> Self:
        """Start a DELETE statement. Use :meth:`from_` to name the table.

        Returns:
            A new builder.
        """
        builder = cast("BuilderProtocol", self)
        return cast("Self", builder._replace(statement_kind=StatementKind.DELETE))
