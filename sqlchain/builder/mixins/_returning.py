from typing import TYPE_CHECKING, cast

from typing_extensions import Self

if TYPE_CHECKING:
    from sqlchain.builder.protocols import BuilderProtocol

__all__ = ("ReturningClauseMixin",)


class ReturningClauseMixin:
    """Mixin providing RETURNING for INSERT, UPDATE and DELETE builders."""

    def returning(self, *columns: str) -> Self:
        """Append columns to the RETURNING clause. Ignored for SELECT.

        Args:
            *columns: Columns to return.

        Returns:
            A new builder.
        """
        builder = cast("BuilderProtocol", self)
        return cast("Self", builder._replace(returning_columns=(*builder.returning_columns, *columns)))
