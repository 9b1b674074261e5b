from typing import TYPE_CHECKING, cast

from typing_extensions import Self

if TYPE_CHECKING:
    from sqlchain.builder.protocols import BuilderProtocol

__all__ = ("OrderByClauseMixin",)


class OrderByClauseMixin:
    """Mixin providing ORDER BY clause for SELECT builders."""

    def order_by(self, expression: str) -> Self:
        """Set the ORDER BY expression, replacing any previous one.

        Args:
            expression: The ordering, e.g. ``"created_at DESC"``.

        Returns:
            A new builder.
        """
        builder = cast("BuilderProtocol", self)
        return cast("Self", builder._replace(order_by_expression=expression))
