from collections.abc import Sequence
from typing import TYPE_CHECKING, Any, cast

from typing_extensions import Self

from sqlchain.builder._state import Clause
from sqlchain.exceptions import SQLBuilderError

if TYPE_CHECKING:
    from sqlchain.builder.protocols import BuilderProtocol

__all__ = ("WhereClauseMixin",)


class WhereClauseMixin:
    """Mixin providing WHERE clause methods for SELECT, UPDATE, and DELETE builders."""

    def where(self, condition: str, *args: Any) -> Self:
        """Add a condition to the WHERE clause.

        Conditions are combined with ``AND`` in the order they were added.

        Args:
            condition: A condition such as ``"age > ?"``.
            *args: One value per ``?`` in ``condition``.

        Returns:
            A new builder.
        """
        builder = cast("BuilderProtocol", self)
        return cast("Self", builder._replace(where_clauses=(*builder.where_clauses, Clause(condition, args))))

    def where_eq(self, column: str, value: Any) -> Self:
        return self.where(f"{column} = ?", value)

    def where_like(self, column: str, pattern: str) -> Self:
        return self.where(f"{column} LIKE ?", pattern)

    def where_between(self, column: str, low: Any, high: Any) -> Self:
        return self.where(f"{column} BETWEEN ? AND ?", low, high)

    def where_is_null(self, column: str) -> Self:
        return self.where(f"{column} IS NULL")

    def where_is_not_null(self, column: str) -> Self:
        return self.where(f"{column} IS NOT NULL")

    def where_in(self, column: str, values: "Sequence[Any]") -> Self:
        """Add a ``column IN (...)`` condition with one placeholder per value.

        Args:
            column: The column name.
            values: The candidate values.

        Raises:
            SQLBuilderError: If ``values`` is a string or is empty.

        Returns:
            A new builder.
        """
        if isinstance(values, (str, bytes)):
            msg = f"where_in expects a sequence of values for column '{column}', got {type(values).__name__}."
            raise SQLBuilderError(msg)
        candidates = tuple(values)
        if not candidates:
            msg = f"where_in requires at least one value for column '{column}'."
            raise SQLBuilderError(msg)
        markers = ", ".join("?" for _ in candidates)
        return self.where(f"{column} IN ({markers})", *candidates)
