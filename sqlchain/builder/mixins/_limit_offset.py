from typing import TYPE_CHECKING, Any, Optional, cast

from typing_extensions import Self

from sqlchain.exceptions import SQLBuilderError

if TYPE_CHECKING:
    from sqlchain.builder.protocols import BuilderProtocol

__all__ = ("LimitOffsetClauseMixin",)


def _row_count(clause: str, value: Any) -> Optional[int]:
    # Rendered as literal text, so anything but a real int is refused.
    if isinstance(value, bool) or not isinstance(value, int):
        msg = f"{clause} must be an integer, got {type(value).__name__}."
        raise SQLBuilderError(msg)
    return value if value >= 0 else None


class LimitOffsetClauseMixin:
    """Mixin providing LIMIT and OFFSET clauses for SELECT builders."""

    def limit(self, value: int) -> Self:
        """Set the LIMIT clause.

        Args:
            value: The maximum number of rows to return. A negative value removes the clause.

        Raises:
            SQLBuilderError: If ``value`` is not an integer.

        Returns:
            A new builder.
        """
        builder = cast("BuilderProtocol", self)
        return cast("Self", builder._replace(limit_value=_row_count("Limit", value)))

    def offset(self, value: int) -> Self:
        """Set the OFFSET clause.

        Args:
            value: The number of rows to skip. A negative value removes the clause.

        Raises:
            SQLBuilderError: If ``value`` is not an integer.

        Returns:
            A new builder.
        """
        builder = cast("BuilderProtocol", self)
        return cast("Self", builder._replace(offset_value=_row_count("Offset", value)))
