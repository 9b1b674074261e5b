"""DELETE statement rendering."""

from typing import TYPE_CHECKING, Any

from sqlchain.builder._clauses import render_clauses, render_returning

if TYPE_CHECKING:
    from sqlchain.builder._base import QueryBuilder
    from sqlchain.parameters import PlaceholderRenumberer

__all__ = ("render_delete",)


def render_delete(builder: "QueryBuilder", renumberer: "PlaceholderRenumberer") -> "tuple[str, list[Any]]":
    """Render ``DELETE FROM t [WHERE ...] [RETURNING ...]``."""
    parts = [f"DELETE FROM {builder.table}"]
    args: list[Any] = []

    if builder.where_clauses:
        conditions, args = render_clauses(
            builder.where_clauses, renumberer, " AND ", strict=builder.config.strict
        )
        parts.append(f" WHERE {conditions}")

    parts.append(render_returning(builder.returning_columns))
    return "".join(parts), args
