"""SELECT statement rendering."""

from typing import TYPE_CHECKING, Any

from sqlchain.builder._clauses import render_clauses

if TYPE_CHECKING:
    from sqlchain.builder._base import QueryBuilder
    from sqlchain.parameters import PlaceholderRenumberer

__all__ = ("render_select",)


def render_select(builder: "QueryBuilder", renumberer: "PlaceholderRenumberer") -> "tuple[str, list[Any]]":
    """Render ``SELECT cols [FROM t] [WHERE ...] [ORDER BY e] [LIMIT n] [OFFSET n]``.

    RETURNING columns, SET clauses and INSERT values are not part of a SELECT
    and are left out.
    """
    columns = ", ".join(builder.select_columns) if builder.select_columns else "*"
    parts = [f"SELECT {columns}"]
    args: list[Any] = []

    if builder.table:
        parts.append(f" FROM {builder.table}")

    if builder.where_clauses:
        conditions, args = render_clauses(
            builder.where_clauses, renumberer, " AND ", strict=builder.config.strict
        )
        parts.append(f" WHERE {conditions}")

    if builder.order_by_expression:
        parts.append(f" ORDER BY {builder.order_by_expression}")

    # Row counts are rendered as literals, not bound parameters.
    if builder.limit_value is not None:
        parts.append(f" LIMIT {builder.limit_value:d}")
    if builder.offset_value is not None:
        parts.append(f" OFFSET {builder.offset_value:d}")

    return "".join(parts), args
