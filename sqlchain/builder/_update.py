"""UPDATE statement rendering."""

from typing import TYPE_CHECKING, Any

from sqlchain.builder._clauses import render_clauses, render_returning

if TYPE_CHECKING:
    from sqlchain.builder._base import QueryBuilder
    from sqlchain.parameters import PlaceholderRenumberer

__all__ = ("render_update",)


def render_update(builder: "QueryBuilder", renumberer: "PlaceholderRenumberer") -> "tuple[str, list[Any]]":
    """Render ``UPDATE t [SET ...] [WHERE ...] [RETURNING ...]``.

    SET assignments are numbered first and WHERE conditions continue from the
    same counter, so the argument list follows placeholder order across the
    whole statement.
    """
    strict = builder.config.strict
    parts = [f"UPDATE {builder.table}"]
    args: list[Any] = []

    if builder.set_clauses:
        assignments, set_args = render_clauses(builder.set_clauses, renumberer, ", ", strict=strict)
        parts.append(f" SET {assignments}")
        args.extend(set_args)

    if builder.where_clauses:
        conditions, where_args = render_clauses(builder.where_clauses, renumberer, " AND ", strict=strict)
        parts.append(f" WHERE {conditions}")
        args.extend(where_args)

    parts.append(render_returning(builder.returning_columns))
    return "".join(parts), args
