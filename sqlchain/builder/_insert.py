"""INSERT statement rendering."""

from typing import TYPE_CHECKING, Any

from sqlchain.builder._clauses import render_returning
from sqlchain.parameters import render_placeholder

if TYPE_CHECKING:
    from sqlchain.builder._base import QueryBuilder
    from sqlchain.parameters import PlaceholderRenumberer

__all__ = ("render_insert",)


def render_insert(builder: "QueryBuilder", renumberer: "PlaceholderRenumberer") -> "tuple[str, list[Any]]":
    """Render ``INSERT INTO t [(cols)] VALUES (...) [RETURNING ...]``.

    VALUES placeholders are numbered by value position. There are no clause
    templates to interleave with, so the renumberer only supplies the style.
    """
    parts = [f"INSERT INTO {builder.table}"]

    if builder.insert_columns:
        parts.append(f" ({', '.join(builder.insert_columns)})")

    placeholders = ", ".join(
        render_placeholder(renumberer.style, index) for index in range(1, len(builder.insert_values) + 1)
    )
    parts.append(f" VALUES ({placeholders})")
    parts.append(render_returning(builder.returning_columns))

    return "".join(parts), list(builder.insert_values)
