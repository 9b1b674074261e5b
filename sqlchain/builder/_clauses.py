"""Rendering helpers shared by the statement renderers."""

from collections.abc import Sequence
from typing import Any

from sqlchain.builder._state import Clause
from sqlchain.exceptions import ExtraParameterError, MissingParameterError
from sqlchain.parameters import PlaceholderRenumberer
from sqlchain.utils.logging import get_logger

__all__ = ("render_clauses", "render_returning")

logger = get_logger("builder")


def _check_clause_arity(clause: Clause, marker_count: int, strict: bool) -> None:
    arg_count = len(clause.args)
    if marker_count == arg_count:
        return
    if strict:
        msg = f"Clause has {marker_count} placeholder(s) but {arg_count} argument(s)"
        if marker_count > arg_count:
            raise MissingParameterError(msg, sql=clause.template)
        raise ExtraParameterError(msg, sql=clause.template)
    logger.warning(
        "Clause %r has %d placeholder(s) but %d argument(s); parameters will not line up",
        clause.template,
        marker_count,
        arg_count,
    )


def render_clauses(
    clauses: "Sequence[Clause]", renumberer: PlaceholderRenumberer, separator: str, strict: bool = False
) -> "tuple[str, list[Any]]":
    """Renumber each clause in order and join the results.

    The renumberer's counter carries over from clause to clause, so calling this
    for SET clauses and then WHERE clauses with the same renumberer numbers the
    whole statement continuously.

    Args:
        clauses: Clauses in the order they were added.
        renumberer: The counter for the statement being rendered.
        separator: Text placed between rendered clauses.
        strict: Raise instead of warning when a clause's markers and arguments differ in number.

    Raises:
        MissingParameterError: In strict mode, when a clause has fewer arguments than markers.
        ExtraParameterError: In strict mode, when a clause has more arguments than markers.

    Returns:
        The joined SQL fragment and the arguments in placeholder order.
    """
    rendered: list[str] = []
    args: list[Any] = []
    for clause in clauses:
        start = renumberer.next_index
        rendered.append(renumberer.renumber(clause.template))
        _check_clause_arity(clause, renumberer.next_index - start, strict)
        args.extend(clause.args)
    return separator.join(rendered), args


def render_returning(columns: "Sequence[str]") -> str:
    """Render a `` RETURNING ...`` suffix, or an empty string when there are no columns."""
    if not columns:
        return ""
    return f" RETURNING {', '.join(columns)}"
