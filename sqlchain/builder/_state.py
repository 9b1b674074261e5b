"""Statement kinds and the clause value shared by SET and WHERE."""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Final

__all__ = ("OPERATION_KINDS", "Clause", "StatementKind")


class StatementKind(str, Enum):
    """The SQL operation a builder renders."""

    UNSET = "unset"
    SELECT = "select"
    INSERT = "insert"
    UPDATE = "update"
    DELETE = "delete"

    def __str__(self) -> str:
        return self.name

    def allows(self, operation: str) -> bool:
        """Whether the modifier ``operation`` contributes to this kind of statement.

        Args:
            operation: A modifier name such as ``"where"`` or ``"limit"``.

        Returns:
            True if the renderer for this kind uses the modifier.
        """
        return self in OPERATION_KINDS.get(operation, frozenset())


OPERATION_KINDS: Final[dict[str, frozenset[StatementKind]]] = {
    "from_": frozenset({StatementKind.SELECT, StatementKind.DELETE}),
    "columns": frozenset({StatementKind.INSERT}),
    "values": frozenset({StatementKind.INSERT}),
    "set": frozenset({StatementKind.UPDATE}),
    "where": frozenset({StatementKind.SELECT, StatementKind.UPDATE, StatementKind.DELETE}),
    "returning": frozenset({StatementKind.INSERT, StatementKind.UPDATE, StatementKind.DELETE}),
    "order_by": frozenset({StatementKind.SELECT}),
    "limit": frozenset({StatementKind.SELECT}),
    "offset": frozenset({StatementKind.SELECT}),
}
"""Statement kinds each modifier applies to."""


@dataclass(frozen=True)
class Clause:
    """A SQL fragment with ``?`` markers and the values bound to them, in order."""

    template: str
    args: "tuple[Any, ...]" = ()
