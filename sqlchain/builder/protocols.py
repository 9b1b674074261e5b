from typing import Any, Optional, Protocol

from typing_extensions import Self

from sqlchain.builder._state import Clause, StatementKind

__all__ = ("BuilderProtocol",)


class BuilderProtocol(Protocol):
    statement_kind: StatementKind
    table: str
    select_columns: "tuple[str, ...]"
    insert_columns: "tuple[str, ...]"
    insert_values: "tuple[Any, ...]"
    set_clauses: "tuple[Clause, ...]"
    where_clauses: "tuple[Clause, ...]"
    returning_columns: "tuple[str, ...]"
    order_by_expression: Optional[str]
    limit_value: Optional[int]
    offset_value: Optional[int]
    from_called: bool

    def _replace(self, **changes: Any) -> Self: ...
