"""Parameter value types accepted by the query builder.

Bound values form a closed set of kinds so that an execution layer can bind
them exhaustively. :func:`classify_parameter` maps a Python value onto that
set.
"""

import datetime
from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Any, Union

from sqlchain.exceptions import UnsupportedParameterTypeError

__all__ = (
    "ParameterKind",
    "SQLValue",
    "TypedParameter",
    "classify_parameter",
    "to_typed_parameters",
)


SQLValue = Union[str, int, float, bool, datetime.datetime, Sequence[str], None]
"""Values that may be bound to a placeholder."""


class ParameterKind(str, Enum):
    """Kinds of bound parameter values."""

    TEXT = "text"
    INTEGER = "integer"
    FLOAT = "float"
    BOOLEAN = "boolean"
    TIMESTAMP = "timestamp"
    TEXT_ARRAY = "text_array"
    NULL = "null"

    def __str__(self) -> str:
        """String representation for better error messages.

        Returns:
            The enum value as a string.
        """
        return self.value


@dataclass(frozen=True)
class TypedParameter:
    """A parameter value tagged with its kind."""

    kind: ParameterKind
    value: SQLValue


def classify_parameter(value: Any) -> ParameterKind:
    """Determine the kind of a parameter value.

    Args:
        value: The value to classify.

    Raises:
        UnsupportedParameterTypeError: If the value is not one of the supported kinds.

    Returns:
        The matching :class:`ParameterKind`.
    """
    if value is None:
        return ParameterKind.NULL
    # bool is a subclass of int
    if isinstance(value, bool):
        return ParameterKind.BOOLEAN
    if isinstance(value, int):
        return ParameterKind.INTEGER
    if isinstance(value, float):
        return ParameterKind.FLOAT
    if isinstance(value, str):
        return ParameterKind.TEXT
    if isinstance(value, datetime.datetime):
        return ParameterKind.TIMESTAMP
    if isinstance(value, (list, tuple)) and all(isinstance(item, str) for item in value):
        return ParameterKind.TEXT_ARRAY
    raise UnsupportedParameterTypeError(value)


def to_typed_parameters(values: "Sequence[Any]") -> "tuple[TypedParameter, ...]":
    """Tag every value in ``values`` with its kind, preserving order."""
    return tuple(TypedParameter(classify_parameter(value), value) for value in values)
