"""Unit tests for parameter value kinds."""

import datetime
import decimal

import pytest

from sqlchain import ParameterKind, QueryBuilder, TypedParameter, UnsupportedParameterTypeError
from sqlchain.typing import classify_parameter, to_typed_parameters


@pytest.mark.parametrize(
    ("value", "kind"),
    [
        ("text", ParameterKind.TEXT),
        ("", ParameterKind.TEXT),
        (42, ParameterKind.INTEGER),
        (3.5, ParameterKind.FLOAT),
        (True, ParameterKind.BOOLEAN),
        (False, ParameterKind.BOOLEAN),
        (datetime.datetime(2024, 1, 1, tzinfo=datetime.timezone.utc), ParameterKind.TIMESTAMP),
        (["a", "b"], ParameterKind.TEXT_ARRAY),
        (("a",), ParameterKind.TEXT_ARRAY),
        ([], ParameterKind.TEXT_ARRAY),
        (None, ParameterKind.NULL),
    ],
)
def test_classify_parameter(value: object, kind: ParameterKind) -> None:
    assert classify_parameter(value) is kind


@pytest.mark.parametrize("value", [b"bytes", decimal.Decimal("1.0"), [1, 2], {"a": 1}, datetime.date(2024, 1, 1)])
def test_classify_parameter_rejects_unsupported(value: object) -> None:
    with pytest.raises(UnsupportedParameterTypeError) as exc_info:
        classify_parameter(value)

    assert exc_info.value.value is value


def test_to_typed_parameters_preserves_order() -> None:
    assert to_typed_parameters([1, "a", None]) == (
        TypedParameter(ParameterKind.INTEGER, 1),
        TypedParameter(ParameterKind.TEXT, "a"),
        TypedParameter(ParameterKind.NULL, None),
    )


def test_safe_query_typed_parameters() -> None:
    query = QueryBuilder().update("t").set("flag = ?", True).where("id = ?", 9).build()

    assert query.typed_parameters() == (
        TypedParameter(ParameterKind.BOOLEAN, True),
        TypedParameter(ParameterKind.INTEGER, 9),
    )
