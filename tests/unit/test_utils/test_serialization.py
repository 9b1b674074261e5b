"""Unit tests for JSON helpers used by structured logging."""

import datetime

import pytest

from sqlchain import ParameterKind
from sqlchain._serialization import decode_json, encode_json
from sqlchain.exceptions import SerializationError


def test_encode_json_str_and_bytes() -> None:
    assert encode_json({"a": 1}) == '{"a":1}'
    assert encode_json({"a": 1}, as_bytes=True) == b'{"a":1}'


def test_encode_json_handles_enums_and_datetimes() -> None:
    payload = decode_json(
        encode_json({"kind": ParameterKind.TEXT, "at": datetime.datetime(2024, 1, 2, 3, 4, 5)})
    )

    assert payload == {"kind": "text", "at": "2024-01-02T03:04:05"}


def test_encode_json_falls_back_to_str() -> None:
    class Custom:
        def __str__(self) -> str:
            return "custom"

    assert decode_json(encode_json([Custom()])) == ["custom"]


def test_decode_json_invalid() -> None:
    with pytest.raises(SerializationError):
        decode_json("{not json")
