"""JSON encoding used by structured log output."""

import datetime
import enum
from typing import Any, Literal, Union, overload

import msgspec

from sqlchain.exceptions import SerializationError

__all__ = ("decode_json", "encode_json")


def _enc_hook(value: Any) -> Any:
    if isinstance(value, enum.Enum):
        return value.value
    if isinstance(value, (datetime.date, datetime.time)):
        return value.isoformat()
    return str(value)


_encoder = msgspec.json.Encoder(enc_hook=_enc_hook)
_decoder = msgspec.json.Decoder()


@overload
def encode_json(data: Any, *, as_bytes: Literal[False] = ...) -> str: ...


@overload
def encode_json(data: Any, *, as_bytes: Literal[True]) -> bytes: ...


def encode_json(data: Any, *, as_bytes: bool = False) -> Union[str, bytes]:
    """Encode data to JSON string or bytes.

    Args:
        data: Data to encode.
        as_bytes: Whether to return bytes instead of string.

    Raises:
        SerializationError: If the data cannot be encoded.

    Returns:
        JSON string or bytes representation based on as_bytes parameter.
    """
    try:
        encoded = _encoder.encode(data)
    except (TypeError, msgspec.EncodeError) as e:
        msg = f"Failed to encode value of type {type(data).__name__} to JSON"
        raise SerializationError(msg) from e
    return encoded if as_bytes else encoded.decode("utf-8")


def decode_json(data: Union[str, bytes]) -> Any:
    """Decode a JSON document.

    Raises:
        SerializationError: If the document is not valid JSON.
    """
    try:
        return _decoder.decode(data)
    except msgspec.DecodeError as e:
        msg = "Failed to decode JSON document"
        raise SerializationError(msg) from e
