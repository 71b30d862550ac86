"""
JSON serialization/deserialization tools

Provides the JSON value codec the protocol model relies on: lossless conversion
between JSON values and wire bytes, and decoding of JSON values into typed
Python objects.
"""

import json
from typing import Any, Type, TypeVar

from pydantic import TypeAdapter, ValidationError

from seam_jsonrpc.rpc.errors import DecodeError

T = TypeVar("T")


def _reject_constant(name: str):
    raise ValueError(f"Invalid JSON constant: {name}")


def encode(value: Any) -> bytes:
    """Convert a JSON value to UTF-8 encoded JSON bytes

    Args:
        value: JSON value (None, bool, int, float, str, list, dict in any nesting)

    Returns:
        bytes: Compact JSON document

    Raises:
        DecodeError: value is not representable as JSON (NaN, unsupported type, cycle)
    """
    try:
        return json.dumps(
            value,
            separators=(",", ":"),
            ensure_ascii=False,
            allow_nan=False,
        ).encode("utf-8")
    except (TypeError, ValueError) as e:
        raise DecodeError(f"Value is not JSON serializable: {e}", cause=e) from e


def decode(data: bytes) -> Any:
    """Convert JSON bytes to a JSON value

    Args:
        data: JSON document as bytes or str

    Returns:
        Any: Decoded JSON value

    Raises:
        DecodeError: data is not a valid JSON document
    """
    try:
        return json.loads(data, parse_constant=_reject_constant)
    except ValueError as e:
        raise DecodeError(f"Invalid JSON document: {e}", cause=e) from e


def decode_as(value: Any, into: Type[T]) -> T:
    """Decode a JSON value into the requested Python type

    Validation is strict, so scalars are never converted: "12" or true does not
    decode into int. Arrays still fill tuples and objects still fill dataclasses
    and models, as they would from a JSON document.

    Args:
        value: JSON value
        into: Target type, anything pydantic can validate (builtins, generics,
            dataclasses, TypedDicts, BaseModel subclasses)

    Returns:
        Value converted to ``into``

    Raises:
        DecodeError: value does not fit ``into``
    """
    try:
        return TypeAdapter(into).validate_json(encode(value), strict=True)
    except ValidationError as e:
        raise DecodeError(f"Cannot decode value into {into!r}: {e}", cause=e) from e
