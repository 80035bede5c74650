"""Lenient accessors for fields of decoded JSON objects."""

from __future__ import annotations

import base64
import calendar
import time
from collections.abc import Mapping
from typing import Any

from chordlet.stringops import from_string

_ISO_FORMAT = "%Y-%m-%dT%H:%M:%S"
_ISO_PREFIX_LENGTH = 19


def _present(data: Mapping[str, Any] | None, key: str) -> Any:
    """Return the value stored under key, or None when absent or null."""
    if data is None:
        return None
    return data.get(key)


def _unsigned(data: Mapping[str, Any] | None, key: str, bits: int) -> int:
    value = _present(data, key)
    if value is None:
        return 0
    if isinstance(value, (bool, int, float)):
        return int(value) & ((1 << bits) - 1)
    raise TypeError(f"field {key!r} holds {type(value).__name__}, not a number")


def snowflake_not_null(data: Mapping[str, Any] | None, key: str) -> int:
    """Return a snowflake id from a string or numeric field, else 0."""
    value = _present(data, key)
    if value is None:
        return 0
    if isinstance(value, str):
        return from_string(value, 10) & 0xFFFFFFFFFFFFFFFF
    return _unsigned(data, key, 64)


def string_not_null(data: Mapping[str, Any] | None, key: str) -> str:
    """Return a string field, or an empty string if it is absent or null."""
    value = _present(data, key)
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    raise TypeError(f"field {key!r} holds {type(value).__name__}, not a string")


def int64_not_null(data: Mapping[str, Any] | None, key: str) -> int:
    """Return an unsigned 64 bit integer field, else 0."""
    return _unsigned(data, key, 64)


def int32_not_null(data: Mapping[str, Any] | None, key: str) -> int:
    """Return an unsigned 32 bit integer field, else 0."""
    return _unsigned(data, key, 32)


def int16_not_null(data: Mapping[str, Any] | None, key: str) -> int:
    """Return an unsigned 16 bit integer field, else 0."""
    return _unsigned(data, key, 16)


def int8_not_null(data: Mapping[str, Any] | None, key: str) -> int:
    """Return an unsigned 8 bit integer field, else 0."""
    return _unsigned(data, key, 8)


def bool_not_null(data: Mapping[str, Any] | None, key: str) -> bool:
    """Return a boolean field, else False."""
    value = _present(data, key)
    if value is None:
        return False
    if isinstance(value, (bool, int, float)):
        return bool(value)
    raise TypeError(f"field {key!r} holds {type(value).__name__}, not a boolean")


def timestamp_not_null(data: Mapping[str, Any] | None, key: str) -> int:
    """Return UTC epoch seconds from an ISO8601 field, else 0."""
    value = _present(data, key)
    if not isinstance(value, str):
        return 0
    try:
        parsed = time.strptime(value[:_ISO_PREFIX_LENGTH], _ISO_FORMAT)
    except ValueError:
        return 0
    return calendar.timegm(parsed)


def base64_encode(data: bytes) -> str:
    """Encode bytes as padded standard base64 text."""
    return base64.b64encode(bytes(data)).decode("ascii")