"""Packing of plain values and strings into flat byte buffers."""

from __future__ import annotations

import struct
from collections.abc import Iterable, Sequence

_BYTE_ORDER = "<"


def serialized_size(value: object) -> int:
    """Return the number of bytes ``value`` occupies once serialized.

    Strings are stored UTF-8 encoded with a terminating null byte, raw bytes
    as they are, booleans in one byte and numbers in four (32-bit) bytes.
    """
    if isinstance(value, str):
        return len(value.encode("utf-8")) + 1
    if isinstance(value, (bytes, bytearray, memoryview)):
        return len(value)
    if isinstance(value, bool):
        return 1
    if isinstance(value, (int, float)):
        return 4
    raise TypeError(f"cannot serialize value of type {type(value).__name__}")


def _format(fmt: str, count: int) -> str:
    if len(fmt) != 1:
        raise ValueError(f"expected a single struct format code, got {fmt!r}")
    return f"{_BYTE_ORDER}{count}{fmt}"


def serialize_values(fmt: str, values: Iterable) -> bytes:
    """Pack ``values`` of one struct type code (e.g. ``'I'``) back to back."""
    items = list(values)
    return struct.pack(_format(fmt, len(items)), *items)


def deserialize_values(
    fmt: str, data: bytes, count: int = 1, offset: int = 0
) -> tuple[list, int]:
    """Unpack ``count`` values of type ``fmt`` from ``data`` at ``offset``.

    Returns the values and the offset just past them.
    """
    layout = _format(fmt, count)
    values = list(struct.unpack_from(layout, data, offset))
    return values, offset + struct.calcsize(layout)


def serialize_strings(strings: Iterable[str]) -> bytes:
    """Store each string UTF-8 encoded and null terminated, one after another."""
    return b"".join(s.encode("utf-8") + b"\x00" for s in strings)


def deserialize_strings(
    data: bytes, count: int = 1, offset: int = 0
) -> tuple[list[str], int]:
    """Read ``count`` null-terminated strings from ``data`` at ``offset``.

    Returns the strings and the offset just past the last terminator.
    """
    buf = bytes(data)
    result = []
    for _ in range(count):
        end = buf.find(b"\x00", offset)
        if end < 0:
            raise ValueError("unterminated string in serialized data")
        result.append(buf[offset:end].decode("utf-8"))
        offset = end + 1
    return result, offset


def are_equal(text: str, data: bytes) -> bool:
    """Compare ``text`` with a string stored as a 32-bit length then its bytes."""
    (length,), offset = deserialize_values("I", data)
    encoded = text.encode("utf-8")
    if len(encoded) != length:
        return False
    return bytes(data[offset:offset + length]) == encoded


__all__: Sequence[str] = (
    "serialized_size",
    "serialize_values",
    "deserialize_values",
    "serialize_strings",
    "deserialize_strings",
    "are_equal",
)