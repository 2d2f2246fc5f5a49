"""Incremental UTF-8 decoding."""

from __future__ import annotations

from collections.abc import Iterator

INVALID_CHAR = 0xFFFFFFFF

_ACCEPT = 0
_REJECT = 1

_UTF8D = bytes([
    0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0,
    0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0,
    0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0,
    0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0,
    1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 9, 9, 9, 9, 9, 9, 9, 9, 9, 9, 9, 9, 9, 9, 9, 9,
    7, 7, 7, 7, 7, 7, 7, 7, 7, 7, 7, 7, 7, 7, 7, 7, 7, 7, 7, 7, 7, 7, 7, 7, 7, 7, 7, 7, 7, 7, 7, 7,
    8, 8, 2, 2, 2, 2, 2, 2, 2, 2, 2, 2, 2, 2, 2, 2, 2, 2, 2, 2, 2, 2, 2, 2, 2, 2, 2, 2, 2, 2, 2, 2,
    0xa, 0x3, 0x3, 0x3, 0x3, 0x3, 0x3, 0x3, 0x3, 0x3, 0x3, 0x3, 0x3, 0x4, 0x3, 0x3,
    0xb, 0x6, 0x6, 0x6, 0x5, 0x8, 0x8, 0x8, 0x8, 0x8, 0x8, 0x8, 0x8, 0x8, 0x8, 0x8,
    0x0, 0x1, 0x2, 0x3, 0x5, 0x8, 0x7, 0x1, 0x1, 0x1, 0x4, 0x6, 0x1, 0x1, 0x1, 0x1,
    1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 0, 1, 1, 1, 1, 1, 0, 1, 0, 1, 1, 1, 1, 1, 1,
    1, 2, 1, 1, 1, 1, 1, 2, 1, 2, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 2, 1, 1, 1, 1, 1, 1, 1, 1,
    1, 2, 1, 1, 1, 1, 1, 1, 1, 2, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 3, 1, 3, 1, 1, 1, 1, 1, 1,
    1, 3, 1, 1, 1, 1, 1, 3, 1, 3, 1, 1, 1, 1, 1, 1, 1, 3, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1,
])


def _decode(state: int, code_point: int, byte: int) -> tuple[int, int]:
    kind = _UTF8D[byte]
    if state != _ACCEPT:
        code_point = (byte & 0x3F) | ((code_point << 6) & 0xFFFFFFFF)
    else:
        code_point = (0xFF >> kind) & byte
    return _UTF8D[256 + state * 16 + kind], code_point


class UTF8Parser:
    """Yields the code points of a UTF-8 text one at a time.

    Text ends at the first null byte. A malformed sequence yields
    ``INVALID_CHAR`` and ends parsing.
    """

    def __init__(self, text: str | bytes = b"") -> None:
        self._data = b""
        self._pos = 0
        self._remaining = 0
        self._done = True
        self.reset(text)

    def reset(self, text: str | bytes) -> None:
        """Start parsing ``text`` from its beginning."""
        data = text.encode("utf-8") if isinstance(text, str) else bytes(text)
        data = data.split(b"\x00", 1)[0]
        self._data = data
        self._pos = 0
        self._remaining = len(data)
        self._done = not data

    def done(self) -> bool:
        """Return True once the whole text has been consumed."""
        return self._done

    def next_code_point(self) -> int:
        """Decode and return the next code point, or ``INVALID_CHAR``."""
        if self._done:
            return INVALID_CHAR

        code_point = 0
        state = _ACCEPT
        byte_min = self._remaining - 4 if self._remaining > 4 else 0

        while self._remaining > byte_min:
            state, code_point = _decode(state, code_point, self._data[self._pos])
            if state == _ACCEPT:
                break
            self._remaining -= 1
            self._pos += 1

        if state == _ACCEPT:
            self._remaining -= 1
            self._pos += 1

        if self._remaining == 0 or state != _ACCEPT:
            self._remaining = 0
            self._done = True

        return code_point if state == _ACCEPT else INVALID_CHAR

    def __iter__(self) -> Iterator[int]:
        while not self._done:
            yield self.next_code_point()


def decode_utf8(data: str | bytes) -> list[int]:
    """Return every code point of ``data``; an error ends with ``INVALID_CHAR``."""
    return list(UTF8Parser(data))