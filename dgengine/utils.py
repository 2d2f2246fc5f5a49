"""Small shared value types and helpers."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path


def _get_byte(value: int, shift: int) -> int:
    return (value >> shift) & 0xFF


@dataclass
class Colour:
    """An RGBA colour packed into 32 bits, red in the lowest byte."""

    data: int = 0xFF

    @classmethod
    def from_rgba(cls, r: int, g: int, b: int, a: int) -> "Colour":
        """Build a colour from four channel values, each masked to 8 bits."""
        data = (
            (r & 0xFF)
            | ((g & 0xFF) << 8)
            | ((b & 0xFF) << 16)
            | ((a & 0xFF) << 24)
        )
        return cls(data)

    def r(self) -> int:
        return _get_byte(self.data, 0)

    def g(self) -> int:
        return _get_byte(self.data, 8)

    def b(self) -> int:
        return _get_byte(self.data, 16)

    def a(self) -> int:
        return _get_byte(self.data, 24)

    def fr(self) -> float:
        return self.r() / 255.0

    def fg(self) -> float:
        return self.g() / 255.0

    def fb(self) -> float:
        return self.b() / 255.0

    def fa(self) -> float:
        return self.a() / 255.0


@dataclass
class UIAABB:
    """An axis-aligned box: top-left position and size."""

    position: tuple[float, float] = field(default=(0.0, 0.0))
    size: tuple[float, float] = field(default=(0.0, 0.0))


def import_text_file(path: str | Path) -> str:
    """Return the contents of a text file, or an empty string if it cannot be read."""
    try:
        with open(path, encoding="utf-8") as handle:
            return handle.read()
    except OSError:
        return ""