"""Texture attributes packed into 32 bits, and raw texture pixel data."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum

from .serialize import deserialize_values, serialize_values

_UINT32_MASK = 0xFFFFFFFF


class TextureWrap(IntEnum):
    NONE = 0
    CLAMP = 1
    REPEAT = 2
    MIRROR = 3


class TextureFilter(IntEnum):
    NEAREST = 0
    LINEAR = 1


class TextureMipmapFilter(IntEnum):
    NEAREST_NEAREST = 0
    LINEAR_NEAREST = 1
    NEAREST_LINEAR = 2
    LINEAR_LINEAR = 3


class TexturePixelType(IntEnum):
    R8 = 0
    RG8 = 1
    RGB8 = 2
    RGBA8 = 3


_PIXEL_SIZES = {
    TexturePixelType.R8: 1,
    TexturePixelType.RG8: 2,
    TexturePixelType.RGB8: 3,
    TexturePixelType.RGBA8: 4,
}


def pixel_size(pixel_type: TexturePixelType) -> int:
    """Return the number of bytes in one pixel of ``pixel_type``."""
    return _PIXEL_SIZES[TexturePixelType(pixel_type)]


# Bit layout of the packed attributes: (first bit, bit count).
_WRAP = (0, 2)
_FILTER = (2, 2)
_MIPMAP_FILTER = (4, 2)
_IS_MIPMAPPED = (6, 1)
_PIXEL_TYPE = (7, 8)


def _get_bits(value: int, begin: int, size: int) -> int:
    return (value >> begin) & ((1 << size) - 1)


def _set_bits(value: int, begin: int, size: int, field_value: int) -> int:
    mask = ((1 << size) - 1) << begin
    return ((value & ~mask) | ((field_value << begin) & mask)) & _UINT32_MASK


@dataclass
class TextureAttributes:
    """Wrap, filter, mipmap and pixel-type settings packed into one integer."""

    data: int = 0

    @property
    def wrap(self) -> TextureWrap:
        return TextureWrap(_get_bits(self.data, *_WRAP))

    @wrap.setter
    def wrap(self, value: TextureWrap) -> None:
        self.data = _set_bits(self.data, *_WRAP, TextureWrap(value))

    @property
    def filter(self) -> TextureFilter:
        return TextureFilter(_get_bits(self.data, *_FILTER))

    @filter.setter
    def filter(self, value: TextureFilter) -> None:
        self.data = _set_bits(self.data, *_FILTER, TextureFilter(value))

    @property
    def mipmap_filter(self) -> TextureMipmapFilter:
        return TextureMipmapFilter(_get_bits(self.data, *_MIPMAP_FILTER))

    @mipmap_filter.setter
    def mipmap_filter(self, value: TextureMipmapFilter) -> None:
        self.data = _set_bits(self.data, *_MIPMAP_FILTER, TextureMipmapFilter(value))

    @property
    def is_mipmapped(self) -> bool:
        return _get_bits(self.data, *_IS_MIPMAPPED) != 0

    @is_mipmapped.setter
    def is_mipmapped(self, value: bool) -> None:
        self.data = _set_bits(self.data, *_IS_MIPMAPPED, 1 if value else 0)

    @property
    def pixel_type(self) -> TexturePixelType:
        return TexturePixelType(_get_bits(self.data, *_PIXEL_TYPE))

    @pixel_type.setter
    def pixel_type(self, value: TexturePixelType) -> None:
        self.data = _set_bits(self.data, *_PIXEL_TYPE, TexturePixelType(value))


@dataclass
class TextureData:
    """Texture dimensions, attributes and pixel bytes."""

    width: int = 0
    height: int = 0
    pixels: bytes | bytearray | None = None
    attrs: TextureAttributes = field(default_factory=TextureAttributes)

    @property
    def pixel_bytes(self) -> int:
        """Number of bytes the pixel data occupies."""
        return self.width * self.height * pixel_size(self.attrs.pixel_type)

    def set(
        self,
        width: int,
        height: int,
        pixels: bytes | bytearray | None,
        attrs: TextureAttributes,
    ) -> None:
        """Replace the contents; ``pixels`` is kept as given, not copied."""
        self.clear()
        self.width = width
        self.height = height
        self.attrs = TextureAttributes(attrs.data)
        self.pixels = pixels

    def duplicate(self, other: "TextureData") -> None:
        """Make this a deep copy of ``other``."""
        attrs = TextureAttributes(other.attrs.data)
        width, height = other.width, other.height
        count = width * height * pixel_size(attrs.pixel_type)
        pixels = None if other.pixels is None else bytes(other.pixels[:count])
        self.clear()
        self.attrs = attrs
        self.width = width
        self.height = height
        self.pixels = pixels

    def size(self) -> int:
        """Number of bytes produced by :meth:`serialize`."""
        return 3 * 4 + self.pixel_bytes

    def serialize(self) -> bytes:
        """Store attributes, width and height as 32-bit values, then the pixels."""
        count = self.pixel_bytes
        pixels = b"" if self.pixels is None else bytes(self.pixels[:count])
        if len(pixels) != count:
            raise ValueError(
                f"texture needs {count} bytes of pixel data, has {len(pixels)}"
            )
        header = serialize_values("I", [self.attrs.data, self.width, self.height])
        return header + pixels

    @classmethod
    def deserialize(cls, data: bytes, offset: int = 0) -> tuple["TextureData", int]:
        """Read a texture at ``offset``; returns it and the offset past it."""
        (attr_data, width, height), offset = deserialize_values("I", data, 3, offset)
        attrs = TextureAttributes(attr_data)
        count = width * height * pixel_size(attrs.pixel_type)
        end = offset + count
        if end > len(data):
            raise ValueError("serialized texture is truncated")
        texture = cls(width, height, bytes(data[offset:end]), attrs)
        return texture, end

    def clear(self) -> None:
        """Reset to an empty texture."""
        self.attrs = TextureAttributes()
        self.width = 0
        self.height = 0
        self.pixels = None