import pytest

from dgengine.serialize import deserialize_values
from dgengine.texture_data import (
    TextureAttributes,
    TextureData,
    TextureFilter,
    TextureMipmapFilter,
    TexturePixelType,
    TextureWrap,
    pixel_size,
)


@pytest.mark.parametrize(
    "pixel_type, expected",
    [
        (TexturePixelType.R8, 1),
        (TexturePixelType.RG8, 2),
        (TexturePixelType.RGB8, 3),
        (TexturePixelType.RGBA8, 4),
    ],
)
def test_pixel_size(pixel_type, expected):
    assert pixel_size(pixel_type) == expected


def test_default_attributes_are_zero():
    attrs = TextureAttributes()
    assert attrs.data == 0
    assert attrs.wrap == TextureWrap.NONE
    assert attrs.filter == TextureFilter.NEAREST
    assert attrs.mipmap_filter == TextureMipmapFilter.NEAREST_NEAREST
    assert attrs.pixel_type == TexturePixelType.R8
    assert attrs.is_mipmapped is False


def test_wrap_occupies_lowest_bits():
    attrs = TextureAttributes()
    attrs.wrap = TextureWrap.MIRROR
    assert attrs.data == int(TextureWrap.MIRROR)


def test_fields_are_independent():
    attrs = TextureAttributes()
    attrs.wrap = TextureWrap.REPEAT
    attrs.filter = TextureFilter.LINEAR
    attrs.mipmap_filter = TextureMipmapFilter.LINEAR_LINEAR
    attrs.is_mipmapped = True
    attrs.pixel_type = TexturePixelType.RGBA8
    assert attrs.wrap == TextureWrap.REPEAT
    assert attrs.filter == TextureFilter.LINEAR
    assert attrs.mipmap_filter == TextureMipmapFilter.LINEAR_LINEAR
    assert attrs.is_mipmapped is True
    assert attrs.pixel_type == TexturePixelType.RGBA8

    attrs.is_mipmapped = False
    attrs.filter = TextureFilter.NEAREST
    assert attrs.is_mipmapped is False
    assert attrs.mipmap_filter == TextureMipmapFilter.LINEAR_LINEAR
    assert attrs.wrap == TextureWrap.REPEAT
    assert attrs.pixel_type == TexturePixelType.RGBA8


def test_attributes_roundtrip_through_data():
    attrs = TextureAttributes()
    attrs.wrap = TextureWrap.CLAMP
    attrs.pixel_type = TexturePixelType.RGB8
    copy = TextureAttributes(attrs.data)
    assert copy.wrap == TextureWrap.CLAMP
    assert copy.pixel_type == TexturePixelType.RGB8


def _rgba_attrs():
    attrs = TextureAttributes()
    attrs.pixel_type = TexturePixelType.RGBA8
    attrs.wrap = TextureWrap.REPEAT
    return attrs


def test_set_and_size():
    tex = TextureData()
    pixels = bytes(range(2 * 3 * 4))
    tex.set(2, 3, pixels, _rgba_attrs())
    assert tex.width == 2
    assert tex.height == 3
    assert tex.pixels is pixels
    assert tex.size() == 12 + len(pixels)


def test_serialize_layout_and_size():
    attrs = _rgba_attrs()
    pixels = bytes(range(16))
    tex = TextureData(2, 2, pixels, attrs)
    blob = tex.serialize()
    assert len(blob) == tex.size()
    header, offset = deserialize_values("I", blob, 3)
    assert header == [attrs.data, 2, 2]
    assert blob[offset:] == pixels


def test_serialize_roundtrip_with_offset():
    tex = TextureData(3, 1, b"abc", TextureAttributes())
    blob = b"xx" + tex.serialize() + b"tail"
    restored, end = TextureData.deserialize(blob, 2)
    assert restored == tex
    assert blob[end:] == b"tail"


def test_serialize_missing_pixels_raises():
    tex = TextureData(2, 2, b"ab", TextureAttributes())
    with pytest.raises(ValueError):
        tex.serialize()


def test_deserialize_truncated_raises():
    blob = TextureData(2, 2, b"abcd", TextureAttributes()).serialize()
    with pytest.raises(ValueError):
        TextureData.deserialize(blob[:-1])


def test_duplicate_is_deep_copy():
    source = TextureData(2, 1, bytearray(b"\x01\x02" * 4), _rgba_attrs())
    copy = TextureData()
    copy.duplicate(source)
    assert copy == TextureData(2, 1, bytes(source.pixels), _rgba_attrs())
    source.pixels[0] = 0xFF
    assert copy.pixels[0] == 0x01
    source.attrs.wrap = TextureWrap.NONE
    assert copy.attrs.wrap == TextureWrap.REPEAT


def test_clear_resets_everything():
    tex = TextureData(4, 4, bytes(64), _rgba_attrs())
    tex.clear()
    assert tex.width == 0
    assert tex.height == 0
    assert tex.pixels is None
    assert tex.attrs.data == 0
    assert tex.size() == 12