import pytest

from dgengine.utils import UIAABB, Colour, import_text_file


def test_default_colour_is_opaque_red_channel_only():
    colour = Colour()
    assert colour.data == 0xFF
    assert (colour.r(), colour.g(), colour.b(), colour.a()) == (255, 0, 0, 0)


def test_from_rgba_round_trip():
    colour = Colour.from_rgba(10, 20, 30, 40)
    assert (colour.r(), colour.g(), colour.b(), colour.a()) == (10, 20, 30, 40)


def test_channel_layout_red_lowest():
    assert Colour.from_rgba(0x11, 0x22, 0x33, 0x44).data == 0x44332211


def test_channels_are_masked():
    colour = Colour.from_rgba(0x1FF, 0, 0, 0)
    assert colour.r() == 0xFF
    assert colour.g() == 0


@pytest.mark.parametrize("value", [0, 51, 255])
def test_float_channels(value):
    colour = Colour.from_rgba(value, value, value, value)
    expected = value / 255.0
    assert colour.fr() == pytest.approx(expected)
    assert colour.fa() == pytest.approx(expected)


def test_uiaabb_holds_values():
    box = UIAABB(position=(1.0, 2.0), size=(3.0, 4.0))
    assert box.position == (1.0, 2.0)
    assert box.size == (3.0, 4.0)


def test_import_text_file_reads_content(tmp_path):
    path = tmp_path / "shader.glsl"
    content = "void main() {}\n"
    path.write_text(content, encoding="utf-8")
    assert import_text_file(path) == content


def test_import_missing_file_returns_empty(tmp_path):
    assert import_text_file(tmp_path / "missing.txt") == ""