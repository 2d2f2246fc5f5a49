import os

import pytest

from dgengine.interfaces import (
    FileSystem,
    GraphicsContext,
    LocalFileSystem,
    MouseController,
    Window,
    WindowProps,
)


def test_window_props_defaults():
    props = WindowProps()
    assert props.name == "DgEngine"
    assert (props.width, props.height) == (1024, 768)
    assert props.fullscreen is False


@pytest.mark.parametrize("cls", [Window, GraphicsContext, MouseController, FileSystem])
def test_interfaces_are_abstract(cls):
    with pytest.raises(TypeError):
        cls()


def test_local_file_system_resolves_existing_path(tmp_path):
    target = tmp_path / "data.txt"
    target.write_text("x", encoding="utf-8")
    relative = os.path.join(str(tmp_path), "sub", "..", "data.txt")
    (tmp_path / "sub").mkdir()
    result = LocalFileSystem().get_absolute_path(relative)
    assert result == str(target.resolve())
    assert os.path.isabs(result)


def test_local_file_system_missing_path_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        LocalFileSystem().get_absolute_path(str(tmp_path / "nope.txt"))