import logging

import pytest

from dgengine.resource_manager import (
    InternalResourceID,
    ResourceManager,
    next_resource_id,
)


@pytest.fixture
def manager():
    ResourceManager.shutdown()
    mgr = ResourceManager.init()
    yield mgr
    ResourceManager.shutdown()


class Shader:
    pass


def test_instance_is_none_before_init():
    ResourceManager.shutdown()
    assert ResourceManager.instance() is None


def test_init_sets_instance(manager):
    assert ResourceManager.instance() is manager


def test_init_twice_raises(manager):
    with pytest.raises(RuntimeError):
        ResourceManager.init()


def test_shutdown_discards_instance(manager):
    manager.register_resource(1, Shader())
    ResourceManager.shutdown()
    assert ResourceManager.instance() is None
    assert len(manager) == 0


def test_register_and_get(manager):
    shader = Shader()
    manager.register_resource(7, shader)
    assert manager.get_resource(7) is shader
    assert manager.get_resource(7, Shader) is shader


def test_get_missing_returns_none(manager):
    assert manager.get_resource(99) is None


def test_wrong_type_warns_but_returns(manager, caplog):
    shader = Shader()
    manager.register_resource(3, shader)
    with caplog.at_level(logging.WARNING):
        result = manager.get_resource(3, str)
    assert result is shader
    assert "different type" in caplog.text


def test_erase(manager):
    manager.register_resource(1, Shader())
    manager.register_resource(2, Shader())
    manager.erase(1)
    manager.erase(42)
    assert manager.get_resource(1) is None
    assert 2 in manager
    assert len(manager) == 1


def test_clear(manager):
    manager.register_resource(1, Shader())
    manager.register_resource(2, Shader())
    manager.clear()
    assert len(manager) == 0


def test_next_resource_id_sequential():
    first = next_resource_id()
    second = next_resource_id()
    assert first >= InternalResourceID.INTERNAL_ID_START
    assert second == first + 1


def test_sequential_ids_stay_below_internal_static_ids():
    resource_id = next_resource_id()
    assert 0x80000000 <= resource_id < InternalResourceID.GUI_BOX_SHADER


def test_internal_ids_can_be_registered(manager):
    shader = Shader()
    manager.register_resource(InternalResourceID.GUI_TEXT_SHADER, shader)
    assert manager.get_resource(InternalResourceID.GUI_BOX_SHADER + 1) is shader