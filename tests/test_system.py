import logging

import pytest

from dgengine.messages import GUIPointerMove, Quit
from dgengine.system import ConsoleSystem, MessageHandler, System


class SystemA(System):
    def update(self, dt):
        self.last_dt = dt


class SystemB(System):
    def update(self, dt):
        pass


def test_system_id_is_stable():
    assert ConsoleSystem.system_id() == ConsoleSystem.system_id()
    assert ConsoleSystem().system_id() == ConsoleSystem.system_id()


def test_system_ids_differ_between_classes():
    ids = {SystemA.system_id(), SystemB.system_id(), ConsoleSystem.system_id()}
    assert len(ids) == 3


def test_system_ids_are_positive():
    assert ConsoleSystem.system_id() >= 1


def test_system_without_update_cannot_be_created():
    with pytest.raises(TypeError):
        System()


def test_default_handler_leaves_message_untouched():
    msg = Quit()
    MessageHandler().handle_message(msg)
    assert msg.handled is False


def test_console_logs_messages(caplog):
    console = ConsoleSystem()
    with caplog.at_level(logging.DEBUG, logger="dgengine.system"):
        console.handle_message(Quit())
    assert any(record.getMessage().startswith("MSG: ") for record in caplog.records)


def test_console_ignores_pointer_moves(caplog):
    console = ConsoleSystem()
    with caplog.at_level(logging.DEBUG, logger="dgengine.system"):
        console.handle_message(GUIPointerMove(1, 2))
    assert not any("MSG" in record.getMessage() for record in caplog.records)


def test_console_does_not_mark_handled():
    msg = Quit()
    ConsoleSystem().handle_message(msg)
    assert msg.handled is False