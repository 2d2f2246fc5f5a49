import pytest

from dgengine.messages import (
    TEXT_INPUT_TEXT_SIZE,
    EventPoller,
    GUIPointerMove,
    GUIText,
    InputKey,
    InputMouse,
    InputText,
    MessageCategory,
    NoneMessage,
    Quit,
    WindowMoved,
    WindowResized,
)


class ListPoller(EventPoller):
    def __init__(self, messages):
        self._messages = list(messages)

    def next_event(self):
        return self._messages.pop(0) if self._messages else None


def test_messages_start_unhandled():
    msg = InputKey(code=4, event=1)
    assert msg.handled is False
    msg.handled = True
    assert msg.handled is True


@pytest.mark.parametrize(
    "message, category",
    [
        (InputKey(), MessageCategory.INPUT),
        (InputMouse(), MessageCategory.INPUT),
        (InputText(), MessageCategory.INPUT),
        (WindowResized(), MessageCategory.WINDOW),
        (WindowMoved(), MessageCategory.WINDOW),
        (GUIPointerMove(), MessageCategory.GUI),
        (GUIText(), MessageCategory.GUI),
        (NoneMessage(), MessageCategory.NONE),
    ],
)
def test_categories(message, category):
    assert message.category == category


def test_consume_hover_does_not_mark_handled():
    msg = GUIPointerMove(10, 20)
    assert msg.hover_consumed is False
    msg.consume_hover()
    assert msg.hover_consumed is True
    assert msg.handled is False


def test_fields_are_kept():
    msg = WindowResized(w=800, h=600)
    assert (msg.w, msg.h) == (800, 600)
    mouse = InputMouse(code=2, event=1, mod_state=3, x=5, y=6)
    assert (mouse.x, mouse.y, mouse.mod_state) == (5, 6, 3)


def test_short_text_is_unchanged():
    assert InputText(text="hello").text == "hello"


def test_long_text_is_truncated_to_buffer():
    msg = InputText(text="x" * 100)
    assert msg.text == "x" * (TEXT_INPUT_TEXT_SIZE - 1)


def test_truncation_does_not_split_characters():
    msg = GUIText(text="é" * 40)
    assert len(msg.text.encode("utf-8")) <= TEXT_INPUT_TEXT_SIZE - 1
    assert set(msg.text) == {"é"}


def test_poller_iterates_until_empty():
    messages = [InputKey(code=1), Quit(), WindowResized(w=1, h=2)]
    poller = ListPoller(messages)
    assert list(poller) == messages
    assert poller.next_event() is None


def test_poller_is_abstract():
    with pytest.raises(TypeError):
        EventPoller()