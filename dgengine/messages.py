"""Engine message types and the event poller interface."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import IntEnum
from typing import ClassVar

TEXT_INPUT_TEXT_SIZE = 32


class MessageCategory(IntEnum):
    """Broad grouping of messages, used by systems to filter what they handle."""

    NONE = 0
    GUI = 1
    WINDOW = 2
    INPUT = 3


def _truncate_text(text: str) -> str:
    """Fit ``text`` in the fixed text buffer, leaving room for a terminator."""
    encoded = text.encode("utf-8")[: TEXT_INPUT_TEXT_SIZE - 1]
    return encoded.decode("utf-8", errors="ignore")


@dataclass
class Message:
    """Base class of every message passed around the engine."""

    category: ClassVar[MessageCategory] = MessageCategory.NONE

    handled: bool = field(default=False, kw_only=True)


@dataclass
class NoneMessage(Message):
    """A message that carries nothing, e.g. an unrecognised window event."""


# --- GUI messages -----------------------------------------------------------


@dataclass
class GUIGoBack(Message):
    category: ClassVar[MessageCategory] = MessageCategory.GUI


@dataclass
class GUIUp(Message):
    category: ClassVar[MessageCategory] = MessageCategory.GUI


@dataclass
class GUIDown(Message):
    category: ClassVar[MessageCategory] = MessageCategory.GUI


@dataclass
class GUILeft(Message):
    category: ClassVar[MessageCategory] = MessageCategory.GUI


@dataclass
class GUIRight(Message):
    category: ClassVar[MessageCategory] = MessageCategory.GUI


@dataclass
class GUISelect(Message):
    category: ClassVar[MessageCategory] = MessageCategory.GUI


@dataclass
class GUIPointerDown(Message):
    category: ClassVar[MessageCategory] = MessageCategory.GUI

    context: int = 0
    x: int = 0
    y: int = 0


@dataclass
class GUIPointerUp(Message):
    category: ClassVar[MessageCategory] = MessageCategory.GUI

    context: int = 0
    x: int = 0
    y: int = 0


@dataclass
class GUIPointerMove(Message):
    category: ClassVar[MessageCategory] = MessageCategory.GUI

    x: int = 0
    y: int = 0
    hover_consumed: bool = field(default=False, kw_only=True)

    def consume_hover(self) -> None:
        """Mark the hover as taken; use this instead of setting ``handled``."""
        self.hover_consumed = True


@dataclass
class GUIText(Message):
    category: ClassVar[MessageCategory] = MessageCategory.GUI

    text: str = ""

    def __post_init__(self) -> None:
        self.text = _truncate_text(self.text)


# --- Window messages --------------------------------------------------------


@dataclass
class WindowShown(Message):
    category: ClassVar[MessageCategory] = MessageCategory.WINDOW


@dataclass
class WindowHidden(Message):
    category: ClassVar[MessageCategory] = MessageCategory.WINDOW


@dataclass
class WindowExposed(Message):
    category: ClassVar[MessageCategory] = MessageCategory.WINDOW


@dataclass
class WindowMoved(Message):
    category: ClassVar[MessageCategory] = MessageCategory.WINDOW

    x: int = 0
    y: int = 0


@dataclass
class WindowResized(Message):
    category: ClassVar[MessageCategory] = MessageCategory.WINDOW

    w: int = 0
    h: int = 0


@dataclass
class WindowMinimized(Message):
    category: ClassVar[MessageCategory] = MessageCategory.WINDOW


@dataclass
class WindowMaximized(Message):
    category: ClassVar[MessageCategory] = MessageCategory.WINDOW


@dataclass
class WindowRestored(Message):
    category: ClassVar[MessageCategory] = MessageCategory.WINDOW


@dataclass
class WindowEnter(Message):
    category: ClassVar[MessageCategory] = MessageCategory.WINDOW


@dataclass
class WindowLeave(Message):
    category: ClassVar[MessageCategory] = MessageCategory.WINDOW


@dataclass
class WindowFocusGained(Message):
    category: ClassVar[MessageCategory] = MessageCategory.WINDOW


@dataclass
class WindowFocusLost(Message):
    category: ClassVar[MessageCategory] = MessageCategory.WINDOW


@dataclass
class WindowTakeFocus(Message):
    category: ClassVar[MessageCategory] = MessageCategory.WINDOW


@dataclass
class Quit(Message):
    """Request to shut the application down."""


# --- Raw input messages -----------------------------------------------------


@dataclass
class InputKey(Message):
    category: ClassVar[MessageCategory] = MessageCategory.INPUT

    code: int = 0
    event: int = 0
    mod_state: int = 0


@dataclass
class InputMouse(Message):
    category: ClassVar[MessageCategory] = MessageCategory.INPUT

    code: int = 0
    event: int = 0
    mod_state: int = 0
    x: int = 0
    y: int = 0


@dataclass
class InputText(Message):
    category: ClassVar[MessageCategory] = MessageCategory.INPUT

    code: int = 0
    event: int = 0
    mod_state: int = 0
    text: str = ""

    def __post_init__(self) -> None:
        self.text = _truncate_text(self.text)


# --- Event source -----------------------------------------------------------


class EventPoller(ABC):
    """A source of messages produced from platform events."""

    @abstractmethod
    def next_event(self) -> Message | None:
        """Return the next pending message, or None when there is none."""

    def __iter__(self) -> Iterator[Message]:
        """Yield pending messages until the poller runs dry."""
        while (message := self.next_event()) is not None:
            yield message