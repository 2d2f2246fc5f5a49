"""Systems: long-lived engine components that receive messages and update."""

from __future__ import annotations

import itertools
import logging
import re
from abc import abstractmethod
from typing import ClassVar

from .messages import GUIPointerMove, Message

_log = logging.getLogger(__name__)

_id_counter = itertools.count(1)

_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])")


def _handler_name(message: Message) -> str:
    snake = _CAMEL_BOUNDARY.sub("_", type(message).__name__).lower()
    return f"handle_{snake}"


class MessageHandler:
    """Something that can be handed messages.

    The default handler dispatches a message to a method named after the
    message's class, e.g. ``handle_window_resized`` for ``WindowResized``.
    """

    def handle_message(self, message: Message) -> bool:
        """Dispatch ``message``; return whether a specific handler ran."""
        handler = getattr(self, _handler_name(message), None)
        if handler is None:
            return False
        handler(message)
        return True


class System(MessageHandler):
    """Base class of every engine system."""

    _system_id: ClassVar[int] = 0
    attached: bool = False
    frames_rendered: int = 0

    @classmethod
    def system_id(cls) -> int:
        """Return this class's id, assigned the first time it is asked for."""
        if "_system_id" not in cls.__dict__ or cls.__dict__["_system_id"] == 0:
            cls._system_id = next(_id_counter)
        return cls._system_id

    def on_attach(self) -> None:
        """Called when the system is added to a stack."""
        self.attached = True

    def on_detach(self) -> None:
        """Called when the system is removed from a stack."""
        self.attached = False

    @abstractmethod
    def update(self, dt: float) -> None:
        """Advance the system by ``dt`` seconds."""

    def render(self) -> None:
        """Draw anything the system owns; the default only counts frames."""
        self.frames_rendered += 1

    def __init_subclass__(cls, **kwargs) -> None:
        super().__init_subclass__(**kwargs)

    def __new__(cls, *args, **kwargs):
        abstract = [
            name
            for name in ("update",)
            if getattr(getattr(cls, name), "__isabstractmethod__", False)
        ]
        if abstract:
            raise TypeError(
                f"Can't instantiate abstract class {cls.__name__} "
                f"with abstract method {abstract[0]}"
            )
        return super().__new__(cls)


class ConsoleSystem(System):
    """Logs every message it sees, except pointer movement."""

    def handle_message(self, message: Message) -> None:
        if isinstance(message, GUIPointerMove):
            return
        _log.debug("MSG: %s", message)

    def update(self, dt: float) -> None:
        """The console has nothing to advance."""