"""Turns raw platform events into bound actions and forwarded messages."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from .messages import EventPoller, InputKey, InputMouse, InputText, Message, MessageCategory
from .system import System

InputCallback = Callable[[Message, Any], None]

_RAW_INPUT_TYPES = (InputKey, InputText, InputMouse)


class InputSystem(System):
    """Polls events; raw input runs bound callbacks, the rest is posted on."""

    def __init__(
        self, poller: EventPoller, post: Callable[[Message], None]
    ) -> None:
        self._poller = poller
        self._post = post
        self._bindings: dict[tuple[int, int], tuple[InputCallback, Any]] = {}

    def add_binding(
        self, code: int, event: int, callback: InputCallback, data: Any = None
    ) -> None:
        """Call ``callback(message, data)`` when input ``code`` has ``event``.

        A later binding for the same code and event replaces the earlier one.
        """
        self._bindings[(code, event)] = (callback, data)

    def clear_bindings(self) -> None:
        self._bindings.clear()

    def update(self, dt: float) -> None:
        """Drain the poller, dispatching or forwarding each message."""
        for message in self._poller:
            if isinstance(message, _RAW_INPUT_TYPES):
                binding = self._bindings.get((message.code, message.event))
                if binding is not None:
                    callback, data = binding
                    callback(message, data)
            elif message.category != MessageCategory.INPUT:
                self._post(message)

    def handle_message(self, message: Message) -> None:
        """Messages sent to the input system are ignored."""