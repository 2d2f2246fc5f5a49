"""Process-wide registry of resources keyed by numeric id."""

from __future__ import annotations

import itertools
import logging
from enum import IntEnum
from typing import Any, ClassVar

_log = logging.getLogger(__name__)

INVALID_RESOURCE_ID = 0xFFFFFFFF


class InternalResourceID(IntEnum):
    """Reserved resource ids.

    User ids lie below ``INTERNAL_ID_START``; sequential ids start there;
    internal static ids start at ``GUI_BOX_SHADER``.
    """

    INTERNAL_ID_START = 0x80000000
    GUI_BOX_SHADER = 0xF0000000
    GUI_TEXT_SHADER = 0xF0000001
    GUI_BOX_BORDER_SHADER = 0xF0000002


_id_counter = itertools.count(InternalResourceID.INTERNAL_ID_START)


def next_resource_id() -> int:
    """Return the next sequential resource id."""
    return next(_id_counter)


class ResourceManager:
    """Holds resources by id; one shared instance managed by init/shutdown."""

    _instance: ClassVar["ResourceManager | None"] = None

    def __init__(self) -> None:
        self._resources: dict[int, tuple[Any, type]] = {}

    @classmethod
    def init(cls) -> "ResourceManager":
        """Create the shared instance; raises if it already exists."""
        if cls._instance is not None:
            raise RuntimeError("Trying to initialise ResourceManager more than once!")
        cls._instance = cls()
        return cls._instance

    @classmethod
    def shutdown(cls) -> None:
        """Clear and discard the shared instance."""
        if cls._instance is not None:
            cls._instance.clear()
        cls._instance = None

    @classmethod
    def instance(cls) -> "ResourceManager | None":
        """Return the shared instance, or None before init."""
        return cls._instance

    def register_resource(self, resource_id: int, obj: Any) -> None:
        self._resources[resource_id] = (obj, type(obj))

    def get_resource(self, resource_id: int, expected_type: type | None = None) -> Any:
        """Return the resource with ``resource_id``, or None if there is none.

        A type other than the one registered is logged but the resource is
        returned anyway.
        """
        entry = self._resources.get(resource_id)
        if entry is None:
            return None
        obj, registered_type = entry
        if expected_type is not None and expected_type is not registered_type:
            _log.warning("Attempt to retrieve resource of different type! Casting anyway...")
        return obj

    def erase(self, resource_id: int) -> None:
        self._resources.pop(resource_id, None)

    def clear(self) -> None:
        self._resources.clear()

    def __contains__(self, resource_id: object) -> bool:
        return resource_id in self._resources

    def __len__(self) -> int:
        return len(self._resources)