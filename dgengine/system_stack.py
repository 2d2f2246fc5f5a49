"""An ordered collection of systems keyed by id."""

from __future__ import annotations

from collections.abc import Iterator

from .system import System


class SystemStack:
    """Systems in the order they were pushed, at most one per id."""

    def __init__(self) -> None:
        self._systems: list[tuple[int, System]] = []

    def _index(self, system_id: int) -> int | None:
        return next(
            (i for i, (sid, _) in enumerate(self._systems) if sid == system_id), None
        )

    def push_system(self, system: System, system_id: int) -> bool:
        """Add ``system`` under ``system_id`` and attach it.

        Returns False, leaving the stack unchanged, if the id is taken.
        """
        if system is None:
            raise ValueError("cannot push a missing system")
        if self._index(system_id) is not None:
            return False
        self._systems.append((system_id, system))
        system.on_attach()
        return True

    def pop_system(self, system_id: int) -> None:
        """Detach and remove the system with ``system_id``, if present."""
        index = self._index(system_id)
        if index is None:
            return
        _, system = self._systems.pop(index)
        system.on_detach()

    def get_system(self, system_id: int) -> System | None:
        index = self._index(system_id)
        return None if index is None else self._systems[index][1]

    def clear(self) -> None:
        """Drop every system without detaching them."""
        self._systems.clear()

    def __iter__(self) -> Iterator[tuple[int, System]]:
        return iter(list(self._systems))

    def __len__(self) -> int:
        return len(self._systems)