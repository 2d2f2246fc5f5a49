"""Abstract platform services: window, graphics context, mouse and file system."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path


@dataclass
class WindowProps:
    """Settings used to create a window."""

    name: str = "DgEngine"
    width: int = 1024
    height: int = 768
    fullscreen: bool = False


class Window(ABC):
    """A native window. Failures are reported by raising."""

    @abstractmethod
    def update(self) -> None: ...

    @abstractmethod
    def swap_buffers(self) -> None: ...

    @abstractmethod
    def set_vsync(self, enabled: bool) -> None: ...

    @abstractmethod
    def is_vsync(self) -> bool: ...

    @abstractmethod
    def is_init(self) -> bool: ...

    @abstractmethod
    def init(self, props: WindowProps | None = None) -> None: ...

    @abstractmethod
    def destroy(self) -> None: ...

    @abstractmethod
    def dimensions(self) -> tuple[int, int]:
        """Return the window's (width, height)."""


class GraphicsContext(ABC):
    """A rendering context bound to a window."""

    @abstractmethod
    def init(self) -> None: ...

    @abstractmethod
    def shutdown(self) -> None: ...

    @abstractmethod
    def swap_buffers(self) -> None: ...

    @abstractmethod
    def resize(self, width: int, height: int) -> None: ...


class MouseController(ABC):
    """Mouse capture and positioning."""

    @abstractmethod
    def grab(self) -> None: ...

    @abstractmethod
    def release(self) -> None: ...

    @abstractmethod
    def position(self) -> tuple[int, int]:
        """Return the pointer's (x, y)."""

    @abstractmethod
    def move_to(self, x: int, y: int) -> None: ...


class FileSystem(ABC):
    """Path services."""

    @abstractmethod
    def get_absolute_path(self, path: str) -> str: ...


class LocalFileSystem(FileSystem):
    """File system backed by the local disk."""

    def get_absolute_path(self, path: str) -> str:
        """Return the canonical absolute path; the path must exist."""
        return str(Path(path).resolve(strict=True))