"""Engine-wide constants and log level selection."""

from __future__ import annotations

from enum import IntEnum

LOG_OUTPUT_FILE = "log-output.txt"
CRASH_REPORT_FILE = "crash-report.txt"

# Renderer
TEMP_BUFFER_SIZE = 16 * 1024 * 1024
RENDER_COMMAND_BUFFER_SIZE = 1 * 1024 * 1024
RENDER_COMMAND_BUFFER_MEM_POOL = 64 * 1024 * 1024

# Fonts and text
FONTATLAS_DEFAULT_TEXTURE_DIMENSION = 1024
MAX_TEXT_CHARACTERS = 65536


class LogLevel(IntEnum):
    """Severity levels, lowest first; OFF disables logging."""

    TRACE = 0
    DEBUG = 1
    INFO = 2
    WARN = 3
    ERROR = 4
    CRITICAL = 5
    OFF = 6


def log_level_for_build(build: str | None) -> LogLevel:
    """Return the log level used for a build configuration.

    Debug builds log everything, release builds log warnings and above,
    any other configuration logs nothing.
    """
    name = (build or "").strip().lower()
    if name == "debug":
        return LogLevel.TRACE
    if name == "release":
        return LogLevel.WARN
    return LogLevel.OFF