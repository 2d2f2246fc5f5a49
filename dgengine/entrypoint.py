"""Application start-up with crash reporting."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Any

from .options import CRASH_REPORT_FILE


def _write_report(path: Path, text: str) -> None:
    path.write_text(text, encoding="utf-8")


def run_application(
    create_application: Callable[[], Any],
    crash_report_file: str | Path = CRASH_REPORT_FILE,
) -> int:
    """Create and run an application, recording any failure in a crash report.

    The crash report file is emptied first. An exception raised while creating
    or running the application is written to the report instead of propagating.
    Always returns 0.
    """
    report = Path(crash_report_file)
    _write_report(report, "")

    try:
        app = create_application()
    except Exception as exc:
        message = str(exc)
        if message:
            _write_report(report, f"Game failed to initialise: {message}")
        else:
            _write_report(report, "Game failed to intialise, no error reported.")
        return 0

    try:
        app.run()
    except Exception as exc:
        message = str(exc)
        if message:
            _write_report(report, f"Game has thrown exception: {message}")
        else:
            _write_report(report, "Game has thrown an unknown exception")
    return 0