"""ANSI color helpers for the terminal shell.

Color is disabled when NO_COLOR is set, when stdout is not a tty, or when
set_color(False) is called (the --no-color flag).
"""

from __future__ import annotations

import os
import sys

from doseengine.types import Severity, Status

_NO_COLOR = os.environ.get("NO_COLOR") is not None or not sys.stdout.isatty()


def set_color(enabled: bool) -> None:
    global _NO_COLOR
    _NO_COLOR = not enabled


def _c(code: str, text: str) -> str:
    if _NO_COLOR:
        return text
    return f"\033[{code}m{text}\033[0m"


def red(t: str) -> str:
    return _c("31", t)


def yellow(t: str) -> str:
    return _c("33", t)


def green(t: str) -> str:
    return _c("32", t)


def cyan(t: str) -> str:
    return _c("36", t)


def bold(t: str) -> str:
    return _c("1", t)


def dim(t: str) -> str:
    return _c("2", t)


_SEVERITY_STYLE = {
    Severity.INFO: (cyan, "ℹ"),
    Severity.SUCCESS: (green, "✔"),
    Severity.CAUTION: (yellow, "▲"),
    Severity.ERROR: (red, "✖"),
}


def style(status: Status) -> str:
    """Render a status line with its severity icon and color."""
    paint, icon = _SEVERITY_STYLE[status.severity]
    return paint(f"{icon} {status.message}")
