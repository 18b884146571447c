"""Diagnostic reporting with error and warning counts."""

from __future__ import annotations

import enum
import sys
from typing import Any, Optional, TextIO

_RESET = "\x1b[0m"
_BOLD = "\x1b[1m"
_BOLD_RED = "\x1b[1;31m"
_BOLD_YELLOW = "\x1b[1;33m"


class DiagLevel(enum.Enum):
    """Severity of a diagnostic; the value is its printed label."""

    INTERNAL = "INTERNAL"
    FATAL = "fatal"
    ERROR = "error"
    WARNING = "warning"

    @property
    def is_error(self) -> bool:
        """True for every level that counts as an error."""
        return self is not DiagLevel.WARNING


class Diag:
    """Prints diagnostics to a stream and counts errors and warnings.

    Colour is used only when asked for, or by default when the stream is a
    terminal.
    """

    def __init__(self, stream: Optional[TextIO] = None, color: Optional[bool] = None) -> None:
        self._stream = stream
        self._color = color
        self.num_errors = 0
        self.num_warnings = 0

    @property
    def stream(self) -> TextIO:
        """The stream diagnostics go to; standard error unless one was given."""
        return self._stream if self._stream is not None else sys.stderr

    def _use_color(self) -> bool:
        if self._color is not None:
            return self._color
        isatty = getattr(self.stream, "isatty", None)
        return bool(isatty and isatty())

    def report(self, level: DiagLevel, *args: Any, location: Any = None) -> str:
        """Print one diagnostic line, count it and return the printed text."""
        color = self._use_color()
        parts = []
        if location is not None:
            parts.append(f"{_BOLD}{location}: " if color else f"{location}: ")
        if color:
            shade = _BOLD_YELLOW if level is DiagLevel.WARNING else _BOLD_RED
            parts.append(f"{shade}{level.value}: {_RESET}")
        else:
            parts.append(f"{level.value}: ")
        parts.extend(str(arg) for arg in args)
        parts.append("\n")
        text = "".join(parts)
        self.stream.write(text)
        if level.is_error:
            self.num_errors += 1
        else:
            self.num_warnings += 1
        return text