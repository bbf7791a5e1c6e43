"""Platform abstraction layer for lsx.

Centralises terminal queries and OS-specific facts behind a single module
so that callers never need ``sys.platform`` checks themselves.
"""

from __future__ import annotations

import shutil
import sys
from typing import Protocol, TextIO

_WIN: bool = sys.platform == "win32"

# Sockets and named pipes only show up as distinct file types on POSIX.
HAS_SPECIAL_FILES: bool = not _WIN

DEFAULT_WIDTH = 80


class Terminal(Protocol):
    """Capabilities of the output terminal, injected into decoration and layout."""

    def is_interactive(self) -> bool: ...

    def width(self) -> int | None: ...


class SystemTerminal:
    """Terminal backed by the real output stream."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    def is_interactive(self) -> bool:
        stream = self._stream or sys.stdout
        try:
            return stream.isatty()
        except (AttributeError, ValueError):
            return False

    def width(self) -> int | None:
        """Return the column count, or None if it cannot be determined."""
        columns = shutil.get_terminal_size(fallback=(0, 0)).columns
        return columns or None


def resolve_width(override: int | None, terminal: Terminal) -> int:
    """Pick the usable line width: explicit override, terminal, then 80."""
    if override is not None:
        return override
    return terminal.width() or DEFAULT_WIDTH
