"""ANSI-aware text measurement.

Escape sequences (SGR colors and OSC 8 hyperlinks) occupy no columns;
East Asian wide/fullwidth characters occupy two.
"""

from __future__ import annotations

import re
import unicodedata

ANSI_ESCAPE_RE = re.compile(r"\x1b\[[0-9;?]*[ -/]*[@-~]|\x1b\]8;[^\x1b]*\x1b\\")


def strip_ansi(text: str) -> str:
    return ANSI_ESCAPE_RE.sub("", text)


def char_display_width(ch: str) -> int:
    if unicodedata.combining(ch) or unicodedata.category(ch) in {"Mn", "Me", "Cf"}:
        return 0
    if unicodedata.east_asian_width(ch) in {"W", "F"}:
        return 2
    return 1


def display_width(text: str) -> int:
    """Return the number of terminal columns *text* occupies."""
    return sum(char_display_width(ch) for ch in strip_ansi(text))


def pad(text: str, width: int) -> str:
    """Left-align *text* in *width* display columns."""
    return text + " " * max(0, width - display_width(text))
