"""Long (table) layout: type, size, modification time and name columns."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from datetime import datetime
from typing import TextIO

from lsx.ansi import display_width
from lsx.decorate import Decorator
from lsx.formatters.size import format_size
from lsx.model import Entry

TYPE_WIDTH = 10
TIME_WIDTH = 20
TIME_FORMAT = "%Y-%m-%d %H:%M:%S"


def column_widths(entries: Sequence[Entry]) -> tuple[int, int]:
    """Return (size column width, name column width) for *entries*."""
    size_width = max((len(format_size(e.size)) for e in entries), default=0)
    name_width = max((display_width(e.name) for e in entries), default=0)
    return size_width, name_width


def format_header(size_width: int) -> str:
    return f"{'Type':<{TYPE_WIDTH}} {'Size':>{size_width}} {'Modified':<{TIME_WIDTH}} Name"


def format_rule(size_width: int, name_width: int) -> str:
    return "-" * (TYPE_WIDTH + 1 + size_width + 1 + TIME_WIDTH + 1 + name_width)


def format_row(entry: Entry, decorator: Decorator, size_width: int) -> str:
    """Format one table row; the scale color spans the whole row."""
    modified = datetime.fromtimestamp(entry.modified_at).strftime(TIME_FORMAT)
    columns = (
        f"{entry.node_type.label:<{TYPE_WIDTH}} "
        f"{format_size(entry.size):>{size_width}} "
        f"{modified:<{TIME_WIDTH}} "
    )
    return decorator.colorize(entry, columns + decorator.label(entry))


def write_long(
    entries: Sequence[Entry], decorator: Decorator, *, out: TextIO | None = None
) -> None:
    """Write the header, a separator rule, and one row per entry."""
    dest = out or sys.stdout
    size_width, name_width = column_widths(entries)
    dest.write(format_header(size_width) + "\n")
    dest.write(format_rule(size_width, name_width) + "\n")
    for entry in entries:
        dest.write(format_row(entry, decorator, size_width) + "\n")
