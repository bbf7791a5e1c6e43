"""One-per-line layout."""

from __future__ import annotations

import sys
from collections.abc import Iterable
from typing import TextIO

from lsx.decorate import Decorator
from lsx.model import Entry


def write_oneline(
    entries: Iterable[Entry], decorator: Decorator, *, out: TextIO | None = None
) -> None:
    """Write one fully decorated line per entry."""
    dest = out or sys.stdout
    for entry in entries:
        dest.write(decorator.render(entry) + "\n")
