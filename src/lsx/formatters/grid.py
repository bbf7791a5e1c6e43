"""Grid layout: entries packed into as many columns as the width allows."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from typing import TextIO

from lsx.ansi import display_width, pad
from lsx.decorate import Decorator
from lsx.model import Entry

SPACING = 2


def grid_shape(count: int, cell_width: int, width: int) -> tuple[int, int]:
    """Return (rows, columns) for *count* cells of *cell_width* in *width*."""
    columns = max(width // cell_width, 1)
    rows = (count + columns - 1) // columns
    return rows, columns


def cell_index(row: int, col: int, rows: int, columns: int, across: bool) -> int:
    """Map a grid cell to its list index (row-major when *across*)."""
    if across:
        return row * columns + col
    return col * rows + row


def write_grid(
    entries: Sequence[Entry],
    decorator: Decorator,
    width: int,
    *,
    across: bool = False,
    out: TextIO | None = None,
) -> None:
    """Write *entries* as a grid no wider than *width* columns where possible.

    Cells past the end of *entries* are skipped; every row ends with exactly
    one newline.
    """
    if not entries:
        return
    dest = out or sys.stdout
    cell_width = max(display_width(decorator.label(e)) for e in entries) + SPACING
    rows, columns = grid_shape(len(entries), cell_width, width)
    for row in range(rows):
        cells: list[str] = []
        for col in range(columns):
            index = cell_index(row, col, rows, columns, across)
            if index < len(entries):
                cells.append(decorator.render(entries[index]))
        line = "".join(pad(cell, cell_width) for cell in cells[:-1]) + cells[-1]
        dest.write(line + "\n")
