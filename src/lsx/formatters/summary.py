"""Summary footer: directory/file counts and total size."""

from __future__ import annotations

import sys
from typing import TextIO

import click

from lsx.formatters.size import format_size
from lsx.model import TraversalStats


def format_summary(stats: TraversalStats, *, color: bool = False) -> tuple[str, str]:
    counts = f"\n{stats.directories} directories, {stats.files} files"
    total = f"Total size: {format_size(stats.total_size)}"
    if color:
        return click.style(counts, fg="blue", bold=True), click.style(total, fg="green", bold=True)
    return counts, total


def write_summary(
    stats: TraversalStats, *, color: bool = False, out: TextIO | None = None
) -> None:
    dest = out or sys.stdout
    for line in format_summary(stats, color=color):
        dest.write(line + "\n")
