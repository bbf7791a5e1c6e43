"""Run pipeline: traverse, order, decorate, render, summarise."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import TextIO

from lsx._platform import SystemTerminal, Terminal, resolve_width
from lsx.config import DisplayMode, ListingConfig
from lsx.decorate import Decorator
from lsx.errors import RenderError
from lsx.formatters.grid import write_grid
from lsx.formatters.long import write_long
from lsx.formatters.oneline import write_oneline
from lsx.formatters.summary import write_summary
from lsx.formatters.tree import write_tree
from lsx.fs import FileSystem, LocalFileSystem
from lsx.model import TraversalStats
from lsx.traversal import collect_entries

log = logging.getLogger(__name__)


def run(
    root: Path,
    config: ListingConfig,
    *,
    fs: FileSystem | None = None,
    terminal: Terminal | None = None,
    out: TextIO | None = None,
    now: float | None = None,
) -> TraversalStats:
    """Render the listing of *root* followed by the summary footer.

    Returns:
        The statistics accumulated over the run.

    Raises:
        FilesystemError: If any directory or metadata read fails.
        RenderError: If writing to *out* fails.
    """
    fs = fs or LocalFileSystem()
    terminal = terminal or SystemTerminal(out)
    dest = out or sys.stdout
    decorator = Decorator.create(config, terminal, now)
    stats = TraversalStats()
    mode = config.display_mode
    log.debug("listing %s in %s mode", root, mode.value)

    try:
        if mode is DisplayMode.TREE:
            write_tree(root, config, fs, decorator, stats, out=dest)
        else:
            entries = collect_entries(root, config, fs, stats)
            if mode is DisplayMode.ONELINE:
                write_oneline(entries, decorator, out=dest)
            elif mode is DisplayMode.LONG:
                write_long(entries, decorator, out=dest)
            else:
                width = resolve_width(config.screen_width, terminal)
                write_grid(entries, decorator, width, across=config.across, out=dest)
        write_summary(stats, color=decorator.summary_color, out=dest)
        dest.flush()
    except OSError as exc:
        raise RenderError(f"write failed: {exc}") from exc
    return stats
