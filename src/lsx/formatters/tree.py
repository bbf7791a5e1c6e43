"""Tree layout, interleaved with traversal.

Each directory level is read, filtered and ordered only when the printer
reaches it, so large trees stream out as they are walked.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass
from pathlib import Path
from typing import TextIO

from lsx.config import ListingConfig
from lsx.decorate import Decorator
from lsx.fs import FileSystem
from lsx.model import TraversalStats
from lsx.traversal import make_entry, read_children, read_root, should_descend

BRANCH = "├── "
LAST_BRANCH = "└── "
PIPE = "│   "
BLANK = "    "


def branch_prefix(prefix: str, is_last: bool) -> str:
    return prefix + (LAST_BRANCH if is_last else BRANCH)


def child_prefix(prefix: str, is_last: bool) -> str:
    """Continuation prefix for the children of an entry."""
    return prefix + (BLANK if is_last else PIPE)


@dataclass
class _TreeWalk:
    config: ListingConfig
    fs: FileSystem
    decorator: Decorator
    stats: TraversalStats
    out: TextIO

    def level(
        self, directory: Path, level: int, prefix: str, ancestors: frozenset[tuple[int, int]]
    ) -> None:
        max_depth = self.config.max_depth
        if max_depth is not None and level >= max_depth:
            return
        children = read_children(directory, self.config, self.fs)
        for index, child in enumerate(children):
            is_last = index == len(children) - 1
            entry = make_entry(child, self.config, self.fs)
            self.stats.record(entry)
            self.out.write(branch_prefix(prefix, is_last) + self.decorator.render(entry) + "\n")
            if should_descend(child, ancestors):
                self.level(
                    child.path,
                    level + 1,
                    child_prefix(prefix, is_last),
                    ancestors | {child.inode_key},
                )


def write_tree(
    root: Path,
    config: ListingConfig,
    fs: FileSystem,
    decorator: Decorator,
    stats: TraversalStats,
    *,
    out: TextIO | None = None,
) -> None:
    """Print *root* and, depth-first, every entry below it within the depth limit."""
    dest = out or sys.stdout
    root_child = read_root(root, fs)
    dest.write(f"{root}\n")
    if config.max_depth == 0:
        return
    if not root_child.is_dir:
        stats.record(make_entry(root_child, config, fs))
        return
    stats.directories += 1
    walk = _TreeWalk(config, fs, decorator, stats, dest)
    walk.level(root, 1, "", frozenset({root_child.inode_key}))
