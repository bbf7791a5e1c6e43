"""In-memory entry model and traversal statistics."""

from __future__ import annotations

import os
import stat as stat_mod
from dataclasses import dataclass
from enum import Enum
from pathlib import Path


class NodeType(Enum):
    FILE = "file"
    DIRECTORY = "dir"
    SYMLINK = "symlink"
    SOCKET = "socket"
    FIFO = "fifo"
    OTHER = "other"

    @classmethod
    def from_mode(cls, mode: int) -> NodeType:
        if stat_mod.S_ISDIR(mode):
            return cls.DIRECTORY
        if stat_mod.S_ISLNK(mode):
            return cls.SYMLINK
        if stat_mod.S_ISREG(mode):
            return cls.FILE
        if stat_mod.S_ISSOCK(mode):
            return cls.SOCKET
        if stat_mod.S_ISFIFO(mode):
            return cls.FIFO
        return cls.OTHER

    @property
    def label(self) -> str:
        """Type column text for the long layout."""
        return _LABELS.get(self, "Other")


_LABELS: dict[NodeType, str] = {
    NodeType.FILE: "File",
    NodeType.DIRECTORY: "Directory",
    NodeType.SYMLINK: "Symlink",
}


@dataclass(frozen=True)
class DirChild:
    """Raw directory member: a path plus the metadata read for it."""

    path: Path
    stat: os.stat_result
    is_link: bool

    @property
    def name(self) -> str:
        return self.path.name

    @property
    def size(self) -> int:
        return self.stat.st_size

    @property
    def modified_at(self) -> float:
        return self.stat.st_mtime

    @property
    def node_type(self) -> NodeType:
        return NodeType.from_mode(self.stat.st_mode)

    @property
    def is_dir(self) -> bool:
        return stat_mod.S_ISDIR(self.stat.st_mode)

    @property
    def inode_key(self) -> tuple[int, int]:
        return (self.stat.st_dev, self.stat.st_ino)


@dataclass(frozen=True)
class Entry:
    """One resolved filesystem node, ready for decoration and layout.

    ``display_path`` is resolved once, when the entry is created, and is
    what every renderer shows and links to. ``source`` is the path that
    was actually read during traversal.
    """

    display_path: Path
    source: Path
    size: int
    modified_at: float
    node_type: NodeType
    is_symlink: bool = False
    links_to_dir: bool = False

    @property
    def name(self) -> str:
        return self.display_path.name or str(self.display_path)

    @property
    def is_dir(self) -> bool:
        return self.node_type is NodeType.DIRECTORY


@dataclass
class TraversalStats:
    """Run-wide counters; one instance per run, mutated only by traversal."""

    directories: int = 0
    files: int = 0
    total_size: int = 0

    def record(self, entry: Entry) -> None:
        """Count *entry* exactly once."""
        if entry.is_dir:
            self.directories += 1
        else:
            self.files += 1
            self.total_size += entry.size
