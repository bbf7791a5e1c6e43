"""Shared helpers for unit tests."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import pytest

from lsx.config import ListingConfig
from lsx.decorate import Decorator
from lsx.model import Entry, NodeType

# Fixed reference clock for age coloring: 2024-01-01T00:00:00Z.
NOW = 1_704_067_200.0


class FakeTerminal:
    """Deterministic stand-in for the real terminal."""

    def __init__(self, interactive: bool = False, columns: int | None = None) -> None:
        self.interactive = interactive
        self.columns = columns

    def is_interactive(self) -> bool:
        return self.interactive

    def width(self) -> int | None:
        return self.columns


def make_tree(root: Path, layout: dict[str, Any]) -> Path:
    """Create files and directories under *root* from a nested dict.

    String values are file contents, dict values are subdirectories.
    """
    root.mkdir(parents=True, exist_ok=True)
    for name, value in layout.items():
        path = root / name
        if isinstance(value, dict):
            make_tree(path, value)
        else:
            path.write_text(value)
    return root


def set_mtime(path: Path, mtime: float) -> None:
    os.utime(path, (mtime, mtime), follow_symlinks=False)


def make_entry(
    name: str,
    *,
    size: int = 0,
    modified_at: float = NOW,
    node_type: NodeType = NodeType.FILE,
    parent: str = "root",
) -> Entry:
    path = Path(parent) / name
    return Entry(
        display_path=path,
        source=path,
        size=size,
        modified_at=modified_at,
        node_type=node_type,
        is_symlink=node_type is NodeType.SYMLINK,
    )


def make_decorator(
    config: ListingConfig | None = None, *, interactive: bool = False, now: float = NOW
) -> Decorator:
    return Decorator.create(config or ListingConfig(), FakeTerminal(interactive), now)


@pytest.fixture
def terminal() -> FakeTerminal:
    return FakeTerminal()


@pytest.fixture
def sample_dir(tmp_path: Path) -> Path:
    """Directory with one hidden and one visible 10-byte file."""
    return make_tree(tmp_path / "sample", {".env": "SECRET=1\n", "note.txt": "0123456789"})
