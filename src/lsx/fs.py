"""Metadata accessor: the only place lsx touches the filesystem.

Every ``OSError`` is converted into :class:`~lsx.errors.FilesystemError`
so callers deal with a single failure type.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Protocol

from lsx.errors import FilesystemError


class FileSystem(Protocol):
    def list_dir(self, path: Path) -> list[Path]: ...

    def stat(self, path: Path, *, follow_symlinks: bool) -> os.stat_result: ...

    def read_link(self, path: Path) -> Path: ...

    def canonicalize(self, path: Path) -> Path: ...


def _reason(exc: OSError) -> str:
    return exc.strerror or str(exc)


class LocalFileSystem:
    """FileSystem implementation over the os module."""

    def list_dir(self, path: Path) -> list[Path]:
        try:
            with os.scandir(path) as it:
                return [path / entry.name for entry in it]
        except OSError as exc:
            raise FilesystemError(path, _reason(exc)) from exc

    def stat(self, path: Path, *, follow_symlinks: bool) -> os.stat_result:
        try:
            return os.stat(path, follow_symlinks=follow_symlinks)
        except OSError as exc:
            raise FilesystemError(path, _reason(exc)) from exc

    def read_link(self, path: Path) -> Path:
        try:
            return Path(os.readlink(path))
        except OSError as exc:
            raise FilesystemError(path, _reason(exc)) from exc

    def canonicalize(self, path: Path) -> Path:
        try:
            return path.resolve(strict=True)
        except (OSError, RuntimeError) as exc:
            reason = _reason(exc) if isinstance(exc, OSError) else str(exc)
            raise FilesystemError(path, reason) from exc
