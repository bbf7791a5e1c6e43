"""Traversal engine: filtering, entry resolution and flat collection.

Tree mode does not go through :func:`collect_entries`; the tree renderer
drives :func:`read_children` and :func:`make_entry` itself, one
directory level at a time, so both paths apply the same rules.
"""

from __future__ import annotations

import logging
import stat as stat_mod
from pathlib import Path

from lsx.config import AbsolutePath, ListingConfig
from lsx.errors import FilesystemError
from lsx.fs import FileSystem
from lsx.model import DirChild, Entry, NodeType, TraversalStats
from lsx.ordering import order

log = logging.getLogger(__name__)

HIDDEN_MARKER = "."


def is_hidden(name: str) -> bool:
    return name.startswith(HIDDEN_MARKER)


def read_child(path: Path, config: ListingConfig, fs: FileSystem) -> DirChild:
    """Read metadata for *path*, following symlinks only under --dereference."""
    link_stat = fs.stat(path, follow_symlinks=False)
    is_link = stat_mod.S_ISLNK(link_stat.st_mode)
    if config.dereference and is_link:
        return DirChild(path, fs.stat(path, follow_symlinks=True), is_link)
    return DirChild(path, link_stat, is_link)


def read_root(path: Path, fs: FileSystem) -> DirChild:
    """Read metadata for the root path; the root itself is always followed."""
    link_stat = fs.stat(path, follow_symlinks=False)
    is_link = stat_mod.S_ISLNK(link_stat.st_mode)
    st = fs.stat(path, follow_symlinks=True) if is_link else link_stat
    return DirChild(path, st, is_link)


def read_children(directory: Path, config: ListingConfig, fs: FileSystem) -> list[DirChild]:
    """List the members of *directory* that pass the hidden and pattern filters.

    Directories are never removed by the pattern so that their descendants
    can still match. The result is ordered by ``config.sort_by``.
    """
    log.debug("reading %s", directory)
    children: list[DirChild] = []
    for path in fs.list_dir(directory):
        name = path.name
        if not config.show_hidden and is_hidden(name):
            log.debug("skip hidden %s", path)
            continue
        child = read_child(path, config, fs)
        if not child.is_dir and not config.matches(name):
            log.debug("skip unmatched %s", path)
            continue
        children.append(child)
    return order(children, config.sort_by)


def _canonical_link_path(child: DirChild, fs: FileSystem) -> Path:
    try:
        return fs.canonicalize(child.path)
    except FilesystemError as exc:
        # dangling: show the link itself under its canonical directory
        log.debug("cannot resolve %s (%s)", child.path, exc.reason)
        return fs.canonicalize(child.path.parent) / child.name


def _links_to_dir(child: DirChild, fs: FileSystem) -> bool:
    if child.node_type is not NodeType.SYMLINK:
        return False
    try:
        target = fs.stat(child.path, follow_symlinks=True)
    except FilesystemError:
        # dangling
        return False
    return stat_mod.S_ISDIR(target.st_mode)


def display_path_for(child: DirChild, config: ListingConfig, fs: FileSystem) -> Path:
    if config.absolute_path is AbsolutePath.ON:
        if child.node_type is NodeType.SYMLINK:
            return _canonical_link_path(child, fs)
        return fs.canonicalize(child.path)
    if config.absolute_path is AbsolutePath.FOLLOW and child.is_link:
        return fs.read_link(child.path)
    return child.path


def make_entry(child: DirChild, config: ListingConfig, fs: FileSystem) -> Entry:
    """Resolve a raw child into an Entry; the display path is fixed here."""
    return Entry(
        display_path=display_path_for(child, config, fs),
        source=child.path,
        size=child.size,
        modified_at=child.modified_at,
        node_type=child.node_type,
        is_symlink=child.is_link,
        links_to_dir=_links_to_dir(child, fs),
    )


def should_descend(child: DirChild, ancestors: frozenset[tuple[int, int]]) -> bool:
    """Return True unless descending into *child* would revisit an ancestor."""
    if not child.is_dir:
        return False
    if child.inode_key in ancestors:
        log.warning("not descending into %s: directory cycle", child.path)
        return False
    return True


def collect_entries(
    root: Path,
    config: ListingConfig,
    fs: FileSystem,
    stats: TraversalStats,
) -> list[Entry]:
    """Collect the flat listing for oneline, long and grid modes.

    Returns the root's children (and, with ``config.recurse``, all of their
    descendants in depth-first pre-order), ordered as a whole. A root that
    is not a directory yields a single entry for itself.
    """
    root_child = read_root(root, fs)
    if not root_child.is_dir:
        entry = make_entry(root_child, config, fs)
        stats.record(entry)
        return [entry]

    stats.directories += 1
    entries: list[Entry] = []
    _collect(root, config, fs, stats, entries, frozenset({root_child.inode_key}))
    return order(entries, config.sort_by)


def _collect(
    directory: Path,
    config: ListingConfig,
    fs: FileSystem,
    stats: TraversalStats,
    entries: list[Entry],
    ancestors: frozenset[tuple[int, int]],
) -> None:
    for child in read_children(directory, config, fs):
        entry = make_entry(child, config, fs)
        stats.record(entry)
        entries.append(entry)
        if config.recurse and should_descend(child, ancestors):
            _collect(child.path, config, fs, stats, entries, ancestors | {child.inode_key})
