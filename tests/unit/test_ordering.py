"""Tests for lsx.ordering: one comparator over entries and raw children."""

from __future__ import annotations

import os
from pathlib import Path

from conftest import NOW, make_entry, set_mtime
from lsx.config import SortBy
from lsx.model import DirChild
from lsx.ordering import order


def _names(items) -> list[str]:
    return [item.name for item in items]


class TestOrderEntries:
    def test_name_is_byte_order(self) -> None:
        entries = [make_entry(n) for n in ["beta", "Alpha", "alpha", "_x", "Zed"]]
        assert _names(order(entries, SortBy.NAME)) == ["Alpha", "Zed", "_x", "alpha", "beta"]

    def test_size_descending(self) -> None:
        entries = [make_entry("s", size=1), make_entry("l", size=300), make_entry("m", size=20)]
        assert _names(order(entries, SortBy.SIZE)) == ["l", "m", "s"]

    def test_time_most_recent_first(self) -> None:
        entries = [
            make_entry("old", modified_at=NOW - 100),
            make_entry("new", modified_at=NOW),
            make_entry("mid", modified_at=NOW - 50),
        ]
        assert _names(order(entries, SortBy.TIME)) == ["new", "mid", "old"]

    def test_equal_keys_keep_input_order(self) -> None:
        entries = [make_entry(n, size=5) for n in ["c", "a", "b"]]
        assert _names(order(entries, SortBy.SIZE)) == ["c", "a", "b"]

    def test_idempotent(self) -> None:
        entries = [make_entry(n, size=len(n)) for n in ["aaa", "b", "cc", "dd"]]
        for key in SortBy:
            once = order(entries, key)
            assert order(once, key) == once

    def test_does_not_mutate_input(self) -> None:
        entries = [make_entry("b"), make_entry("a")]
        order(entries, SortBy.NAME)
        assert _names(entries) == ["b", "a"]


class TestOrderRawChildren:
    def test_same_policy_applies_to_dir_children(self, tmp_path: Path) -> None:
        children = []
        for name, size, age in [("small", 1, 10), ("big", 100, 30), ("medium", 10, 20)]:
            path = tmp_path / name
            path.write_bytes(b"x" * size)
            set_mtime(path, NOW - age)
            children.append(DirChild(path, os.stat(path), is_link=False))

        assert _names(order(children, SortBy.NAME)) == ["big", "medium", "small"]
        assert _names(order(children, SortBy.SIZE)) == ["big", "medium", "small"]
        assert _names(order(children, SortBy.TIME)) == ["small", "medium", "big"]
