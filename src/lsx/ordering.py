"""Ordering policy shared by flat listings and per-directory tree sorting."""

from __future__ import annotations

import os
from collections.abc import Callable, Iterable
from typing import Any, Protocol, TypeVar

from lsx.config import SortBy


class Sortable(Protocol):
    @property
    def name(self) -> str: ...

    @property
    def size(self) -> int: ...

    @property
    def modified_at(self) -> float: ...


T = TypeVar("T", bound=Sortable)

_KEYS: dict[SortBy, Callable[[Any], Any]] = {
    SortBy.NAME: lambda item: os.fsencode(item.name),
    SortBy.SIZE: lambda item: item.size,
    SortBy.TIME: lambda item: item.modified_at,
}

# Name sorts ascending; size and time put the largest/newest first.
_DESCENDING = {SortBy.SIZE, SortBy.TIME}


def order(items: Iterable[T], sort_by: SortBy) -> list[T]:
    """Return *items* sorted by *sort_by*; equal keys keep their input order."""
    return sorted(items, key=_KEYS[sort_by], reverse=sort_by in _DESCENDING)
