"""Tests for the grid layout."""

from __future__ import annotations

import io

import pytest

from conftest import make_decorator, make_entry
from lsx.ansi import display_width
from lsx.config import ListingConfig, When
from lsx.formatters.grid import cell_index, grid_shape, write_grid


def _entries(*names: str):
    return [make_entry(n) for n in names]


class TestGridShape:
    def test_columns_fit_width(self) -> None:
        assert grid_shape(10, 10, 80) == (2, 8)

    def test_at_least_one_column(self) -> None:
        assert grid_shape(3, 100, 80) == (3, 1)

    def test_rows_round_up(self) -> None:
        assert grid_shape(7, 20, 60) == (3, 3)


class TestCellIndex:
    @pytest.mark.parametrize("across", [True, False])
    @pytest.mark.parametrize("count", [1, 2, 5, 7, 12, 13])
    @pytest.mark.parametrize("columns_hint", [1, 3, 4])
    def test_bijection(self, across: bool, count: int, columns_hint: int) -> None:
        rows, columns = grid_shape(count, 10, columns_hint * 10)
        seen = [
            cell_index(r, c, rows, columns, across)
            for r in range(rows)
            for c in range(columns)
            if cell_index(r, c, rows, columns, across) < count
        ]
        assert sorted(seen) == list(range(count))

    def test_across_differs_from_down(self) -> None:
        across = [cell_index(r, c, 2, 3, True) for r in range(2) for c in range(3)]
        down = [cell_index(r, c, 2, 3, False) for r in range(2) for c in range(3)]
        assert across == [0, 1, 2, 3, 4, 5]
        assert down == [0, 2, 4, 1, 3, 5]


class TestWriteGrid:
    def test_down_is_default(self) -> None:
        buf = io.StringIO()
        # cell width 3 ("a" + 2) in 9 columns -> 3 columns, 2 rows
        write_grid(_entries("a", "b", "c", "d", "e"), make_decorator(), 9, out=buf)
        assert buf.getvalue() == "a  c  e\nb  d\n"

    def test_across(self) -> None:
        buf = io.StringIO()
        write_grid(_entries("a", "b", "c", "d", "e"), make_decorator(), 9, across=True, out=buf)
        assert buf.getvalue() == "a  b  c\nd  e\n"

    def test_one_newline_per_row(self) -> None:
        buf = io.StringIO()
        write_grid(_entries("aa", "b", "c"), make_decorator(), 80, out=buf)
        assert buf.getvalue() == "aa  b   c\n"

    def test_narrow_width_gives_single_column(self) -> None:
        buf = io.StringIO()
        write_grid(_entries("alpha", "beta"), make_decorator(), 3, out=buf)
        assert buf.getvalue() == "alpha\nbeta\n"

    def test_empty_writes_nothing(self) -> None:
        buf = io.StringIO()
        write_grid([], make_decorator(), 80, out=buf)
        assert buf.getvalue() == ""

    def test_every_entry_appears_once(self) -> None:
        names = [f"file{i:02d}.txt" for i in range(23)]
        for across in (True, False):
            buf = io.StringIO()
            write_grid(_entries(*names), make_decorator(), 50, across=across, out=buf)
            cells = buf.getvalue().split()
            assert sorted(cells) == names

    def test_wide_icons_counted_in_cell_width(self) -> None:
        buf = io.StringIO()
        decorator = make_decorator(ListingConfig(icons=When.ALWAYS))
        write_grid(_entries("a.py", "b.py"), decorator, 80, across=True, out=buf)
        line = buf.getvalue().rstrip("\n")
        first_cell = line[: line.index("\U0001f40d b.py")]
        assert display_width(first_cell) == display_width("\U0001f40d a.py") + 2
