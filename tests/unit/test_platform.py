"""Tests for lsx._platform: terminal capability and width resolution."""

from __future__ import annotations

import io
import os

import pytest

from conftest import FakeTerminal
from lsx._platform import DEFAULT_WIDTH, SystemTerminal, resolve_width


class TestResolveWidth:
    def test_override_wins(self) -> None:
        assert resolve_width(40, FakeTerminal(columns=120)) == 40

    def test_terminal_width(self) -> None:
        assert resolve_width(None, FakeTerminal(columns=120)) == 120

    def test_fallback(self) -> None:
        assert resolve_width(None, FakeTerminal(columns=None)) == DEFAULT_WIDTH == 80


class TestSystemTerminal:
    def test_string_stream_is_not_interactive(self) -> None:
        assert SystemTerminal(io.StringIO()).is_interactive() is False

    def test_closed_stream_is_not_interactive(self) -> None:
        stream = io.StringIO()
        stream.close()
        assert SystemTerminal(stream).is_interactive() is False

    def test_width_from_shutil(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(
            "lsx._platform.shutil.get_terminal_size",
            lambda fallback: os.terminal_size((132, 40)),
        )
        assert SystemTerminal().width() == 132

    def test_unknown_width_is_none(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(
            "lsx._platform.shutil.get_terminal_size",
            lambda fallback: os.terminal_size(fallback),
        )
        assert SystemTerminal().width() is None
