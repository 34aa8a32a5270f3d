"""Tests for the console entry point dispatch."""

from __future__ import annotations

import io

from arabic_search import _entry


class _Tty(io.StringIO):
    def isatty(self):
        return True


def test_no_args_over_pipe_serves_mcp(monkeypatch):
    calls = []
    monkeypatch.setattr("sys.argv", ["arabic-search"])
    monkeypatch.setattr("sys.stdin", io.StringIO())
    monkeypatch.setattr("arabic_search.mcp.server.main", lambda: calls.append("mcp"))
    _entry.main()
    assert calls == ["mcp"]


def test_args_run_cli(monkeypatch):
    calls = []
    monkeypatch.setattr("sys.argv", ["arabic-search", "normalize", "x"])
    monkeypatch.setattr("sys.stdin", io.StringIO())
    monkeypatch.setattr("arabic_search.cli.main.app", lambda **kw: calls.append(kw))
    _entry.main()
    assert calls == [{"prog_name": "arabic-search"}]


def test_tty_without_args_runs_cli(monkeypatch):
    calls = []
    monkeypatch.setattr("sys.argv", ["arabic-search"])
    monkeypatch.setattr("sys.stdin", _Tty())
    monkeypatch.setattr("arabic_search.cli.main.app", lambda **kw: calls.append(kw))
    _entry.main()
    assert len(calls) == 1
