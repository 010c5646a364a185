"""Tests for the stderr diagnostics system.

Covers:
- NO_COLOR / TERM=dumb color disabling
- Everything goes to stderr, nothing to stdout
- Verbose mode debug output
- Global instance management
"""

from __future__ import annotations

import pytest

from recman.output import (
    OutputManager,
    _should_disable_color,
    get_output,
    reset_output,
    set_output,
)


@pytest.fixture(autouse=True)
def _reset_global_output():
    """Ensure the global output instance is reset between tests."""
    reset_output()
    yield
    reset_output()


class TestColorDisabling:
    def test_no_color_env_disables_color(self, monkeypatch):
        monkeypatch.setenv("NO_COLOR", "")
        assert _should_disable_color() is True

    def test_term_dumb_disables_color(self, monkeypatch):
        monkeypatch.delenv("NO_COLOR", raising=False)
        monkeypatch.setenv("TERM", "dumb")
        assert _should_disable_color() is True

    def test_normal_term_keeps_color(self, monkeypatch):
        monkeypatch.delenv("NO_COLOR", raising=False)
        monkeypatch.setenv("TERM", "xterm-256color")
        assert _should_disable_color() is False


class TestStderrOnly:
    def test_plain_debug_goes_to_stderr(self, capfd):
        OutputManager(no_color=True, verbose=True).debug("some message")
        captured = capfd.readouterr()
        assert captured.out == ""
        assert "some message" in captured.err

    def test_rich_console_also_uses_stderr(self, capfd, monkeypatch):
        monkeypatch.delenv("NO_COLOR", raising=False)
        monkeypatch.setenv("TERM", "xterm-256color")
        mgr = OutputManager(verbose=True)
        mgr.debug("scope=[branch_list]")
        captured = capfd.readouterr()
        assert captured.out == ""
        assert "scope=[branch_list]" in captured.err


class TestVerboseMode:
    def test_debug_hidden_by_default(self, capfd):
        OutputManager(no_color=True).debug("should not appear")
        assert capfd.readouterr().err == ""

    def test_debug_prefix_when_verbose(self, capfd):
        OutputManager(no_color=True, verbose=True).debug("trace info")
        assert "[debug] trace info" in capfd.readouterr().err

    def test_verbose_property(self):
        assert OutputManager(verbose=True).is_verbose is True
        assert OutputManager().is_verbose is False


class TestGlobalInstance:
    def test_default_is_silent(self, capfd):
        assert get_output().is_verbose is False
        get_output().debug("hidden")
        assert capfd.readouterr().err == ""

    def test_set_output_overrides(self):
        custom = OutputManager(no_color=True)
        set_output(custom)
        assert get_output() is custom

    def test_set_then_reset_then_get(self):
        first = OutputManager(no_color=True)
        set_output(first)
        reset_output()
        assert get_output() is not first
