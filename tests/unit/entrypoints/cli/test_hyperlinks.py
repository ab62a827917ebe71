"""Unit tests for :mod:`xtend.entrypoints.cli.helpers.hyperlinks`."""

import io

import pytest

from xtend.entrypoints.cli.helpers import hyperlinks

# pylint: disable=redefined-outer-name

TERMINAL_VARS = ("TERM_PROGRAM", "WT_SESSION", "VTE_VERSION", "TERM")


class TTY(io.StringIO):
    """A StringIO that claims to be a terminal."""

    def isatty(self) -> bool:
        return True


@pytest.fixture
def clean_terminal_env(monkeypatch):
    """Remove every variable the OSC-8 heuristic looks at."""
    for name in TERMINAL_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


def test_not_a_tty(clean_terminal_env):
    """Redirected output never gets hyperlinks."""
    clean_terminal_env.setenv("TERM_PROGRAM", "vscode")
    assert hyperlinks.supports_osc8(io.StringIO()) is False


@pytest.mark.parametrize(
    ("name", "value"),
    [
        ("TERM_PROGRAM", "iTerm.app"),
        ("TERM_PROGRAM", "WezTerm"),
        ("WT_SESSION", "1"),
        ("VTE_VERSION", "7200"),
        ("TERM", "alacritty"),
        ("TERM", "konsole-256color"),
    ],
)
def test_known_terminals(clean_terminal_env, name, value):
    """Terminals on the allowlist support hyperlinks."""
    clean_terminal_env.setenv(name, value)
    assert hyperlinks.supports_osc8(TTY()) is True


def test_unknown_terminal(clean_terminal_env):
    """A plain xterm is not assumed to support hyperlinks."""
    clean_terminal_env.setenv("TERM", "xterm-256color")
    assert hyperlinks.supports_osc8(TTY()) is False


def test_hyperlink_fallback(monkeypatch):
    """Without OSC-8 support the label is returned unchanged."""
    monkeypatch.setattr(hyperlinks, "supports_osc8", lambda: False)
    assert hyperlinks.hyperlink("file:///tmp/x.log", "x.log") == "x.log"
    assert hyperlinks.hyperlink("file:///tmp/x.log") == "file:///tmp/x.log"


def test_hyperlink_osc8(monkeypatch):
    """With OSC-8 support the label is wrapped in escape sequences."""
    monkeypatch.setattr(hyperlinks, "supports_osc8", lambda: True)
    link = hyperlinks.hyperlink("file:///tmp/x.log", "x.log")
    assert link == "\x1b]8;;file:///tmp/x.log\x07x.log\x1b]8;;\x07"


def test_file_link(monkeypatch, tmp_path):
    """Files link to their absolute file:// URI and show the given path."""
    monkeypatch.setattr(hyperlinks, "supports_osc8", lambda: True)
    path = tmp_path / "latest.log"
    link = hyperlinks.file_link(path)
    assert path.resolve().as_uri() in link
    assert link.endswith(f"{path}\x1b]8;;\x07")
