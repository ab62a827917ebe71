"""OSC-8 terminal hyperlinks for the xtend CLI.

Terminals that understand OSC-8 render ``ESC ] 8 ;; URL BEL label ESC ] 8 ;; BEL``
as a clickable *label*. Everywhere else the label is printed as is.
"""

import os
import sys
from pathlib import Path
from typing import TextIO

OSC8_TERMINALS = {"apple_terminal", "vscode", "iterm.app", "wezterm", "kitty"}
OSC8_TERM_PREFIXES = ("alacritty", "konsole")


def _terminal_supports_osc8() -> bool:
    if (os.getenv("TERM_PROGRAM") or "").lower() in OSC8_TERMINALS:
        return True
    # Windows Terminal and VTE-based terminals (GNOME Terminal, Tilix, ...)
    if os.getenv("WT_SESSION") or os.getenv("VTE_VERSION"):
        return True
    return os.getenv("TERM", "").startswith(OSC8_TERM_PREFIXES)


def supports_osc8(stream: TextIO | None = None) -> bool:
    """Guess whether *stream* (default: stdout) renders OSC-8 hyperlinks.

    Redirected streams never do; for terminals the answer comes from an
    allowlist keyed on the usual terminal environment variables.
    """
    stream = stream or sys.stdout
    isatty = getattr(stream, "isatty", None)
    if isatty is None or not isatty():
        return False
    return _terminal_supports_osc8()


def hyperlink(url: str, text: str | None = None) -> str:
    """Return *text* (default: *url*) linked to *url* when the terminal allows."""
    label = text or url
    if not supports_osc8():
        return label
    return f"\x1b]8;;{url}\x07{label}\x1b]8;;\x07"


def file_link(path: Path) -> str:
    """Return *path* as a link to the file itself."""
    return hyperlink(path.resolve().as_uri(), str(path))
