"""CLI helpers for xtend.

Utilities used by the command-line interface: OSC-8 terminal hyperlinks when
supported, message emitters that write to stderr with emoji→ASCII fallbacks,
and translation of library errors into Click errors.
"""

from .errors import reraise_as_click
from .hyperlinks import file_link, hyperlink
from .messages import error, success, warn

__all__ = ["error", "file_link", "hyperlink", "reraise_as_click", "success", "warn"]
