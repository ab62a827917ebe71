"""XTEND

Stateless helper functions for numbers, bytes, collections, strings, dates
and small geometric value types. Each subpackage groups the helpers by the
type they extend; nothing is shared between groups beyond trivial delegation.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
