"""Configuration utilities for xtend.

Environment-driven defaults used by the CLI. The library itself never reads
the environment: every helper takes its settings as arguments.
"""

from __future__ import annotations

import logging
import os

from xtend.errors import XtendError
from xtend.io.endianness import Endianness, native_endianness

logger = logging.getLogger(__name__)

SEED_ENV_VAR = "XTEND_SEED"  # pragma: no mutate
ENDIANNESS_ENV_VAR = "XTEND_ENDIANNESS"  # pragma: no mutate


class InvalidSeedError(XtendError, ValueError):
    """Raised when the XTEND_SEED environment variable is not an integer."""

    def __init__(self, value: str) -> None:
        super().__init__(f"{SEED_ENV_VAR} must be an integer, got {value!r}.")
        self.value = value


class InvalidEndiannessError(XtendError, ValueError):
    """Raised when the XTEND_ENDIANNESS environment variable is not recognised."""

    def __init__(self, value: str) -> None:
        choices = ", ".join(member.value for member in Endianness)
        super().__init__(
            f"{ENDIANNESS_ENV_VAR} must be one of {choices}, got {value!r}."
        )
        self.value = value


def get_seed() -> int | None:
    """Get the default random seed from the environment.

    Returns:
        The integer value of `XTEND_SEED`, or None when it is unset or empty.

    Raises:
        InvalidSeedError: If `XTEND_SEED` is not an integer.
    """
    if not (raw := os.environ.get(SEED_ENV_VAR, "").strip()):
        return None
    try:
        return int(raw)
    except ValueError as exc:
        raise InvalidSeedError(raw) from exc


def get_default_endianness() -> Endianness:
    """Get the default byte order from the environment.

    Returns:
        The endianness named by `XTEND_ENDIANNESS` (case-insensitive), or the
        platform's native order when it is unset or empty.

    Raises:
        InvalidEndiannessError: If `XTEND_ENDIANNESS` names no byte order.
    """
    if not (raw := os.environ.get(ENDIANNESS_ENV_VAR, "").strip()):
        return native_endianness()
    try:
        endianness = Endianness(raw.lower())
    except ValueError as exc:
        raise InvalidEndiannessError(raw) from exc
    logger.debug("Using %s endianness from %s", endianness.value, ENDIANNESS_ENV_VAR)
    return endianness
