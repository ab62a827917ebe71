"""Translation of library errors into Click errors."""

from __future__ import annotations

import functools
import logging
from collections.abc import Callable
from typing import ParamSpec, TypeVar

import click

from xtend.errors import XtendError

P = ParamSpec("P")
R = TypeVar("R")

logger = logging.getLogger(__name__)


def reraise_as_click(func: Callable[P, R]) -> Callable[P, R]:
    """Decorate a command so :class:`XtendError` exits with a Click error.

    The full traceback is logged at DEBUG (kept by the flight recorder); the
    user sees only the message.
    """

    @functools.wraps(func)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
        try:
            return func(*args, **kwargs)
        except XtendError as exc:
            logger.debug("%s failed", func.__name__, exc_info=True)
            raise click.ClickException(str(exc)) from exc

    return wrapper
