"""Logging setup for the xtend CLI.

Two handlers hang off the root logger:

- a Rich console handler on stderr, at the verbosity chosen with ``-v``/``-q``;
- an optional in-memory "flight recorder" that keeps recent records at DEBUG
  and writes them to a file once something goes wrong.

The library modules only ever call ``logging.getLogger(__name__)``; nothing
here runs unless the CLI asks for it.
"""

from __future__ import annotations

import logging
import os
import platform
import sys
from collections.abc import Mapping
from dataclasses import dataclass, field
from logging.handlers import MemoryHandler
from pathlib import Path
from typing import Literal, TypeAlias

import numpy
from rich.console import Console
from rich.logging import RichHandler

PROJECT_PREFIX = "xtend"

DEFAULT_FLIGHT_CAPACITY = 2000
FLIGHT_RECORDER_FORMAT = (
    "[%(asctime)s] [%(process)d:%(threadName)s] "
    "%(levelname)s %(name)s:%(lineno)d: %(message)s"
)

# the settings the CLI reads from XTEND_* variables, reported at startup
REPORTED_ENV_VARS = ("XTEND_SEED", "XTEND_ENDIANNESS")

ColorSystem: TypeAlias = Literal["auto", "standard", "256", "truecolor", "windows"]


@dataclass(frozen=True)
class LoggingSettings:  # pylint: disable=too-many-instance-attributes
    """Everything the CLI's global options say about logging.

    Attributes:
        verbose: Number of ``-v`` flags; each lowers the console threshold.
        quiet: Number of ``-q`` flags; each raises the console threshold.
        debug: Show every record on the console with source locations.
        color: Allow colored console output.
        log_path: File the flight recorder writes to.
        flight_recorder: Keep recent records in memory for post-mortems.
        flight_capacity: How many records the flight recorder keeps.
        force_flush: Write the flight recorder out on exit even without errors.
        logger_levels: Minimum level per logger name.
    """

    verbose: int = 0
    quiet: int = 0
    debug: bool = False
    color: bool = True
    log_path: Path | None = None
    flight_recorder: bool = True
    flight_capacity: int = DEFAULT_FLIGHT_CAPACITY
    force_flush: bool = False
    logger_levels: Mapping[str, int] = field(default_factory=dict)

    @property
    def console_level(self) -> int:
        """WARNING, moved one level per ``-v``/``-q`` and kept in DEBUG..CRITICAL."""
        level = logging.WARNING + 10 * (self.quiet - self.verbose)
        return max(logging.DEBUG, min(logging.CRITICAL, level))

    @property
    def records_flight(self) -> bool:
        return self.flight_recorder and self.log_path is not None


class ThirdPartyPrefixFilter(logging.Filter):
    """Tag records from outside xtend with their top-level package.

    ``asyncio.base_events`` becomes ``[asyncio]`` in ``record.prefix``; xtend's
    own records get an empty prefix. Nothing is filtered out.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        package = record.name.partition(".")[0]
        record.prefix = "" if package == PROJECT_PREFIX else f"[{package}]"
        return True


def config_console_handler(
    level: int = logging.INFO, debug_mode: bool = False, color: bool = True
) -> RichHandler:
    """Return a stderr RichHandler.

    In debug mode the handler passes everything and shows where each record
    came from; otherwise foreign records are tagged by
    :class:`ThirdPartyPrefixFilter`.
    """
    # keep in step with click-extra's --color / --no-color option
    color_system: ColorSystem | None = "auto" if color else None
    handler = RichHandler(
        level=logging.DEBUG if debug_mode else level,
        console=Console(color_system=color_system, stderr=True),
        rich_tracebacks=True,
        show_time=False,
        show_path=debug_mode,
        enable_link_path=debug_mode,
    )
    if debug_mode:
        handler.setFormatter(logging.Formatter("%(asctime)s %(name)s: %(message)s"))
    else:
        handler.setFormatter(logging.Formatter("%(prefix)s %(message)s"))
        handler.addFilter(ThirdPartyPrefixFilter())
    return handler


def config_flight_recorder(
    path: Path,
    capacity: int = DEFAULT_FLIGHT_CAPACITY,
    flush_level: int = logging.WARNING,
    flush_on_close: bool = False,
) -> MemoryHandler:
    """Return a MemoryHandler that dumps its buffer to *path*.

    The buffer is written when a record at *flush_level* arrives, when it is
    full, and on close if *flush_on_close* is set. Each run truncates the
    file; nothing is created until the first flush.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    target = logging.FileHandler(path, mode="w", encoding="utf-8", delay=True)
    target.setLevel(logging.DEBUG)
    target.setFormatter(logging.Formatter(FLIGHT_RECORDER_FORMAT))
    return MemoryHandler(
        capacity=capacity,
        flushLevel=flush_level,
        target=target,
        flushOnClose=flush_on_close,
    )


def configure_logging(settings: LoggingSettings) -> list[logging.Handler]:
    """Install the console handler and flight recorder on the root logger.

    The root logger accepts everything; each handler applies its own
    threshold. Per-logger levels from *settings* apply to both handlers.

    Returns:
        The installed handlers, console first.
    """
    handlers: list[logging.Handler] = [
        config_console_handler(
            level=settings.console_level,
            debug_mode=settings.debug,
            color=settings.color,
        )
    ]
    log_path = settings.log_path
    if settings.flight_recorder and log_path is not None:
        handlers.append(
            config_flight_recorder(
                log_path,
                capacity=settings.flight_capacity,
                flush_on_close=settings.force_flush,
            )
        )
    logging.basicConfig(level=logging.DEBUG, handlers=handlers, force=True)
    for name, level in settings.logger_levels.items():
        logging.getLogger(name).setLevel(level)
    return handlers


def log_startup(
    logger: logging.Logger,
    settings: LoggingSettings,
    handlers: list[logging.Handler],
    *,
    app_version: str,
) -> None:
    """Log a one-line INFO banner, then DEBUG diagnostics for bug reports."""
    logger.info(
        "XTEND %s - console=%s, flight-recorder=%s",
        app_version,
        logging.getLevelName(settings.console_level),
        "ON" if settings.records_flight else "OFF",
    )
    logger.debug("Python: %s", platform.python_version())
    logger.debug("Platform: %s %s", platform.system(), platform.release())
    logger.debug("PID: %s, CWD: %s", os.getpid(), Path.cwd())
    logger.debug("NumPy: %s", numpy.__version__)
    logger.debug("Native byte order: %s", sys.byteorder)
    for name in REPORTED_ENV_VARS:
        logger.debug("%s=%r", name, os.environ.get(name))
    logger.debug("Handlers: %s", [type(h).__name__ for h in handlers])
    if settings.records_flight:
        logger.debug(
            "Flight recorder: path=%s, capacity=%s, flush_on_close=%s",
            settings.log_path,
            settings.flight_capacity,
            settings.force_flush,
        )
    logger.debug(
        "Per-logger overrides: %s",
        {
            name: logging.getLevelName(level)
            for name, level in settings.logger_levels.items()
        }
        or "<none>",
    )
