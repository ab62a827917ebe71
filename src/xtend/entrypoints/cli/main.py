"""xtend CLI entry point.

Defines the top-level ``xtend`` command (via Click-Extra), wires its global
options into :mod:`xtend.logging` and registers the subcommands.

Command groups
- ``xtend num`` - byte dumps, wrapping and number facts.
- ``xtend text`` - palindromes, chunking and shuffling.
- ``xtend date`` - calendar facts about a date.
- ``xtend env`` - the XTEND_* defaults and whether they are valid.

Examples
    $ xtend --version
    $ xtend -v num bytes 420 --type int16 --endianness big
    $ XTEND_SEED=7 xtend text shuffle abcdef
"""

import logging
from pathlib import Path

import click
import click_extra as clickx
from platformdirs import user_log_dir

from xtend import __version__
from xtend.logging import (
    DEFAULT_FLIGHT_CAPACITY,
    LoggingSettings,
    configure_logging,
    log_startup,
)

from .dates import date_group
from .env import env
from .helpers import file_link
from .helpers.log_level_parser import parse_log_level
from .num import num
from .text import text

logger = logging.getLogger(__name__)

DEFAULT_LOG_PATH = (
    Path(user_log_dir("xtend", appauthor=False, ensure_exists=True)) / "latest.log"
)

HELP = """Quick calculations and checks on numbers, text and dates.

    Each subcommand is a thin wrapper around one of the xtend helper modules.
    Results are printed to stdout; logs and notices go to stderr.
    """

EPILOG = "\b\n" + "\n".join(
    [
        click.style("Logs:", fg="blue", bold=True, underline=True),
        "  Recent runs are kept in " + file_link(DEFAULT_LOG_PATH),
    ]
)


@clickx.extra_group(
    version=__version__,
    help=HELP,
    params=[
        clickx.ColorOption(show_envvar=True),
        clickx.TimerOption(show_envvar=True),
        clickx.ExtraVersionOption(),
    ],
    epilog=EPILOG,
)
@click.option(
    "--verbose",
    "-v",
    "verbose_count",
    count=True,
    default=0,
    help="Show more on the console: -v for INFO, -vv for DEBUG.",
)
@click.option(
    "--quiet",
    "-q",
    "quiet_count",
    count=True,
    default=0,
    help="Show less on the console: -q for ERROR, -qq for CRITICAL only.",
)
@click.option(
    "--debug/--no-debug",
    default=False,
    help="Print every log record with its source location.",
)
@click.option(
    "--log-path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=DEFAULT_LOG_PATH,
    envvar="XTEND_LOG_PATH",
    show_default=True,
    show_envvar=True,
    help="File the flight recorder writes to.",
)
@click.option(
    "--flight-recorder-capacity",
    type=click.IntRange(min=1),
    default=DEFAULT_FLIGHT_CAPACITY,
    hidden=True,
    envvar="XTEND_FLIGHT_RECORDER_CAPACITY",
    show_envvar=True,
    help="Number of log records the flight recorder keeps.",
)
@click.option(
    "--flight-recorder/--no-flight-recorder",
    "flight_recorder",
    default=True,
    envvar="XTEND_FLIGHT_RECORDER",
    show_envvar=True,
    help=(
        "Keep the most recent log records, at DEBUG regardless of -v/-q, and "
        "write them to --log-path when a WARNING or ERROR is logged."
    ),
)
@click.option(
    "--force-flush/--no-force-flush",
    "force_flush",
    default=False,
    envvar="XTEND_FORCE_FLUSH",
    show_default=True,
    show_envvar=True,
    help="Also write the flight recorder out when the command succeeds.",
)
@click.option(
    "-L",
    "--logger-level",
    "logger_levels",
    multiple=True,
    callback=parse_log_level,
    default=("asyncio=WARNING",),
    envvar="XTEND_LOGGER_LEVELS",
    show_default=True,
    show_envvar=True,
    help=(
        "Minimum level for one logger, as NAME=LEVEL. Applies to the console "
        "and the flight recorder alike. Repeatable (-L xtend.config=DEBUG "
        "-L asyncio=ERROR); XTEND_LOGGER_LEVELS takes a comma/space list."
    ),
)
@clickx.pass_context
def xtend(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    ctx: click.Context,
    verbose_count: int,
    quiet_count: int,
    debug: bool,
    log_path: Path,
    flight_recorder_capacity: int,
    flight_recorder: bool,
    force_flush: bool,
    logger_levels: dict[str, int],
) -> None:
    """Configure logging for the subcommand about to run."""
    settings = LoggingSettings(
        verbose=verbose_count,
        quiet=quiet_count,
        debug=debug,
        color=ctx.color is not False,  # None means auto-detect
        log_path=log_path,
        flight_recorder=flight_recorder,
        flight_capacity=flight_recorder_capacity,
        force_flush=force_flush,
        logger_levels=logger_levels,
    )
    handlers = configure_logging(settings)
    log_startup(logger, settings, handlers, app_version=__version__)
    ctx.call_on_close(logging.shutdown)


xtend.add_command(num)
xtend.add_command(text)
xtend.add_command(date_group)
xtend.add_command(env)
