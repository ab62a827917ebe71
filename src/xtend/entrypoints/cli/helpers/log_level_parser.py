"""Parsing of ``-L/--logger-level NAME=LEVEL`` options.

The option may be repeated, and the ``XTEND_LOGGER_LEVELS`` variable holds
the same items separated by commas or whitespace. Later items win.
"""

import logging
import re

import click

DEFAULT_LIB_LEVELS = {"asyncio": logging.WARNING}

ITEM_SEPARATORS = re.compile(r"[,\s]+")


def _normalize_items(value: str | list[str] | tuple[str, ...] | None) -> list[str]:
    """Flatten a string or a sequence of strings into ``NAME=LEVEL`` items."""
    if not value:
        return []
    chunks = (value,) if isinstance(value, str) else value
    return [item for chunk in chunks for item in ITEM_SEPARATORS.split(chunk) if item]


def _parse_item(item: str) -> tuple[str, int]:
    name, sep, level_name = item.partition("=")
    name = name.strip()
    if not sep or not name:
        raise click.BadParameter(f"Expected NAME=LEVEL, got {item!r}")
    level = logging.getLevelNamesMapping().get(level_name.strip().upper())
    if level is None:
        raise click.BadParameter(f"Invalid log level: {level_name}")
    return name, level


def parse_log_level(
    ctx: click.Context,  # pylint: disable=unused-argument
    param: click.Parameter | None,  # pylint: disable=unused-argument
    value: str | list[str] | tuple[str, ...] | None,
) -> dict[str, int]:
    """Click callback turning ``NAME=LEVEL`` items into ``{name: level}``.

    The result starts from :data:`DEFAULT_LIB_LEVELS`, so libraries stay quiet
    unless explicitly overridden. Level names are case-insensitive.

    Raises:
        click.BadParameter: If an item has no ``=``, an empty name or an
            unknown level.
    """
    levels = dict(DEFAULT_LIB_LEVELS)
    levels.update(_parse_item(item) for item in _normalize_items(value))
    return levels
