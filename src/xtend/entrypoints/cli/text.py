"""xtend TEXT CLI - string checks and transformations.

Results go to **stdout**. ``palindrome`` also reports through its exit code
(0 when the text is a palindrome, 1 otherwise) so it can be used in scripts.
"""

from __future__ import annotations

import logging
import random

import click
import click_extra as clickx

from xtend import config
from xtend.text import strings

from .helpers import reraise_as_click, warn

logger = logging.getLogger(__name__)


@click.group(cls=clickx.ExtraGroup)
def text() -> None:
    """String checks and transformations."""


@text.command()
@click.argument("value")
@click.pass_context
def palindrome(ctx: click.Context, value: str) -> None:
    """Check whether VALUE reads the same both ways (ignoring case and punctuation)."""
    result = strings.is_palindrome(value)
    click.echo("yes" if result else "no")
    if not result:
        ctx.exit(1)


@text.command()
@click.argument("value")
@click.argument("size", type=int)
@reraise_as_click
def chunk(value: str, size: int) -> None:
    """Split VALUE into pieces of SIZE characters, one per line."""
    for piece in strings.chunk(value, size):
        click.echo(piece)


@text.command()
@click.argument("value")
@click.option(
    "--seed",
    type=int,
    default=None,
    help="Seed for a reproducible shuffle (default: XTEND_SEED).",
)
@reraise_as_click
def shuffle(value: str, seed: int | None) -> None:
    """Print a random permutation of the characters of VALUE."""
    if seed is None:
        seed = config.get_seed()
    if seed is None and len(set(value)) > 1:
        warn("No seed given; the output is not reproducible.")
    logger.debug("Shuffling %d character(s) with seed %s", len(value), seed)
    click.echo(strings.shuffled(value, random.Random(seed)))
