"""xtend ENV CLI - inspect the environment-driven defaults.

``xtend env`` reads the ``XTEND_*`` settings the other commands fall back
to and reports whether they are valid.
"""

from __future__ import annotations

import click

from xtend import config
from xtend.errors import XtendError

from .helpers import error, success


@click.command()
def env() -> None:
    """Show the XTEND_* defaults used by the other commands."""
    try:
        seed = config.get_seed()
        endianness = config.get_default_endianness()
    except XtendError as e:
        error("Invalid configuration")
        click.echo(str(e))
    else:
        success("Configuration valid")
        click.echo(f"Seed       : {'unset' if seed is None else seed}")
        click.echo(f"Endianness : {endianness.value}")
