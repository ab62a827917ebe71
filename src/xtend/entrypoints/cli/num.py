"""xtend NUM CLI - number conversions and facts.

Behavior
- Results go to **stdout**, one value per line, so they can be piped.
- The byte order of ``bytes`` defaults to ``XTEND_ENDIANNESS`` and then to the
  platform's native order.

Failure modes
- Values that do not fit the chosen type, an empty wrap range or an invalid
  ``XTEND_ENDIANNESS`` exit with a ``ClickException``.
"""

from __future__ import annotations

import logging
from decimal import Decimal, InvalidOperation

import click
import click_extra as clickx

from xtend import config
from xtend.io.endianness import Endianness, NumericType, get_bytes
from xtend.math import numeric

from .helpers import reraise_as_click

logger = logging.getLogger(__name__)


class NumberParamType(click.ParamType):
    """Accept integers (including ``0x``/``0b``/``0o`` literals) or decimals."""

    name = "number"

    def convert(self, value, param, ctx):
        if isinstance(value, (int, Decimal)):
            return value
        try:
            return int(value, 0)
        except ValueError:
            pass
        try:
            return Decimal(value)
        except InvalidOperation:
            self.fail(f"{value!r} is not a number", param, ctx)


NUMBER = NumberParamType()

TYPE_CHOICE = click.Choice([t.name.lower() for t in NumericType], case_sensitive=False)
ENDIANNESS_CHOICE = click.Choice([e.value for e in Endianness], case_sensitive=False)


@click.group(cls=clickx.ExtraGroup)
def num() -> None:
    """Number conversions and facts."""


@num.command("bytes")
@click.argument("value", type=NUMBER)
@click.option(
    "--type",
    "type_name",
    type=TYPE_CHOICE,
    default="int32",
    show_default=True,
    help="Fixed-width type to encode VALUE as.",
)
@click.option(
    "--endianness",
    type=ENDIANNESS_CHOICE,
    default=None,
    help="Byte order (default: XTEND_ENDIANNESS, then the native order).",
)
@reraise_as_click
def bytes_(value: int | Decimal, type_name: str, endianness: str | None) -> None:
    """Print the bytes of VALUE as hex."""
    numeric_type = NumericType[type_name.upper()]
    order = Endianness(endianness) if endianness else config.get_default_endianness()
    if numeric_type.is_float:
        value = float(value)
    elif isinstance(value, Decimal):
        raise click.BadParameter(
            f"{type_name} needs an integer value", param_hint="VALUE"
        )
    logger.debug("Encoding %r as %s (%s)", value, numeric_type.name, order.value)
    click.echo(get_bytes(value, numeric_type, order).hex(" "))


@num.command("wrap")
@click.argument("value", type=NUMBER)
@click.argument("low", type=NUMBER)
@click.argument("high", type=NUMBER)
@reraise_as_click
def wrap(value: int | Decimal, low: int | Decimal, high: int | Decimal) -> None:
    """Wrap VALUE into the half-open range [LOW, HIGH)."""
    if any(isinstance(n, Decimal) for n in (value, low, high)):
        value, low, high = Decimal(value), Decimal(low), Decimal(high)
    click.echo(numeric.wrap(value, low, high))


@num.command("inspect")
@click.argument("value", type=int)
@reraise_as_click
def inspect(value: int) -> None:
    """Print number-theoretic facts about the integer VALUE."""
    facts = {
        "even": numeric.is_even(value),
        "prime": numeric.is_prime(value),
        "digits": numeric.count_digits(value),
        "digital root": numeric.digital_root(value),
        "multiplicative persistence": numeric.multiplicative_persistence(value),
        "sign": numeric.sign(value),
    }
    for name, fact in facts.items():
        rendered = str(fact).lower() if isinstance(fact, bool) else fact
        click.echo(f"{name}: {rendered}")
