"""xtend DATE CLI - calendar facts about a date."""

from __future__ import annotations

import logging
from datetime import date, datetime

import click
import click_extra as clickx

from xtend.time import dates

from .helpers import reraise_as_click

logger = logging.getLogger(__name__)

DATE_TYPE = click.DateTime(formats=["%Y-%m-%d"])


@click.group("date", cls=clickx.ExtraGroup)
def date_group() -> None:
    """Calendar facts about a date."""


@date_group.command()
@click.argument("day", metavar="DATE", type=DATE_TYPE, required=False)
@click.option(
    "--birth",
    type=DATE_TYPE,
    default=None,
    help="Date of birth; prints the age reached on DATE.",
)
@reraise_as_click
def info(day: datetime | None, birth: datetime | None) -> None:
    """Print calendar facts about DATE (YYYY-MM-DD, default: today)."""
    current = day.date() if day else date.today()
    facts = {
        "date": current.isoformat(),
        "weekday": current.strftime("%A"),
        "iso week": dates.iso_week_of_year(current),
        "leap year": str(dates.is_leap_year(current)).lower(),
        "first day of month": dates.first_day_of_month(current).isoformat(),
        "last day of month": dates.last_day_of_month(current).isoformat(),
        "unix time": dates.to_unix_time_seconds(current),
    }
    if birth is not None:
        facts["age"] = dates.age(birth.date(), current)
    for name, fact in facts.items():
        click.echo(f"{name}: {fact}")
