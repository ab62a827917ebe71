"""Helpers for ``date`` and ``datetime`` receivers.

Weekdays are :class:`calendar.Day` members, which share their numbering with
:meth:`datetime.date.weekday`. Helpers that return a date keep the receiver's
type, so a ``datetime`` keeps its time of day and timezone.

Examples:
    ```py
    >>> last_weekday(date(2000, 1, 15), Day.SATURDAY)
    datetime.date(2000, 1, 29)
    >>> next_weekday(date(2000, 1, 1), Day.SATURDAY)
    datetime.date(2000, 1, 8)
    ```
"""

from __future__ import annotations

import calendar
from calendar import Day
from datetime import UTC, date, datetime, timedelta
from typing import TypeVar

from xtend.errors import YearZeroError, require_not_none

DateT = TypeVar("DateT", bound=date)

UNIX_EPOCH = datetime(1970, 1, 1, tzinfo=UTC)


def age(date_of_birth: date, reference: date | None = None) -> int:
    """Return the number of whole years between *date_of_birth* and *reference*.

    Args:
        date_of_birth: The birth date.
        reference: The date at which the age is measured. Defaults to today.
    """
    require_not_none(date_of_birth, "date_of_birth")
    reference = reference or date.today()
    had_birthday = (reference.month, reference.day) >= (
        date_of_birth.month,
        date_of_birth.day,
    )
    return reference.year - date_of_birth.year - (0 if had_birthday else 1)


def first_day_of_month(current: DateT) -> DateT:
    """Return *current* moved to the first day of its month."""
    require_not_none(current, "current")
    return current.replace(day=1)


def last_day_of_month(current: DateT) -> DateT:
    """Return *current* moved to the last day of its month."""
    require_not_none(current, "current")
    _, days_in_month = calendar.monthrange(current.year, current.month)
    return current.replace(day=days_in_month)


def first_weekday(current: DateT, day: Day) -> DateT:
    """Return the first *day* of the week inside *current*'s month."""
    first = first_day_of_month(current)
    return first + timedelta(days=(day - first.weekday()) % 7)


def last_weekday(current: DateT, day: Day) -> DateT:
    """Return the last *day* of the week inside *current*'s month."""
    last = last_day_of_month(current)
    return last - timedelta(days=(last.weekday() - day) % 7)


def next_weekday(current: DateT, day: Day) -> DateT:
    """Return the next *day* of the week strictly after *current*.

    When *current* already falls on *day*, the result is one week later.
    """
    require_not_none(current, "current")
    offset = (day - current.weekday()) % 7 or 7
    return current + timedelta(days=offset)


def iso_week_of_year(current: date) -> int:
    """Return the ISO 8601 week number of *current*."""
    require_not_none(current, "current")
    return current.isocalendar().week


def is_leap_year(value: date | int) -> bool:
    """True if the year of *value* is a Gregorian leap year.

    *value* may be a date or a year number. Years before 1 AD count the
    astronomical way: year -1 (1 BC) is a leap year, like year 0 would be.

    Raises:
        YearZeroError: If *value* is the year ``0``, which does not exist.
    """
    require_not_none(value, "value")
    year = value.year if isinstance(value, date) else value
    if year == 0:
        raise YearZeroError()
    if year < 0:
        year += 1
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def _as_utc(value: date) -> datetime:
    if not isinstance(value, datetime):
        return datetime(value.year, value.month, value.day, tzinfo=UTC)
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value


def to_unix_time_seconds(value: date) -> int:
    """Return the whole seconds elapsed since the Unix epoch.

    Naive datetimes and plain dates are interpreted as UTC.
    """
    require_not_none(value, "value")
    return (_as_utc(value) - UNIX_EPOCH) // timedelta(seconds=1)


def to_unix_time_milliseconds(value: date) -> int:
    """Return the whole milliseconds elapsed since the Unix epoch."""
    require_not_none(value, "value")
    return (_as_utc(value) - UNIX_EPOCH) // timedelta(milliseconds=1)
