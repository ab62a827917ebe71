"""Numeric receivers turned into ``timedelta`` and ``datetime`` values.

A tick is 100 nanoseconds. ``timedelta`` resolves microseconds, so tick
counts that are not multiples of ten are rounded.
"""

from __future__ import annotations

from datetime import datetime, timedelta

from xtend.time.dates import UNIX_EPOCH

TICKS_PER_MICROSECOND = 10


def ticks(value: float) -> timedelta:
    """Return a duration of *value* 100-nanosecond ticks."""
    return timedelta(microseconds=value / TICKS_PER_MICROSECOND)


def milliseconds(value: float) -> timedelta:
    """Return a duration of *value* milliseconds."""
    return timedelta(milliseconds=value)


def seconds(value: float) -> timedelta:
    """Return a duration of *value* seconds."""
    return timedelta(seconds=value)


def minutes(value: float) -> timedelta:
    """Return a duration of *value* minutes."""
    return timedelta(minutes=value)


def hours(value: float) -> timedelta:
    """Return a duration of *value* hours."""
    return timedelta(hours=value)


def days(value: float) -> timedelta:
    """Return a duration of *value* days."""
    return timedelta(days=value)


def weeks(value: float) -> timedelta:
    """Return a duration of *value* weeks."""
    return timedelta(weeks=value)


def from_unix_time_seconds(value: int) -> datetime:
    """Return the UTC instant *value* seconds after the Unix epoch."""
    return UNIX_EPOCH + timedelta(seconds=value)


def from_unix_time_milliseconds(value: int) -> datetime:
    """Return the UTC instant *value* milliseconds after the Unix epoch."""
    return UNIX_EPOCH + timedelta(milliseconds=value)
