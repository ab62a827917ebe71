"""Hypothesis property tests for leap years.

- **Gregorian rule**: for positive years, ``is_leap_year`` agrees with
  :func:`calendar.isleap`.
- **Date receivers**: passing a date is the same as passing its year.
"""

import calendar
from datetime import date

import pytest
from hypothesis import given
from hypothesis import strategies as st

from xtend.time.dates import is_leap_year

pytestmark = [pytest.mark.property]


@given(year=st.integers(min_value=1, max_value=100_000))
def test_matches_gregorian_rule(year):
    """Divisible by 4, except centuries not divisible by 400."""
    assert is_leap_year(year) is calendar.isleap(year)


@given(day=st.dates())
def test_date_and_year_agree(day):
    """A date is a leap-year date exactly when its year is a leap year."""
    assert is_leap_year(day) is is_leap_year(day.year)
