"""QuantLib-backed Poland calendar."""

from datetime import date

import pytest

from loanlib.conventions.calendars import get_calendar, is_statutory_holiday
from loanlib.conventions.calendars_quantlib import POLAND_QUANTLIB


@pytest.mark.parametrize(
    "dt",
    [date(2026, 4, 6), date(2026, 6, 4), date(2026, 11, 11), date(2026, 5, 1)],
)
def test_quantlib_poland_holidays(dt):
    assert POLAND_QUANTLIB.is_holiday(dt)
    assert is_statutory_holiday(dt)


def test_weekends_are_not_reported_as_holidays():
    assert not POLAND_QUANTLIB.is_holiday(date(2026, 3, 7))
    assert not POLAND_QUANTLIB.is_business_day(date(2026, 3, 7))


def test_business_day():
    assert POLAND_QUANTLIB.is_business_day(date(2026, 3, 10))


def test_registry_lookup():
    assert get_calendar("PL_QUANTLIB") is POLAND_QUANTLIB
