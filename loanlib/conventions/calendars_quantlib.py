"""
QuantLib-backed holiday calendar.

Provides an alternative to the built-in statutory table using QuantLib's Poland
calendar, for callers who want QuantLib's maintained holiday rules.
"""

from datetime import date, datetime
from typing import Union

import QuantLib as ql

from loanlib.conventions.calendars import Calendar, is_weekend
from loanlib.conventions.types import CalendarType


def _to_ql_date(dt: Union[date, datetime]) -> ql.Date:
    """Convert Python date/datetime to QuantLib Date."""
    if isinstance(dt, datetime):
        dt = dt.date()
    return ql.Date(dt.day, dt.month, dt.year)


class QuantLibCalendar(Calendar):
    """Calendar whose holiday rules come from a QuantLib calendar."""

    def __init__(self, name: str, ql_calendar: ql.Calendar):
        super().__init__(name, self._ql_holiday)
        self._ql_calendar = ql_calendar

    def _ql_holiday(self, dt: date) -> bool:
        # QuantLib reports weekends as holidays too; keep only real holidays
        if is_weekend(dt):
            return False
        return not self._ql_calendar.isBusinessDay(_to_ql_date(dt))


POLAND_QUANTLIB = QuantLibCalendar(CalendarType.PL_QUANTLIB.value, ql.Poland())
