"""
Date adjustment functions for installment schedules.
"""

from datetime import date, datetime, timedelta
from typing import Optional, Union

from dateutil.relativedelta import relativedelta

from loanlib.conventions.calendars import HolidayPredicate, is_weekend


def shift_forward_to_working_day(
    dt: Union[date, datetime], holiday_predicate: Optional[HolidayPredicate] = None
) -> date:
    """Move a date forward until it is neither a weekend nor a holiday.

    Returns the input date unchanged when it is already a working day.
    """
    if isinstance(dt, datetime):
        dt = dt.date()

    while is_weekend(dt) or (holiday_predicate is not None and holiday_predicate(dt)):
        dt += timedelta(days=1)
    return dt


def month_index(dt: Union[date, datetime]) -> int:
    """Absolute month number (year * 12 + zero-based month)."""
    return dt.year * 12 + dt.month - 1


def day_in_month(month_idx: int, day_of_month: int) -> date:
    """Day ``day_of_month`` of the month at ``month_idx``.

    A day past the end of a short month rolls into the following month by the
    overflow, e.g. day 31 of April is 1 May and day 30 of February 2026 is
    2 March.
    """
    if not 1 <= day_of_month <= 31:
        raise ValueError(f"day_of_month must be in 1..31, got {day_of_month}")
    year, month0 = divmod(month_idx, 12)
    return date(year, month0 + 1, 1) + relativedelta(days=day_of_month - 1)
