"""
Installment due-date generation.
"""

import logging
from datetime import date, datetime
from typing import List, Optional, Union

from loanlib.conventions.calendars import HolidaysLike, resolve_holiday_predicate
from loanlib.utils.date import DateLike, to_date

from .adjustments import day_in_month, month_index, shift_forward_to_working_day

logger = logging.getLogger(__name__)

# Default market settings
_DEFAULT_DUE_DAY_OF_MONTH = 10
_DEFAULT_MIN_DAYS_TO_FIRST_DUE = 30


def first_due_month(
    start_date: Union[date, datetime],
    due_day_of_month: int = _DEFAULT_DUE_DAY_OF_MONTH,
    min_days_to_first_due: int = _DEFAULT_MIN_DAYS_TO_FIRST_DUE,
) -> int:
    """Month index of the first installment (before any working-day shift).

    The due day in the start month is used unless it already passed, in which
    case the next month is tried; if the first due date is still closer than
    ``min_days_to_first_due`` days to the start, one more month is skipped.
    """
    start = to_date(start_date)
    anchor = month_index(start)

    if day_in_month(anchor, due_day_of_month) < start:
        anchor += 1

    if (day_in_month(anchor, due_day_of_month) - start).days < min_days_to_first_due:
        anchor += 1

    return anchor


def generate_due_dates(
    start_date: DateLike,
    count: int,
    *,
    due_day_of_month: int = _DEFAULT_DUE_DAY_OF_MONTH,
    min_days_to_first_due: int = _DEFAULT_MIN_DAYS_TO_FIRST_DUE,
    holiday_predicate: Optional[HolidaysLike] = None,
    shift_to_working_day: bool = True,
) -> List[date]:
    """
    Generate monthly installment due dates.

    Args:
        start_date: Loan start (disbursement) date
        count: Number of installments; non-positive counts give an empty list
        due_day_of_month: Day of month the installments fall on
        min_days_to_first_due: Minimum calendar days from start to first due date
        holiday_predicate: Holidays to skip besides weekends: a predicate, a
            calendar name such as "WEEKEND", or None for Polish statutory holidays
        shift_to_working_day: Move weekend/holiday due dates to the next working day

    Returns:
        Strictly increasing list of due dates
    """
    start = to_date(start_date)
    if count <= 0:
        return []

    anchor = first_due_month(start, due_day_of_month, min_days_to_first_due)
    is_holiday = resolve_holiday_predicate(holiday_predicate)

    dates: List[date] = []
    for i in range(count):
        due = day_in_month(anchor + i, due_day_of_month)
        if shift_to_working_day:
            due = shift_forward_to_working_day(due, is_holiday)
        dates.append(due)

    logger.debug(
        "Generated %s due dates from %s: first=%s last=%s", count, start, dates[0], dates[-1]
    )
    return dates
