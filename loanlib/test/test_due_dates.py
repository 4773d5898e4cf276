"""Monthly due-date generation."""

from datetime import date

import pytest

from loanlib.conventions.calendars import POLAND
from loanlib.schedule.adjustments import day_in_month, month_index, shift_forward_to_working_day
from loanlib.schedule.generator import first_due_month, generate_due_dates


def test_first_due_next_month_when_start_before_due_day():
    dates = generate_due_dates("2026-01-05", 3)
    assert dates == [date(2026, 2, 10), date(2026, 3, 10), date(2026, 4, 10)]


def test_minimum_gap_to_first_due():
    # 2026-02-10 is only 26 days after the start
    dates = generate_due_dates("2026-01-15", 2)
    assert dates == [date(2026, 3, 10), date(2026, 4, 10)]


def test_first_due_month_index():
    assert first_due_month(date(2026, 1, 15)) == month_index(date(2026, 3, 1))
    assert first_due_month(date(2025, 12, 5)) == month_index(date(2026, 1, 1))


def test_weekend_shift():
    # 2027-01-10 is a Sunday
    assert generate_due_dates("2026-12-01", 1) == [date(2027, 1, 11)]


def test_holiday_shift_with_polish_calendar():
    # 2026-11-11 is Independence Day (a Wednesday)
    plain = generate_due_dates(
        "2026-10-01", 1, due_day_of_month=11, holiday_predicate="WEEKEND"
    )
    assert plain == [date(2026, 11, 11)]
    shifted = generate_due_dates("2026-10-01", 1, due_day_of_month=11, holiday_predicate=POLAND)
    assert shifted == [date(2026, 11, 12)]
    by_name = generate_due_dates("2026-10-01", 1, due_day_of_month=11, holiday_predicate="PL")
    assert by_name == shifted


def test_statutory_holidays_skipped_by_default():
    assert generate_due_dates("2026-10-01", 1, due_day_of_month=11) == [date(2026, 11, 12)]
    # Easter Monday 2023 fell on 10 April
    assert generate_due_dates("2023-03-01", 1) == [date(2023, 4, 11)]


def test_easter_period_with_polish_calendar():
    dates = generate_due_dates("2026-03-01", 2, holiday_predicate=POLAND)
    assert dates[0] == date(2026, 4, 10)
    assert len(dates) == 2


def test_short_month_rolls_over():
    dates = generate_due_dates("2026-03-01", 2, due_day_of_month=31, shift_to_working_day=False)
    assert dates == [date(2026, 3, 31), date(2026, 5, 1)]
    # 1 May and 3 May are holidays, 2 May is a Saturday
    shifted = generate_due_dates("2026-03-01", 2, due_day_of_month=31, holiday_predicate=POLAND)
    assert shifted == [date(2026, 3, 31), date(2026, 5, 4)]


def test_month_index_anchor_after_rollover():
    # 31 April rolls over to 1 May; later installments stay on the month index
    # grid instead of following the rolled date
    dates = generate_due_dates("2026-04-01", 3, due_day_of_month=31, shift_to_working_day=False)
    assert dates == [date(2026, 5, 1), date(2026, 5, 31), date(2026, 7, 1)]
    assert first_due_month(date(2026, 4, 1), 31) == month_index(date(2026, 4, 1))


def test_dates_strictly_increasing():
    dates = generate_due_dates("2026-01-31", 36, due_day_of_month=31, holiday_predicate=POLAND)
    assert len(dates) == 36
    assert all(a < b for a, b in zip(dates, dates[1:]))


@pytest.mark.parametrize("count", [0, -3])
def test_non_positive_count(count):
    assert generate_due_dates("2026-01-05", count) == []


def test_bad_due_day():
    with pytest.raises(ValueError):
        generate_due_dates("2026-01-05", 3, due_day_of_month=0)
    with pytest.raises(ValueError):
        day_in_month(month_index(date(2026, 1, 1)), 32)


def test_bad_start_date():
    with pytest.raises(ValueError):
        generate_due_dates("05/01/2026", 3)


def test_day_in_month_overflow():
    assert day_in_month(month_index(date(2026, 2, 1)), 30) == date(2026, 3, 2)
    assert day_in_month(month_index(date(2026, 12, 1)), 10) == date(2026, 12, 10)


def test_shift_forward_keeps_working_day():
    assert shift_forward_to_working_day(date(2026, 3, 10)) == date(2026, 3, 10)
    assert shift_forward_to_working_day(date(2026, 3, 7)) == date(2026, 3, 9)
