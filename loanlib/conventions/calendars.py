"""
Holiday calendars for installment scheduling.

A holiday predicate is any callable ``date -> bool``. The default table is the
Polish statutory one: nine fixed-date holidays plus the Easter-based movable
feasts. Weekends are handled separately by ``is_weekend`` so a predicate only
has to describe holidays.
"""

from datetime import date, datetime, timedelta
from typing import Callable, Dict, Optional, Union

from loanlib.conventions.types import CalendarType

HolidayPredicate = Callable[[date], bool]
HolidaysLike = Union[str, CalendarType, HolidayPredicate]

# (month, day)
_FIXED_HOLIDAYS = frozenset(
    [
        (1, 1),  # New Year's Day
        (1, 6),  # Epiphany
        (5, 1),  # Labour Day
        (5, 3),  # Constitution Day
        (8, 15),  # Assumption of Mary
        (11, 1),  # All Saints' Day
        (11, 11),  # Independence Day
        (12, 25),  # Christmas Day
        (12, 26),  # Second Day of Christmas
    ]
)

# Days after Easter Sunday: Easter, Easter Monday, Pentecost, Corpus Christi
_EASTER_OFFSETS = (0, 1, 49, 60)


def _as_date(dt: Union[date, datetime]) -> date:
    return dt.date() if isinstance(dt, datetime) else dt


def is_weekend(dt: Union[date, datetime]) -> bool:
    """Saturday or Sunday (ISO weekday 6 or 7)."""
    return _as_date(dt).isoweekday() in (6, 7)


def easter_sunday(year: int) -> date:
    """Gregorian Easter Sunday (anonymous Meeus/Jones/Butcher algorithm)."""
    a = year % 19
    b, c = divmod(year, 100)
    d, e = divmod(b, 4)
    f = (b + 8) // 25
    g = (b - f + 1) // 3
    h = (19 * a + b - d - g + 15) % 30
    i, k = divmod(c, 4)
    l = (32 + 2 * e + 2 * i - h - k) % 7
    m = (a + 11 * h + 22 * l) // 451
    month, day = divmod(h + l - 7 * m + 114, 31)
    return date(year, month, day + 1)


def movable_holidays(year: int) -> Dict[str, date]:
    """Easter-based holidays for a year, keyed by name."""
    easter = easter_sunday(year)
    names = ("easter_sunday", "easter_monday", "pentecost", "corpus_christi")
    return {
        name: easter + timedelta(days=offset)
        for name, offset in zip(names, _EASTER_OFFSETS)
    }


def is_statutory_holiday(dt: Union[date, datetime]) -> bool:
    """True for Polish statutory days off (fixed and Easter-based)."""
    dt = _as_date(dt)
    if (dt.month, dt.day) in _FIXED_HOLIDAYS:
        return True
    offset = (dt - easter_sunday(dt.year)).days
    return offset in _EASTER_OFFSETS


def no_holidays(dt: Union[date, datetime]) -> bool:
    """Predicate for calendars that only close on weekends."""
    return False


class Calendar:
    """Named holiday calendar; instances are usable as holiday predicates."""

    def __init__(self, name: str, holiday_predicate: HolidayPredicate):
        self.name = name
        self._holiday_predicate = holiday_predicate

    def is_holiday(self, dt: Union[date, datetime]) -> bool:
        """Check if date is a holiday (weekends are not holidays by themselves)."""
        return bool(self._holiday_predicate(_as_date(dt)))

    def is_business_day(self, dt: Union[date, datetime]) -> bool:
        """Check if date is a business day (not weekend or holiday)."""
        return not is_weekend(dt) and not self.is_holiday(dt)

    def __call__(self, dt: Union[date, datetime]) -> bool:
        return self.is_holiday(dt)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"


# Pre-defined calendar instances
POLAND = Calendar(CalendarType.PL.value, is_statutory_holiday)
WEEKEND_ONLY = Calendar(CalendarType.WEEKEND.value, no_holidays)

# Calendar registry
CALENDARS: Dict[str, Calendar] = {
    CalendarType.PL.value: POLAND,
    CalendarType.WEEKEND.value: WEEKEND_ONLY,
}


def get_calendar(name: Union[str, CalendarType]) -> Calendar:
    """
    Get a calendar by name ("PL", "WEEKEND" or "PL_QUANTLIB").

    The QuantLib-backed calendar is imported on first use only.
    """
    key = name.value if isinstance(name, CalendarType) else name.upper()
    if key == CalendarType.PL_QUANTLIB.value:
        from loanlib.conventions.calendars_quantlib import POLAND_QUANTLIB

        return POLAND_QUANTLIB
    if key not in CALENDARS:
        available = list(CALENDARS.keys()) + [CalendarType.PL_QUANTLIB.value]
        raise ValueError(f"Unknown calendar: {name}. Available: {available}")
    return CALENDARS[key]


def resolve_holiday_predicate(holidays: Optional[HolidaysLike]) -> HolidayPredicate:
    """Accept a calendar name, a predicate, or None (Polish statutory holidays).

    Pass "WEEKEND" or ``WEEKEND_ONLY`` to skip weekends only.
    """
    if holidays is None:
        return POLAND
    if isinstance(holidays, (str, CalendarType)):
        return get_calendar(holidays)
    return holidays
