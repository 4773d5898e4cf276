from .calendars import (
    CALENDARS,
    POLAND,
    WEEKEND_ONLY,
    Calendar,
    HolidayPredicate,
    HolidaysLike,
    easter_sunday,
    get_calendar,
    is_statutory_holiday,
    is_weekend,
    movable_holidays,
    no_holidays,
    resolve_holiday_predicate,
)
from .daycount import (
    DEFAULT_DAY_COUNT,
    YearFractionFunc,
    get_day_count,
    period_year_fractions,
    register_day_count,
)
from .types import AmortizationMethod, CalendarType

__all__ = [
    "Calendar",
    "CALENDARS",
    "POLAND",
    "WEEKEND_ONLY",
    "HolidayPredicate",
    "HolidaysLike",
    "easter_sunday",
    "movable_holidays",
    "is_statutory_holiday",
    "is_weekend",
    "no_holidays",
    "get_calendar",
    "resolve_holiday_predicate",
    "DEFAULT_DAY_COUNT",
    "YearFractionFunc",
    "period_year_fractions",
    "get_day_count",
    "register_day_count",
    "AmortizationMethod",
    "CalendarType",
]
