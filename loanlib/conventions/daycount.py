"""Year fractions for installment interest.

Interest on a loan balance accrues over the actual days between consecutive
due dates. ACT/365F is the default basis; ACT/360 is available for lenders
quoting on a 360-day year.
"""

import logging
from datetime import date
from typing import Callable, Dict, List, Sequence

logger = logging.getLogger(__name__)

YearFractionFunc = Callable[[date, date], float]

DEFAULT_DAY_COUNT = "ACT/365F"


def _actual_over(basis: int) -> YearFractionFunc:
    def year_fraction(start: date, end: date) -> float:
        if end < start:
            logger.debug("Period %s -> %s runs backwards; using absolute days", start, end)
        return abs((end - start).days) / basis

    year_fraction.__name__ = f"act_{basis}"
    return year_fraction


_CONVENTIONS: Dict[str, YearFractionFunc] = {
    "ACT/365F": _actual_over(365),
    "ACT/365": _actual_over(365),
    "ACT/360": _actual_over(360),
}


def get_day_count(name: str = DEFAULT_DAY_COUNT) -> YearFractionFunc:
    """Year-fraction function for a convention name (case-insensitive)."""
    func = _CONVENTIONS.get(name.upper())
    if func is None:
        raise ValueError(f"Unknown day count: {name}. Available: {sorted(_CONVENTIONS)}")
    return func


def register_day_count(name: str, func: YearFractionFunc, *, overwrite: bool = False) -> None:
    """
    Add a day-count convention.

    Args:
        name: Convention name, stored upper-case
        func: ``(start, end) -> year fraction``
        overwrite: Replace an existing convention of the same name

    Raises:
        ValueError: If the name is taken and ``overwrite`` is False
    """
    key = name.upper()
    if key in _CONVENTIONS and not overwrite:
        raise ValueError(f"Day count {name!r} is already registered")
    _CONVENTIONS[key] = func


def period_year_fractions(
    start_date: date, due_dates: Sequence[date], day_count: str = DEFAULT_DAY_COUNT
) -> List[float]:
    """Year fraction of each installment period; the first runs from the start date."""
    year_fraction = get_day_count(day_count)
    bounds = [start_date, *due_dates]
    return [year_fraction(a, b) for a, b in zip(bounds, bounds[1:])]
