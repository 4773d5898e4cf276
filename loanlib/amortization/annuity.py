"""Equal-installment annuity schedule with day-count interest.

Interest for each period accrues on the outstanding balance over the actual
days between due dates (ACT/365F by default) and is rounded to cents. The
constant base payment is not computed from a closed formula: it is the
smallest whole-cent amount that, simulated installment by installment with the
same rounding, pays the balance down to zero or below. The simulated ending
balance is non-increasing in the payment, so an integer bisection finds it.
"""

from __future__ import annotations

import logging
from datetime import date
from typing import Callable, List, Optional, Sequence

from loanlib.conventions.calendars import HolidaysLike
from loanlib.conventions.daycount import DEFAULT_DAY_COUNT, period_year_fractions
from loanlib.schedule.generator import generate_due_dates
from loanlib.utils.money import (
    MoneyCents,
    from_cents,
    round_half_away,
    sub,
    to_cents,
)

from .types import LoanInput, ScheduleRow

logger = logging.getLogger(__name__)

InterestFunc = Callable[[MoneyCents, int], MoneyCents]

_MAX_UPPER_EXPANSIONS = 64


def annual_rate(nominal_rate_pct: float) -> float:
    """Percent -> fraction."""
    return nominal_rate_pct / 100


def commission_total_cents(principal: float, commission_pct: float) -> MoneyCents:
    return to_cents(commission_pct / 100 * principal)


def commission_share_cents(principal: float, commission_pct: float, n: int) -> MoneyCents:
    """Per-installment commission, rounded; the remainder is not redistributed."""
    return round_half_away(commission_total_cents(principal, commission_pct) / n)


def interest_for_period_cents(
    balance_cents: MoneyCents, rate: float, year_fraction: float
) -> MoneyCents:
    if rate == 0:
        return 0
    return to_cents(from_cents(balance_cents) * rate * year_fraction)


def simulate_end_balance_cents(
    principal_cents: MoneyCents,
    rate: float,
    year_fractions: Sequence[float],
    payment_cents: MoneyCents,
) -> MoneyCents:
    """Balance left after paying ``payment_cents`` every period."""
    balance = principal_cents
    for fraction in year_fractions:
        interest = interest_for_period_cents(balance, rate, fraction)
        balance = sub(balance, payment_cents - interest)
    return balance


def solve_base_payment_cents(
    principal_cents: MoneyCents, rate: float, year_fractions: Sequence[float]
) -> MoneyCents:
    """Smallest constant payment whose simulated ending balance is <= 0."""

    def end_balance(payment: MoneyCents) -> MoneyCents:
        return simulate_end_balance_cents(principal_cents, rate, year_fractions, payment)

    low, high = 0, 2 * principal_cents
    for _ in range(_MAX_UPPER_EXPANSIONS):
        if end_balance(high) <= 0:
            break
        logger.debug("Payment upper bound %s too small; doubling", high)
        high *= 2

    iterations = 0
    while low < high:
        mid = (low + high) // 2
        if end_balance(mid) > 0:
            low = mid + 1
        else:
            high = mid
        iterations += 1

    logger.debug("Base payment %s cents solved in %s bisection steps", low, iterations)
    return low


def materialize_rows(
    principal_cents: MoneyCents,
    base_payment_cents: MoneyCents,
    commission_share: MoneyCents,
    due_dates: Sequence[date],
    interest_for: InterestFunc,
) -> List[ScheduleRow]:
    """Build schedule rows for a constant base payment.

    ``interest_for(balance, period_idx)`` returns the interest of a period.
    The last installment repays whatever balance is left, and no installment
    repays more principal than is outstanding.
    """
    n = len(due_dates)
    rows: List[ScheduleRow] = []
    balance = principal_cents

    for i, due in enumerate(due_dates, start=1):
        interest = interest_for(balance, i - 1)
        principal_part = sub(base_payment_cents, interest)

        if i == n:
            principal_part = balance
        if principal_part > balance:
            principal_part = balance

        balance = sub(balance, principal_part)
        rows.append(
            ScheduleRow(
                index=i,
                due_date=due,
                principal_part=principal_part,
                interest_part=interest,
                commission_part=commission_share,
                payment_total=base_payment_cents + commission_share,
                remaining_balance=balance,
            )
        )

    return rows


def compute_annuity_schedule(
    loan: LoanInput,
    *,
    holiday_predicate: Optional[HolidaysLike] = None,
    day_count: str = DEFAULT_DAY_COUNT,
) -> List[ScheduleRow]:
    """
    Compute an equal-installment schedule with day-count interest.

    Args:
        loan: Loan terms
        holiday_predicate: Holidays to skip when shifting due dates (None = Polish statutory holidays)
        day_count: Day-count convention for period interest

    Returns:
        One row per installment; empty when ``installment_count <= 0``
    """
    n = loan.installment_count
    if n <= 0:
        return []

    principal_cents = to_cents(loan.principal)
    rate = annual_rate(loan.nominal_rate_pct)
    commission_share = commission_share_cents(loan.principal, loan.commission_pct, n)

    due_dates = generate_due_dates(loan.start_date, n, holiday_predicate=holiday_predicate)
    fractions = period_year_fractions(loan.start_date, due_dates, day_count)

    base_payment = solve_base_payment_cents(principal_cents, rate, fractions)

    def interest_for(balance: MoneyCents, period_idx: int) -> MoneyCents:
        return interest_for_period_cents(balance, rate, fractions[period_idx])

    return materialize_rows(principal_cents, base_payment, commission_share, due_dates, interest_for)
