"""Closed-form annuity with a constant monthly rate (legacy mode).

Every period accrues one twelfth of the annual rate regardless of the actual
number of days between due dates. Kept alongside the day-count schedule for
callers that need the older figures; the two are never mixed.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from loanlib.conventions.calendars import HolidaysLike
from loanlib.schedule.generator import generate_due_dates
from loanlib.utils.money import MoneyCents, mul_ratio, round_half_away, to_cents

from .annuity import annual_rate, commission_share_cents, materialize_rows
from .types import LoanInput, ScheduleRow

logger = logging.getLogger(__name__)

_MONTHS_PER_YEAR = 12


def annuity_payment_cents(principal_cents: MoneyCents, monthly_rate: float, n: int) -> MoneyCents:
    """Level payment P*r / (1 - (1 + r)^-n), rounded to cents (P / n at zero rate)."""
    if n <= 0:
        raise ValueError("n must be positive")
    if monthly_rate == 0:
        return round_half_away(principal_cents / n)
    return mul_ratio(principal_cents, monthly_rate / (1.0 - (1.0 + monthly_rate) ** (-n)))


def compute_closed_form_schedule(
    loan: LoanInput,
    *,
    holiday_predicate: Optional[HolidaysLike] = None,
) -> List[ScheduleRow]:
    """Equal-installment schedule using the closed-form annuity payment."""
    n = loan.installment_count
    if n <= 0:
        return []

    principal_cents = to_cents(loan.principal)
    monthly_rate = annual_rate(loan.nominal_rate_pct) / _MONTHS_PER_YEAR
    commission_share = commission_share_cents(loan.principal, loan.commission_pct, n)
    due_dates = generate_due_dates(loan.start_date, n, holiday_predicate=holiday_predicate)

    base_payment = annuity_payment_cents(principal_cents, monthly_rate, n)
    logger.debug("Closed-form base payment %s cents at monthly rate %s", base_payment, monthly_rate)

    def interest_for(balance: MoneyCents, period_idx: int) -> MoneyCents:
        return mul_ratio(balance, monthly_rate)

    return materialize_rows(principal_cents, base_payment, commission_share, due_dates, interest_for)
