"""Borrower cash flows for cost-of-credit calculations."""

from __future__ import annotations

from typing import List, Sequence

from loanlib.amortization.types import ScheduleRow
from loanlib.utils.date import DateLike, to_date
from loanlib.utils.money import from_cents

from .types import CashFlow


def commission_amount(principal: float, commission_pct: float) -> float:
    """Upfront commission in currency units."""
    return commission_pct / 100 * principal


def build_cash_flows(
    start_date: DateLike,
    principal: float,
    commission_pct: float,
    schedule: Sequence[ScheduleRow],
) -> List[CashFlow]:
    """Return the borrower's cash flows: net disbursement, then every installment.

    The disbursement at t0 is the principal less the commission (received,
    positive); each installment's total payment is an outflow (negative) at
    the number of days from the start date to its due date.
    """
    start = to_date(start_date)
    flows: List[CashFlow] = [CashFlow(0, principal - commission_amount(principal, commission_pct))]
    for row in schedule:
        flows.append(CashFlow((row.due_date - start).days, -from_cents(row.payment_total)))
    return flows
