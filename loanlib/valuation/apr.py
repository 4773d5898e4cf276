"""Annual percentage rate of charge (APR, Polish RRSO).

The APR is the internal rate of return of the borrower's cash flows: the net
disbursement (principal less commission) against every installment actually
paid, commission share included.
"""

from typing import Sequence

from loanlib.amortization.types import ScheduleRow
from loanlib.utils.date import DateLike

from .cashflows import build_cash_flows
from .solver import solve_irr
from .types import RateResult


def compute_apr_rrso(
    start_date: DateLike,
    principal: float,
    commission_pct: float,
    schedule: Sequence[ScheduleRow],
) -> RateResult:
    """APR (RRSO) of a schedule via IRR on its cash flows."""
    flows = build_cash_flows(start_date, principal, commission_pct, schedule)
    return solve_irr(flows)


def compute_esp(
    start_date: DateLike,
    principal: float,
    commission_pct: float,
    schedule: Sequence[ScheduleRow],
) -> RateResult:
    """Effective interest rate (ESP); defined identically to the APR."""
    return compute_apr_rrso(start_date, principal, commission_pct, schedule)
