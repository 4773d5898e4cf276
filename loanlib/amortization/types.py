"""Data structures for amortization schedules.

Money fields of ``ScheduleRow`` and ``ScheduleSummary`` are integer cents.
"""

from dataclasses import dataclass
from datetime import date

from loanlib.utils.date import to_date
from loanlib.utils.money import MoneyCents


@dataclass(frozen=True)
class LoanInput:
    """Validated loan terms.

    Attributes:
        start_date: Disbursement date
        principal: Loan amount in currency units (> 0)
        nominal_rate_pct: Annual nominal interest rate in percent (8.5 = 8.5%)
        commission_pct: Upfront commission in percent of principal
        installment_count: Number of monthly installments
    """

    start_date: date
    principal: float
    nominal_rate_pct: float
    commission_pct: float
    installment_count: int

    def __post_init__(self):
        object.__setattr__(self, "start_date", to_date(self.start_date))


@dataclass(frozen=True)
class ScheduleRow:
    """A single installment of an amortization schedule.

    Attributes:
        index: Installment number (1-based)
        due_date: Payment date
        principal_part: Principal repaid by this installment
        interest_part: Interest accrued since the previous due date
        commission_part: Share of the upfront commission
        payment_total: Base payment plus commission share
        remaining_balance: Outstanding principal after this installment
    """

    index: int
    due_date: date
    principal_part: MoneyCents
    interest_part: MoneyCents
    commission_part: MoneyCents
    payment_total: MoneyCents
    remaining_balance: MoneyCents


@dataclass(frozen=True)
class ScheduleSummary:
    """Totals over a schedule."""

    installment_count: int
    total_principal: MoneyCents
    total_interest: MoneyCents
    total_commission: MoneyCents
    total_paid: MoneyCents
