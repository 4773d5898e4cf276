"""Consumer Loan Amortization and APR Engine.

This package computes equal-installment loan schedules on a monthly due-date
grid with Polish statutory holidays, and the annual percentage rate of charge
(RRSO) of the resulting cash flows.

Key modules:
- amortization: Annuity schedules in integer cents
- valuation: Cash flows, IRR solving, APR
- schedule: Due-date generation
- conventions: Holiday calendars, day counts, enums
- schema: Raw input validation and the legal rate cap
- data: Reference-rate loading
"""

from loanlib.amortization import (
    LoanInput,
    ScheduleRow,
    ScheduleSummary,
    compute_annuity_schedule,
    compute_schedule,
    schedule_to_frame,
    summarize_schedule,
)
from loanlib.conventions import AmortizationMethod, CalendarType, get_calendar
from loanlib.schedule import generate_due_dates
from loanlib.schema import LoanInputError, parse_loan_input, validate_loan_input
from loanlib.valuation import (
    CashFlow,
    RateNotBracketedError,
    RateResult,
    build_cash_flows,
    compute_apr_rrso,
    compute_esp,
    solve_irr,
)

__version__ = "1.0.0"

__all__ = [
    "__version__",
    "LoanInput",
    "ScheduleRow",
    "ScheduleSummary",
    "CashFlow",
    "RateResult",
    "AmortizationMethod",
    "CalendarType",
    "get_calendar",
    "generate_due_dates",
    "compute_schedule",
    "compute_annuity_schedule",
    "schedule_to_frame",
    "summarize_schedule",
    "build_cash_flows",
    "solve_irr",
    "compute_apr_rrso",
    "compute_esp",
    "validate_loan_input",
    "parse_loan_input",
    "LoanInputError",
    "RateNotBracketedError",
]
