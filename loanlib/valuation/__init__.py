"""Cost-of-credit valuation.

This package provides:
- Borrower cash-flow construction from a schedule
- IRR solving by bisection
- APR (RRSO) and effective rate (ESP)
"""

from .apr import compute_apr_rrso, compute_esp
from .cashflows import build_cash_flows, commission_amount
from .solver import RateNotBracketedError, npv, solve_irr
from .types import CashFlow, RateResult

__all__ = [
    # Types
    "CashFlow",
    "RateResult",
    # Main functions
    "build_cash_flows",
    "commission_amount",
    "npv",
    "solve_irr",
    "compute_apr_rrso",
    "compute_esp",
    # Exceptions
    "RateNotBracketedError",
]
