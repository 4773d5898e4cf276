"""Internal rate of return of a dated cash-flow series.

The rate is the annual, compounding-on-actual-days rate r solving

    NPV(r) = sum(amount_i / (1 + r) ** (offset_days_i / 365)) = 0

found by bisection starting from a wide bracket whose upper end is doubled
until the NPV changes sign.
"""

from __future__ import annotations

import logging
from typing import Sequence

import numpy as np

from loanlib.utils.rootfinding import BracketError, bisect

from .types import CashFlow, RateResult

logger = logging.getLogger(__name__)

_DAYS_PER_YEAR = 365.0


class RateNotBracketedError(BracketError):
    """Raised when NPV has the same sign at both (expanded) bounds."""


def npv(rate: float, flows: Sequence[CashFlow]) -> float:
    """Net present value of ``flows`` at an annual rate."""
    years = np.array([cf.offset_days for cf in flows], dtype=float) / _DAYS_PER_YEAR
    amounts = np.array([cf.amount for cf in flows], dtype=float)
    return _npv(rate, years, amounts)


def _npv(rate: float, years: np.ndarray, amounts: np.ndarray) -> float:
    # Very large trial rates overflow the discount base to inf; their
    # discounted flows are then zero, which is the correct limit.
    with np.errstate(over="ignore", divide="ignore", invalid="ignore"):
        return float(np.sum(amounts / np.power(1.0 + rate, years)))


def solve_irr(
    flows: Sequence[CashFlow],
    *,
    low: float = -0.9999,
    high: float = 10.0,
    tol: float = 1e-10,
    max_iter: int = 200,
) -> RateResult:
    """
    Solve the annual IRR of a cash-flow series by bisection.

    Args:
        flows: Borrower cash flows (see ``build_cash_flows``)
        low: Lower rate bound (fraction, must be > -1)
        high: Initial upper rate bound; doubled up to 50 times if needed
        tol: Absolute NPV tolerance
        max_iter: Maximum bisection steps; the midpoint is returned on exhaustion

    Returns:
        RateResult with the annual rate

    Raises:
        ValueError: if ``flows`` is empty or ``low <= -1``
        RateNotBracketedError: if NPV never changes sign between the bounds
    """
    if not flows:
        raise ValueError("flows must contain at least one cash flow")
    if low <= -1.0:
        raise ValueError("low must be greater than -100%")

    years = np.array([cf.offset_days for cf in flows], dtype=float) / _DAYS_PER_YEAR
    amounts = np.array([cf.amount for cf in flows], dtype=float)

    def objective(rate: float) -> float:
        return _npv(rate, years, amounts)

    try:
        result = bisect(objective, low, high, tol=tol, max_iter=max_iter)
    except BracketError as exc:
        logger.error("IRR solve failed: %s", exc)
        raise RateNotBracketedError(f"IRR not bracketed (NPV has same sign at bounds): {exc}") from exc

    logger.debug(
        "IRR %s solved after %s iterations (converged=%s)",
        result.root,
        result.iterations,
        result.converged,
    )
    return RateResult(rate=result.root, iterations=result.iterations, converged=result.converged)
