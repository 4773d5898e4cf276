"""Data structures for cost-of-credit calculations."""

from dataclasses import dataclass


@dataclass(frozen=True)
class CashFlow:
    """A borrower-side cash flow.

    Attributes:
        offset_days: Calendar days since the disbursement date (t0)
        amount: Positive when received by the borrower, negative when paid
    """

    offset_days: int
    amount: float


@dataclass(frozen=True)
class RateResult:
    """Annualized rate solved from a cash-flow series.

    Attributes:
        rate: Annual rate as a fraction (0.1234 = 12.34%)
        iterations: Bisection steps taken
        converged: False when the iteration limit was hit or the bracket
            collapsed before the tolerance was met
    """

    rate: float
    iterations: int = 0
    converged: bool = True

    @property
    def rate_pct(self) -> float:
        """Annual rate as a percentage."""
        return self.rate * 100
