"""Shared fixtures for the loan engine tests."""

from datetime import date

import pytest

from loanlib.amortization.types import LoanInput


@pytest.fixture
def zero_cost_loan():
    """1000 over 10 installments, no interest, no commission."""
    return LoanInput(
        start_date=date(2026, 1, 1),
        principal=1000,
        nominal_rate_pct=0,
        commission_pct=0,
        installment_count=10,
    )


@pytest.fixture
def consumer_loan():
    """10000 over 60 installments at 9.25% with 2% commission."""
    return LoanInput(
        start_date=date(2026, 1, 1),
        principal=10000,
        nominal_rate_pct=9.25,
        commission_pct=2,
        installment_count=60,
    )
