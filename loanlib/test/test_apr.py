"""APR (RRSO) of annuity schedules."""

from datetime import date

import pytest

from loanlib.amortization.annuity import compute_annuity_schedule
from loanlib.amortization.types import LoanInput
from loanlib.valuation.apr import compute_apr_rrso, compute_esp
from loanlib.valuation.cashflows import build_cash_flows, commission_amount

START = date(2026, 1, 1)


def _apr(principal, rate_pct, commission_pct, n):
    schedule = compute_annuity_schedule(LoanInput(START, principal, rate_pct, commission_pct, n))
    return compute_apr_rrso(START, principal, commission_pct, schedule)


def test_zero_cost_loan_has_zero_apr(zero_cost_loan):
    schedule = compute_annuity_schedule(zero_cost_loan)
    res = compute_apr_rrso(zero_cost_loan.start_date, 1000, 0, schedule)
    assert abs(res.rate_pct) < 1e-3


def test_commission_cost_reflected():
    res = _apr(10000, 0, 2, 12)
    assert 2 < res.rate_pct < 5


def test_apr_grows_with_commission():
    aprs = [_apr(10000, 0, pct, 12).rate_pct for pct in (0, 1, 2, 5)]
    assert aprs == sorted(aprs)
    assert len(set(aprs)) == len(aprs)


def test_mortgage_like_scenario():
    res = _apr(100000, 8.5, 1, 120)
    assert 8.5 < res.rate_pct < 10


def test_small_loan():
    res = _apr(500, 5, 1, 2)
    assert res.rate_pct > 5


def test_esp_equals_apr(consumer_loan):
    schedule = compute_annuity_schedule(consumer_loan)
    apr = compute_apr_rrso(START, 10000, 2, schedule)
    esp = compute_esp(START, 10000, 2, schedule)
    assert esp == apr


def test_build_cash_flows(consumer_loan):
    schedule = compute_annuity_schedule(consumer_loan)
    flows = build_cash_flows("2026-01-01", 10000, 2, schedule)

    assert len(flows) == 61
    assert flows[0].offset_days == 0
    assert flows[0].amount == pytest.approx(9800.0)
    assert flows[1].offset_days == 40
    assert flows[1].amount == pytest.approx(-schedule[0].payment_total / 100)
    assert all(f.amount < 0 for f in flows[1:])


def test_commission_amount():
    assert commission_amount(10000, 2) == pytest.approx(200.0)
