import pandas as pd
import pytest

from loanlib.amortization.annuity import compute_annuity_schedule
from loanlib.amortization.export import SCHEDULE_COLUMNS, schedule_to_frame, summarize_schedule


def test_schedule_to_frame(consumer_loan):
    rows = compute_annuity_schedule(consumer_loan)
    df = schedule_to_frame(rows)

    assert list(df.columns) == SCHEDULE_COLUMNS[1:]
    assert df.index.name == "index"
    assert list(df.index) == list(range(1, 61))
    assert pd.api.types.is_datetime64_any_dtype(df["due_date"])
    assert df.loc[1, "due_date"] == pd.Timestamp("2026-02-10")
    assert df.loc[1, "commission_part"] == pytest.approx(3.33)
    assert df["principal_part"].sum() == pytest.approx(10000.0)
    assert df.loc[60, "remaining_balance"] == 0.0


def test_summarize_schedule(consumer_loan):
    rows = compute_annuity_schedule(consumer_loan)
    summary = summarize_schedule(rows)

    assert summary.installment_count == 60
    assert summary.total_principal == 1_000_000
    assert summary.total_commission == 333 * 60
    assert summary.total_paid == sum(r.payment_total for r in rows)
    assert summary.total_interest > 0


def test_empty_schedule():
    df = schedule_to_frame([])
    assert df.empty
    assert summarize_schedule([]).total_paid == 0
