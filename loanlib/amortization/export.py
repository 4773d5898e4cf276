"""Tabular views of a schedule."""

from __future__ import annotations

from typing import Sequence

import pandas as pd

from loanlib.utils.money import from_cents

from .types import ScheduleRow, ScheduleSummary

SCHEDULE_COLUMNS = [
    "index",
    "due_date",
    "principal_part",
    "interest_part",
    "commission_part",
    "payment_total",
    "remaining_balance",
]

_MONEY_COLUMNS = SCHEDULE_COLUMNS[2:]


def schedule_to_frame(rows: Sequence[ScheduleRow]) -> pd.DataFrame:
    """Return the schedule as a DataFrame indexed by installment number.

    Money columns are converted from cents to currency units and due dates to
    ``Timestamp``.
    """
    df = pd.DataFrame(
        [
            (
                r.index,
                r.due_date,
                r.principal_part,
                r.interest_part,
                r.commission_part,
                r.payment_total,
                r.remaining_balance,
            )
            for r in rows
        ],
        columns=SCHEDULE_COLUMNS,
    )
    df["due_date"] = pd.to_datetime(df["due_date"])
    for col in _MONEY_COLUMNS:
        df[col] = df[col].map(from_cents).astype(float)
    return df.set_index("index")


def summarize_schedule(rows: Sequence[ScheduleRow]) -> ScheduleSummary:
    """Sum principal, interest, commission and payments over all rows."""
    return ScheduleSummary(
        installment_count=len(rows),
        total_principal=sum(r.principal_part for r in rows),
        total_interest=sum(r.interest_part for r in rows),
        total_commission=sum(r.commission_part for r in rows),
        total_paid=sum(r.payment_total for r in rows),
    )
