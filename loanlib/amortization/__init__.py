"""Amortization schedules.

Two algorithms are available through ``compute_schedule``:
- DAY_COUNT: ACT/365F interest on actual days, payment solved by bisection
- CLOSED_FORM: constant monthly rate, closed-form annuity payment (legacy)
"""

from .annuity import compute_annuity_schedule, solve_base_payment_cents
from .closed_form import annuity_payment_cents, compute_closed_form_schedule
from .export import schedule_to_frame, summarize_schedule
from .schedule import compute_schedule
from .types import LoanInput, ScheduleRow, ScheduleSummary

__all__ = [
    # Types
    "LoanInput",
    "ScheduleRow",
    "ScheduleSummary",
    # Schedules
    "compute_schedule",
    "compute_annuity_schedule",
    "compute_closed_form_schedule",
    "solve_base_payment_cents",
    "annuity_payment_cents",
    # Export
    "schedule_to_frame",
    "summarize_schedule",
]
