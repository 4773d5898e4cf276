from .adjustments import day_in_month, month_index, shift_forward_to_working_day
from .generator import first_due_month, generate_due_dates

__all__ = [
    "shift_forward_to_working_day",
    "day_in_month",
    "month_index",
    "first_due_month",
    "generate_due_dates",
]
