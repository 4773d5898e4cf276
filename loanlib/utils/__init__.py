from .date import DATE_FMT, date_to_str, days_between, to_date
from .money import (
    MoneyCents,
    add,
    from_cents,
    mul_ratio,
    round_half_away,
    sub,
    to_cents,
)

__all__ = [
    "DATE_FMT",
    "to_date",
    "date_to_str",
    "days_between",
    "MoneyCents",
    "to_cents",
    "from_cents",
    "add",
    "sub",
    "mul_ratio",
    "round_half_away",
]
