"""
Basic types and enums used across the scheduling and amortization code.
"""

from enum import Enum


class AmortizationMethod(Enum):
    """Annuity schedule algorithms."""

    DAY_COUNT = "DAY_COUNT"  # ACT/365F interest, payment solved by bisection
    CLOSED_FORM = "CLOSED_FORM"  # constant monthly rate, closed-form annuity (legacy)


class CalendarType(Enum):
    """Predefined holiday calendars."""

    PL = "PL"
    WEEKEND = "WEEKEND"
    PL_QUANTLIB = "PL_QUANTLIB"
