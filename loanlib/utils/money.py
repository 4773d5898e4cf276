"""Fixed-point money helpers.

All schedule arithmetic runs on signed integer cents. Every conversion from a
decimal amount rounds exactly once, half away from zero, so a schedule is
reproducible bit-for-bit from the same inputs.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, localcontext

MoneyCents = int

_CENTS_PER_UNIT = 100
_ONE = Decimal(1)
_MIN_PRECISION = 28


def _exact_precision(dec: Decimal) -> int:
    """Context precision that holds ``dec * 100`` and its integer part exactly."""
    return max(_MIN_PRECISION, dec.adjusted() + 5, len(dec.as_tuple().digits) + 5)


def _to_decimal(value: float | Decimal) -> Decimal:
    dec = value if isinstance(value, Decimal) else Decimal(repr(float(value)))
    if not dec.is_finite():
        raise ValueError(f"Cannot round non-finite value: {value!r}")
    return dec


def round_half_away(value: float | int | Decimal) -> int:
    """Round to the nearest integer, ties away from zero.

    Floats go through their shortest repr so that e.g. 100.5 rounds to 101
    rather than inheriting binary representation noise. Magnitudes beyond the
    default 28 significant digits are rounded exactly as well.
    """
    if isinstance(value, int):
        return value
    dec = _to_decimal(value)
    with localcontext() as ctx:
        ctx.prec = _exact_precision(dec)
        return int(dec.quantize(_ONE, rounding=ROUND_HALF_UP))


def to_cents(amount: float | int | Decimal) -> MoneyCents:
    """Decimal amount -> integer cents (half away from zero)."""
    if isinstance(amount, int):
        return amount * _CENTS_PER_UNIT
    dec = _to_decimal(amount)
    with localcontext() as ctx:
        ctx.prec = _exact_precision(dec)
        scaled = dec * _CENTS_PER_UNIT
    return round_half_away(scaled)


def from_cents(cents: MoneyCents) -> float:
    """Integer cents -> decimal amount."""
    return cents / _CENTS_PER_UNIT


def add(a: MoneyCents, b: MoneyCents) -> MoneyCents:
    return a + b


def sub(a: MoneyCents, b: MoneyCents) -> MoneyCents:
    return a - b


def mul_ratio(cents: MoneyCents, ratio: float) -> MoneyCents:
    """Scale an amount by a ratio, rounding the product to whole cents."""
    return round_half_away(cents * ratio)
