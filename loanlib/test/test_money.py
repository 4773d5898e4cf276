from decimal import Decimal

import pytest

from loanlib.utils.money import from_cents, mul_ratio, round_half_away, to_cents


@pytest.mark.parametrize(
    "value,expected",
    [(0.5, 1), (-0.5, -1), (2.5, 3), (-2.5, -3), (2.4999, 2), (7, 7), (Decimal("1.5"), 2)],
)
def test_round_half_away_from_zero(value, expected):
    assert round_half_away(value) == expected


def test_round_rejects_non_finite():
    with pytest.raises(ValueError):
        round_half_away(float("nan"))
    with pytest.raises(ValueError):
        round_half_away(float("inf"))


def test_to_cents_uses_shortest_decimal_repr():
    # 1.005 is 1.00499999... in binary; the decimal literal is what is meant
    assert to_cents(1.005) == 101
    assert to_cents(0.125) == 13
    assert to_cents(-0.125) == -13
    assert to_cents(1000) == 100000


def test_from_cents():
    assert from_cents(12345) == pytest.approx(123.45)
    assert from_cents(-1) == pytest.approx(-0.01)


def test_mul_ratio_rounds_product():
    assert mul_ratio(1000, 0.015) == 15
    assert mul_ratio(100000, 0.01) == 1000
    assert mul_ratio(333, 0.5) == 167


def test_round_beyond_default_decimal_precision():
    assert round_half_away(1e40) == 10**40
    assert round_half_away(Decimal("123456789012345678901234567890.5")) == (
        123456789012345678901234567891
    )
    assert to_cents(1e40) == 10**42
    assert to_cents(-2.5e30) == -(25 * 10**31)
