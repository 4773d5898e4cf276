"""
Statutory cap on the nominal interest rate.

The maximum nominal rate is the central bank reference rate plus a fixed
margin. The reference rate itself is resolved by ``loanlib.data``; this
module only compares numbers.
"""

from typing import Dict

MAX_RATE_MARGIN_PCT = 3.5


def max_nominal_rate_pct(reference_rate_pct: float) -> float:
    """Highest nominal rate allowed for a given reference rate (percent)."""
    return reference_rate_pct + MAX_RATE_MARGIN_PCT


def check_nominal_rate_cap(nominal_rate_pct: float, reference_rate_pct: float) -> Dict[str, str]:
    """
    Check a nominal rate against the cap.

    Returns:
        Empty dict when the rate is at or below the cap, otherwise an error
        message keyed by the ``nominal_rate_pct`` field
    """
    cap = max_nominal_rate_pct(reference_rate_pct)
    if nominal_rate_pct > cap:
        return {"nominal_rate_pct": f"Nominal rate exceeds legal cap ({cap:.2f}%)"}
    return {}
