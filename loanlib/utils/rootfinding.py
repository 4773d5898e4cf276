"""Root-finding utilities (bracket expansion and bisection)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Tuple

import logging

logger = logging.getLogger(__name__)

Func = Callable[[float], float]


@dataclass
class RootResult:
    root: float
    iterations: int
    converged: bool
    method: str


class RootFindingError(RuntimeError):
    """Raised when root-finding fails."""


class BracketError(RootFindingError):
    """Raised when no sign change can be found between the bounds."""


def _no_sign_change(f_a: float, f_b: float) -> bool:
    # NaN compares false, so it never counts as a sign change
    return not (f_a * f_b <= 0.0)


def expand_upper_bracket(
    func: Func,
    lower: float,
    upper: float,
    *,
    factor: float = 2.0,
    max_expansions: int = 50,
) -> Tuple[float, float, float, float]:
    """Grow ``upper`` geometrically until ``func`` changes sign on [lower, upper].

    Returns (lower, upper, f(lower), f(upper)). The caller decides what to do
    when the last pair still has the same sign.
    """
    f_lower = func(lower)
    f_upper = func(upper)
    expansions = 0
    while _no_sign_change(f_lower, f_upper) and expansions < max_expansions:
        upper *= factor
        f_upper = func(upper)
        expansions += 1
    if expansions:
        logger.debug("Upper bound expanded %s times to %s", expansions, upper)
    return lower, upper, f_lower, f_upper


def bisect(
    func: Func,
    lower: float,
    upper: float,
    *,
    tol: float = 1e-10,
    max_iter: int = 200,
    max_expansions: int = 50,
) -> RootResult:
    """Bisection on ``func`` with upper-bound expansion.

    Stops when ``|func(mid)| < tol``. When the bracket can no longer be split
    in floating point, or ``max_iter`` is exhausted, the midpoint is returned
    as a best effort with ``converged`` set to False.

    Raises:
        BracketError: if no sign change is found after expansion
    """
    lower, upper, f_lower, f_upper = expand_upper_bracket(
        func, lower, upper, max_expansions=max_expansions
    )
    if f_lower == 0.0:
        return RootResult(lower, 0, True, "bisect")
    if f_upper == 0.0:
        return RootResult(upper, 0, True, "bisect")
    if _no_sign_change(f_lower, f_upper):
        raise BracketError(
            f"Root not bracketed: f({lower:.6g})={f_lower:.6e}, f({upper:.6g})={f_upper:.6e}"
        )

    for iteration in range(1, max_iter + 1):
        mid = 0.5 * (lower + upper)
        f_mid = func(mid)
        if abs(f_mid) < tol:
            return RootResult(mid, iteration, True, "bisect")
        if mid in (lower, upper):
            logger.debug(
                "Bracket collapsed at %s after %s iterations; |f|=%.3e not below tol=%.3e",
                mid,
                iteration,
                abs(f_mid),
                tol,
            )
            return RootResult(mid, iteration, False, "bisect")
        if f_lower * f_mid <= 0:
            upper, f_upper = mid, f_mid
        else:
            lower, f_lower = mid, f_mid

    mid = 0.5 * (lower + upper)
    logger.warning(
        "Bisection hit max_iter=%s; returning midpoint %s (bracket width %.3e)",
        max_iter,
        mid,
        upper - lower,
    )
    return RootResult(mid, max_iter, False, "bisect")
