"""
Reference-rate resolution: cache, then source, then bundled fallback.
"""

import logging
from datetime import datetime, timedelta
from typing import Callable, Optional

from .base import (
    DEFAULT_REFERENCE_RATE,
    RateCache,
    ReferenceRate,
    ReferenceRateFetchError,
    ReferenceRateSource,
)

logger = logging.getLogger(__name__)


def _is_fresh(
    rate: ReferenceRate,
    max_age: Optional[timedelta],
    clock: Optional[Callable[[], datetime]],
) -> bool:
    if max_age is None:
        return True
    if rate.fetched_at is None or clock is None:
        return False
    return clock() - rate.fetched_at <= max_age


def get_reference_rate(
    source: ReferenceRateSource,
    cache: Optional[RateCache] = None,
    *,
    clock: Optional[Callable[[], datetime]] = None,
    max_age: Optional[timedelta] = None,
    prefer_cache: bool = True,
    fallback: ReferenceRate = DEFAULT_REFERENCE_RATE,
) -> ReferenceRate:
    """
    Resolve the reference rate.

    Args:
        source: Where to fetch a fresh value
        cache: Optional cache consulted first and updated after a fetch
        clock: Current-time provider used to age cached values
        max_age: Oldest acceptable cached value; None accepts any cached value
        prefer_cache: Use a fresh cached value without fetching
        fallback: Returned when the fetch fails

    Returns:
        ReferenceRate; never raises for fetch failures or cache write errors
    """
    if prefer_cache and cache is not None:
        cached = cache.load()
        if cached is not None and _is_fresh(cached, max_age, clock):
            logger.debug("Using cached reference rate as of %s", cached.as_of)
            return cached

    try:
        rate = source.fetch()
    except ReferenceRateFetchError as exc:
        logger.warning(
            "Reference rate fetch failed, using %s (%.2f%% as of %s): %s",
            fallback.source,
            fallback.rate_pct,
            fallback.as_of,
            exc,
        )
        return fallback

    if cache is not None:
        try:
            cache.save(rate)
        except OSError as exc:
            logger.warning("Could not save reference rate to cache: %s", exc)
    return rate
