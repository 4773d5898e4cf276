"""
Base abstractions for reference-rate loading.

Defines the rate record, the source and cache interfaces, and the bundled
default used when nothing else is available.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Protocol, runtime_checkable


@dataclass(frozen=True)
class ReferenceRate:
    """
    Central bank reference rate.

    Attributes:
        rate_pct: Reference rate in percent (e.g., 5.75)
        as_of: Date the rate applies from, ISO string as published
        source: Where the value came from ("remote-json", "bundled-default", ...)
        fetched_at: When the value was fetched; None for bundled values
    """

    rate_pct: float
    as_of: str
    source: str
    fetched_at: Optional[datetime] = None


DEFAULT_REFERENCE_RATE = ReferenceRate(
    rate_pct=5.75,
    as_of="2026-02-07",
    source="bundled-default",
    fetched_at=None,
)


class ReferenceRateFetchError(RuntimeError):
    """Raised when a reference rate cannot be fetched or parsed."""


@runtime_checkable
class ReferenceRateSource(Protocol):
    """
    Protocol for reference-rate sources (HTTP, file, fixed value, ...).
    """

    def fetch(self) -> ReferenceRate:
        """
        Fetch the current reference rate.

        Returns:
            ReferenceRate

        Raises:
            ReferenceRateFetchError: If the rate cannot be obtained
        """
        ...


@runtime_checkable
class RateCache(Protocol):
    """
    Protocol for storing the last fetched reference rate.
    """

    def load(self) -> Optional[ReferenceRate]:
        """Return the cached rate, or None when nothing usable is stored."""
        ...

    def save(self, rate: ReferenceRate) -> None:
        """Store a rate, replacing any previous value."""
        ...
