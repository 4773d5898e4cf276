"""
Reference-rate data loading.

This package provides:
- ReferenceRate record and bundled default
- Source and cache interfaces
- HTTP JSON source, file and in-memory caches
- Cache-then-fetch-then-fallback resolution
"""

from .base import (
    DEFAULT_REFERENCE_RATE,
    RateCache,
    ReferenceRate,
    ReferenceRateFetchError,
    ReferenceRateSource,
)
from .loaders import (
    DEFAULT_REFERENCE_RATE_URL,
    HTTPReferenceRateSource,
    InMemoryRateCache,
    JSONFileRateCache,
    parse_reference_rate_payload,
)
from .provider import get_reference_rate

__all__ = [
    "ReferenceRate",
    "DEFAULT_REFERENCE_RATE",
    "DEFAULT_REFERENCE_RATE_URL",
    "ReferenceRateFetchError",
    "ReferenceRateSource",
    "RateCache",
    "HTTPReferenceRateSource",
    "JSONFileRateCache",
    "InMemoryRateCache",
    "parse_reference_rate_payload",
    "get_reference_rate",
]
