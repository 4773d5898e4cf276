"""
Concrete reference-rate sources and caches.

Provides an HTTP JSON source plus file-backed and in-memory caches.
"""

import json
import logging
import math
import os
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Callable, Dict, Optional

import requests

from .base import ReferenceRate, ReferenceRateFetchError

logger = logging.getLogger(__name__)

DEFAULT_REFERENCE_RATE_URL = (
    "https://raw.githubusercontent.com/MarcinWorkDev/credit-calculator-vibed/"
    "main/public/nbp-reference-rate.json"
)
_DEFAULT_TIMEOUT = 10.0
_DEFAULT_CACHE_FILE = "reference-rate.json"
_DEFAULT_SOURCE_LABEL = "remote-json"


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def parse_reference_rate_payload(
    payload: Any, fetched_at: Optional[datetime] = None
) -> ReferenceRate:
    """
    Validate a reference-rate JSON payload.

    Expected shape: ``{"ratePct": number, "asOf": str, "source"?: str}``.

    Args:
        payload: Decoded JSON value
        fetched_at: Fetch timestamp to stamp on the result

    Returns:
        ReferenceRate

    Raises:
        ReferenceRateFetchError: If the payload does not match the shape
    """
    if not isinstance(payload, dict):
        raise ReferenceRateFetchError("Reference rate payload must be a JSON object")

    rate_pct = payload.get("ratePct")
    if isinstance(rate_pct, bool) or not isinstance(rate_pct, (int, float)):
        raise ReferenceRateFetchError("ratePct must be a number")
    if not math.isfinite(rate_pct):
        raise ReferenceRateFetchError("ratePct must be finite")

    as_of = payload.get("asOf")
    if not isinstance(as_of, str) or not as_of:
        raise ReferenceRateFetchError("asOf must be a non-empty string")

    source = payload.get("source")
    if source is None:
        source = _DEFAULT_SOURCE_LABEL
    elif not isinstance(source, str) or not source:
        raise ReferenceRateFetchError("source must be a non-empty string when present")

    return ReferenceRate(
        rate_pct=float(rate_pct), as_of=as_of, source=source, fetched_at=fetched_at
    )


class HTTPReferenceRateSource:
    """
    Fetch the reference rate from a small JSON document over HTTP.
    """

    def __init__(
        self,
        url: Optional[str] = None,
        timeout: float = _DEFAULT_TIMEOUT,
        session: Optional[requests.Session] = None,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        """
        Initialize HTTP source.

        Args:
            url: Document URL (defaults to env var LOANLIB_REFERENCE_RATE_URL)
            timeout: Request timeout in seconds
            session: Optional requests session (a module-level get is used otherwise)
            clock: Timestamp provider for ``fetched_at`` (defaults to UTC now)
        """
        self.url = url or os.getenv("LOANLIB_REFERENCE_RATE_URL", DEFAULT_REFERENCE_RATE_URL)
        self.timeout = timeout
        self._session = session
        self._clock = clock or _utc_now

    def _get(self) -> requests.Response:
        getter = self._session.get if self._session is not None else requests.get
        return getter(
            self.url,
            timeout=self.timeout,
            headers={"Cache-Control": "no-store", "Accept": "application/json"},
        )

    def fetch(self) -> ReferenceRate:
        try:
            response = self._get()
        except requests.RequestException as exc:
            raise ReferenceRateFetchError(f"Reference rate fetch failed: {exc}") from exc

        if not response.ok:
            raise ReferenceRateFetchError(
                f"Reference rate fetch failed: {response.status_code}"
            )

        try:
            payload = response.json()
        except ValueError as exc:
            raise ReferenceRateFetchError("Reference rate response is not valid JSON") from exc

        rate = parse_reference_rate_payload(payload, fetched_at=self._clock())
        logger.debug("Fetched reference rate %.4f%% as of %s from %s", rate.rate_pct, rate.as_of, self.url)
        return rate


def _rate_to_record(rate: ReferenceRate) -> Dict[str, Any]:
    return {
        "ratePct": rate.rate_pct,
        "asOf": rate.as_of,
        "source": rate.source,
        "fetchedAt": rate.fetched_at.isoformat() if rate.fetched_at else None,
    }


def _record_to_rate(record: Any) -> Optional[ReferenceRate]:
    if not isinstance(record, dict):
        return None
    rate_pct = record.get("ratePct")
    as_of = record.get("asOf")
    source = record.get("source")
    fetched_at = record.get("fetchedAt")
    if isinstance(rate_pct, bool) or not isinstance(rate_pct, (int, float)):
        return None
    if not isinstance(as_of, str) or not isinstance(source, str):
        return None
    if fetched_at is not None:
        if not isinstance(fetched_at, str):
            return None
        try:
            fetched_at = datetime.fromisoformat(fetched_at)
        except ValueError:
            return None
    return ReferenceRate(
        rate_pct=float(rate_pct), as_of=as_of, source=source, fetched_at=fetched_at
    )


class JSONFileRateCache:
    """
    Keep the last fetched rate in a JSON file.

    An unreadable or malformed file is treated as an empty cache.
    """

    def __init__(self, path: Optional[Path] = None):
        """
        Initialize file cache.

        Args:
            path: Cache file (defaults to reference-rate.json under env var
                LOANLIB_CACHE_DIR, or the user's ~/.cache/loanlib)
        """
        if path is None:
            cache_dir = os.getenv("LOANLIB_CACHE_DIR") or str(Path.home() / ".cache" / "loanlib")
            path = Path(cache_dir) / _DEFAULT_CACHE_FILE
        self.path = Path(path)

    def load(self) -> Optional[ReferenceRate]:
        if not self.path.exists():
            return None
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                record = json.load(f)
        except (OSError, ValueError) as exc:
            logger.warning("Ignoring unreadable reference rate cache %s: %s", self.path, exc)
            return None
        return _record_to_rate(record)

    def save(self, rate: ReferenceRate) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump(_rate_to_record(rate), f)


class InMemoryRateCache:
    """Process-local cache, mostly for tests and short-lived scripts."""

    def __init__(self, rate: Optional[ReferenceRate] = None):
        self._rate = rate

    def load(self) -> Optional[ReferenceRate]:
        return self._rate

    def save(self, rate: ReferenceRate) -> None:
        self._rate = rate
