import os
import logging
from concurrent.futures import ThreadPoolExecutor
from datetime import date
from typing import Callable, List, Optional, Sequence

import requests
import streamlit as st

from services.records import FetchResult, ImageRecord

APOD_BASE = "https://api.nasa.gov/planetary/apod"
# Earliest APOD date is 1995-06-16
APOD_EARLIEST = date(1995, 6, 16)
REQUEST_TIMEOUT = 20

logger = logging.getLogger(__name__)

Fetcher = Callable[[str, str], FetchResult]


def get_api_key() -> str:
    # Fallback to DEMO_KEY if not set (very rate-limited)
    try:
        return st.secrets["api"]["nasa_apod_key"]
    except Exception:
        return os.environ.get("NASA_APOD_KEY", "DEMO_KEY")


def _failure_reason(exc: Exception) -> str:
    # requests puts the full URL (api_key included) in its messages
    if isinstance(exc, requests.HTTPError) and exc.response is not None:
        return f"HTTP {exc.response.status_code}"
    return type(exc).__name__


def fetch_apod_record(
    day: str,
    api_key: str,
    session: Optional[requests.Session] = None,
    timeout: float = REQUEST_TIMEOUT,
) -> FetchResult:
    """Fetch the APOD for one ISO date. Never raises; failures come back marked."""
    http = session or requests
    params = {"api_key": api_key, "date": day}
    logger.info("Fetching APOD for %s", day)
    try:
        r = http.get(APOD_BASE, params=params, timeout=timeout)
        r.raise_for_status()
        record = ImageRecord.from_payload(r.json())
    except (requests.RequestException, ValueError) as e:
        reason = _failure_reason(e)
        logger.warning("APOD fetch failed for %s: %s", day, reason)
        return FetchResult.failure(day, reason)
    return FetchResult.success(day, record)


def fetch_apod_batch(
    days: Sequence[str],
    api_key: str,
    fetch: Fetcher = fetch_apod_record,
) -> List[ImageRecord]:
    """Fetch every day concurrently and keep the successes in input order."""
    if not days:
        return []
    with ThreadPoolExecutor(max_workers=len(days)) as pool:
        futures = [pool.submit(fetch, d, api_key) for d in days]
        results = [f.result() for f in futures]
    records = [res.record for res in results if res.ok]
    logger.info("APOD batch: %d ok / %d requested", len(records), len(days))
    return records
