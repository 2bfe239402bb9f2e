import os
from datetime import datetime, timezone
from typing import List, Optional

import httpx
from prometheus_client import Counter, Gauge

from .cache import FeedCache
from .config import HTTP_TIMEOUT, NASA_API_KEY, NEO_API_BASE
from .logging_config import get_logger
from .schemas import FeedResponse, LoadOutcome, LoadResult, NearEarthObject, NeoDetail
from .synthetic import inject_test_neos

logger = get_logger(__name__)

NEOWS_REQUESTS = Counter(
    "neows_requests_total",
    "Requests sent to the NeoWs API",
    ["endpoint", "http_status"],
)
NEOWS_RATE_LIMIT_REMAINING = Gauge(
    "neows_rate_limit_remaining",
    "Last X-RateLimit-Remaining reported by NeoWs",
)
FEED_LOADS = Counter(
    "feed_loads_total",
    "Feed loads by outcome",
    ["outcome"],
)


def _api_key() -> str:
    return os.getenv("NASA_API_KEY", NASA_API_KEY)


def _api_base() -> str:
    return os.getenv("NEO_API_BASE", NEO_API_BASE).rstrip("/")


def log_rate_limit(resp: httpx.Response, label: str) -> None:
    """Log the rate-limit headers of a NeoWs response. Informational only."""
    limit = resp.headers.get("X-RateLimit-Limit")
    remaining = resp.headers.get("X-RateLimit-Remaining")
    logger.info("NASA API Rate Limit (%s) - Total: %s, Remaining: %s", label, limit, remaining)
    if remaining is not None:
        try:
            NEOWS_RATE_LIMIT_REMAINING.set(float(remaining))
        except ValueError:
            pass


def fetch_feed(day: str) -> httpx.Response:
    """GET the one-day feed for ``day`` (``YYYY-MM-DD``)."""
    params = {
        "start_date": day,
        "end_date": day,
        "api_key": _api_key(),
    }
    resp = httpx.get(f"{_api_base()}/feed", params=params, timeout=HTTP_TIMEOUT)
    NEOWS_REQUESTS.labels(endpoint="feed", http_status=resp.status_code).inc()
    log_rate_limit(resp, "feed")
    return resp


def fetch_neo_detail(neo_id: str) -> httpx.Response:
    resp = httpx.get(
        f"{_api_base()}/neo/{neo_id}",
        params={"api_key": _api_key()},
        timeout=HTTP_TIMEOUT,
    )
    NEOWS_REQUESTS.labels(endpoint="neo", http_status=resp.status_code).inc()
    log_rate_limit(resp, f"NEO detail {neo_id}")
    return resp


def enrich_neos(neos: List[NearEarthObject]) -> int:
    """Fill ``orbital_data`` on each NEO from its detail record, in order.

    Objects whose lookup is not successful are left as they are. Any other
    error propagates and stops the loop; objects already handled keep their
    orbit. Returns the number of objects enriched.
    """
    enriched = 0
    for neo in neos:
        resp = fetch_neo_detail(neo.id)
        if not resp.is_success:
            continue
        detail = NeoDetail.model_validate(resp.json())
        neo.orbital_data = detail.orbital_data
        enriched += 1
    return enriched


def _finish(outcome: LoadOutcome, data: Optional[FeedResponse] = None) -> LoadResult:
    FEED_LOADS.labels(outcome=outcome.value).inc()
    return LoadResult(outcome=outcome, data=data)


def load_feed(cache: FeedCache, now: Optional[datetime] = None) -> LoadResult:
    """Return today's feed, from ``cache`` if it already holds it.

    On a miss the feed is fetched, the test NEOs are prepended, the result is
    cached and then enriched with orbital data. Errors never escape: a failed
    fetch gives an empty result, a failure during enrichment gives whatever
    was enriched so far.
    """
    if now is None:
        now = datetime.now(timezone.utc)
    today = now.astimezone(timezone.utc).strftime("%Y-%m-%d")

    cached = cache.get(today)
    if cached is not None:
        return _finish(LoadOutcome.CACHED, cached)

    try:
        resp = fetch_feed(today)
        if not resp.is_success:
            logger.warning("Feed request for %s failed with HTTP %s", today, resp.status_code)
            return _finish(LoadOutcome.UPSTREAM_ERROR)

        data = FeedResponse.model_validate(resp.json())
        inject_test_neos(data, now, day=today)
        cache.store(today, data)
    except Exception:
        logger.warning("Feed load for %s failed", today, exc_info=True)
        return _finish(LoadOutcome.FAILED)

    # only the first date is enriched; a one-day feed has no other
    key = data.first_date_key()
    neos = data.near_earth_objects.get(key, []) if key else []
    try:
        enriched = enrich_neos(neos)
    except Exception:
        logger.warning("Enrichment for %s stopped early", today, exc_info=True)
        return _finish(LoadOutcome.PARTIAL, data)

    logger.info("Feed for %s cached with %d of %d objects enriched", today, enriched, len(neos))
    return _finish(LoadOutcome.FETCHED, data)
