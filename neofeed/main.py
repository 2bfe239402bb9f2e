import time
from fastapi import FastAPI, Depends, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from prometheus_client import (
    Counter,
    Histogram,
    generate_latest,
    CONTENT_TYPE_LATEST,
)
from .cache import FeedCache
from .config import LOG_FILE, LOG_LEVEL
from .logging_config import configure_logging
from .services import load_feed

configure_logging(LOG_LEVEL, LOG_FILE)

app = FastAPI(title="NEO Daily Feed")
app.add_middleware(CORSMiddleware, allow_origins=["*"])

# one cache for the life of the process
feed_cache = FeedCache()

# Prometheus metrics
REQUEST_COUNT = Counter(
    "http_requests_total",
    "Total HTTP requests",
    ["method", "endpoint", "http_status"],
)
REQUEST_LATENCY = Histogram(
    "http_request_latency_seconds",
    "HTTP request latency",
    ["method", "endpoint"],
)


def get_cache() -> FeedCache:
    return feed_cache


@app.middleware("http")
async def metrics_middleware(request: Request, call_next):
    method = request.method
    endpoint = request.url.path
    start_time = time.monotonic()
    response = await call_next(request)
    duration = time.monotonic() - start_time
    REQUEST_COUNT.labels(method=method, endpoint=endpoint, http_status=response.status_code).inc()
    REQUEST_LATENCY.labels(method=method, endpoint=endpoint).observe(duration)
    return response


# sync so the blocking NeoWs calls run in the threadpool
@app.get("/feed")
def get_feed(cache: FeedCache = Depends(get_cache)):
    return load_feed(cache).to_page_data()


@app.get("/health")
async def health(cache: FeedCache = Depends(get_cache)):
    return {"status": "ok", "cached_date": cache.date}


@app.get("/metrics")
async def metrics():
    return Response(generate_latest(), media_type=CONTENT_TYPE_LATEST)
