import pytest

from neofeed.main import feed_cache

from neows_fakes import TODAY, FakeNeoWs
from neofeed import services
from neofeed.schemas import FeedResponse


@pytest.mark.asyncio
async def test_feed_returns_data(client, neows):
    resp = await client.get("/feed")
    assert resp.status_code == 200
    body = resp.json()
    assert set(body) == {"data"}
    day = next(iter(body["data"]["near_earth_objects"]))
    neos = body["data"]["near_earth_objects"][day]
    assert neos[0]["id"] == "test-neo-1"
    assert body["data"]["element_count"] == 7


@pytest.mark.asyncio
async def test_feed_cached_between_requests(client, neows):
    first = await client.get("/feed")
    calls = len(neows.calls)
    second = await client.get("/feed")
    assert len(neows.calls) == calls
    assert second.json() == first.json()


@pytest.mark.asyncio
async def test_feed_upstream_failure_is_empty(client, monkeypatch, feed_payload):
    monkeypatch.setattr(services.httpx, "get", FakeNeoWs(feed_payload, feed_status=503))
    resp = await client.get("/feed")
    assert resp.status_code == 200
    assert resp.json() == {}


@pytest.mark.asyncio
async def test_health_reports_cached_date(client):
    resp = await client.get("/health")
    assert resp.json() == {"status": "ok", "cached_date": None}

    feed_cache.store(TODAY, FeedResponse.model_validate({"element_count": 0, "near_earth_objects": {}}))
    resp = await client.get("/health")
    assert resp.json()["cached_date"] == TODAY


def test_entry_point_runs_app(monkeypatch):
    import uvicorn
    from neofeed import __main__ as entry

    seen = {}
    monkeypatch.setattr(uvicorn, "run", lambda app, host, port: seen.update(app=app, host=host, port=port))
    entry.main()
    assert seen == {"app": "neofeed.main:app", "host": entry.HOST, "port": entry.PORT}
