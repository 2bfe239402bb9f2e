import pytest
from httpx import AsyncClient, ASGITransport
from neofeed.main import app, feed_cache
from neofeed import services
from neows_fakes import TODAY, FakeNeoWs, make_neo


import pytest_asyncio

@pytest.fixture
def feed_payload():
    return {
        "links": {"self": "http://api.nasa.gov/neo/rest/v1/feed?start_date=2025-06-01&end_date=2025-06-01"},
        "element_count": 5,
        "near_earth_objects": {TODAY: [make_neo(i) for i in ["a", "b", "c", "d", "e"]]},
    }


@pytest.fixture
def neows(monkeypatch, feed_payload):
    fake = FakeNeoWs(feed_payload)
    monkeypatch.setattr(services.httpx, "get", fake)
    return fake


@pytest_asyncio.fixture
async def client():
    feed_cache.clear()
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    feed_cache.clear()
