from datetime import datetime, timezone

from neofeed import synthetic
from neofeed.schemas import FeedResponse

from neows_fakes import make_neo

NOW = datetime(2025, 12, 31, 23, 58, 30, tzinfo=timezone.utc)


def test_approach_time_format():
    moment = datetime(2025, 3, 7, 4, 5, 59, tzinfo=timezone.utc)
    assert synthetic.format_approach_time(moment) == "2025-Mar-07 04:05"


def test_test_neos_cross_midnight():
    neos = synthetic.build_test_neos(NOW)
    approaches = [n.close_approach_data[0] for n in neos]
    assert [a.close_approach_date_full for a in approaches] == [
        "2025-Dec-31 23:59",
        "2026-Jan-01 00:00",
        "2026-Jan-01 00:02",
    ]
    assert [a.close_approach_date for a in approaches] == ["2025-Dec-31", "2026-Jan-01", "2026-Jan-01"]
    assert all(a.orbiting_body == "Earth" for a in approaches)


def test_test_neos_are_complete():
    neos = synthetic.build_test_neos(NOW)
    assert [n.name for n in neos] == ["Test NEO", "Test NEO 2", "Test NEO 3"]
    assert [n.is_potentially_hazardous_asteroid for n in neos] == [True, False, False]
    assert not any(n.is_sentry_object for n in neos)
    assert neos[0].orbital_data.orbit_id == "test-orbit"
    assert neos[2].orbital_data.orbit_id == "test-orbit-3"
    assert neos[1].orbital_data.orbit_determination_date == "2026-Jan-01 00:00"
    assert neos[0].estimated_diameter.meters.estimated_diameter_max == 450


def test_inject_uses_first_key():
    feed = FeedResponse.model_validate({
        "element_count": 2,
        "near_earth_objects": {"2025-06-01": [make_neo("a")], "2025-06-02": [make_neo("b")]},
    })
    synthetic.inject_test_neos(feed, NOW)
    assert [n.id for n in feed.near_earth_objects["2025-06-01"]] == [
        "test-neo-1", "test-neo-2", "test-neo-3", "a",
    ]
    assert len(feed.near_earth_objects["2025-06-02"]) == 1
    assert feed.element_count == 2 + synthetic.ELEMENT_COUNT_BUMP
