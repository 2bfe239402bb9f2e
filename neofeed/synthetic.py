"""Fabricated NEOs that pass Earth a few minutes after the feed is loaded.

They let a dashboard show its "approaching now" countdown without waiting for
a real close approach. Each one is complete, orbital data included, so it
needs no detail lookup to render.
"""

from datetime import datetime, timedelta, timezone
from typing import List, Optional

from .schemas import FeedResponse, NearEarthObject

# seconds after the load at which each test NEO makes its approach
APPROACH_OFFSETS = (60, 120, 250)

# the feed count is bumped by this much, not by len(APPROACH_OFFSETS)
ELEMENT_COUNT_BUMP = 2

_MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun",
           "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")

_BIG_DIAMETER = {
    "kilometers": {"estimated_diameter_min": 0.5, "estimated_diameter_max": 1.1},
    "meters": {"estimated_diameter_min": 500, "estimated_diameter_max": 1100},
    "miles": {"estimated_diameter_min": 0.31, "estimated_diameter_max": 0.68},
    "feet": {"estimated_diameter_min": 1640, "estimated_diameter_max": 3608},
}

_TEMPLATES = [
    {
        "name": "Test NEO",
        "jpl_path": "test",
        "absolute_magnitude_h": 20.5,
        "hazardous": True,
        "diameter": {
            "kilometers": {"estimated_diameter_min": 0.2, "estimated_diameter_max": 0.45},
            "meters": {"estimated_diameter_min": 200, "estimated_diameter_max": 450},
            "miles": {"estimated_diameter_min": 0.1242, "estimated_diameter_max": 0.2795},
            "feet": {"estimated_diameter_min": 656.1, "estimated_diameter_max": 1476.4},
        },
        "velocity": ("25.3", "91080", "56593.4"),
        "miss": ("0.0485", "18.8", "7254000", "4507000"),
        "orbit": {
            "first_observation_date": "2023-01-01",
            "data_arc_in_days": 365,
            "observations_used": 50,
            "minimum_orbit_intersection": "0.05",
            "jupiter_tisserand_invariant": "4.5",
            "eccentricity": "0.35",
            "semi_major_axis": "1.5",
            "inclination": "12.5",
            "ascending_node_longitude": "180",
            "orbital_period": "550",
            "perihelion_distance": "0.9",
            "perihelion_argument": "90",
            "aphelion_distance": "2.1",
            "mean_anomaly": "45",
            "mean_motion": "0.65",
        },
        "orbit_class": ("AMO", "Test orbit class", "Test range"),
    },
    {
        "name": "Test NEO 2",
        "jpl_path": "test2",
        "absolute_magnitude_h": 18.2,
        "hazardous": False,
        "diameter": _BIG_DIAMETER,
        "velocity": ("15.7", "56520", "35120"),
        "miss": ("0.0927", "36.0", "13867620", "8616246"),
        "orbit": {
            "first_observation_date": "2023-02-15",
            "data_arc_in_days": 320,
            "observations_used": 42,
            "minimum_orbit_intersection": "0.08",
            "jupiter_tisserand_invariant": "5.2",
            "eccentricity": "0.28",
            "semi_major_axis": "1.8",
            "inclination": "9.3",
            "ascending_node_longitude": "210",
            "orbital_period": "720",
            "perihelion_distance": "1.2",
            "perihelion_argument": "120",
            "aphelion_distance": "2.4",
            "mean_anomaly": "50",
            "mean_motion": "0.5",
        },
        "orbit_class": ("ATE", "Test orbit class 2", "Test range 2"),
    },
    {
        "name": "Test NEO 3",
        "jpl_path": "test3",
        "absolute_magnitude_h": 18.2,
        "hazardous": False,
        "diameter": _BIG_DIAMETER,
        "velocity": ("15.7", "56520", "35120"),
        "miss": ("0.0927", "36.0", "13867620", "8616246"),
        "orbit": {
            "first_observation_date": "2023-02-15",
            "data_arc_in_days": 320,
            "observations_used": 42,
            "minimum_orbit_intersection": "0.08",
            "jupiter_tisserand_invariant": "5.2",
            "eccentricity": "0.28",
            "semi_major_axis": "1.8",
            "inclination": "9.3",
            "ascending_node_longitude": "210",
            "orbital_period": "720",
            "perihelion_distance": "1.2",
            "perihelion_argument": "120",
            "aphelion_distance": "2.4",
            "mean_anomaly": "50",
            "mean_motion": "0.5",
        },
        "orbit_class": ("ATE", "Test orbit class 3", "Test range 3"),
    },
]


def format_approach_time(moment: datetime) -> str:
    """Render ``moment`` the way NeoWs writes ``close_approach_date_full``."""
    moment = moment.astimezone(timezone.utc)
    return (
        f"{moment.year}-{_MONTHS[moment.month - 1]}-{moment.day:02d} "
        f"{moment.hour:02d}:{moment.minute:02d}"
    )


def build_test_neos(now: datetime) -> List[NearEarthObject]:
    """Return the test NEOs, approaching at ``now`` plus each offset."""
    now_ms = int(now.timestamp() * 1000)
    neos = []
    for number, (template, offset) in enumerate(zip(_TEMPLATES, APPROACH_OFFSETS), start=1):
        passing = now + timedelta(seconds=offset)
        full = format_approach_time(passing)
        neo_id = f"test-neo-{number}"
        kps, kph, mph = template["velocity"]
        au, lunar, km, miles = template["miss"]
        class_type, class_desc, class_range = template["orbit_class"]
        orbit = {
            "orbit_id": f"test-orbit-{number}" if number > 1 else "test-orbit",
            "orbit_determination_date": full,
            "last_observation_date": "2025-10-17",
            "orbit_uncertainty": "0",
            "epoch_osculation": "2025-10-18",
            "perihelion_time": "2025-10-18",
            "equinox": "J2000",
            "orbit_class": {
                "orbit_class_type": class_type,
                "orbit_class_description": class_desc,
                "orbit_class_range": class_range,
            },
        }
        orbit.update(template["orbit"])
        neos.append(NearEarthObject.model_validate({
            "links": {"self": f"https://api.nasa.gov/neo/rest/v1/neo/{neo_id}"},
            "id": neo_id,
            "neo_reference_id": neo_id,
            "name": template["name"],
            "nasa_jpl_url": f"https://example.com/{template['jpl_path']}",
            "absolute_magnitude_h": template["absolute_magnitude_h"],
            "estimated_diameter": template["diameter"],
            "is_potentially_hazardous_asteroid": template["hazardous"],
            "close_approach_data": [{
                "close_approach_date": full.split(" ")[0],
                "close_approach_date_full": full,
                "epoch_date_close_approach": now_ms + offset * 1000,
                "relative_velocity": {
                    "kilometers_per_second": kps,
                    "kilometers_per_hour": kph,
                    "miles_per_hour": mph,
                },
                "miss_distance": {
                    "astronomical": au,
                    "lunar": lunar,
                    "kilometers": km,
                    "miles": miles,
                },
                "orbiting_body": "Earth",
            }],
            "is_sentry_object": False,
            "orbital_data": orbit,
        }))
    return neos


def inject_test_neos(feed: FeedResponse, now: datetime, day: Optional[str] = None) -> FeedResponse:
    """Prepend the test NEOs to the first date in ``feed``, in place.

    ``day`` names the key to create when the feed has no dates at all.
    """
    key = feed.first_date_key() or day or now.astimezone(timezone.utc).strftime("%Y-%m-%d")
    existing = feed.near_earth_objects.get(key, [])
    feed.near_earth_objects[key] = build_test_neos(now) + existing
    feed.element_count += ELEMENT_COUNT_BUMP
    return feed
