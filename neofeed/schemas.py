from enum import Enum
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class NeoWsModel(BaseModel):
    # NeoWs adds fields over time; keep whatever it sends
    model_config = ConfigDict(extra="allow", populate_by_name=True)


class Links(NeoWsModel):
    self_: Optional[str] = Field(None, alias="self")


class DiameterRange(NeoWsModel):
    estimated_diameter_min: float
    estimated_diameter_max: float


class EstimatedDiameter(NeoWsModel):
    kilometers: DiameterRange
    meters: DiameterRange
    miles: DiameterRange
    feet: DiameterRange


class RelativeVelocity(NeoWsModel):
    kilometers_per_second: str
    kilometers_per_hour: str
    miles_per_hour: str


class MissDistance(NeoWsModel):
    astronomical: str
    lunar: str
    kilometers: str
    miles: str


class CloseApproachEvent(NeoWsModel):
    close_approach_date: Optional[str] = None
    close_approach_date_full: Optional[str] = None
    epoch_date_close_approach: Optional[int] = None
    relative_velocity: Optional[RelativeVelocity] = None
    miss_distance: Optional[MissDistance] = None
    orbiting_body: Optional[str] = None


class OrbitClass(NeoWsModel):
    orbit_class_type: Optional[str] = None
    orbit_class_description: Optional[str] = None
    orbit_class_range: Optional[str] = None


class OrbitalData(NeoWsModel):
    orbit_id: Optional[str] = None
    orbit_determination_date: Optional[str] = None
    first_observation_date: Optional[str] = None
    last_observation_date: Optional[str] = None
    data_arc_in_days: Optional[int] = None
    observations_used: Optional[int] = None
    orbit_uncertainty: Optional[str] = None
    minimum_orbit_intersection: Optional[str] = None
    jupiter_tisserand_invariant: Optional[str] = None
    epoch_osculation: Optional[str] = None
    eccentricity: Optional[str] = None
    semi_major_axis: Optional[str] = None
    inclination: Optional[str] = None
    ascending_node_longitude: Optional[str] = None
    orbital_period: Optional[str] = None
    perihelion_distance: Optional[str] = None
    perihelion_argument: Optional[str] = None
    aphelion_distance: Optional[str] = None
    perihelion_time: Optional[str] = None
    mean_anomaly: Optional[str] = None
    mean_motion: Optional[str] = None
    equinox: Optional[str] = None
    orbit_class: Optional[OrbitClass] = None


class NearEarthObject(NeoWsModel):
    # only the identity is required; partial records pass through as sent
    links: Optional[Links] = None
    id: str
    neo_reference_id: Optional[str] = None
    name: str
    nasa_jpl_url: Optional[str] = None
    absolute_magnitude_h: Optional[float] = None
    estimated_diameter: Optional[EstimatedDiameter] = None
    is_potentially_hazardous_asteroid: Optional[bool] = None
    close_approach_data: List[CloseApproachEvent] = Field(default_factory=list)
    is_sentry_object: bool = False
    orbital_data: Optional[OrbitalData] = None


class NeoDetail(NeoWsModel):
    """Response of the ``/neo/{id}`` lookup; only the orbit is kept."""

    id: Optional[str] = None
    orbital_data: Optional[OrbitalData] = None


class FeedLinks(NeoWsModel):
    self_: Optional[str] = Field(None, alias="self")
    next: Optional[str] = None
    previous: Optional[str] = None


class FeedResponse(NeoWsModel):
    links: Optional[FeedLinks] = None
    element_count: int
    near_earth_objects: Dict[str, List[NearEarthObject]]

    def first_date_key(self) -> Optional[str]:
        return next(iter(self.near_earth_objects), None)


class LoadOutcome(str, Enum):
    CACHED = "cached"
    FETCHED = "fetched"
    PARTIAL = "partial"
    UPSTREAM_ERROR = "upstream_error"
    FAILED = "failed"


class LoadResult(BaseModel):
    """What a feed load produced and how.

    Callers that only render pages should use :meth:`to_page_data`, which
    collapses every failure into an empty mapping.
    """

    outcome: LoadOutcome
    data: Optional[FeedResponse] = None

    def to_page_data(self) -> dict:
        if self.data is None:
            return {}
        return {"data": self.data.model_dump(mode="json", by_alias=True, exclude_unset=True)}
