"""Pydantic models for curated neighborhood climate data."""

from pydantic import BaseModel, ConfigDict, Field

from aquaqual.neighborhoods.constants import MATCH_THRESHOLD


class ClimateParameters(BaseModel):
    """Climate risk attributes of a neighborhood, stored as display text."""

    model_config = ConfigDict(frozen=True)

    flood_risk: str
    storm_surge: str
    heat_index: str
    sea_level_rise: str
    precipitation_trends: str
    wind_risk: str
    coastal_erosion: str
    groundwater_intrusion: str
    infrastructure_resilience: str
    adaptation_cost_estimate: str


class LocationHint(BaseModel):
    """Map coordinates for a matched neighborhood."""

    model_config = ConfigDict(frozen=True)

    lat: float
    lon: float


class NeighborhoodRecord(BaseModel):
    """A curated, read-only description of one neighborhood."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1)
    description: str
    lat: float
    lon: float
    climate_parameters: ClimateParameters
    vulnerability: str
    solutions: str

    @property
    def location(self) -> LocationHint:
        return LocationHint(lat=self.lat, lon=self.lon)


class MatchResult(BaseModel):
    """Best neighborhood for a query and its similarity score."""

    model_config = ConfigDict(frozen=True)

    record: NeighborhoodRecord | None = None
    score: float = Field(default=0.0, ge=0.0, le=1.0)

    @property
    def is_confident(self) -> bool:
        return self.record is not None and self.score > MATCH_THRESHOLD

    @property
    def neighborhood(self) -> NeighborhoodRecord | None:
        """The matched record, or None when the score is not above the threshold."""
        return self.record if self.is_confident else None
