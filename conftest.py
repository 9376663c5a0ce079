"""Shared pytest fixtures."""

import json

import pytest

from aquaqual.ai.base import (
    AIProvider,
    ChatMessage,
    ChatStreamChunk,
    ContentGenerationResult,
)
from aquaqual.neighborhoods.schemas import ClimateParameters, NeighborhoodRecord


def make_record(name: str, lat: float = 25.0, lon: float = -80.0) -> NeighborhoodRecord:
    """Build a neighborhood record whose text fields mention its name."""
    return NeighborhoodRecord(
        name=name,
        description=f"{name} description",
        lat=lat,
        lon=lon,
        climate_parameters=ClimateParameters(
            flood_risk=f"{name} flood risk",
            storm_surge=f"{name} storm surge",
            heat_index=f"{name} heat index",
            sea_level_rise=f"{name} sea level rise",
            precipitation_trends=f"{name} precipitation trends",
            wind_risk=f"{name} wind risk",
            coastal_erosion=f"{name} coastal erosion",
            groundwater_intrusion=f"{name} groundwater intrusion",
            infrastructure_resilience=f"{name} infrastructure resilience",
            adaptation_cost_estimate=f"{name} adaptation cost",
        ),
        vulnerability=f"{name} vulnerability",
        solutions=f"{name} solutions",
    )


@pytest.fixture
def brickell() -> NeighborhoodRecord:
    return NeighborhoodRecord(
        name="Brickell",
        description="Financial district on Biscayne Bay",
        lat=25.7617,
        lon=-80.1918,
        climate_parameters=ClimateParameters(
            flood_risk="High – 40% chance",
            storm_surge="Up to 9 ft",
            heat_index="105°F summer peaks",
            sea_level_rise="10–17 inches by 2040",
            precipitation_trends="Heavier downpours",
            wind_risk="High",
            coastal_erosion="Low",
            groundwater_intrusion="Moderate",
            infrastructure_resilience="Moderate",
            adaptation_cost_estimate="$1.2–1.8 billion",
        ),
        vulnerability="Surge and king-tide flooding",
        solutions="Raise seawalls, backflow valves",
    )


@pytest.fixture
def neighborhoods(brickell) -> list[NeighborhoodRecord]:
    return [
        brickell,
        make_record("Coconut Grove", lat=25.7126, lon=-80.2571),
        make_record("Wynwood", lat=25.8005, lon=-80.1994),
    ]


@pytest.fixture
def dataset_path(tmp_path, neighborhoods):
    """Write the sample neighborhoods to a JSON file and return its path."""
    path = tmp_path / "neighborhoods.json"
    path.write_text(
        json.dumps([record.model_dump() for record in neighborhoods]),
        encoding="utf-8",
    )
    return path


@pytest.fixture
def record_factory():
    return make_record


class FakeProvider(AIProvider):
    """In-memory provider that records every conversation it is sent."""

    def __init__(
        self,
        text: str = "Brickell faces high flood risk.",
        chunks: list[str] | None = None,
        error: Exception | None = None,
        error_after_chunks: bool = False,
    ) -> None:
        self.text = text
        self.chunks = chunks if chunks is not None else [text]
        self.error = error
        self.error_after_chunks = error_after_chunks
        self.calls: list[list[ChatMessage]] = []
        self.closed = False

    async def generate_chat(self, messages, **kwargs) -> ContentGenerationResult:
        self.calls.append(messages)
        if self.error:
            raise self.error
        return ContentGenerationResult(text=self.text, finish_reason="stop")

    async def stream_chat(self, messages, **kwargs):
        self.calls.append(messages)
        try:
            if self.error and not self.error_after_chunks:
                raise self.error
            for chunk in self.chunks:
                yield ChatStreamChunk(content=chunk)
            if self.error:
                raise self.error
            yield ChatStreamChunk(finish_reason="stop")
        finally:
            self.closed = True


@pytest.fixture
def provider_factory():
    return FakeProvider
