"""Curated South Florida neighborhood data and fuzzy lookup."""

from aquaqual.neighborhoods.matcher import find_best_match, fuzzy_score
from aquaqual.neighborhoods.repository import (
    NeighborhoodDataError,
    NeighborhoodRepository,
)
from aquaqual.neighborhoods.schemas import (
    ClimateParameters,
    LocationHint,
    MatchResult,
    NeighborhoodRecord,
)

__all__ = [
    "ClimateParameters",
    "LocationHint",
    "MatchResult",
    "NeighborhoodDataError",
    "NeighborhoodRecord",
    "NeighborhoodRepository",
    "find_best_match",
    "fuzzy_score",
]
