"""Map state kept in sync with the locations returned by the chat API."""

from collections.abc import Callable
from dataclasses import dataclass, field

from aquaqual.neighborhoods.schemas import LocationHint

MIAMI_CENTER = (25.7617, -80.1918)
SOUTH_FLORIDA_BOUNDS = ((24.5, -80.5), (26.7, -79.8))
DEFAULT_ZOOM = 11
NEIGHBORHOOD_ZOOM = 14
TILE_URL_TEMPLATE = "https://{s}.tile.openstreetmap.org/{z}/{x}/{y}.png"
TILE_ATTRIBUTION = "© OpenStreetMap contributors"


@dataclass
class MapView:
    """Position, zoom and marker a map renderer should display.

    Listeners registered with ``subscribe`` are called with the view after
    every reposition.
    """

    center: tuple[float, float] = MIAMI_CENTER
    zoom: int = DEFAULT_ZOOM
    bounds: tuple[tuple[float, float], tuple[float, float]] = SOUTH_FLORIDA_BOUNDS
    marker: LocationHint | None = None
    tile_url: str = TILE_URL_TEMPLATE
    attribution: str = TILE_ATTRIBUTION
    _listeners: list[Callable[["MapView"], None]] = field(
        default_factory=list, repr=False
    )

    def subscribe(self, listener: Callable[["MapView"], None]) -> None:
        self._listeners.append(listener)

    def focus(self, location: LocationHint, zoom: int = NEIGHBORHOOD_ZOOM) -> None:
        """Centre the map on ``location`` and drop a marker there."""
        self.center = (location.lat, location.lon)
        self.zoom = zoom
        self.marker = location
        for listener in self._listeners:
            listener(self)
