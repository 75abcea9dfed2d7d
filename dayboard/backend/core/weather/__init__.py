"""Weather subpackage – current conditions, place search, saved locations."""

from __future__ import annotations

from dayboard.backend.core.weather.client import Place, PlaceSearchClient, WeatherClient, WeatherReport
from dayboard.backend.core.weather.locations import SavedLocation, SavedLocations

__all__ = [
    "Place",
    "PlaceSearchClient",
    "SavedLocation",
    "SavedLocations",
    "WeatherClient",
    "WeatherReport",
]
