"""Saved weather locations, persisted in local storage."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any

from dayboard.backend.core.errors import NotFoundError, ValidationError
from dayboard.backend.core.utils.storage import LocalStorage

LOCATIONS_KEY = "savedLocations"


@dataclass
class SavedLocation:
    name: str
    latitude: float
    longitude: float

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


class SavedLocations:
    def __init__(self, storage: LocalStorage, key: str = LOCATIONS_KEY) -> None:
        self.storage = storage
        self.key = key

    def list(self) -> list[SavedLocation]:
        result = []
        for raw in self.storage.get(self.key, []) or []:
            try:
                result.append(SavedLocation(str(raw["name"]), float(raw["latitude"]), float(raw["longitude"])))
            except (KeyError, TypeError, ValueError):
                continue
        return result

    def add(self, name: str, latitude: Any, longitude: Any) -> SavedLocation:
        """Save a location; an existing entry with the same name is replaced."""
        name = (name or "").strip()
        if not name:
            raise ValidationError("Location name is required")
        try:
            location = SavedLocation(name, float(latitude), float(longitude))
        except (TypeError, ValueError) as exc:
            raise ValidationError("Latitude and longitude must be numbers") from exc
        if not -90 <= location.latitude <= 90 or not -180 <= location.longitude <= 180:
            raise ValidationError("Coordinates out of range")
        locations = [loc for loc in self.list() if loc.name != name]
        locations.append(location)
        self._save(locations)
        return location

    def remove(self, name: str) -> None:
        locations = self.list()
        remaining = [loc for loc in locations if loc.name != name]
        if len(remaining) == len(locations):
            raise NotFoundError(f"No saved location named {name!r}")
        self._save(remaining)

    def _save(self, locations: list[SavedLocation]) -> None:
        self.storage.set(self.key, [loc.to_dict() for loc in locations])
