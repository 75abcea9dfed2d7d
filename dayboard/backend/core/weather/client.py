"""
Weather and Place-Search Clients.

Thin ``requests`` wrappers around two third-party HTTP APIs:

- OpenWeatherMap current conditions, keyed by latitude/longitude
- Kakao Local keyword search, returning place name, address and coordinates

Nothing is cached. Every failure (missing key, network error, non-2xx,
malformed payload) surfaces as :class:`WeatherLookupError` so the widget can
render an inline error panel.
"""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass
from typing import Any

import requests

from dayboard.backend.core.errors import ValidationError, WeatherLookupError

logger = logging.getLogger(__name__)

OPENWEATHER_URL = "https://api.openweathermap.org/data/2.5/weather"
KAKAO_KEYWORD_URL = "https://dapi.kakao.com/v2/local/search/keyword.json"
ICON_URL = "https://openweathermap.org/img/wn/{icon}@2x.png"


@dataclass
class WeatherReport:
    """
    Current conditions at a location.

    Attributes:
        location: Name reported by the API
        temperature: Degrees in the configured units
        feels_like: Apparent temperature
        humidity: Relative humidity in percent
        wind_speed: Wind speed in the configured units
        description: Localised condition text
        icon: OpenWeatherMap icon id
    """

    location: str
    temperature: float
    feels_like: float
    humidity: int
    wind_speed: float
    description: str
    icon: str

    @property
    def icon_url(self) -> str:
        return ICON_URL.format(icon=self.icon)

    def to_dict(self) -> dict[str, Any]:
        return {**asdict(self), "icon_url": self.icon_url}


@dataclass
class Place:
    name: str
    address: str
    latitude: float
    longitude: float

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


def _check_coordinates(lat: float, lon: float) -> tuple[float, float]:
    try:
        lat, lon = float(lat), float(lon)
    except (TypeError, ValueError) as exc:
        raise ValidationError("Latitude and longitude are required") from exc
    if not -90 <= lat <= 90 or not -180 <= lon <= 180:
        raise ValidationError(f"Coordinates out of range: {lat}, {lon}")
    return lat, lon


def _get_json(
    http: requests.Session,
    url: str,
    params: dict[str, Any],
    headers: dict[str, str] | None,
    timeout: float,
    what: str,
) -> Any:
    try:
        response = http.get(url, params=params, headers=headers, timeout=timeout)
    except requests.RequestException as exc:
        logger.warning("%s request failed: %s", what, exc)
        raise WeatherLookupError(f"{what} service unreachable") from exc
    if not response.ok:
        logger.warning("%s request -> HTTP %d", what, response.status_code)
        raise WeatherLookupError(f"{what} API error: {response.status_code}", status=response.status_code)
    try:
        return response.json()
    except ValueError as exc:
        raise WeatherLookupError(f"{what} API returned malformed JSON") from exc


class WeatherClient:
    """OpenWeatherMap current-weather lookups."""

    def __init__(
        self,
        api_key: str,
        base_url: str = OPENWEATHER_URL,
        units: str = "metric",
        lang: str = "kr",
        timeout: float = 10,
        session: requests.Session | None = None,
    ) -> None:
        self.api_key = api_key
        self.base_url = base_url
        self.units = units
        self.lang = lang
        self.timeout = timeout
        self.http = session or requests.Session()

    def current(self, lat: float, lon: float) -> WeatherReport:
        """
        Fetch current conditions.

        Args:
            lat: Latitude in degrees
            lon: Longitude in degrees

        Returns:
            Parsed :class:`WeatherReport`

        Raises:
            ValidationError: Coordinates missing or out of range
            WeatherLookupError: Key missing or the API call failed
        """
        lat, lon = _check_coordinates(lat, lon)
        if not self.api_key:
            raise WeatherLookupError("Weather API key is not configured")
        data = _get_json(
            self.http,
            self.base_url,
            {"lat": lat, "lon": lon, "appid": self.api_key, "units": self.units, "lang": self.lang},
            None,
            self.timeout,
            "Weather",
        )
        try:
            conditions = data["weather"][0]
            return WeatherReport(
                location=data.get("name", ""),
                temperature=float(data["main"]["temp"]),
                feels_like=float(data["main"].get("feels_like", data["main"]["temp"])),
                humidity=int(data["main"]["humidity"]),
                wind_speed=float(data.get("wind", {}).get("speed", 0.0)),
                description=conditions.get("description", ""),
                icon=conditions.get("icon", ""),
            )
        except (KeyError, IndexError, TypeError, ValueError) as exc:
            raise WeatherLookupError("Weather API returned an unexpected payload") from exc


class PlaceSearchClient:
    """Kakao Local keyword search."""

    def __init__(
        self,
        api_key: str,
        base_url: str = KAKAO_KEYWORD_URL,
        timeout: float = 10,
        session: requests.Session | None = None,
    ) -> None:
        self.api_key = api_key
        self.base_url = base_url
        self.timeout = timeout
        self.http = session or requests.Session()

    def search(self, query: str, size: int = 10) -> list[Place]:
        query = (query or "").strip()
        if not query:
            raise ValidationError("Search query is required")
        if not self.api_key:
            raise WeatherLookupError("Place search API key is not configured")
        data = _get_json(
            self.http,
            self.base_url,
            {"query": query, "size": size},
            {"Authorization": f"KakaoAK {self.api_key}"},
            self.timeout,
            "Place search",
        )
        places = []
        try:
            for doc in data.get("documents", []):
                places.append(
                    Place(
                        name=doc.get("place_name") or doc.get("address_name", ""),
                        address=doc.get("road_address_name") or doc.get("address_name", ""),
                        latitude=float(doc["y"]),
                        longitude=float(doc["x"]),
                    )
                )
        except (KeyError, TypeError, ValueError, AttributeError) as exc:
            raise WeatherLookupError("Place search returned an unexpected payload") from exc
        return places
