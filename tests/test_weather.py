"""
Unit tests for the weather / place-search clients and saved locations.
"""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest
import requests

from dayboard.backend.core.errors import NotFoundError, RemoteError, ValidationError, WeatherLookupError
from dayboard.backend.core.utils.storage import LocalStorage
from dayboard.backend.core.weather import PlaceSearchClient, SavedLocations, WeatherClient

WEATHER_PAYLOAD = {
    "name": "Jeonju",
    "main": {"temp": 21.5, "feels_like": 20.9, "humidity": 40},
    "wind": {"speed": 2.6},
    "weather": [{"description": "맑음", "icon": "01d"}],
}

PLACES_PAYLOAD = {
    "documents": [
        {
            "place_name": "전주역",
            "road_address_name": "전북 전주시 덕진구 동부대로 680",
            "address_name": "전북 전주시 덕진구 우아동3가",
            "x": "127.1617",
            "y": "35.8500",
        }
    ]
}


def _response(status: int = 200, payload=None) -> MagicMock:
    response = MagicMock()
    response.status_code = status
    response.ok = status < 400
    response.json.return_value = payload
    return response


def _session(response: MagicMock | None = None, error: Exception | None = None) -> MagicMock:
    session = MagicMock()
    if error is not None:
        session.get.side_effect = error
    else:
        session.get.return_value = response
    return session


class TestWeatherClient:
    def test_current(self) -> None:
        session = _session(_response(payload=WEATHER_PAYLOAD))
        report = WeatherClient("key", session=session).current(35.8242, 127.1480)

        assert report.location == "Jeonju"
        assert report.temperature == 21.5
        assert report.humidity == 40
        assert report.icon_url == "https://openweathermap.org/img/wn/01d@2x.png"
        params = session.get.call_args.kwargs["params"]
        assert params["appid"] == "key"
        assert params["units"] == "metric"
        assert params["lang"] == "kr"

    def test_missing_key(self) -> None:
        session = _session(_response(payload=WEATHER_PAYLOAD))
        with pytest.raises(WeatherLookupError, match="not configured"):
            WeatherClient("", session=session).current(35.8, 127.1)
        session.get.assert_not_called()

    def test_bad_coordinates_rejected_before_request(self) -> None:
        session = _session(_response(payload=WEATHER_PAYLOAD))
        with pytest.raises(ValidationError):
            WeatherClient("key", session=session).current(120.0, 127.1)
        with pytest.raises(ValidationError):
            WeatherClient("key", session=session).current(None, 127.1)
        session.get.assert_not_called()

    def test_http_error(self) -> None:
        session = _session(_response(status=401, payload={"message": "Invalid API key"}))
        with pytest.raises(WeatherLookupError) as excinfo:
            WeatherClient("key", session=session).current(35.8, 127.1)
        assert excinfo.value.status == 401
        assert excinfo.value.kind == "weather"

    def test_network_error_is_remote(self) -> None:
        session = _session(error=requests.ConnectionError("down"))
        with pytest.raises(RemoteError) as excinfo:
            WeatherClient("key", session=session).current(35.8, 127.1)
        assert isinstance(excinfo.value, WeatherLookupError)
        assert excinfo.value.retryable

    def test_unexpected_payload(self) -> None:
        session = _session(_response(payload={"main": {}}))
        with pytest.raises(WeatherLookupError, match="unexpected payload"):
            WeatherClient("key", session=session).current(35.8, 127.1)


class TestPlaceSearchClient:
    def test_search(self) -> None:
        session = _session(_response(payload=PLACES_PAYLOAD))
        places = PlaceSearchClient("kakao-key", session=session).search(" 전주역 ")

        assert len(places) == 1
        assert places[0].name == "전주역"
        assert places[0].address.startswith("전북 전주시 덕진구 동부대로")
        assert places[0].latitude == pytest.approx(35.85)
        assert places[0].longitude == pytest.approx(127.1617)
        kwargs = session.get.call_args.kwargs
        assert kwargs["headers"] == {"Authorization": "KakaoAK kakao-key"}
        assert kwargs["params"]["query"] == "전주역"

    def test_empty_query(self) -> None:
        with pytest.raises(ValidationError):
            PlaceSearchClient("kakao-key", session=_session()).search("  ")

    def test_no_results(self) -> None:
        session = _session(_response(payload={"documents": []}))
        assert PlaceSearchClient("kakao-key", session=session).search("nowhere") == []


class TestSavedLocations:
    @pytest.fixture
    def locations(self, storage: LocalStorage) -> SavedLocations:
        return SavedLocations(storage)

    def test_add_and_list(self, locations: SavedLocations, storage: LocalStorage) -> None:
        locations.add("Seoul", 37.5665, 126.9780)
        locations.add("Busan", "35.1796", "129.0756")
        assert [loc.name for loc in locations.list()] == ["Seoul", "Busan"]
        assert storage.get("savedLocations")[1]["latitude"] == pytest.approx(35.1796)

    def test_same_name_replaces(self, locations: SavedLocations) -> None:
        locations.add("Home", 35.0, 127.0)
        locations.add("Home", 36.0, 128.0)
        saved = locations.list()
        assert len(saved) == 1
        assert saved[0].latitude == 36.0

    def test_validation(self, locations: SavedLocations) -> None:
        with pytest.raises(ValidationError):
            locations.add("", 35.0, 127.0)
        with pytest.raises(ValidationError):
            locations.add("Nowhere", "north", 127.0)
        with pytest.raises(ValidationError):
            locations.add("Space", 95.0, 127.0)

    def test_remove(self, locations: SavedLocations) -> None:
        locations.add("Home", 35.0, 127.0)
        locations.remove("Home")
        assert locations.list() == []
        with pytest.raises(NotFoundError):
            locations.remove("Home")

    def test_malformed_entries_skipped(self, locations: SavedLocations, storage: LocalStorage) -> None:
        storage.set("savedLocations", [{"name": "ok", "latitude": 1, "longitude": 2}, {"name": "broken"}])
        assert [loc.name for loc in locations.list()] == ["ok"]
