"""Tests for the Open-Meteo client with mocked httpx."""

import httpx
import pytest
import respx

from weatherdex.ingest.open_meteo_client import OpenMeteoClient
from weatherdex.tests.conftest import WEATHER_URL


@pytest.fixture
def open_meteo() -> OpenMeteoClient:
    return OpenMeteoClient(base_url=WEATHER_URL)


class TestCurrentWeather:
    @respx.mock
    def test_success(self, open_meteo: OpenMeteoClient, lisbon_rain: dict):
        respx.get(f"{WEATHER_URL}/forecast").mock(
            return_value=httpx.Response(200, json=lisbon_rain)
        )

        result = open_meteo.current_weather(38.7077507, -9.1365919)
        assert result["current_weather"]["weathercode"] == 61

    @respx.mock
    def test_query_params(self, open_meteo: OpenMeteoClient, lisbon_rain: dict):
        route = respx.get(f"{WEATHER_URL}/forecast").mock(
            return_value=httpx.Response(200, json=lisbon_rain)
        )

        open_meteo.current_weather(38.7077507, -9.1365919)
        params = route.calls.last.request.url.params
        assert params["latitude"] == "38.7077507"
        assert params["longitude"] == "-9.1365919"
        assert params["current_weather"] == "true"
        assert params["timezone"] == "auto"

    @respx.mock
    def test_bad_request_raises(self, open_meteo: OpenMeteoClient):
        respx.get(f"{WEATHER_URL}/forecast").mock(
            return_value=httpx.Response(
                400, json={"error": True, "reason": "Latitude must be in range"}
            )
        )

        with pytest.raises(httpx.HTTPStatusError):
            open_meteo.current_weather(500.0, 0.0)

    @respx.mock
    def test_timeout_raises(self, open_meteo: OpenMeteoClient):
        respx.get(f"{WEATHER_URL}/forecast").mock(
            side_effect=httpx.ReadTimeout("timed out")
        )

        with pytest.raises(httpx.RequestError):
            open_meteo.current_weather(0.0, 0.0)
