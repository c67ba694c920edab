"""Tests for the provider health checker."""

import httpx
import respx

from weatherdex.config.schema import AppConfig
from weatherdex.health import HealthChecker
from weatherdex.tests.conftest import CATALOG_URL, GEO_URL, WEATHER_URL


class TestHealthChecker:
    @respx.mock
    def test_all_reachable(self, test_config: AppConfig):
        geo = respx.get(f"{GEO_URL}/status").mock(return_value=httpx.Response(200))
        respx.get(f"{WEATHER_URL}/forecast").mock(return_value=httpx.Response(200))
        respx.get(f"{CATALOG_URL}/type/").mock(return_value=httpx.Response(200))

        status = HealthChecker(test_config).check()

        assert status.ok
        assert status.checked_at
        assert geo.calls.last.request.headers["user-agent"] == "weatherdex-tests/0.1.0"

    @respx.mock
    def test_unreachable_provider(self, test_config: AppConfig):
        respx.get(f"{GEO_URL}/status").mock(return_value=httpx.Response(200))
        respx.get(f"{WEATHER_URL}/forecast").mock(
            side_effect=httpx.ConnectError("unreachable")
        )
        respx.get(f"{CATALOG_URL}/type/").mock(return_value=httpx.Response(503))

        status = HealthChecker(test_config).check()

        assert status.geocoding_reachable
        assert not status.weather_reachable
        assert not status.catalog_reachable
        assert not status.ok
