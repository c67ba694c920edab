"""Health checker: reachability of the geocoding, weather and catalog providers."""

import logging
from dataclasses import dataclass

import httpx

from weatherdex.config.schema import AppConfig
from weatherdex.models.common import utc_now_iso

logger = logging.getLogger(__name__)

PROBE_TIMEOUT = 10.0


@dataclass(frozen=True)
class HealthStatus:
    geocoding_reachable: bool
    weather_reachable: bool
    catalog_reachable: bool
    checked_at: str

    @property
    def ok(self) -> bool:
        return self.geocoding_reachable and self.weather_reachable and self.catalog_reachable


class HealthChecker:
    def __init__(self, config: AppConfig, timeout: float = PROBE_TIMEOUT):
        self.providers = config.providers
        self.timeout = timeout

    def check(self) -> HealthStatus:
        return HealthStatus(
            geocoding_reachable=self._check_geocoding(),
            weather_reachable=self._check_weather(),
            catalog_reachable=self._check_catalog(),
            checked_at=utc_now_iso(),
        )

    def _check_geocoding(self) -> bool:
        return self._probe(
            f"{self.providers.geocoding_url.rstrip('/')}/status",
            params={"format": "json"},
            headers={"User-Agent": self.providers.user_agent},
        )

    def _check_weather(self) -> bool:
        return self._probe(
            f"{self.providers.weather_url.rstrip('/')}/forecast",
            params={"latitude": 0, "longitude": 0, "current_weather": "true"},
        )

    def _check_catalog(self) -> bool:
        return self._probe(
            f"{self.providers.catalog_url.rstrip('/')}/type/",
            params={"limit": 1},
        )

    def _probe(self, url: str, **kwargs) -> bool:
        try:
            resp = httpx.get(url, timeout=self.timeout, **kwargs)
            return resp.status_code == 200
        except httpx.HTTPError as e:
            logger.warning("Health probe %s failed: %s", url, e)
            return False
