"""Open-Meteo current weather client."""

import logging

import httpx

logger = logging.getLogger(__name__)

OPEN_METEO_BASE_URL = "https://api.open-meteo.com/v1"


class OpenMeteoClient:
    def __init__(self, base_url: str = OPEN_METEO_BASE_URL, timeout: float | None = None):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    def current_weather(self, latitude: float, longitude: float) -> dict:
        """Fetch the forecast payload with the ``current_weather`` block enabled."""
        url = f"{self.base_url}/forecast"
        params = {
            "latitude": latitude,
            "longitude": longitude,
            "current_weather": "true",
            "timezone": "auto",
        }
        try:
            resp = httpx.get(url, params=params, timeout=self.timeout)
            resp.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.error(
                "Open-Meteo error for lat=%s lon=%s: %s", latitude, longitude, e
            )
            raise
        except httpx.RequestError as e:
            logger.error(
                "Open-Meteo request failed for lat=%s lon=%s: %s", latitude, longitude, e
            )
            raise
        return resp.json()
