"""Nominatim (OpenStreetMap) geocoding client."""

import logging

import httpx

from weatherdex.config.schema import DEFAULT_USER_AGENT

logger = logging.getLogger(__name__)

NOMINATIM_BASE_URL = "https://nominatim.openstreetmap.org"


class NominatimClient:
    def __init__(
        self,
        base_url: str = NOMINATIM_BASE_URL,
        user_agent: str = DEFAULT_USER_AGENT,
        timeout: float | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.user_agent = user_agent
        self.timeout = timeout

    def search(self, query: str) -> list[dict]:
        """Search for a place by free-form name. Returns at most one match."""
        url = f"{self.base_url}/search"
        params = {"q": query, "format": "json", "limit": 1}
        headers = {"User-Agent": self.user_agent}
        try:
            resp = httpx.get(url, params=params, headers=headers, timeout=self.timeout)
            resp.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.error("Nominatim error for q=%s: %s", query, e)
            raise
        except httpx.RequestError as e:
            logger.error("Nominatim request failed for q=%s: %s", query, e)
            raise
        data = resp.json()
        if not isinstance(data, list):
            raise ValueError(f"Unexpected Nominatim response type: {type(data).__name__}")
        return data
