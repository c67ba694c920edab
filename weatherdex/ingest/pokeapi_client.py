"""PokeAPI client: Pokémon listed by type and per-Pokémon details."""

import logging

import httpx

logger = logging.getLogger(__name__)

POKEAPI_BASE_URL = "https://pokeapi.co/api/v2"


class PokeApiClient:
    def __init__(self, base_url: str = POKEAPI_BASE_URL, timeout: float | None = None):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    def get_type(self, type_name: str) -> dict:
        """Fetch a type resource, including every Pokémon of that type."""
        return self._get(f"{self.base_url}/type/{type_name}/")

    def get_pokemon(self, url: str) -> dict:
        """Fetch Pokémon details from the resource URL listed in a type payload."""
        return self._get(url)

    def _get(self, url: str) -> dict:
        try:
            resp = httpx.get(url, timeout=self.timeout)
            resp.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.warning("PokeAPI error for %s: %s", url, e)
            raise
        except httpx.RequestError as e:
            logger.warning("PokeAPI request failed for %s: %s", url, e)
            raise
        return resp.json()
