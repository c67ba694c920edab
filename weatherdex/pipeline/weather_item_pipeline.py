"""Lookup pipeline: city -> location -> current weather -> Pokémon type -> Pokémon.

Geocoding and weather are mandatory steps and abort the lookup on failure.
The catalog step is optional: any PokeAPI failure degrades to a placeholder
item instead of failing the request.
"""

import logging
import random

import httpx

from weatherdex.config.schema import AppConfig
from weatherdex.errors import CityNotFound, UpstreamError
from weatherdex.ingest.nominatim_client import NominatimClient
from weatherdex.ingest.open_meteo_client import OpenMeteoClient
from weatherdex.ingest.pokeapi_client import PokeApiClient
from weatherdex.mapping.weather_types import map_weather_code
from weatherdex.models.category import DEFAULT_TYPE, PokemonType
from weatherdex.models.lookup import (
    PLACEHOLDER_NAME,
    CatalogItem,
    Location,
    WeatherItemResult,
    WeatherReading,
)

logger = logging.getLogger(__name__)

# Failures a provider call may raise: transport/status errors, bad JSON, bad shape
PROVIDER_ERRORS = (
    httpx.HTTPError,
    ValueError,
    KeyError,
    TypeError,
    IndexError,
    AttributeError,
)


class WeatherItemPipeline:
    def __init__(
        self,
        geocoder: NominatimClient,
        weather: OpenMeteoClient,
        catalog: PokeApiClient,
        rng: random.Random | None = None,
    ):
        self.geocoder = geocoder
        self.weather = weather
        self.catalog = catalog
        self.rng = rng or random.Random()

    @classmethod
    def from_config(
        cls, config: AppConfig, rng: random.Random | None = None
    ) -> "WeatherItemPipeline":
        providers = config.providers
        return cls(
            geocoder=NominatimClient(
                base_url=providers.geocoding_url,
                user_agent=providers.user_agent,
                timeout=providers.timeout,
            ),
            weather=OpenMeteoClient(
                base_url=providers.weather_url, timeout=providers.timeout
            ),
            catalog=PokeApiClient(
                base_url=providers.catalog_url, timeout=providers.timeout
            ),
            rng=rng,
        )

    def run(self, city: str) -> WeatherItemResult:
        """Resolve a city name into its current weather and a matching Pokémon."""
        location = self.locate(city)
        reading = self.read_weather(location)

        if reading is not None and reading.weather_code is not None:
            category = map_weather_code(reading.weather_code, self.rng)
            item = self.pick_item(category)
        else:
            logger.info("No weather code for %s, using default type", location.display_name)
            item = CatalogItem.placeholder(DEFAULT_TYPE)

        return WeatherItemResult(location=location, weather=reading, item=item)

    # -- steps ---------------------------------------------------------------

    def locate(self, city: str) -> Location:
        try:
            matches = self.geocoder.search(city)
        except PROVIDER_ERRORS as e:
            raise UpstreamError("geocoding", str(e)) from e
        if not matches:
            logger.info("No geocoding match for %r", city)
            raise CityNotFound(city)

        # Ambiguous names resolve to whatever the provider ranks first
        first = matches[0]
        try:
            return Location(
                latitude=float(first["lat"]),
                longitude=float(first["lon"]),
                display_name=first.get("display_name") or city,
            )
        except PROVIDER_ERRORS as e:
            raise UpstreamError("geocoding", f"malformed result: {e}") from e

    def read_weather(self, location: Location) -> WeatherReading | None:
        try:
            raw = self.weather.current_weather(location.latitude, location.longitude)
        except PROVIDER_ERRORS as e:
            raise UpstreamError("weather", str(e)) from e
        if not isinstance(raw, dict):
            raise UpstreamError("weather", "unexpected response shape")
        return _parse_current_weather(raw.get("current_weather"))

    def pick_item(self, category: PokemonType) -> CatalogItem:
        """Pick a random Pokémon of ``category``, or a placeholder on any failure."""
        try:
            entries = self.catalog.get_type(category.value).get("pokemon") or []
            if not entries:
                logger.warning("PokeAPI listed no Pokémon of type %s", category)
                return CatalogItem.placeholder(category)

            entry = self.rng.choice(entries)
            details = self.catalog.get_pokemon(entry["pokemon"]["url"])
            return CatalogItem(
                category=category,
                name=details.get("name") or PLACEHOLDER_NAME,
                image_url=(details.get("sprites") or {}).get("front_default") or "",
            )
        except PROVIDER_ERRORS as e:
            logger.warning("Catalog lookup for type %s failed: %s", category, e)
            return CatalogItem.placeholder(category)


def _parse_current_weather(block: object) -> WeatherReading | None:
    if not isinstance(block, dict):
        return None
    code = block.get("weathercode")
    is_day = block.get("is_day")
    return WeatherReading(
        temperature=_safe_float(block.get("temperature")),
        windspeed=_safe_float(block.get("windspeed")),
        winddirection=_safe_float(block.get("winddirection")),
        weather_code=_weather_code(code),
        time=block.get("time"),
        is_day=int(is_day) if isinstance(is_day, (int, float)) else None,
    )


def _weather_code(value: object) -> int | None:
    # bool is an int subclass but never a valid WMO code
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    return int(value)


def _safe_float(value: object) -> float | None:
    if value is None:
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None
