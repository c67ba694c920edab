"""Shared test fixtures."""

import json
from collections.abc import Sequence
from pathlib import Path
from typing import Any

import pytest

from weatherdex.config.schema import AppConfig, ProviderConfig

FIXTURE_DIR = Path(__file__).parent / "fixtures"

GEO_URL = "https://test-geo.example.com"
WEATHER_URL = "https://test-weather.example.com/v1"
CATALOG_URL = "https://test-pokeapi.example.com"


class PickIndex:
    """Deterministic stand-in for ``random.Random``: always picks ``index``."""

    def __init__(self, index: int = 0):
        self.index = index
        self.calls: list[Sequence[Any]] = []

    def choice(self, seq: Sequence[Any]) -> Any:
        self.calls.append(seq)
        return seq[self.index % len(seq)]


def load_fixture(name: str) -> Any:
    with open(FIXTURE_DIR / name) as f:
        return json.load(f)


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the test fixtures directory."""
    return FIXTURE_DIR


@pytest.fixture
def test_config() -> AppConfig:
    """AppConfig pointing every provider at a fake host."""
    return AppConfig(
        providers=ProviderConfig(
            geocoding_url=GEO_URL,
            weather_url=WEATHER_URL,
            catalog_url=CATALOG_URL,
            user_agent="weatherdex-tests/0.1.0",
        )
    )


@pytest.fixture
def lisbon_geocode() -> list[dict]:
    return load_fixture("nominatim_lisbon.json")


@pytest.fixture
def lisbon_rain() -> dict:
    return load_fixture("open_meteo_lisbon_rain.json")


@pytest.fixture
def water_type() -> dict:
    return load_fixture("pokeapi_type_water.json")


@pytest.fixture
def squirtle() -> dict:
    return load_fixture("pokeapi_pokemon_squirtle.json")
