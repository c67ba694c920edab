"""Lookup result models: location, current weather and the matched Pokémon."""

from dataclasses import dataclass
from typing import Any

from weatherdex.models.category import PokemonType

PLACEHOLDER_NAME = "Pokémon"


@dataclass(frozen=True)
class Location:
    latitude: float
    longitude: float
    display_name: str


@dataclass(frozen=True)
class WeatherReading:
    """Open-Meteo current conditions, passed through without unit conversion."""

    temperature: float | None
    windspeed: float | None
    winddirection: float | None
    weather_code: int | None
    time: str | None = None
    is_day: int | None = None

    def to_payload(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "temperature": self.temperature,
            "windspeed": self.windspeed,
            "winddirection": self.winddirection,
            "weathercode": self.weather_code,
        }
        if self.time is not None:
            payload["time"] = self.time
        if self.is_day is not None:
            payload["is_day"] = self.is_day
        return payload


@dataclass(frozen=True)
class CatalogItem:
    category: PokemonType
    name: str = PLACEHOLDER_NAME
    image_url: str = ""

    @classmethod
    def placeholder(cls, category: PokemonType) -> "CatalogItem":
        return cls(category=category)

    @property
    def is_placeholder(self) -> bool:
        return not self.image_url

    def to_payload(self) -> dict[str, str]:
        return {
            "type": self.category.value,
            "name": self.name,
            "imageUrl": self.image_url,
        }


@dataclass(frozen=True)
class WeatherItemResult:
    location: Location
    weather: WeatherReading | None
    item: CatalogItem

    def to_payload(self) -> dict[str, Any]:
        """Serialize into the JSON shape consumed by the frontend."""
        return {
            "city": self.location.display_name,
            "latitude": self.location.latitude,
            "longitude": self.location.longitude,
            "weather": self.weather.to_payload() if self.weather else None,
            "item": self.item.to_payload(),
        }
