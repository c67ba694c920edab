"""Pydantic v2 configuration schema with strict validation."""

from pydantic import BaseModel, Field

DEFAULT_USER_AGENT = "weatherdex/0.1.0 (+https://example.com)"


class ServerConfig(BaseModel):
    model_config = {"extra": "forbid"}

    host: str = "0.0.0.0"
    port: int = Field(default=3000, ge=1, le=65535)


class ProviderConfig(BaseModel):
    model_config = {"extra": "forbid"}

    geocoding_url: str = "https://nominatim.openstreetmap.org"
    weather_url: str = "https://api.open-meteo.com/v1"
    catalog_url: str = "https://pokeapi.co/api/v2"
    # Nominatim's usage policy rejects requests without an identifying agent
    user_agent: str = Field(default=DEFAULT_USER_AGENT, min_length=1)
    timeout: float | None = Field(default=None, gt=0.0)


class AppConfig(BaseModel):
    model_config = {"extra": "forbid"}

    server: ServerConfig = ServerConfig()
    providers: ProviderConfig = ProviderConfig()
