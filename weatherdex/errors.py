"""Domain errors raised while resolving a city into a weather item."""


class WeatherItemError(Exception):
    """Base error for the lookup workflow."""


class QueryValidationError(WeatherItemError):
    """The city query is missing or blank."""


class CityNotFound(WeatherItemError):
    """The geocoding provider returned no match for the city."""

    def __init__(self, city: str):
        super().__init__(f"City not found: {city}")
        self.city = city


class UpstreamError(WeatherItemError):
    """A mandatory upstream call (geocoding or weather) failed."""

    def __init__(self, provider: str, message: str):
        super().__init__(f"{provider}: {message}")
        self.provider = provider
        self.message = message
